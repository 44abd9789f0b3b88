import pytest

from histsearch.cursor import Cursor, WordJumper, WordJumpMode

EMACS_CHARS = "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789"
SUBL_CHARS = "./\\()\"'-:,.;<>~!@#$%^&*|+=[]{}`~?"

EMACS = WordJumper(EMACS_CHARS, WordJumpMode.EMACS)
SUBL = WordJumper(SUBL_CHARS, WordJumpMode.SUBL)

SAMPLE = "   aaa   ((()))bbb   ((()))   "
UNICODE = "öaöböcödöeöfö"


def test_right_moves_one_char_and_stops_at_end():
    c = Cursor(UNICODE)
    for k in range(len(UNICODE) + 4):
        assert c.substring() == UNICODE[: min(k, len(UNICODE))]
        c.right()
    assert c.index == len(UNICODE)


def test_left_moves_one_char_and_stops_at_start():
    c = Cursor(UNICODE)
    c.end()
    for k in range(len(UNICODE) + 4):
        assert c.substring() == UNICODE[: max(len(UNICODE) - k, 0)]
        c.left()
    assert c.index == 0
    assert c.left() is False


@pytest.mark.parametrize("src,dest", [(0, 6), (3, 6), (7, 18), (19, 30)])
def test_emacs_next_word_pos(src, dest):
    assert EMACS.next_word_pos(SAMPLE, src) == dest


def test_emacs_next_word_pos_empty():
    assert EMACS.next_word_pos("", 0) == 0


@pytest.mark.parametrize("src,dest", [(30, 15), (29, 15), (15, 3), (3, 0)])
def test_emacs_prev_word_pos(src, dest):
    assert EMACS.prev_word_pos(SAMPLE, src) == dest


def test_emacs_prev_word_pos_empty():
    assert EMACS.prev_word_pos("", 0) == 0


@pytest.mark.parametrize(
    "src,dest", [(0, 3), (1, 3), (3, 9), (9, 15), (15, 21), (21, 30)]
)
def test_subl_next_word_pos(src, dest):
    assert SUBL.next_word_pos(SAMPLE, src) == dest


def test_subl_next_word_pos_empty():
    assert SUBL.next_word_pos("", 0) == 0


@pytest.mark.parametrize("src,dest", [(30, 21), (21, 15), (15, 9), (9, 3), (3, 0)])
def test_subl_prev_word_pos(src, dest):
    assert SUBL.prev_word_pos(SAMPLE, src) == dest


def test_subl_prev_word_pos_empty():
    assert SUBL.prev_word_pos("", 0) == 0


def test_pop():
    s = UNICODE
    c = Cursor(s)
    c.end()
    while s:
        expected, s = s[-1], s[:-1]
        assert c.back() == expected
        assert c.substring() == s
    assert c.back() is None


def test_back():
    c = Cursor(UNICODE)
    for _ in range(4):
        c.right()
    assert c.substring() == "öaöb"
    assert c.back() == "b"
    assert c.back() == "ö"
    assert c.back() == "a"
    assert c.back() == "ö"
    assert c.back() is None
    assert str(c) == "öcödöeöfö"


def test_insert():
    c = Cursor(UNICODE)
    for _ in range(4):
        c.right()
    assert c.substring() == "öaöb"
    for ch in "ögöh":
        c.insert(ch)
    assert c.substring() == "öaöbögöh"
    assert str(c) == "öaöbögöhöcödöeöfö"


def test_char_and_remove():
    c = Cursor(UNICODE)
    c.right()
    assert c.char() == UNICODE[1]
    assert c.remove() == UNICODE[1]
    assert c.source == UNICODE[:1] + UNICODE[2:]
    c.end()
    assert c.char() is None
    assert c.remove() is None


def test_next_and_prev_word_move_cursor():
    c = Cursor(SAMPLE)
    c.next_word(EMACS_CHARS, WordJumpMode.EMACS)
    assert c.index == 6
    c.end()
    c.prev_word(SUBL_CHARS, WordJumpMode.SUBL)
    assert c.index == 21


def test_remove_next_word_keeps_cursor():
    c = Cursor(SAMPLE, 3)
    c.remove_next_word(EMACS_CHARS, WordJumpMode.EMACS)
    assert c.source == SAMPLE[:3] + SAMPLE[6:]
    assert c.index == 3


def test_remove_prev_word_moves_cursor():
    c = Cursor(SAMPLE)
    c.end()
    c.remove_prev_word(SUBL_CHARS, WordJumpMode.SUBL)
    assert c.source == SAMPLE[:21]
    assert c.index == 21


def test_clear_start_end():
    c = Cursor(UNICODE)
    c.end()
    assert c.index == len(UNICODE)
    c.start()
    assert c.index == 0
    c.clear()
    assert c.source == ""
    assert c.index == 0
# histsearch

A library of building blocks for shell history tools. It covers duration
formatting, a line-editing cursor for a search query, template-based rendering
of history entries, scrolling logic for a result list, filtering and ranking
of fuzzy matches, and command-usage statistics. It uses only the standard
library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

### `histsearch.duration`

`format_duration(duration)` takes a `timedelta` or a number of seconds. It
returns only the most significant unit: `y` (365.25 days), `mo` (30.44 days),
`d`, `h`, `m`, `s` or `ms`. Examples are `3h`, `2mo` and `450ms`. A negative
duration, or one under a millisecond, gives `0s`.

### `histsearch.cursor`

`Cursor(source="", index=0)` holds a string and a cursor index into it.

- `substring()` returns the text before the cursor. `char()` returns the
  character under the cursor, or `None` at the end.
- `left()` and `right()` move one character. `left()` returns whether the
  cursor moved. `start()` and `end()` jump to either end.
- `insert(c)` inserts text at the cursor. `remove()` deletes the character
  under the cursor and `back()` deletes the one before it. Both return the
  removed character or `None`. `clear()` empties the line.
- `next_word(word_chars, mode)` and `prev_word(word_chars, mode)` jump by
  word. `remove_next_word(...)` and `remove_prev_word(...)` delete by word.

`WordJumper(word_chars, word_jump_mode)` computes the word positions through
`next_word_pos(source, index)` and `prev_word_pos(source, index)`.
`WordJumpMode.EMACS` treats runs of `word_chars` as words.
`WordJumpMode.SUBL` stops at every boundary between whitespace, word
characters and other characters.

### `histsearch.stats`

- `interesting_command(command)` reduces a command line to the part worth
  counting. It drops a leading `sudo`. For `cargo`, `go`, `git`, `npm`, `yarn`
  and `pnpm` it keeps the subcommand, so `git push origin` becomes `git push`.
- `compute_stats(commands, count)` returns a `CommandStats` with the `count`
  most frequent commands (`top`), the total number of commands (`total`) and
  the number of distinct ones (`unique`). It raises `ValueError` when there
  are no commands.
- `render_stats(stats)` draws each top command as a coloured ten-cell bar with
  its count, followed by the totals. It uses ANSI escape codes.

### `histsearch.history_format`

`HistoryEntry` is one recorded command. It has `command`, `timestamp`,
`duration` (in nanoseconds), `exit`, `cwd`, `session`, `hostname` (in the
form `host:user`) and `id`.

- `parse_format(template)` splits a template into literal text and `{key}`
  placeholders. `{{` stands for a literal `{`. A malformed template raises
  `FormatError`.
- `format_entry(entry, segments, now=None)` renders one entry. It knows the
  keys `command`, `directory`, `exit`, `duration`, `time`, `relativetime`,
  `host` and `user`. An unknown key raises `FormatError`.
- `format_list(entries, mode, template=None, now=None)` renders entries as
  lines, last entry first. `print_list(entries, mode, template=None,
  stream=None)` writes those lines to a stream, standard output by default,
  and stops quietly on a broken pipe.
- `ListMode.from_flags(human, cmd_only)` picks the layout. `HUMAN` and
  `REGULAR` have the default templates `HUMAN_TEMPLATE` and
  `REGULAR_TEMPLATE`. `CMD_ONLY` prints the command alone. A literal `\t` in
  a template is turned into a tab.

### `histsearch.history_list`

- `ListState` keeps `offset`, `selected` and `max_entries` for a scrolling
  list.
- `items_bounds(history_len, selected, offset, height)` returns the visible
  `(start, end)` slice. It keeps up to ten rows of context beyond the
  selection.
- `index_marker(row, offset, selected)` gives the three-character marker for
  a row: `" > "` for the selected row, the distance `1` to `9` for the rows
  after it, and blanks for all others.

### `histsearch.fuzzy`

- `FilterMode` has the members `GLOBAL`, `HOST`, `SESSION`, `DIRECTORY` and
  `WORKSPACE`. `SearchContext` describes where the search runs: `session`,
  `cwd`, `hostname` and `git_root`.
- `matches_filter(entry, mode, context)` checks an aggregated entry against
  the filter. Hosts are comma-separated, directories are colon-separated and
  sessions are concatenated 32-character identifiers. `WORKSPACE` matches
  nothing here.
- `path_dist(a, b)` counts the steps from directory `a` up to a common
  ancestor and then down to `b`.
- `rank_score(score, begin, count, age_seconds, path_distance)` combines a
  match score with the position where the match begins, the usage count, the
  age and the directory distance. Lower values rank first.
- `RankedResults(limit=200)` keeps entries best-first with unique commands.
  `insert(entry, score)` returns whether the entry was kept.

## What this package does not do

There is no command-line program. The package does not store or load
history, does not hook into a shell, and does not sync with anything. It
draws no interactive screen: `histsearch.history_list` only provides the
scrolling and marker logic. It does not compute fuzzy match scores either.
`rank_score` takes a score and a match start that the caller has computed.

## Example

```python
from datetime import timedelta

from histsearch.cursor import Cursor, WordJumpMode
from histsearch.duration import format_duration
from histsearch.stats import compute_stats, interesting_command, render_stats

print(format_duration(timedelta(hours=3, minutes=5)))     # 3h
print(interesting_command("sudo cargo build --release"))  # cargo build

cursor = Cursor("git commit -m fix")
cursor.end()
cursor.prev_word("abcdefghijklmnopqrstuvwxyz", WordJumpMode.EMACS)
print(repr(cursor.substring()))  # 'git commit -m '

stats = compute_stats(["ls", "git status", "git status", "ls -la"], 10)
print(render_stats(stats))
```
"""Template-driven formatting and printing of history entries."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from enum import Enum
from typing import Iterable, Sequence, TextIO, Union

from histsearch.duration import format_duration

TIME_FORMAT = "%Y-%m-%d %H:%M:%S"
HUMAN_TEMPLATE = "{time} · {duration}\t{command}"
REGULAR_TEMPLATE = "{time}\t{command}\t{duration}"


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class HistoryEntry:
    """One command recorded in the shell history.

    ``duration`` is in nanoseconds; ``hostname`` has the form ``host:user``.
    """

    command: str
    timestamp: datetime = field(default_factory=_utc_now)
    duration: int = -1
    exit: int = -1
    cwd: str = ""
    session: str = ""
    hostname: str = ""
    id: str = ""


class ListMode(Enum):
    """How a list of history entries is presented."""

    HUMAN = "human"
    CMD_ONLY = "cmd_only"
    REGULAR = "regular"

    @classmethod
    def from_flags(cls, human: bool, cmd_only: bool) -> "ListMode":
        if human:
            return cls.HUMAN
        if cmd_only:
            return cls.CMD_ONLY
        return cls.REGULAR


class FormatError(ValueError):
    """A format template is malformed or uses an unknown key."""


@dataclass(frozen=True)
class Key:
    """A placeholder in a parsed template."""

    name: str


Segment = Union[str, Key]


def parse_format(template: str) -> list[Segment]:
    """Split a template into literal text and ``{key}`` placeholders.

    ``{{`` stands for a literal opening brace.
    """
    segments: list[Segment] = []
    literal: list[str] = []
    pos = 0
    while pos < len(template):
        c = template[pos]
        if c != "{":
            literal.append(c)
            pos += 1
            continue
        if template.startswith("{{", pos):
            literal.append("{")
            pos += 2
            continue
        close = template.find("}", pos + 1)
        if close == -1:
            raise FormatError(f"unclosed placeholder at position {pos}")
        name = template[pos + 1 : close]
        if not name or "{" in name:
            raise FormatError(f"invalid placeholder {template[pos:close + 1]!r}")
        if literal:
            segments.append("".join(literal))
            literal = []
        segments.append(Key(name))
        pos = close + 1
    if literal:
        segments.append("".join(literal))
    return segments


def _nanos_to_timedelta(nanos: int) -> timedelta:
    return timedelta(microseconds=max(nanos, 0) // 1000)


def _render_key(entry: HistoryEntry, key: str, now: datetime) -> str:
    if key == "command":
        return entry.command.strip()
    if key == "directory":
        return entry.cwd.strip()
    if key == "exit":
        return str(entry.exit)
    if key == "duration":
        return format_duration(_nanos_to_timedelta(entry.duration))
    if key == "time":
        return entry.timestamp.strftime(TIME_FORMAT)
    if key == "relativetime":
        return format_duration(now - entry.timestamp)
    if key == "host":
        return entry.hostname.split(":", 1)[0]
    if key == "user":
        _, sep, user = entry.hostname.partition(":")
        return user if sep else ""
    raise FormatError(f"unknown key {key!r}")


def format_entry(
    entry: HistoryEntry, segments: Sequence[Segment], now: datetime | None = None
) -> str:
    """Render one entry with a parsed template."""
    now = now or _utc_now()
    return "".join(
        _render_key(entry, seg.name, now) if isinstance(seg, Key) else seg
        for seg in segments
    )


def _segments_for(mode: ListMode, template: str | None) -> list[Segment]:
    if mode is ListMode.CMD_ONLY:
        return [Key("command")]
    default = HUMAN_TEMPLATE if mode is ListMode.HUMAN else REGULAR_TEMPLATE
    return parse_format((template or default).replace("\\t", "\t"))


def format_list(
    entries: Sequence[HistoryEntry],
    mode: ListMode,
    template: str | None = None,
    now: datetime | None = None,
) -> list[str]:
    """Render entries as lines, last entry first."""
    segments = _segments_for(mode, template)
    now = now or _utc_now()
    return [format_entry(entry, segments, now) for entry in reversed(entries)]


def print_list(
    entries: Sequence[HistoryEntry],
    mode: ListMode,
    template: str | None = None,
    stream: TextIO | None = None,
) -> None:
    """Write formatted entries to ``stream``, stopping quietly on a broken pipe."""
    out = stream if stream is not None else sys.stdout
    lines: Iterable[str] = format_list(entries, mode, template)
    try:
        for line in lines:
            out.write(line + "\n")
        out.flush()
    except BrokenPipeError:
        return
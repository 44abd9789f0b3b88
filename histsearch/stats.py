"""Statistics over command history: most used commands and their counts."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from typing import Iterable

COMMON_COMMAND_PREFIX = ("sudo",)
COMMON_SUBCOMMAND_PREFIX = ("cargo", "go", "git", "npm", "yarn", "pnpm")

_ASCII_WHITESPACE = " \t\n\x0c\r"

_RED = "\x1b[38;5;9m"
_YELLOW = "\x1b[38;5;11m"
_GREEN = "\x1b[38;5;10m"
_GREY = "\x1b[38;5;7m"
_BOLD = "\x1b[1m"
_RESET = "\x1b[0m"


@dataclass
class CommandStats:
    """Top commands with their counts, plus totals."""

    top: list[tuple[str, int]] = field(default_factory=list)
    total: int = 0
    unique: int = 0


def _first_whitespace(s: str) -> int:
    return next((i for i, c in enumerate(s) if c in _ASCII_WHITESPACE), len(s))


def _first_non_whitespace(s: str) -> int | None:
    return next((i for i, c in enumerate(s) if c not in _ASCII_WHITESPACE), None)


def interesting_command(command: str) -> str:
    """Reduce a command line to the part worth counting.

    Leading ``sudo`` is dropped, and for tools such as git or cargo the
    subcommand is kept along with the tool name.
    """
    while True:
        i = _first_whitespace(command)
        prefix = command[:i]
        if prefix not in COMMON_COMMAND_PREFIX:
            break
        command = command[i:].lstrip()
        if not command:
            return prefix

    offset = _first_non_whitespace(command[i:])
    if offset is not None and prefix in COMMON_SUBCOMMAND_PREFIX:
        start = i + offset
        return command[: start + _first_whitespace(command[start:])]
    return prefix


def compute_stats(commands: Iterable[str], count: int) -> CommandStats:
    """Count the most frequent commands, keeping at most ``count`` of them.

    Raises ValueError when there is nothing to report.
    """
    trimmed = [command.strip() for command in commands]
    prefixes = Counter(interesting_command(command) for command in trimmed)
    top = sorted(prefixes.items(), key=lambda item: item[1], reverse=True)[:count]
    if not top:
        raise ValueError("No commands found")
    return CommandStats(top=top, total=len(trimmed), unique=len(set(trimmed)))


def _bar(filled: int) -> str:
    parts = [_RED]
    for i in range(filled):
        if i == 2:
            parts.append(_YELLOW)
        if i == 5:
            parts.append(_GREEN)
        parts.append("▮")
    parts.append(" " * (10 - filled))
    return "".join(parts)


def render_stats(stats: CommandStats) -> str:
    """Render statistics as coloured terminal text, one line per command."""
    if not stats.top:
        raise ValueError("No commands found")
    highest = max(n for _, n in stats.top)
    width = len(str(highest))
    lines = [
        f"[{_bar(10 * n // highest)}{_RESET}] "
        f"{_GREY}{n:>{width}}{_RESET} {_BOLD}{command}{_RESET}"
        for command, n in stats.top
    ]
    lines.append(f"Total commands:   {stats.total}")
    lines.append(f"Unique commands:  {stats.unique}")
    return "\n".join(lines) + "\n"
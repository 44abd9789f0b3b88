"""Filtering and ranking of history entries for fuzzy search."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum
from pathlib import PurePosixPath
from typing import Iterator

from histsearch.history_format import HistoryEntry

RESULT_LIMIT = 200
_SESSION_CHUNK = 32


class FilterMode(Enum):
    """Which part of the history a search looks at."""

    GLOBAL = "global"
    HOST = "host"
    SESSION = "session"
    DIRECTORY = "directory"
    WORKSPACE = "workspace"


@dataclass(frozen=True)
class SearchContext:
    """Where the search is being run from."""

    session: str
    cwd: str
    hostname: str
    git_root: str | None = None


def path_dist(a: str, b: str) -> int:
    """Number of steps from directory ``a`` up to a common ancestor and down to ``b``."""
    a_parts = list(PurePosixPath(a).parts)
    b_parts = list(PurePosixPath(b).parts)
    dist = 0
    while b_parts[: len(a_parts)] != a_parts:
        dist += 1
        a_parts.pop()
    return len(b_parts) - len(a_parts) + dist


def matches_filter(entry: HistoryEntry, mode: FilterMode, context: SearchContext) -> bool:
    """Whether an aggregated entry passes the filter mode.

    Aggregated hosts are comma separated, directories colon separated and
    sessions concatenated 32-character identifiers.
    """
    if mode is FilterMode.GLOBAL:
        return True
    if mode is FilterMode.HOST:
        return context.hostname in entry.hostname.split(",")
    if mode is FilterMode.SESSION:
        data = entry.session.encode()
        wanted = context.session.encode()
        return any(
            data[i : i + _SESSION_CHUNK] == wanted
            for i in range(0, len(data), _SESSION_CHUNK)
        )
    if mode is FilterMode.DIRECTORY:
        return context.cwd in entry.cwd.split(":")
    return False


def rank_score(
    score: int, begin: int, count: int, age_seconds: float, path_distance: int
) -> float:
    """Combine a match score with usage data; lower values rank first.

    Older entries are reduced, frequent ones raised, and matches starting
    near the beginning of the command or run in nearby directories favoured.
    """
    duration = math.log2(age_seconds) if age_seconds > 0 else math.nan
    if not math.isfinite(duration) or duration <= 1.0:
        duration = 1.0
    count_factor = math.log2(count + 8.0)
    begin_factor = math.log2(begin + 16.0)
    path_factor = math.log2(path_distance + 8.0)
    return -score * count_factor / path_factor / duration / begin_factor


@dataclass
class RankedResults:
    """Best-first list of entries with unique commands, capped at ``limit``."""

    limit: int = RESULT_LIMIT
    entries: list[HistoryEntry] = field(default_factory=list)
    ranks: list[float] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[HistoryEntry]:
        return iter(self.entries)

    def insert(self, entry: HistoryEntry, score: float) -> bool:
        """Place an entry by score; return whether it was kept.

        An entry is dropped when the same command already ranks better, and
        a worse-ranked duplicate is removed when it is added.
        """
        for i, (rank, existing) in enumerate(zip(self.ranks, self.entries)):
            if rank > score:
                self.ranks.insert(i, score)
                self.entries.insert(i, entry)
                for j in range(i + 1, len(self.entries)):
                    if self.entries[j].command == entry.command:
                        del self.ranks[j]
                        del self.entries[j]
                        break
                if len(self.ranks) > self.limit:
                    self.ranks.pop()
                    self.entries.pop()
                return True
            if existing.command == entry.command:
                return False
        if len(self.entries) < self.limit:
            self.ranks.append(score)
            self.entries.append(entry)
            return True
        return False
"""
Data models for the commit tracker.

This module contains the shared data structures used across all modules.
"""

import datetime
from dataclasses import dataclass, field
from typing import List, Optional


@dataclass(frozen=True)
class Repository:
    """A repository the tracked user can read."""
    name: str
    full_name: str


@dataclass(frozen=True)
class CommitInfo:
    """Represents a single commit with its metadata."""
    sha: str
    author: Optional[str]
    date: datetime.datetime
    message: str

    @property
    def first_line(self) -> str:
        lines = self.message.splitlines()
        return lines[0] if lines else ""


@dataclass(frozen=True)
class LineChanges:
    """Lines added and deleted by one or more commits."""
    additions: int = 0
    deletions: int = 0

    def __add__(self, other: "LineChanges") -> "LineChanges":
        return LineChanges(self.additions + other.additions, self.deletions + other.deletions)


@dataclass(frozen=True)
class TimeWindow:
    """Half-open interval of instants, ``[start, end)``."""
    start: datetime.datetime
    end: datetime.datetime

    def contains(self, moment: datetime.datetime) -> bool:
        return self.start <= moment < self.end


@dataclass(frozen=True)
class ReportWindows:
    """The two windows reported on every run."""
    today: TimeWindow
    week: TimeWindow


@dataclass
class CommitStats:
    """Commits of one repository that fall in a window, in fetch order."""
    repository: str
    count: int
    commits: List[CommitInfo]


@dataclass
class WindowSummary:
    """Per-repository stats and the grand total for one window."""
    stats: List[CommitStats] = field(default_factory=list)
    total: int = 0

    def add(self, repository: str, commits: List[CommitInfo]) -> None:
        """Fold one repository's commits into the summary. Empty lists are ignored."""
        if not commits:
            return
        self.stats.append(CommitStats(repository=repository, count=len(commits), commits=list(commits)))
        self.total += len(commits)

    def ranked(self) -> List[CommitStats]:
        """Stats ordered by descending count; ties keep processing order."""
        return sorted(self.stats, key=lambda s: s.count, reverse=True)


@dataclass
class CommitReport:
    """Everything a single run produces."""
    windows: ReportWindows
    today: WindowSummary = field(default_factory=WindowSummary)
    week: WindowSummary = field(default_factory=WindowSummary)
    changes: Optional[LineChanges] = None
    repositories_checked: int = 0
    skipped_repositories: List[str] = field(default_factory=list)

"""
Commit Tracker - report a GitHub user's commits for today and this week.
"""

from .models import (
    CommitInfo,
    CommitReport,
    CommitStats,
    LineChanges,
    ReportWindows,
    Repository,
    TimeWindow,
    WindowSummary,
)
from .timeframe import compute_windows
from .fetcher import GitHubFetcher, GitHubFetchError
from .aggregator import CommitAggregator, filter_commits_by_window
from .report import ReportGenerator, truncate_message
from .config import ConfigurationError, TrackerConfig
from .main import main

__all__ = [
    'CommitInfo',
    'CommitReport',
    'CommitStats',
    'LineChanges',
    'ReportWindows',
    'Repository',
    'TimeWindow',
    'WindowSummary',
    'compute_windows',
    'GitHubFetcher',
    'GitHubFetchError',
    'CommitAggregator',
    'filter_commits_by_window',
    'ReportGenerator',
    'truncate_message',
    'ConfigurationError',
    'TrackerConfig',
    'main'
]

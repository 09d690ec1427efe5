"""
Commit collection and aggregation module.

Fetches each repository's commits once for the whole week, classifies them
into the "today" and "this week" windows and folds them into per-repository
statistics and grand totals.
"""

import logging
from typing import Callable, List, Optional

from .fetcher import GitHubFetchError
from .models import CommitInfo, CommitReport, LineChanges, ReportWindows, Repository, TimeWindow

# logging
logger = logging.getLogger("commit-tracker.aggregator")

ProgressFn = Callable[[int, int, Repository], None]


def filter_commits_by_window(commits: List[CommitInfo], window: TimeWindow) -> List[CommitInfo]:
    """Return the commits authored inside ``window``, keeping their order."""
    return [c for c in commits if window.contains(c.date)]


class CommitAggregator:
    """
    Build a CommitReport for one user across a list of repositories.

    Repositories are processed one at a time in the order given. A repository
    whose commits cannot be fetched is skipped; a commit whose line changes
    cannot be fetched only drops out of the line totals.

    Args:
        fetcher: Object providing ``fetch_commits`` and ``fetch_commit_changes``
                 (normally a GitHubFetcher).
        username: Author whose commits are counted.
        include_changes: Whether to look up lines added/deleted for the week's commits.
        progress_fn: Optional callback invoked after each repository with
                     ``(position, total, repository)``.
    """

    def __init__(self, fetcher, username: str, include_changes: bool = True,
                 progress_fn: Optional[ProgressFn] = None) -> None:
        self.fetcher = fetcher
        self.username = username
        self.include_changes = include_changes
        self.progress_fn = progress_fn

    def collect(self, repositories: List[Repository], windows: ReportWindows) -> CommitReport:
        """
        Fetch, classify and aggregate commits for every repository.

        Args:
            repositories: Repositories in the order they should be processed
            windows: The today and week windows

        Returns:
            CommitReport with both window summaries filled in
        """
        report = CommitReport(windows=windows)
        if self.include_changes:
            report.changes = LineChanges()

        total = len(repositories)
        for position, repo in enumerate(repositories, start=1):
            self._collect_repository(repo, report)
            report.repositories_checked += 1
            if self.progress_fn is not None:
                self.progress_fn(position, total, repo)

        logger.info(
            "Collected %d commits today and %d this week across %d repositories (%d skipped)",
            report.today.total, report.week.total, total, len(report.skipped_repositories),
        )
        return report

    def _collect_repository(self, repo: Repository, report: CommitReport) -> None:
        """Fold one repository's contribution into ``report``."""
        try:
            commits = self.fetcher.fetch_commits(repo.full_name, self.username, since=report.windows.week.start)
        except GitHubFetchError as e:
            logger.info("Skipping %s: %s", repo.full_name, e)
            report.skipped_repositories.append(repo.full_name)
            return

        today_commits = filter_commits_by_window(commits, report.windows.today)
        week_commits = filter_commits_by_window(commits, report.windows.week)
        if len(week_commits) < len(commits):
            logger.debug("Dropped %d commits outside this week from %s",
                         len(commits) - len(week_commits), repo.full_name)

        report.today.add(repo.name, today_commits)
        report.week.add(repo.name, week_commits)

        if self.include_changes and week_commits:
            report.changes = report.changes + self._sum_changes(repo, week_commits)

    def _sum_changes(self, repo: Repository, commits: List[CommitInfo]) -> LineChanges:
        """Sum line changes of ``commits``, skipping those whose details fail."""
        changes = LineChanges()
        for commit in commits:
            try:
                changes = changes + self.fetcher.fetch_commit_changes(repo.full_name, commit.sha)
            except GitHubFetchError as e:
                logger.debug("Leaving %s out of line totals: %s", commit.sha[:7], e)
                continue
        return changes

import datetime

import pytest

from commit_tracker.fetcher import GitHubFetchError
from commit_tracker.models import CommitInfo, LineChanges, Repository
from commit_tracker.timeframe import compute_windows

UTC = datetime.timezone.utc

# Wednesday; the week runs Mon Oct 19 .. Sun Oct 25
FIXED_NOW = datetime.datetime(2026, 10, 21, 15, 30, tzinfo=UTC)


class FakeFetcher:
    """
    In-memory stand-in for GitHubFetcher that records every call.
    """

    def __init__(self, commits_by_repo, changes=None, failing_repos=(), failing_shas=()):
        self.commits_by_repo = commits_by_repo
        self.changes = changes or {}
        self.failing_repos = set(failing_repos)
        self.failing_shas = set(failing_shas)
        self.commit_calls = []
        self.change_calls = []

    def fetch_commits(self, full_name, author, since):
        self.commit_calls.append((full_name, author, since))
        if full_name in self.failing_repos:
            raise GitHubFetchError(f"Failed to fetch commits for {full_name}: boom")
        return list(self.commits_by_repo.get(full_name, []))

    def fetch_commit_changes(self, full_name, sha):
        self.change_calls.append((full_name, sha))
        if sha in self.failing_shas:
            raise GitHubFetchError(f"Failed to fetch stats for {full_name}@{sha}: boom")
        return self.changes.get(sha, LineChanges(additions=1, deletions=1))


@pytest.fixture
def windows():
    return compute_windows(FIXED_NOW)


@pytest.fixture
def make_commit():
    """
    Build CommitInfo objects with UTC dates.
    """
    def _make(sha, date, message="Update code"):
        return CommitInfo(sha=sha, author="octocat", date=date, message=message)
    return _make


@pytest.fixture
def make_repo():
    def _make(name, owner="octocat"):
        return Repository(name=name, full_name=f"{owner}/{name}")
    return _make


@pytest.fixture
def fake_fetcher():
    return FakeFetcher

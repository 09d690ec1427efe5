"""
GitHub data fetching module.

This module handles all GitHub API interactions for listing repositories,
fetching a user's recent commits and looking up per-commit line changes
using PyGithub.
"""

import datetime
import logging
from typing import List, Optional

from .models import CommitInfo, LineChanges, Repository

# External libs
try:
    from github import Auth, Github
except Exception as e:
    raise RuntimeError("PyGithub is required. Install with: pip install PyGithub") from e

# Set up logging
logger = logging.getLogger("commit-tracker.fetcher")

DEFAULT_TIMEOUT = 30
PAGE_SIZE = 100


class GitHubFetchError(RuntimeError):
    """
    Raised when a GitHub API call fails (error status, transport error,
    timeout or an unexpected payload).
    """


class GitHubFetcher:
    """
    Fetch repositories and commits from GitHub using PyGithub.

    Only the first page of every listing is read (up to 100 items) and no
    request is retried; a failed call surfaces as GitHubFetchError.

    Args:
        token: Personal access token.
        timeout: Per-request timeout in seconds.
    """

    def __init__(self, token: str, timeout: int = DEFAULT_TIMEOUT) -> None:
        try:
            self._g = Github(auth=Auth.Token(token), timeout=timeout, retry=None, per_page=PAGE_SIZE, lazy=True)
            logger.debug("GitHub client initialized (timeout=%ss)", timeout)
        except Exception as e:
            logger.error("Failed to initialize GitHub client: %s", e)
            raise GitHubFetchError(f"GitHub client initialization failed: {e}") from e

    def list_repositories(self, username: str) -> List[Repository]:
        """
        List repositories of ``username``, most recently updated first.

        Raises:
            GitHubFetchError: If the repositories cannot be listed
        """
        try:
            user = self._g.get_user(username)
            page = user.get_repos(sort="updated").get_page(0)
            repos = [Repository(name=r.name, full_name=r.full_name) for r in page]
        except Exception as e:
            error_msg = f"Failed to list repositories for {username}: {e}"
            logger.debug(error_msg)
            raise GitHubFetchError(error_msg) from e

        logger.info("Found %d repositories for %s", len(repos), username)
        return repos

    def fetch_commits(self, full_name: str, author: str, since: datetime.datetime) -> List[CommitInfo]:
        """
        Fetch commits authored by ``author`` in ``full_name`` since ``since``.

        Commits are returned in API order (most recent first).

        Args:
            full_name: Repository name in owner/name form
            author: GitHub login of the commit author
            since: Only commits with an author date at or after this instant

        Returns:
            List of CommitInfo objects, at most one page

        Raises:
            GitHubFetchError: If commits cannot be fetched
        """
        try:
            repo = self._g.get_repo(full_name)
            # PyGithub formats since as wall-clock time with a literal Z suffix
            since_utc = since.astimezone(datetime.timezone.utc)
            page = repo.get_commits(author=author, since=since_utc).get_page(0)
            result = [self._to_commit_info(c) for c in page]
        except Exception as e:
            error_msg = f"Failed to fetch commits for {full_name}: {e}"
            logger.warning(error_msg)
            raise GitHubFetchError(error_msg) from e

        logger.debug("Fetched %d commits from %s", len(result), full_name)
        return result

    def fetch_commit_changes(self, full_name: str, sha: str) -> LineChanges:
        """
        Look up lines added and deleted by a single commit.

        Raises:
            GitHubFetchError: If the commit details cannot be fetched
        """
        try:
            stats = self._g.get_repo(full_name).get_commit(sha).stats
            return LineChanges(additions=int(stats.additions), deletions=int(stats.deletions))
        except Exception as e:
            error_msg = f"Failed to fetch stats for {full_name}@{sha[:7]}: {e}"
            logger.warning(error_msg)
            raise GitHubFetchError(error_msg) from e

    @staticmethod
    def _to_commit_info(c) -> CommitInfo:
        """Convert a PyGithub commit into a CommitInfo."""
        commit_obj = c.commit

        # Extract author information with fallbacks
        author_name: Optional[str] = None
        if c.author:
            author_name = c.author.login
        elif commit_obj.author and commit_obj.author.name:
            author_name = commit_obj.author.name

        date = commit_obj.author.date
        if date.tzinfo is None:
            date = date.replace(tzinfo=datetime.timezone.utc)

        return CommitInfo(sha=c.sha, author=author_name, date=date, message=commit_obj.message)

#!/usr/bin/env python3
"""
Main driver script for the commit tracker.

This script provides the command-line interface and coordinates all modules
to report how many commits a GitHub user made today and this week.

Usage (example):
    python -m commit_tracker.main --username octocat --token GITHUB_TOKEN
"""

import argparse
import logging
import sys
from typing import List, Optional

from .aggregator import CommitAggregator
from .config import TOKEN_ENV, USERNAME_ENV, ConfigurationError, TrackerConfig
from .fetcher import DEFAULT_TIMEOUT, GitHubFetcher, GitHubFetchError
from .models import Repository
from .report import ReportGenerator
from .timeframe import compute_windows

logger = logging.getLogger("commit-tracker")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="commit-tracker",
        description="Report a GitHub user's commits for today and this week, grouped by repository.",
        epilog=f"Alternatively, set {TOKEN_ENV} and {USERNAME_ENV} environment variables (a .env file is read too).",
    )
    parser.add_argument("--token", "-t", help="GitHub personal access token")
    parser.add_argument("--username", "-u", help="GitHub username")
    parser.add_argument("--no-line-stats", action="store_true",
                        help="Skip the per-commit lookups that total lines added/deleted")
    parser.add_argument("--timeout", type=int, default=DEFAULT_TIMEOUT, help="Request timeout in seconds")
    parser.add_argument("--verbose", "-v", action="count", default=0, help="Log more (-vv for debug output)")
    return parser


def setup_logging(verbosity: int) -> None:
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity > 1:
        level = logging.DEBUG
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def print_progress(position: int, total: int, repo: Repository) -> None:
    sys.stderr.write(f"\rProcessing repository {position}/{total}: {repo.name}      ")
    sys.stderr.flush()


def main(argv: Optional[List[str]] = None) -> None:
    """
    Main entry point for the commit tracker.

    Exits with status 2 when credentials are missing and 1 when the
    repositories cannot be listed; repositories that fail individually are
    skipped.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.verbose)

    try:
        config = TrackerConfig.resolve(
            token=args.token,
            username=args.username,
            include_changes=not args.no_line_stats,
            timeout=args.timeout,
        )
    except ConfigurationError as e:
        parser.error(str(e))

    try:
        print(f"Fetching commit statistics for {config.username}...")
        fetcher = GitHubFetcher(token=config.token, timeout=config.timeout)
        repos = fetcher.list_repositories(config.username)
        print(f"Found {len(repos)} repositories to check.")

        windows = compute_windows()
        aggregator = CommitAggregator(
            fetcher,
            config.username,
            include_changes=config.include_changes,
            progress_fn=print_progress,
        )
        report = aggregator.collect(repos, windows)
        sys.stderr.write("\n")
        print("\nProcessing complete.")

        print(ReportGenerator().generate_text(report))

    except KeyboardInterrupt:
        logger.info("Commit tracking interrupted by user")
        print("\nOperation cancelled by user")
        sys.exit(1)
    except GitHubFetchError as e:
        print(f"Error fetching repositories: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()

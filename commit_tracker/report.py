"""
Report Generation Module

This module contains the ReportGenerator class responsible for rendering a
CommitReport as the flat text shown on the terminal.
"""

import datetime
from typing import List

from .models import CommitInfo, CommitReport, CommitStats, WindowSummary

MAX_MESSAGE_LENGTH = 60


def truncate_message(message: str, limit: int = MAX_MESSAGE_LENGTH) -> str:
    """Shorten ``message`` to ``limit`` characters, ending with "..." when cut."""
    if len(message) > limit:
        return message[:limit - 3] + "..."
    return message


def _format_day(value: datetime.datetime, with_year: bool = True) -> str:
    text = f"{value:%b} {value.day}"
    return f"{text}, {value.year}" if with_year else text


class ReportGenerator:
    """
    Compose the text report from a CommitReport.

    Each window gets its own section with the total and a ranked
    per-repository breakdown; a footer lists line totals and the dates
    covered.
    """

    def __init__(self, max_commits_shown: int = 3) -> None:
        """
        Initialize the report generator.

        Args:
            max_commits_shown: How many commit messages to list per repository
        """
        self.max_commits_shown = max_commits_shown

    def generate_text(self, report: CommitReport) -> str:
        """
        Build the complete report.

        Args:
            report: Aggregated commit report

        Returns:
            Report text, without a trailing newline
        """
        lines: List[str] = []
        lines.extend(self.format_section("TODAY'S COMMITS", report.today))
        lines.extend(self.format_section("THIS WEEK'S COMMITS", report.week))
        lines.extend(self._format_footer(report))
        return "\n".join(lines)

    def format_section(self, title: str, summary: WindowSummary) -> List[str]:
        """Render one window section."""
        lines = ["", f"=== {title} ===", f"Total commits: {summary.total}"]
        if summary.total == 0:
            lines.append("No commits found for this period.")
            return lines

        lines.append("")
        lines.append("By repository:")
        for stat in summary.ranked():
            lines.extend(self._format_stats(stat))
        return lines

    def _format_stats(self, stat: CommitStats) -> List[str]:
        lines = [f"  {stat.repository}: {stat.count} commits"]
        shown = stat.commits[:self.max_commits_shown]
        for commit in shown:
            lines.append(f"    - {self._format_commit(commit)}")
        remaining = len(stat.commits) - len(shown)
        if remaining > 0:
            lines.append(f"    ... and {remaining} more commits")
        return lines

    @staticmethod
    def _format_commit(commit: CommitInfo) -> str:
        return truncate_message(commit.first_line)

    def _format_footer(self, report: CommitReport) -> List[str]:
        """Line totals, skipped repositories and the periods covered."""
        lines: List[str] = []
        if report.changes is not None:
            lines.append("")
            lines.append(f"Lines of code added this week: {report.changes.additions}")
            lines.append(f"Lines of code deleted this week: {report.changes.deletions}")

        if report.skipped_repositories:
            lines.append("")
            lines.append(f"Could not read commits from {len(report.skipped_repositories)} repositories.")

        today = report.windows.today
        week = report.windows.week
        # week.end is exclusive; show the last day inside the window
        last_day = week.end - datetime.timedelta(seconds=1)
        lines.append("")
        lines.append(f"Time period (Today): {_format_day(today.start)}")
        lines.append(f"Time period (This Week): {_format_day(week.start, with_year=False)} - {_format_day(last_day)}")
        return lines

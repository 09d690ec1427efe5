"""
Run configuration for the commit tracker.

Credentials come from command-line flags first, then from the GITHUB_TOKEN and
GITHUB_USERNAME environment variables (a ``.env`` file in the working
directory is loaded into the environment without overriding it).
"""

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from dotenv import find_dotenv, load_dotenv

from .fetcher import DEFAULT_TIMEOUT

TOKEN_ENV = "GITHUB_TOKEN"
USERNAME_ENV = "GITHUB_USERNAME"


class ConfigurationError(ValueError):
    """Raised when a required setting is missing."""


@dataclass(frozen=True)
class TrackerConfig:
    """Settings for a single run."""
    token: str
    username: str
    include_changes: bool = True
    timeout: int = DEFAULT_TIMEOUT

    @classmethod
    def resolve(cls, token: Optional[str] = None, username: Optional[str] = None,
                include_changes: bool = True, timeout: int = DEFAULT_TIMEOUT,
                environ: Optional[Mapping[str, str]] = None) -> "TrackerConfig":
        """
        Build a config from explicit values, falling back to the environment.

        Args:
            token: GitHub token given on the command line, if any
            username: GitHub username given on the command line, if any
            include_changes: Whether to total lines added/deleted
            timeout: Per-request timeout in seconds
            environ: Environment to read; defaults to ``os.environ`` after
                     loading ``.env``

        Raises:
            ConfigurationError: If the token or username is still missing
        """
        if environ is None:
            load_dotenv(find_dotenv(usecwd=True), override=False)
            environ = os.environ

        token = token or environ.get(TOKEN_ENV)
        username = username or environ.get(USERNAME_ENV)

        missing = []
        if not token:
            missing.append(f"token (--token or {TOKEN_ENV})")
        if not username:
            missing.append(f"username (--username or {USERNAME_ENV})")
        if missing:
            raise ConfigurationError("Missing GitHub " + " and ".join(missing))
        if timeout <= 0:
            raise ConfigurationError(f"Timeout must be positive, got {timeout}")

        return cls(token=token, username=username, include_changes=include_changes, timeout=timeout)

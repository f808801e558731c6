"""Errors raised for YouTrack failures."""

from __future__ import annotations


class YouTrackError(Exception):
    """Base class for failures reported by the YouTrack API."""


class LoginError(YouTrackError):
    """Raised when YouTrack does not hand out a session for the given credentials."""

    def __init__(self, *, base_url: str) -> None:
        super().__init__(f"Login to YouTrack at {base_url} failed")
        self.base_url = base_url


class IssueCreationError(YouTrackError):
    """Raised when YouTrack rejects an issue or does not report where it was created."""

    def __init__(self, *, status_code: int, reason: str) -> None:
        super().__init__(f"YouTrack issue creation failed ({status_code}): {reason}")
        self.status_code = status_code
        self.reason = reason

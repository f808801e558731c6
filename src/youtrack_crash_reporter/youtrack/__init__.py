"""YouTrack REST API access."""

from youtrack_crash_reporter.youtrack.client import YouTrackClient
from youtrack_crash_reporter.youtrack.errors import IssueCreationError, LoginError, YouTrackError

__all__ = ["IssueCreationError", "LoginError", "YouTrackClient", "YouTrackError"]

"""Human readable issue body for a crash event."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from youtrack_crash_reporter.payload import IssuePayload


def _users_phrase(count: int) -> str:
    if count == 1:
        return "at least 1 user who has crashed"
    return f"at least {count} users who have crashed"


def _crashes_phrase(count: int) -> str:
    if count == 1:
        return "at least 1 time"
    return f"at least {count} times"


def issue_description_text(payload: IssuePayload | Mapping[str, Any]) -> str:
    """Build the YouTrack issue description for `payload`.

    Title, method and URL are embedded verbatim. Device and crash counts are
    phrased in the singular only when they equal 1.
    """

    event = IssuePayload.coerce(payload)
    impact = (
        f"This issue is affecting {_users_phrase(event.impacted_devices_count)} "
        f"{_crashes_phrase(event.crashes_count)}."
    )
    return "\n".join(
        [
            "Crashlytics detected a new issue.",
            f"{event.title} in {event.method}",
            "",
            impact,
            "",
            f"App: {event.app.name} ({event.app.bundle_identifier})",
            f"Impact level: {event.impact_level}",
            "",
            f"More information: {event.url}",
        ]
    )

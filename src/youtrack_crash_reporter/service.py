"""Crash event reporting into YouTrack.

Two entry points with intentionally different failure shapes:
- `receive_verification` never raises and answers with a (success, message) pair,
  for settings screens.
- `receive_issue_impact_change` raises on any failure, for automated pipelines.

Every operation logs in afresh; no session outlives the call that opened it.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator, Mapping
from contextlib import contextmanager
from typing import Any, Literal, TypedDict

import requests
from pydantic import ValidationError

from youtrack_crash_reporter.config import YouTrackConfig
from youtrack_crash_reporter.description import issue_description_text
from youtrack_crash_reporter.payload import IssuePayload
from youtrack_crash_reporter.youtrack.client import YouTrackClient
from youtrack_crash_reporter.youtrack.errors import LoginError

logger = logging.getLogger(__name__)

VERIFIED_MESSAGE = "Successfully connected to your YouTrack project!"
PROJECT_NOT_VERIFIED_MESSAGE = "Oops! Please check your YouTrack settings again."
SETTINGS_ERROR_MESSAGE = "Oops! Please check your settings again."

# Malformed config or an unreachable tracker; both mean "check your settings".
_VERIFICATION_ERRORS: tuple[type[Exception], ...] = (
    ValidationError,
    KeyError,
    TypeError,
    ValueError,
    requests.RequestException,
)


class IssueCreationResult(TypedDict):
    issue_url: str


class YouTrackService:
    """Reports crash-monitoring events into a YouTrack project."""

    title = "YouTrack"

    def __init__(
        self,
        *,
        summary_prefix: str = "Crashlytics",
        timeout: float = 30.0,
        session_factory: Callable[[], requests.Session] = requests.Session,
    ) -> None:
        self._summary_prefix = summary_prefix
        self._timeout = timeout
        self._session_factory = session_factory

    @contextmanager
    def _client(self, base_url: str) -> Iterator[YouTrackClient]:
        with YouTrackClient(
            base_url=base_url, timeout=self._timeout, session=self._session_factory()
        ) as client:
            yield client

    def login(self, base_url: str, username: str, password: str) -> str | Literal[False]:
        """Log in once and return the session cookie, or ``False`` on rejection."""

        with self._client(base_url) as client:
            return client.login(username, password)

    def issue_description_text(self, payload: IssuePayload | Mapping[str, Any]) -> str:
        return issue_description_text(payload)

    def summary(self, title: str) -> str:
        return f"[{self._summary_prefix}] {title}"

    def receive_verification(
        self, config: YouTrackConfig | Mapping[str, Any], _payload: object = None
    ) -> tuple[bool, str]:
        """Check that the credentials log in and the configured project exists."""

        try:
            settings = YouTrackConfig.coerce(config)
            with self._client(settings.base_url) as client:
                token = client.login(settings.username, settings.password)
                if not token:
                    return False, SETTINGS_ERROR_MESSAGE

                if not client.project_exists(token=token, project_id=settings.project_id):
                    return False, PROJECT_NOT_VERIFIED_MESSAGE
        except _VERIFICATION_ERRORS as e:
            logger.warning(
                "YouTrack verification failed",
                extra={"error_type": type(e).__name__, "error": str(e)},
            )
            return False, SETTINGS_ERROR_MESSAGE

        logger.info("Verified YouTrack project", extra={"project_id": settings.project_id})
        return True, VERIFIED_MESSAGE

    def receive_issue_impact_change(
        self,
        config: YouTrackConfig | Mapping[str, Any],
        payload: IssuePayload | Mapping[str, Any],
    ) -> IssueCreationResult:
        """Create a YouTrack issue for a crash event.

        Raises:
            pydantic.ValidationError: If the config or payload is malformed.
            LoginError: If YouTrack rejects the credentials.
            IssueCreationError: If YouTrack does not create the issue.
            requests.RequestException: On transport failure.
        """

        settings = YouTrackConfig.coerce(config)
        event = IssuePayload.coerce(payload)
        with self._client(settings.base_url) as client:
            token = client.login(settings.username, settings.password)
            if not token:
                raise LoginError(base_url=settings.base_url)

            description = self.issue_description_text(event)
            issue = client.create_issue(
                token=token,
                project_id=settings.project_id,
                summary=self.summary(event.title),
                description=description,
            )

        return {"issue_url": issue.url}

"""Thin requests-based client for the YouTrack REST endpoints we need.

A client owns one `requests.Session` and is meant to live for a single
operation: log in, make one authenticated call, close.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from types import TracebackType
from typing import Literal
from urllib.parse import quote

import requests

from youtrack_crash_reporter.youtrack.errors import IssueCreationError

logger = logging.getLogger(__name__)

SESSION_HEADER = "Cookie"


def _is_success(resp: requests.Response) -> bool:
    return 200 <= resp.status_code < 300


@dataclass(frozen=True, slots=True)
class CreatedIssue:
    """Location of an issue YouTrack has just created."""

    url: str
    status_code: int


class YouTrackClient:
    """Small wrapper around `requests` for login, project lookup and issue creation."""

    def __init__(
        self,
        *,
        base_url: str,
        timeout: float = 30.0,
        session: requests.Session | None = None,
    ) -> None:
        if not base_url:
            raise ValueError("YouTrack base URL is required")

        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._session = session if session is not None else requests.Session()
        self._session.headers.update({"User-Agent": "youtrack-crash-reporter"})

    def __enter__(self) -> YouTrackClient:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def close(self) -> None:
        self._session.close()

    @property
    def base_url(self) -> str:
        return self._base_url

    def _url(self, path: str) -> str:
        return f"{self._base_url}/{path.lstrip('/')}"

    def login(self, username: str, password: str) -> str | Literal[False]:
        """Exchange credentials for a session cookie.

        Returns:
            The `Set-Cookie` value to send back as the session credential, or
            ``False`` if YouTrack did not accept the login.
        """

        resp = self._session.post(
            self._url("/rest/user/login"),
            data={"login": username, "password": password},
            timeout=self._timeout,
        )
        if not _is_success(resp):
            logger.warning(
                "YouTrack login failed",
                extra={"base_url": self._base_url, "status_code": resp.status_code},
            )
            return False

        cookie = resp.headers.get("Set-Cookie")
        if not cookie:
            logger.warning(
                "YouTrack login response carried no session cookie",
                extra={"base_url": self._base_url, "status_code": resp.status_code},
            )
            return False

        logger.debug("Logged in to YouTrack", extra={"base_url": self._base_url})
        return cookie

    def project_exists(self, *, token: str, project_id: str) -> bool:
        resp = self._session.get(
            self._url(f"/rest/admin/project/{quote(project_id, safe='')}"),
            headers={SESSION_HEADER: token},
            timeout=self._timeout,
        )
        if not _is_success(resp):
            logger.info(
                "YouTrack project lookup failed",
                extra={"project_id": project_id, "status_code": resp.status_code},
            )
            return False
        return True

    def create_issue(
        self, *, token: str, project_id: str, summary: str, description: str
    ) -> CreatedIssue:
        """Create an issue in `project_id`.

        Raises:
            IssueCreationError: If YouTrack answers with a non-2xx status or
                omits the `Location` of the new issue.
        """

        resp = self._session.put(
            self._url("/rest/issue"),
            params={"project": project_id, "summary": summary, "description": description},
            headers={SESSION_HEADER: token},
            timeout=self._timeout,
        )
        if not _is_success(resp):
            raise IssueCreationError(status_code=resp.status_code, reason=resp.reason or "")

        location = resp.headers.get("Location")
        if not location:
            raise IssueCreationError(
                status_code=resp.status_code, reason="response has no Location header"
            )

        logger.info(
            "Created YouTrack issue",
            extra={"project_id": project_id, "issue_url": location},
        )
        return CreatedIssue(url=location, status_code=resp.status_code)

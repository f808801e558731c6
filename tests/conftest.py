"""Test configuration and fixtures."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any
from unittest.mock import Mock

import pytest
import requests


def _make_response(status_code: int, headers: dict[str, str] | None = None) -> requests.Response:
    resp = requests.Response()
    resp.status_code = status_code
    resp.headers.update(headers or {})
    resp._content = b"{}"
    return resp


@pytest.fixture
def make_response() -> Callable[..., requests.Response]:
    """Build real `requests.Response` objects without touching the network."""
    return _make_response


@pytest.fixture
def youtrack_config() -> dict[str, str]:
    """Provide a complete YouTrack configuration mapping."""
    return {
        "base_url": "http://example-project.youtrack.com",
        "project_id": "foo_project_id",
        "username": "username",
        "password": "password",
    }


@pytest.fixture
def issue_payload() -> dict[str, Any]:
    """Provide a crash event payload."""
    return {
        "title": "foo_title",
        "method": "method name",
        "impact_level": 1,
        "impacted_devices_count": 1,
        "crashes_count": 1,
        "app": {"name": "foo name", "bundle_identifier": "foo.bar.baz"},
        "url": "http://foo.com/bar",
    }


@pytest.fixture
def http_session() -> Mock:
    """Provide a fake `requests.Session`; tests set post/get/put return values."""
    session = Mock(spec=requests.Session)
    session.headers = {}
    return session


@pytest.fixture
def session_factory(http_session: Mock) -> Mock:
    """Provide a session factory that always hands out `http_session`."""
    return Mock(return_value=http_session)

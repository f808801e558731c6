"""Unit tests for the YouTrack REST client (mocked HTTP)."""

from __future__ import annotations

from unittest.mock import Mock

import pytest

from youtrack_crash_reporter.youtrack.client import YouTrackClient
from youtrack_crash_reporter.youtrack.errors import IssueCreationError

BASE_URL = "http://example-project.youtrack.com"


def test_login_returns_cookie_on_success(http_session: Mock, make_response) -> None:
    http_session.post.return_value = make_response(200, {"Set-Cookie": "cookie-string"})
    client = YouTrackClient(base_url=BASE_URL, session=http_session)

    assert client.login("username", "password") == "cookie-string"
    http_session.post.assert_called_once_with(
        f"{BASE_URL}/rest/user/login",
        data={"login": "username", "password": "password"},
        timeout=30.0,
    )


@pytest.mark.parametrize("status_code", [302, 401, 403, 500])
def test_login_returns_false_on_non_2xx(
    http_session: Mock, make_response, status_code: int
) -> None:
    http_session.post.return_value = make_response(status_code)
    client = YouTrackClient(base_url=BASE_URL, session=http_session)

    assert client.login("username", "password") is False


def test_login_without_cookie_is_a_failure(http_session: Mock, make_response) -> None:
    http_session.post.return_value = make_response(200)
    client = YouTrackClient(base_url=BASE_URL, session=http_session)

    assert client.login("username", "password") is False


def test_base_url_trailing_slash_is_normalized(http_session: Mock, make_response) -> None:
    http_session.get.return_value = make_response(200)
    client = YouTrackClient(base_url=f"{BASE_URL}/", session=http_session)

    assert client.project_exists(token="cookie-string", project_id="foo_project_id") is True
    http_session.get.assert_called_once_with(
        f"{BASE_URL}/rest/admin/project/foo_project_id",
        headers={"Cookie": "cookie-string"},
        timeout=30.0,
    )


def test_project_id_is_percent_encoded(http_session: Mock, make_response) -> None:
    http_session.get.return_value = make_response(200)
    client = YouTrackClient(base_url=BASE_URL, session=http_session)

    client.project_exists(token="cookie-string", project_id="A B/C")

    assert http_session.get.call_args.args[0] == f"{BASE_URL}/rest/admin/project/A%20B%2FC"


def test_project_exists_false_on_error_status(http_session: Mock, make_response) -> None:
    http_session.get.return_value = make_response(404)
    client = YouTrackClient(base_url=BASE_URL, session=http_session)

    assert client.project_exists(token="cookie-string", project_id="missing") is False


def test_create_issue_returns_location(http_session: Mock, make_response) -> None:
    http_session.put.return_value = make_response(201, {"Location": "foo_youtrack_issue_url"})
    client = YouTrackClient(base_url=BASE_URL, timeout=5.0, session=http_session)

    created = client.create_issue(
        token="cookie-string",
        project_id="foo_project_id",
        summary="[Crashlytics] foo_title",
        description="foo_issue_description",
    )

    assert created.url == "foo_youtrack_issue_url"
    assert created.status_code == 201
    http_session.put.assert_called_once_with(
        f"{BASE_URL}/rest/issue",
        params={
            "project": "foo_project_id",
            "summary": "[Crashlytics] foo_title",
            "description": "foo_issue_description",
        },
        headers={"Cookie": "cookie-string"},
        timeout=5.0,
    )


def test_create_issue_raises_on_error_status(http_session: Mock, make_response) -> None:
    http_session.put.return_value = make_response(500)
    client = YouTrackClient(base_url=BASE_URL, session=http_session)

    with pytest.raises(IssueCreationError) as excinfo:
        client.create_issue(token="c", project_id="p", summary="s", description="d")

    assert excinfo.value.status_code == 500


def test_create_issue_without_location_raises(http_session: Mock, make_response) -> None:
    http_session.put.return_value = make_response(201)
    client = YouTrackClient(base_url=BASE_URL, session=http_session)

    with pytest.raises(IssueCreationError, match="Location"):
        client.create_issue(token="c", project_id="p", summary="s", description="d")


def test_context_manager_closes_session(http_session: Mock) -> None:
    with YouTrackClient(base_url=BASE_URL, session=http_session):
        pass

    http_session.close.assert_called_once_with()


def test_base_url_is_required(http_session: Mock) -> None:
    with pytest.raises(ValueError, match="base URL"):
        YouTrackClient(base_url="", session=http_session)

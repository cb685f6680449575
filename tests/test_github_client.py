"""Tests for the GitHub API client (HTTP stubbed)."""

from __future__ import annotations

import io
import json
import urllib.error
from email.message import Message
from urllib.parse import parse_qs, urlparse

import pytest

from ghfc.core.github_client import GitHubClient, GitHubError


class FakeResponse:
    def __init__(self, body: bytes = b"", status: int = 200, headers: dict[str, str] | None = None) -> None:
        self._body = body
        self.status = status
        self.headers = Message()
        for k, v in (headers or {}).items():
            self.headers[k] = v

    def read(self) -> bytes:
        return self._body

    def __enter__(self) -> "FakeResponse":
        return self

    def __exit__(self, *exc) -> None:
        return None


def _http_error(url: str, code: int, headers: dict[str, str] | None = None, body: bytes = b"") -> urllib.error.HTTPError:
    msg = Message()
    for k, v in (headers or {}).items():
        msg[k] = v
    return urllib.error.HTTPError(url, code, "error", msg, io.BytesIO(body))


@pytest.fixture
def requests(monkeypatch):
    """Record outgoing requests; tests set ``handler`` to produce responses."""
    seen: list = []
    state: dict = {}

    def fake_urlopen(req, timeout=None):
        seen.append(req)
        return state["handler"](req)

    monkeypatch.setattr("urllib.request.urlopen", fake_urlopen)
    return seen, state


def test_list_pull_files_paginates(requests) -> None:
    seen, state = requests
    pages = {
        "1": [{"filename": f"f{i}.py"} for i in range(100)],
        "2": [{"filename": "last.md"}, {"status": "removed"}, {"filename": None}],
        "3": [],
    }

    def handler(req):
        page = parse_qs(urlparse(req.full_url).query)["page"][0]
        return FakeResponse(json.dumps(pages[page]).encode())

    state["handler"] = handler
    files = GitHubClient(token="t0k").list_pull_files("owner/repo", 7)

    assert len(files) == 101
    assert files[0] == "f0.py"
    assert files[-1] == "last.md"
    assert len(seen) == 3
    assert urlparse(seen[0].full_url).path == "/repos/owner/repo/pulls/7/files"
    assert seen[0].get_header("Authorization") == "Bearer t0k"


def test_no_token_sends_no_auth(requests) -> None:
    seen, state = requests
    state["handler"] = lambda req: FakeResponse(b"[]")
    assert GitHubClient().list_pull_files("o/r", 1) == []
    assert seen[0].get_header("Authorization") is None


def test_http_error_raises_with_status(requests) -> None:
    _, state = requests

    def handler(req):
        raise _http_error(req.full_url, 404, body=b'{"message": "Not Found"}')

    state["handler"] = handler
    with pytest.raises(GitHubError) as exc:
        GitHubClient().list_pull_files("o/r", 1)
    assert exc.value.status == 404
    assert "404" in str(exc.value)


def test_non_list_body_raises(requests) -> None:
    _, state = requests
    state["handler"] = lambda req: FakeResponse(b'{"message": "weird"}')
    with pytest.raises(GitHubError):
        GitHubClient().list_pull_files("o/r", 1)


def test_invalid_json_raises(requests) -> None:
    _, state = requests
    state["handler"] = lambda req: FakeResponse(b"<html>")
    with pytest.raises(GitHubError):
        GitHubClient().list_pull_files("o/r", 1)


def test_connection_error_raises(requests) -> None:
    _, state = requests

    def handler(req):
        raise urllib.error.URLError("name resolution failed")

    state["handler"] = handler
    with pytest.raises(GitHubError):
        GitHubClient().list_pull_files("o/r", 1)


def test_head_root(requests) -> None:
    seen, state = requests
    state["handler"] = lambda req: FakeResponse(headers={"X-OAuth-Scopes": "contents:read"})

    status, headers = GitHubClient(token="abc", api_base="https://ghe.example/api/v3/").head_root()

    assert status == 200
    assert headers["X-OAuth-Scopes"] == "contents:read"
    assert seen[0].get_method() == "HEAD"
    assert seen[0].full_url == "https://ghe.example/api/v3/"
    assert seen[0].get_header("Authorization") == "token abc"


def test_head_root_returns_error_status(requests) -> None:
    _, state = requests

    def handler(req):
        raise _http_error(req.full_url, 401, headers={"WWW-Authenticate": "Bearer"})

    state["handler"] = handler
    status, headers = GitHubClient(token="bad").head_root()
    assert status == 401
    assert "WWW-Authenticate" in headers

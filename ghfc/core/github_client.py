"""GitHub API operations: pull request files and token scope headers."""

from __future__ import annotations

import json
import urllib.error
import urllib.request
from typing import Any

from .constants import API_BASE, GITHUB_API_ACCEPT, HTTP_TIMEOUT_SEC, PER_PAGE, USER_AGENT


class GitHubError(RuntimeError):
    def __init__(self, message: str, status: int | None = None) -> None:
        super().__init__(message)
        self.status = status


class GitHubClient:
    def __init__(self, token: str | None = None, api_base: str = API_BASE) -> None:
        self.token = token
        self.api_base = api_base.rstrip("/")

    # ---------- low-level HTTP ----------
    def _request(self, url: str, method: str = "GET", auth_scheme: str = "Bearer") -> urllib.request.Request:
        req = urllib.request.Request(url, method=method)
        req.add_header("Accept", GITHUB_API_ACCEPT)
        req.add_header("User-Agent", USER_AGENT)
        if self.token:
            req.add_header("Authorization", f"{auth_scheme} {self.token}")
        return req

    def _request_json(self, url: str) -> Any:
        try:
            with urllib.request.urlopen(self._request(url), timeout=HTTP_TIMEOUT_SEC) as resp:
                body = resp.read().decode("utf-8")
        except urllib.error.HTTPError as e:
            detail = e.read().decode("utf-8", "ignore")
            raise GitHubError(f"GitHub API request failed with HTTP status {e.code}: {detail}", status=e.code) from e
        except urllib.error.URLError as e:
            raise GitHubError(f"GitHub API request failed: {e.reason}") from e
        try:
            return json.loads(body)
        except json.JSONDecodeError as e:
            raise GitHubError(f"Failed to parse GitHub API response: {body[:200]}") from e

    # ---------- public API ----------
    def list_pull_files(self, repo_full: str, pr_number: int) -> list[str]:
        """Filenames changed by a pull request, in API order."""
        files: list[str] = []
        page = 1
        while True:
            url = f"{self.api_base}/repos/{repo_full}/pulls/{pr_number}/files?per_page={PER_PAGE}&page={page}"
            data = self._request_json(url)
            if not isinstance(data, list):
                raise GitHubError(f"Unexpected GitHub API response for {url}: expected a list")
            if not data:
                break
            for entry in data:
                name = entry.get("filename") if isinstance(entry, dict) else None
                if isinstance(name, str) and name:
                    files.append(name)
            page += 1
        return files

    def head_root(self) -> tuple[int, dict[str, str]]:
        """HEAD the API root and return (status, headers).

        Non-2xx responses are returned, not raised, since their headers are
        what the scope check inspects. Transport failures raise GitHubError.
        """
        req = self._request(f"{self.api_base}/", method="HEAD", auth_scheme="token")
        try:
            with urllib.request.urlopen(req, timeout=HTTP_TIMEOUT_SEC) as resp:
                return resp.status, dict(resp.headers.items())
        except urllib.error.HTTPError as e:
            return e.code, dict(e.headers.items()) if e.headers else {}
        except urllib.error.URLError as e:
            raise GitHubError(f"Could not connect to GitHub API: {e.reason}") from e

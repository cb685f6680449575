"""Service: verify a token only carries read access to contents."""

from __future__ import annotations

import sys

from ..core.github_client import GitHubClient, GitHubError
from ..core.scopes import evaluate_scopes
from ..core.types import ScopeStatus


def check_token_scope(*, token: str | None, api_base: str, expected: str) -> int:
    client = GitHubClient(token=token, api_base=api_base)
    try:
        status, headers = client.head_root()
    except GitHubError as e:
        print(f"Error: {e}", file=sys.stderr)
        return int(ScopeStatus.connection_error)

    check = evaluate_scopes(status, headers, expected=expected)
    if check.ok:
        print(check.message)
        return int(check.status)

    if check.status == ScopeStatus.extra_scopes:
        print(check.message, file=sys.stderr)
        print(f"Detected scopes: {check.raw}", file=sys.stderr)
        print(f"Parsed effective scopes ({len(check.scopes)}):", file=sys.stderr)
        for s in check.scopes:
            print(f"- '{s}'", file=sys.stderr)
    else:
        print(f"Error: {check.message}", file=sys.stderr)
    return int(check.status)

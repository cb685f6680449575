"""Service: check which patterns match files changed in a pull request."""

from __future__ import annotations

import sys

from ..core.github_client import GitHubClient, GitHubError
from ..core.matcher import ConfigurationError, match_changed_files
from ..core.report import append_github_file, bool_str, matched_output, pattern_lines


def check_pull_request(
    *,
    patterns: list[str],
    repository: str | None,
    pr_number: str | None,
    token: str | None,
    api_base: str,
    github_env: str | None,
) -> int:
    """Fetch PR files via the REST API and report per-pattern matches."""
    if not repository:
        print("Error: GITHUB_REPOSITORY environment variable is not set.", file=sys.stderr)
        print("Please set it to your repository (e.g., 'owner/repo').", file=sys.stderr)
        return 1
    if not pr_number:
        print("Error: GITHUB_PULL_REQUEST_NUMBER environment variable is not set.", file=sys.stderr)
        print("Please set it to the pull request number.", file=sys.stderr)
        return 1
    try:
        number = int(pr_number)
    except ValueError:
        number = 0
    if number <= 0:
        print(f"Error: GITHUB_PULL_REQUEST_NUMBER must be a positive number, got: {pr_number!r}", file=sys.stderr)
        return 1
    if not token:
        print("Warning: GITHUB_TOKEN is not set.", file=sys.stderr)
        print(
            "API requests will be unauthenticated and may be rate-limited or fail for private repositories.",
            file=sys.stderr,
        )

    print(f"Patterns to match against {' '.join(patterns)}")
    print(f"Fetching changed files for PR #{number} in repository {repository}...")

    client = GitHubClient(token=token, api_base=api_base)
    try:
        changed = client.list_pull_files(repository, number)
    except GitHubError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if not changed:
        print(f"No files found changed in PR #{number} or an issue occurred retrieving them.")
    print(f"Files modified by PR: {' '.join(changed)}")

    try:
        result = match_changed_files(changed, patterns)
    except ConfigurationError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print("-" * 52)
    print(f"Processing patterns against changed files in PR #{number}:")
    print("-" * 52)
    for r, line in zip(result.results, pattern_lines(result, suffix=" in the PR")):
        print(f"Checking pattern {r.pattern}")
        for f in r.files:
            print(f"Changed file {f} matches pattern {r.pattern}")
        print(line)

    print(f"Pattern was matched: {bool_str(result.matched)}")

    if github_env:
        append_github_file(github_env, matched_output(result))
    return 0

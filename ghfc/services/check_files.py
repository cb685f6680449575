"""Service: match globs against the files changed by the last commit."""

from __future__ import annotations

import sys

from ..core.git_client import GitClient, GitError
from ..core.matcher import ConfigurationError, match_changed_files
from ..core.report import append_github_file, files_output


def check_changed_files(
    *,
    patterns: list[str],
    base: str,
    head: str,
    github_output: str | None,
    cwd: str | None = None,
) -> int:
    """Print changed files that match ``patterns``; return the exit code."""
    git = GitClient(cwd=cwd)
    try:
        changed = git.changed_files(base, head)
    except GitError as e:
        print(str(e), file=sys.stderr)
        return 1

    if not changed:
        print("No files changed between the last two commits.")
        return 0

    try:
        result = match_changed_files(changed, patterns)
    except ConfigurationError:
        print(
            "Error: No GLOB_PATTERNS supplied, you must supply at least one pattern if using this command",
            file=sys.stderr,
        )
        return 1

    print("Matching against globs:")
    for p in patterns:
        print(f"  {p}")
    for f in changed:
        print(f"File {f} was changed")

    if result.files:
        print("Matched files:")
        for f in result.files:
            print(f"  {f}")
    else:
        print("No files matched the provided globs.")

    print(f"Total matching files: {result.total}")

    if github_output and result.total > 0:
        append_github_file(github_output, files_output(result))
    return 0

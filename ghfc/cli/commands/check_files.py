"""CLI for matching globs against the local commit diff."""

from __future__ import annotations

import typer

from ...config.settings import get_settings
from ...core.constants import DEFAULT_BASE_REF, DEFAULT_HEAD_REF
from ...core.matcher import parse_patterns
from ...services.check_files import check_changed_files

app = typer.Typer(add_completion=False)


@app.command("check-files")
def check_files(
    pattern: list[str] = typer.Option(
        None, "--pattern", "-p", help="Glob pattern (repeatable). Defaults to GLOB_PATTERNS."
    ),
    base: str = typer.Option(DEFAULT_BASE_REF, "--base", help="Base ref of the diff"),
    head: str = typer.Option(DEFAULT_HEAD_REF, "--head", help="Head ref of the diff"),
    output: str | None = typer.Option(None, "--output", help="File to append files=... to (default GITHUB_OUTPUT)"),
):
    """Match globs against files changed between HEAD~1 and HEAD.

    The checkout must have fetch-depth of at least 2.

    Examples:
      GLOB_PATTERNS='*.py docs/*' ghfc check-files
      ghfc check-files -p '*.go' -p 'go.mod'
    """
    s = get_settings()
    patterns = pattern or parse_patterns(s.glob_patterns)
    code = check_changed_files(
        patterns=patterns,
        base=base,
        head=head,
        github_output=output or s.github_output,
    )
    raise typer.Exit(code=code)

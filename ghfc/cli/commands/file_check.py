"""CLI for matching globs against the files of a pull request."""

from __future__ import annotations

import typer

from ...config.settings import get_settings
from ...services.file_check import check_pull_request

app = typer.Typer(add_completion=False)


@app.command("file-check")
def file_check(
    patterns: list[str] = typer.Argument(..., help="Glob patterns to check, e.g. 'src/*' '*.md'"),
    repository: str | None = typer.Option(None, "--repository", help="owner/repo (default GITHUB_REPOSITORY)"),
    pr: str | None = typer.Option(None, "--pr", help="Pull request number (default GITHUB_PULL_REQUEST_NUMBER)"),
    token: str | None = typer.Option(None, "--token", help="GitHub token (default GITHUB_TOKEN)"),
    env_file: str | None = typer.Option(None, "--env-file", help="File to append patten_matched=... to (default GITHUB_ENV)"),
):
    """Report, per pattern, whether any file changed in the PR matches.

    Examples:
      ghfc file-check 'src/*' '*.md'
      ghfc file-check --repository owner/repo --pr 42 '*.py'
    """
    s = get_settings()
    code = check_pull_request(
        patterns=patterns,
        repository=repository or s.github_repository,
        pr_number=pr or s.github_pull_request_number,
        token=(token if token is not None else s.github_token),
        api_base=s.github_api_url,
        github_env=env_file or s.github_env,
    )
    raise typer.Exit(code=code)

"""CLI for checking a token's OAuth scopes."""

from __future__ import annotations

import typer

from ...config.settings import get_settings
from ...core.constants import EXPECTED_SCOPE
from ...services.token_scope import check_token_scope

app = typer.Typer(add_completion=False)


@app.command("token-scope")
def token_scope(
    token: str | None = typer.Option(None, "--token", help="GitHub token (default GITHUB_TOKEN)"),
    expected: str = typer.Option(EXPECTED_SCOPE, "--expected", help="The only scope the token may carry"),
):
    """Exit 0 when the token has only the expected scope (or none at all).

    Other exit codes: 1 extra scopes, 2 connection error, 3 no HTTP status,
    4 unauthorized, 5 unexpected status, 6 missing X-OAuth-Scopes header.
    """
    s = get_settings()
    _token = token if token is not None else s.github_token
    if not _token:
        typer.echo("Warning: no token provided; scopes cannot be reported.", err=True)
    code = check_token_scope(token=_token, api_base=s.github_api_url, expected=expected)
    raise typer.Exit(code=code)

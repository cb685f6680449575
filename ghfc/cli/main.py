"""CLI entrypoint that wires subcommands into a Typer app."""

import typer

from .commands.check_files import app as check_files_app
from .commands.file_check import app as file_check_app
from .commands.token_scope import app as token_scope_app

app = typer.Typer(add_completion=False, help="Match changed files against globs inside GitHub Actions workflows.")


app.add_typer(check_files_app, help="Match globs against files changed by the last commit")
app.add_typer(file_check_app, help="Match globs against files changed in a pull request")
app.add_typer(token_scope_app, help="Check a token is limited to contents:read")


if __name__ == "__main__":
    app()

"""Render match results for logs and for GitHub Actions output files."""

from __future__ import annotations

from .constants import FILES_OUTPUT_KEY, PATTERN_MATCHED_KEY
from .matcher import AggregateResult


def bool_str(value: bool) -> str:
    return "true" if value else "false"


def pattern_lines(result: AggregateResult, suffix: str = "") -> list[str]:
    """One summary line per pattern, in pattern order."""
    lines: list[str] = []
    for r in result.results:
        if r.matched:
            lines.append(f"Pattern '{r.pattern}': Found a matching file{suffix}.")
        else:
            lines.append(f"Pattern '{r.pattern}': No matching file found{suffix}.")
    return lines


def files_output(result: AggregateResult) -> str:
    """``files=a,b``. Paths are joined as-is, so a path containing a comma
    cannot be told apart from two paths when the value is split again."""
    return f"{FILES_OUTPUT_KEY}={','.join(result.files)}"


def matched_output(result: AggregateResult) -> str:
    return f"{PATTERN_MATCHED_KEY}={bool_str(result.matched)}"


def append_github_file(path: str, line: str) -> None:
    """Append a ``key=value`` line to a GITHUB_OUTPUT / GITHUB_ENV file."""
    with open(path, "a", encoding="utf-8") as f:
        f.write(f"{line}\n")


def parse_github_file(text: str) -> dict[str, str]:
    """Read ``key=value`` lines back; later keys win, like the runner does."""
    out: dict[str, str] = {}
    for line in text.splitlines():
        if "=" not in line:
            continue
        k, v = line.split("=", 1)
        out[k] = v
    return out


def split_files_value(value: str) -> list[str]:
    """Inverse of the ``files=`` value for paths without commas."""
    return value.split(",") if value else []

"""Tests for rendering match results."""

from __future__ import annotations

from pathlib import Path

from ghfc.core.matcher import match_changed_files
from ghfc.core.report import (
    append_github_file,
    files_output,
    matched_output,
    parse_github_file,
    pattern_lines,
    split_files_value,
)


def test_pattern_lines() -> None:
    result = match_changed_files(["a.py"], ["*.py", "*.md"])
    assert pattern_lines(result) == [
        "Pattern '*.py': Found a matching file.",
        "Pattern '*.md': No matching file found.",
    ]
    assert pattern_lines(result, suffix=" in the PR")[0] == "Pattern '*.py': Found a matching file in the PR."


def test_outputs() -> None:
    result = match_changed_files(["a.py", "b.txt", "dir/c.py"], ["*.py"])
    assert files_output(result) == "files=a.py,dir/c.py"
    assert matched_output(result) == "patten_matched=true"

    empty = match_changed_files([], ["*.py"])
    assert files_output(empty) == "files="
    assert matched_output(empty) == "patten_matched=false"


def test_github_file_round_trip(tmp_path: Path) -> None:
    out = tmp_path / "github_output"
    out.write_text("earlier=1\n", encoding="utf-8")
    result = match_changed_files(["src/a=b.py", "x.md"], ["*.py", "*.md"])

    append_github_file(str(out), files_output(result))
    append_github_file(str(out), matched_output(result))

    values = parse_github_file(out.read_text(encoding="utf-8"))
    assert values["earlier"] == "1"
    assert split_files_value(values["files"]) == list(result.files)
    assert values["patten_matched"] == "true"


def test_split_files_value_empty() -> None:
    assert split_files_value("") == []


def test_files_value_with_comma_is_ambiguous() -> None:
    result = match_changed_files(["a,b.py"], ["*.py"])
    assert files_output(result) == "files=a,b.py"
    assert split_files_value("a,b.py") == ["a", "b.py"]
    assert result.total == 1

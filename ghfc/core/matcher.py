"""Shell-style glob matching of changed files.

Patterns are matched against the whole path as one string, the way bash's
``[[ $file == $pattern ]]`` does it:

- ``*`` matches any run of characters, ``/`` included.
- ``?`` matches exactly one character.
- ``[...]`` is a character class with ranges and POSIX named classes
  (``[[:digit:]]``, ``[[:alpha:]]``, ...); ``[!...]`` and ``[^...]`` negate it.
- ``\\c`` matches ``c`` literally.
- Matching is case-sensitive and anchored at both ends.

Only the pattern side is interpreted. A changed path containing ``*`` or
``[`` is compared literally.
"""

from __future__ import annotations

import functools
import re
import string
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

# C locale (ASCII) definitions.
NAMED_CLASSES = {
    "alnum": "a-zA-Z0-9",
    "alpha": "a-zA-Z",
    "blank": " \\t",
    "cntrl": "\\x00-\\x1f\\x7f",
    "digit": "0-9",
    "graph": "\\x21-\\x7e",
    "lower": "a-z",
    "print": "\\x20-\\x7e",
    "punct": re.escape(string.punctuation),
    "space": " \\t\\n\\r\\f\\v",
    "upper": "A-Z",
    "word": "a-zA-Z0-9_",
    "xdigit": "0-9A-Fa-f",
}


class ConfigurationError(ValueError):
    """The matcher was invoked without any patterns."""


@dataclass(frozen=True)
class MatchResult:
    pattern: str
    files: tuple[str, ...] = ()

    @property
    def matched(self) -> bool:
        return bool(self.files)


@dataclass(frozen=True)
class AggregateResult:
    files: tuple[str, ...]
    results: tuple[MatchResult, ...]

    @property
    def total(self) -> int:
        return len(self.files)

    @property
    def matched(self) -> bool:
        return any(r.matched for r in self.results)


def _translate_class(pattern: str, i: int) -> tuple[str | None, int]:
    """Translate the bracket expression whose body starts at ``pattern[i]``.

    Returns (regex, index after the closing ``]``), or (None, i) when the
    bracket is never closed and the ``[`` is a literal.
    """
    n = len(pattern)
    j = i
    negate = j < n and pattern[j] in "!^"
    if negate:
        j += 1

    parts: list[str] = []
    first = True
    while j < n and (first or pattern[j] != "]"):
        first = False
        if pattern.startswith("[:", j):
            end = pattern.find(":]", j + 2)
            name = pattern[j + 2 : end] if end >= 0 else None
            if name in NAMED_CLASSES:
                parts.append(NAMED_CLASSES[name])
                j = end + 2
                continue
        c = pattern[j]
        if c == "\\" and j + 1 < n:
            j += 1
            c = pattern[j]
        j += 1
        # range: c-d, unless the '-' is the last character of the class
        if j + 1 < n and pattern[j] == "-" and pattern[j + 1] != "]":
            d = pattern[j + 1]
            j += 2
            if d == "\\" and j < n:
                d = pattern[j]
                j += 1
            if c <= d:
                parts.append(f"{re.escape(c)}-{re.escape(d)}")
            continue
        parts.append(re.escape(c))

    if j >= n:
        return None, i

    if not parts:
        return ("." if negate else "(?!)"), j + 1
    return f"[{'^' if negate else ''}{''.join(parts)}]", j + 1


@functools.lru_cache(maxsize=512)
def _compile(pattern: str) -> re.Pattern[str]:
    res: list[str] = []
    i, n = 0, len(pattern)
    while i < n:
        c = pattern[i]
        i += 1
        if c == "*":
            if not res or res[-1] != ".*":
                res.append(".*")
        elif c == "?":
            res.append(".")
        elif c == "\\" and i < n:
            res.append(re.escape(pattern[i]))
            i += 1
        elif c == "[":
            cls, i = _translate_class(pattern, i)
            res.append(cls if cls is not None else re.escape(c))
        else:
            res.append(re.escape(c))
    return re.compile("".join(res), re.DOTALL)


def match_path(path: str, pattern: str) -> bool:
    """Return True when ``pattern`` matches ``path`` in full."""
    return _compile(pattern).fullmatch(path) is not None


def parse_patterns(text: str | None) -> list[str]:
    """Split space- or newline-separated pattern text into patterns."""
    return (text or "").split()


def match_changed_files(changed_files: Iterable[str], patterns: Sequence[str]) -> AggregateResult:
    """Match every pattern against every changed file.

    Each pattern scans all files independently, so one file can show up under
    several patterns. The aggregate ``files`` lists every matched file once,
    in the order it was first seen. Raises ConfigurationError when
    ``patterns`` is empty.
    """
    if not patterns:
        raise ConfigurationError("No patterns supplied; at least one glob pattern is required.")

    files = list(changed_files)
    results: list[MatchResult] = []
    for pattern in patterns:
        regex = _compile(pattern)
        hits = dict.fromkeys(f for f in files if regex.fullmatch(f) is not None)
        results.append(MatchResult(pattern=pattern, files=tuple(hits)))

    # first-seen order across patterns follows file order, not pattern order
    hit_set = {f for r in results for f in r.files}
    matched = dict.fromkeys(f for f in files if f in hit_set)
    return AggregateResult(files=tuple(matched), results=tuple(results))

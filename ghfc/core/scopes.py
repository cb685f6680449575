"""Decide whether a token is read-only from its X-OAuth-Scopes header."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field

from .constants import EXPECTED_SCOPE, NO_SCOPE_MARKER
from .types import ScopeStatus

SCOPES_HEADER = "x-oauth-scopes"
WWW_AUTHENTICATE_HEADER = "www-authenticate"


@dataclass(frozen=True)
class ScopeCheck:
    status: ScopeStatus
    message: str
    raw: str = ""
    scopes: tuple[str, ...] = field(default_factory=tuple)

    @property
    def ok(self) -> bool:
        return self.status == ScopeStatus.read_only


def _get_header(headers: Mapping[str, str], name: str) -> str | None:
    for k, v in headers.items():
        if k.lower() == name:
            return v
    return None


def parse_scopes(value: str | None) -> tuple[str, ...]:
    """'repo, , read:org' -> ('repo', 'read:org'); '(no scope)' -> ()"""
    raw = (value or "").replace("\r", "").strip()
    if not raw or raw == NO_SCOPE_MARKER:
        return ()
    return tuple(s.strip() for s in raw.split(",") if s.strip())


def evaluate_scopes(
    status: int | None,
    headers: Mapping[str, str],
    expected: str = EXPECTED_SCOPE,
) -> ScopeCheck:
    """Map an API-root response to a ScopeCheck."""
    if not status:
        return ScopeCheck(ScopeStatus.no_status, "Could not retrieve HTTP status from GitHub API response.")
    if status == 401:
        return ScopeCheck(
            ScopeStatus.unauthorized,
            f"GitHub API returned status {status}. Token is likely invalid, expired, or revoked.",
        )
    if status != 200:
        return ScopeCheck(ScopeStatus.unexpected_status, f"GitHub API returned non-200 status {status}.")

    header = _get_header(headers, SCOPES_HEADER)
    if header is None:
        if _get_header(headers, WWW_AUTHENTICATE_HEADER) is not None:
            msg = (
                "Token authentication may have failed or was not processed as an OAuth token by GitHub. "
                "The X-OAuth-Scopes header was missing, and a WWW-Authenticate header was present."
            )
        else:
            msg = (
                "No X-OAuth-Scopes header found in the API response. "
                "The token might be of an unsupported type for this check, or it genuinely has no OAuth scopes reported."
            )
        return ScopeCheck(ScopeStatus.missing_header, msg)

    raw = header.replace("\r", "").strip()
    scopes = parse_scopes(raw)
    if not scopes:
        return ScopeCheck(ScopeStatus.read_only, "Token does not have any permissions", raw=raw)
    if scopes == (expected,):
        return ScopeCheck(ScopeStatus.read_only, f"Token has only '{expected}' permission.", raw=raw, scopes=scopes)
    return ScopeCheck(
        ScopeStatus.extra_scopes,
        f"Token does not have only '{expected}' permission.",
        raw=raw,
        scopes=scopes,
    )

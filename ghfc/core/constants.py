"""Module holding constants used across ghfc."""

API_BASE = "https://api.github.com"
GITHUB_API_ACCEPT = "application/vnd.github+json"
USER_AGENT = "ghfc/0.1"
HTTP_TIMEOUT_SEC = 30
GIT_TIMEOUT_SEC = 120
PER_PAGE = 100

DEFAULT_BASE_REF = "HEAD~1"
DEFAULT_HEAD_REF = "HEAD"

EXPECTED_SCOPE = "contents:read"
NO_SCOPE_MARKER = "(no scope)"

FILES_OUTPUT_KEY = "files"
# spelling matches the workflows that already read it
PATTERN_MATCHED_KEY = "patten_matched"

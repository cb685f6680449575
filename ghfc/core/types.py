"""Small types and Enums used by ghfc."""

from enum import IntEnum


class ScopeStatus(IntEnum):
    """Outcome of a token scope check; the value is the process exit code."""

    read_only = 0
    extra_scopes = 1
    connection_error = 2
    no_status = 3
    unauthorized = 4
    unexpected_status = 5
    missing_header = 6

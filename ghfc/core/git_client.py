"""Small helpers for reading changed files from a local Git checkout."""

from __future__ import annotations

import shutil
import subprocess

from .constants import DEFAULT_BASE_REF, DEFAULT_HEAD_REF, GIT_TIMEOUT_SEC


class GitError(RuntimeError):
    pass


class GitClient:
    def __init__(self, cwd: str | None = None) -> None:
        self.cwd = cwd

    # ---------- process helpers ----------
    @staticmethod
    def _run_raw(cmd: list[str], cwd: str | None = None) -> tuple[bool, bytes]:
        """Run a command; return (success, stdout) or (False, stderr)."""
        try:
            out = subprocess.check_output(cmd, cwd=cwd, stderr=subprocess.PIPE, timeout=GIT_TIMEOUT_SEC)
            return True, out
        except subprocess.CalledProcessError as e:
            return False, e.stderr or b""
        except subprocess.TimeoutExpired as e:
            raise GitError(f"{' '.join(cmd)} timed out after {GIT_TIMEOUT_SEC}s") from e

    @staticmethod
    def ensure_available() -> None:
        if not shutil.which("git"):
            raise GitError("git is not installed. Please install git and try again.")

    # ---------- diff ----------
    def changed_files(self, base: str = DEFAULT_BASE_REF, head: str = DEFAULT_HEAD_REF) -> list[str]:
        """Files changed between ``base`` and ``head``, in diff order.

        Names are read NUL-separated so they come back verbatim: no quoting,
        no whitespace trimming. Bytes that are not UTF-8 are kept as
        surrogate escapes. An unresolvable ref (e.g. a checkout with a
        single commit) yields an empty list rather than an error.
        """
        self.ensure_available()
        ok, out = self._run_raw(["git", "diff", "--name-only", "-z", base, head], cwd=self.cwd)
        if not ok:
            return []
        return [name for name in out.decode("utf-8", "surrogateescape").split("\0") if name]

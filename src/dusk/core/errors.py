"""Error types and the non-fatal failure reporting policy."""

from __future__ import annotations

import logging

log = logging.getLogger(__name__)


class ScanError(Exception):
    """Raised when the scan target itself cannot be accessed."""

    def __init__(self, path: str, cause: OSError) -> None:
        self.path = path
        self.cause = cause
        super().__init__(f"Failed to scan '{path}': {format_os_error(cause)}")


def is_permission_denied(exc: OSError) -> bool:
    """Check whether *exc* is an access-denied failure."""
    return isinstance(exc, PermissionError)


def format_os_error(exc: OSError) -> str:
    """Render an OS error with its numeric code, e.g. ``No such file or directory (os error 2)``."""
    if exc.errno is not None and exc.strerror:
        return f"{exc.strerror} (os error {exc.errno})"
    return str(exc)


def report_failure(message: str, path: str, exc: OSError) -> None:
    """Report a failure below the scan target without aborting the scan.

    Permission-denied failures are dropped silently; anything else becomes
    a warning naming *path*.
    """
    if is_permission_denied(exc):
        log.debug("Permission denied: %s", path)
        return
    log.warning("%s '%s': %s", message, path, format_os_error(exc))

"""
Errors raised by easycopy.

Each error carries a machine-readable ``reason`` so callers (the CLI, the MCP
server) can report failures without parsing messages.
"""

from __future__ import annotations


class EasycopyError(Exception):
    reason = "error"
    exit_code = 1


class RootUnreadableError(EasycopyError):
    """The tree root does not exist, is not a directory, or cannot be listed."""

    reason = "unreadable_root"
    exit_code = 2

    def __init__(self, root, cause: OSError | None = None):
        self.root = root
        self.cause = cause
        detail = f": {cause.strerror or cause}" if cause is not None else ""
        super().__init__(f"Cannot read directory {root}{detail}")


class InvalidThresholdError(EasycopyError, ValueError):
    reason = "invalid_threshold"
    exit_code = 2

    def __init__(self, max_bytes):
        self.max_bytes = max_bytes
        super().__init__(f"Invalid size threshold: {max_bytes!r} (must be a non-negative integer)")


class AcquisitionError(EasycopyError):
    """Cloning or locating the source tree failed."""

    reason = "acquisition_failed"
    exit_code = 3

    def __init__(self, source: str, detail: str = ""):
        self.source = source
        self.detail = detail.strip()
        msg = f"Failed to acquire {source}"
        if self.detail:
            msg += f": {self.detail}"
        super().__init__(msg)

"""
ytmerge error taxonomy.

Every failure is terminal; ``cli.main`` maps each kind to its exit code.
"""

from __future__ import annotations


class YtMergeError(Exception):
    """Base class for all user-facing failures."""

    exit_code = 1

    def __init__(self, message: str, *, detail: str = "") -> None:
        super().__init__(message)
        self.message = message
        self.detail = detail


class InvalidInput(YtMergeError):
    """Bad flags, missing arguments or a malformed URL."""

    exit_code = 2

    def __init__(self, message: str, *, show_usage: bool = False, detail: str = "") -> None:
        super().__init__(message, detail=detail)
        self.show_usage = show_usage


class MissingDependency(YtMergeError):
    exit_code = 3

    def __init__(self, missing: list[str]) -> None:
        super().__init__(
            f"Missing required tool(s): {', '.join(missing)}. "
            "Install them and make sure they are on PATH."
        )
        self.missing = list(missing)


class ResourceUnavailable(YtMergeError):
    """The video could not be resolved, titled or downloaded."""

    exit_code = 4


class DestinationConflict(YtMergeError):
    exit_code = 5


class StreamClassificationFailure(YtMergeError):
    """Downloaded files did not yield one audio and one video file."""

    exit_code = 6


class MuxFailure(YtMergeError):
    exit_code = 7

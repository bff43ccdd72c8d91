"""
Shared infrastructure: settings, error taxonomy, tool discovery, subprocess
lifecycle, scratch workspace and the pipeline that sequences them.
"""

from .config_manager import DEFAULT_CONFIG, Settings
from .errors import (
    DestinationConflict,
    InvalidInput,
    MissingDependency,
    MuxFailure,
    ResourceUnavailable,
    StreamClassificationFailure,
    YtMergeError,
)

__all__ = [
    # settings
    "DEFAULT_CONFIG",
    "Settings",
    # errors
    "YtMergeError",
    "InvalidInput",
    "MissingDependency",
    "ResourceUnavailable",
    "DestinationConflict",
    "StreamClassificationFailure",
    "MuxFailure",
]

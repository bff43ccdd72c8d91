"""
URL validation lives in utils.validators; this package wraps yt-dlp.
"""

from .format_probe import FormatReport, inspect_formats, warn_missing_formats
from .yt_dlp_cli import YtDlpCli

__all__ = [
    "YtDlpCli",
    "FormatReport",
    "inspect_formats",
    "warn_missing_formats",
]

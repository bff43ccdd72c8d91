"""
Advisory format check.

This is a best-effort keyword match over the ``yt-dlp -F`` table and only
ever produces warnings. The authoritative check is the ffprobe-based stream
classification that runs after the download.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from ..utils.logger import logger

AUDIO_KEYWORDS = ("audio only",)
VIDEO_KEYWORDS = ("video only",)
RESOLUTION_PATTERN = re.compile(r"\b\d{2,5}x\d{2,5}\b")


@dataclass(frozen=True)
class FormatReport:
    has_audio: bool
    has_video: bool


def inspect_formats(listing: str) -> FormatReport:
    has_audio = False
    has_video = False
    for line in (listing or "").splitlines():
        lower = line.lower()
        if any(k in lower for k in AUDIO_KEYWORDS):
            has_audio = True
        if any(k in lower for k in VIDEO_KEYWORDS) or RESOLUTION_PATTERN.search(lower):
            has_video = True
    return FormatReport(has_audio=has_audio, has_video=has_video)


def warn_missing_formats(listing: str) -> FormatReport:
    """Log a warning for each stream category the listing does not seem to offer."""

    report = inspect_formats(listing)
    if not report.has_audio:
        logger.warning("No audio formats found in the format list; the download may fail")
    if not report.has_video:
        logger.warning("No video formats found in the format list; the download may fail")
    return report

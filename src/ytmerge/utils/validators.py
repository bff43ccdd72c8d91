from __future__ import annotations

import re


class UrlValidator:
    """YouTube URL validation."""

    # http(s)://[www.]youtube.com/... or youtu.be/...
    YOUTUBE_REGEX = r"^https?://(www\.)?(youtube\.com|youtu\.be)/.+$"

    @staticmethod
    def is_youtube_url(text: str) -> bool:
        if not text:
            return False
        return bool(re.match(UrlValidator.YOUTUBE_REGEX, text.strip()))

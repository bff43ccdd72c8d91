from __future__ import annotations

from dataclasses import dataclass
from typing import Any

DEFAULT_CONFIG: dict[str, Any] = {
    # External tools, resolved on PATH by the environment checker
    "yt_dlp_exe": "yt-dlp",
    "ffmpeg_exe": "ffmpeg",
    "ffprobe_exe": "ffprobe",
    # Separate streams, never a pre-muxed format
    "format_selector": "bestaudio,bestvideo",
    # format_id keeps an audio and a video stream with the same ext apart
    "output_template": "%(title)s.f%(format_id)s.%(ext)s",
    "output_extension": "mp4",
    "audio_codec": "aac",
    "scratch_prefix": "ytmerge-",
    # Empty means no log file
    "log_file": "",
}


@dataclass(frozen=True)
class Settings:
    """Immutable runtime settings.

    The command line never reads a config file; ``Settings()`` is always the
    defaults above.
    """

    yt_dlp_exe: str = DEFAULT_CONFIG["yt_dlp_exe"]
    ffmpeg_exe: str = DEFAULT_CONFIG["ffmpeg_exe"]
    ffprobe_exe: str = DEFAULT_CONFIG["ffprobe_exe"]
    format_selector: str = DEFAULT_CONFIG["format_selector"]
    output_template: str = DEFAULT_CONFIG["output_template"]
    output_extension: str = DEFAULT_CONFIG["output_extension"]
    audio_codec: str = DEFAULT_CONFIG["audio_codec"]
    scratch_prefix: str = DEFAULT_CONFIG["scratch_prefix"]
    log_file: str = DEFAULT_CONFIG["log_file"]

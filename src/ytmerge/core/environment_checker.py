"""
Environment self-check.

Checks, before anything else runs, that the external tools are installed:
1. yt-dlp (fetching)
2. ffmpeg (muxing)
3. ffprobe (stream probing, ships with FFmpeg)

Nothing is executed here; tools are only looked up on PATH.
"""

from __future__ import annotations

import shutil
from dataclasses import dataclass

from ..utils.logger import logger
from .config_manager import Settings
from .errors import MissingDependency


@dataclass(frozen=True)
class Toolchain:
    """Resolved executable paths handed to every later stage."""

    yt_dlp: str
    ffmpeg: str
    ffprobe: str


class EnvironmentChecker:
    def __init__(self, settings: Settings | None = None):
        self.settings = settings or Settings()

    def locate(self, exe_name: str) -> str | None:
        path = shutil.which(exe_name)
        if path:
            logger.debug(f"Found {exe_name}: {path}")
        return path

    def check_all(self) -> dict[str, str | None]:
        return {
            "yt-dlp": self.locate(self.settings.yt_dlp_exe),
            "ffmpeg": self.locate(self.settings.ffmpeg_exe),
            "ffprobe": self.locate(self.settings.ffprobe_exe),
        }

    def require(self) -> Toolchain:
        """Return the toolchain or raise ``MissingDependency`` naming every missing tool."""

        found = self.check_all()
        missing = [name for name, path in found.items() if not path]
        if missing:
            raise MissingDependency(missing)
        return Toolchain(
            yt_dlp=str(found["yt-dlp"]),
            ffmpeg=str(found["ffmpeg"]),
            ffprobe=str(found["ffprobe"]),
        )

from __future__ import annotations

from pathlib import Path

from ..core.config_manager import Settings
from ..core.errors import ResourceUnavailable
from ..core.process_manager import process_manager
from ..utils.error_parser import describe_failure
from ..utils.logger import logger

# Options shared by every call: single video, machine-readable output
COMMON_ARGS = ["--no-playlist", "--no-warnings", "--no-color"]


class YtDlpCli:
    """Thin wrapper over the ``yt-dlp`` executable.

    Each method runs one blocking subprocess through the process manager.
    """

    def __init__(self, exe: str, settings: Settings | None = None):
        self.exe = exe
        self.settings = settings or Settings()

    def _run(self, *args: str):
        return process_manager.run([self.exe, *COMMON_ARGS, *args])

    def check_available(self, url: str) -> None:
        """Resolve the video without downloading anything."""

        proc = self._run("--simulate", "--quiet", url)
        if proc.returncode != 0:
            raise ResourceUnavailable(
                describe_failure(f"{url} is not a valid video", proc.stderr),
                detail=proc.stderr.strip(),
            )

    def list_formats(self, url: str) -> str | None:
        """Return the ``-F`` format table, or ``None`` if listing failed."""

        proc = self._run("-F", url)
        if proc.returncode != 0:
            logger.warning(describe_failure("Could not list formats", proc.stderr))
            return None
        return proc.stdout

    def fetch_title(self, url: str) -> str:
        proc = self._run("--print", "title", url)
        if proc.returncode != 0:
            raise ResourceUnavailable(
                describe_failure("Could not fetch the video title", proc.stderr),
                detail=proc.stderr.strip(),
            )

        lines = [line.strip() for line in proc.stdout.splitlines() if line.strip()]
        if not lines:
            raise ResourceUnavailable("Could not fetch the video title: yt-dlp printed nothing")
        return lines[0]

    def download_streams(self, url: str, workdir: Path) -> None:
        """Download the best audio and best video as separate files into ``workdir``."""

        template = str(Path(workdir) / self.settings.output_template)
        proc = self._run(
            "-f",
            self.settings.format_selector,
            "-o",
            template,
            url,
        )
        if proc.returncode != 0:
            raise ResourceUnavailable(
                describe_failure("Download failed", proc.stderr),
                detail=proc.stderr.strip(),
            )

"""
Download-and-merge pipeline.

Stages run strictly one after another; each blocks on its subprocess:
URL check -> availability -> format advisory -> title -> output path ->
destination check -> scratch workspace -> fetch -> classify -> mux.
"""

from __future__ import annotations

import shutil
from pathlib import Path

from ..models.options import Options
from ..processing import ffmpeg_tools
from ..processing.stream_classifier import classify_streams
from ..utils.logger import logger
from ..utils.paths import check_destination, resolve_output_path
from ..utils.validators import UrlValidator
from ..youtube.format_probe import warn_missing_formats
from ..youtube.yt_dlp_cli import YtDlpCli
from .config_manager import Settings
from .environment_checker import Toolchain
from .errors import InvalidInput, MuxFailure
from .workspace import scratch_workspace


def validate_url(url: str) -> str:
    if not UrlValidator.is_youtube_url(url):
        raise InvalidInput(f"Not a YouTube URL: {url}")
    return url.strip()


def run(options: Options, toolchain: Toolchain, settings: Settings | None = None) -> Path:
    """Execute every stage for one invocation and return the merged file's path."""

    settings = settings or Settings()
    url = validate_url(options.url)
    ytdlp = YtDlpCli(toolchain.yt_dlp, settings)

    logger.info(f"Checking {url}")
    ytdlp.check_available(url)

    # Advisory only; never blocks
    listing = ytdlp.list_formats(url)
    if listing is not None:
        warn_missing_formats(listing)

    title = ytdlp.fetch_title(url)
    logger.info(f"Title: {title}")

    output = resolve_output_path(options.output_path, title, settings.output_extension)
    check_destination(output, options.force)

    with scratch_workspace(settings.scratch_prefix) as workdir:
        logger.info("Downloading audio and video streams")
        ytdlp.download_streams(url, workdir)

        pair = classify_streams(workdir, toolchain.ffprobe)
        logger.debug(f"audio={pair.audio.name} video={pair.video.name}")

        # ffmpeg truncates its target before it can fail; keep that inside the workspace
        merged = workdir / f"merged{output.suffix or '.' + settings.output_extension}"
        ffmpeg_tools.mux(toolchain.ffmpeg, pair.video, pair.audio, merged, settings.audio_codec)
        try:
            shutil.move(str(merged), str(output))
        except OSError as e:
            raise MuxFailure(f"Could not write {output}: {e}") from e

    logger.success(f"Saved {output}")
    return output

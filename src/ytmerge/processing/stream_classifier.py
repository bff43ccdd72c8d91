from __future__ import annotations

from pathlib import Path

from ..core.errors import StreamClassificationFailure
from ..models.options import StreamPair
from ..utils.logger import logger
from . import ffmpeg_tools


def classify_streams(workdir: Path, ffprobe: str) -> StreamPair:
    """
    Label the downloaded files in ``workdir`` as audio or video.

    Files are scanned in name order and the first match for a role wins.
    Video is checked first, so a file carrying both kinds of stream counts
    as video; that case is logged as a warning and reported in
    ``StreamPair.dual_stream``.
    """
    audio: Path | None = None
    video: Path | None = None
    dual: list[Path] = []

    for path in sorted(p for p in Path(workdir).iterdir() if p.is_file()):
        video_count = ffmpeg_tools.count_streams(ffprobe, path, "video")
        audio_count = ffmpeg_tools.count_streams(ffprobe, path, "audio")

        if video_count > 0:
            if audio_count > 0:
                dual.append(path)
                logger.warning(
                    f"{path.name} contains both audio and video streams; "
                    "treating it as the video file, its audio track will be replaced"
                )
            if video is None:
                video = path
                logger.debug(f"Video stream file: {path.name}")
        elif audio_count > 0:
            if audio is None:
                audio = path
                logger.debug(f"Audio stream file: {path.name}")
        else:
            logger.debug(f"Ignoring {path.name}: no audio or video streams")

    missing = [role for role, found in (("audio", audio), ("video", video)) if found is None]
    if missing:
        raise StreamClassificationFailure(
            f"Could not find a downloaded {' or '.join(missing)} stream"
        )

    return StreamPair(audio=audio, video=video, dual_stream=tuple(dual))

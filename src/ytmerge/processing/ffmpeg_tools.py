"""
FFmpeg / ffprobe helpers: count streams of a kind, mux a video and an audio file.
"""

from __future__ import annotations

from pathlib import Path

from ..core.errors import MuxFailure
from ..core.process_manager import process_manager
from ..utils.logger import logger

STREAM_SELECTORS = {"audio": "a", "video": "v"}


def count_streams(ffprobe: str, path: Path, kind: str) -> int:
    """Number of ``kind`` ("audio" or "video") streams in ``path``; 0 if ffprobe fails."""

    selector = STREAM_SELECTORS[kind]
    proc = process_manager.run(
        [
            ffprobe,
            "-v",
            "error",
            "-select_streams",
            selector,
            "-show_entries",
            "stream=index",
            "-of",
            "csv=p=0",
            str(path),
        ]
    )
    if proc.returncode != 0:
        logger.debug(f"ffprobe failed on {path.name}: {proc.stderr.strip()}")
        return 0
    return sum(1 for line in proc.stdout.splitlines() if line.strip())


def mux(ffmpeg: str, video: Path, audio: Path, output: Path, audio_codec: str = "aac") -> Path:
    """
    Merge ``video`` and ``audio`` into ``output``.

    The video bitstream is copied, the audio is encoded with ``audio_codec``,
    and an existing ``output`` is always overwritten.
    """
    cmd = [
        ffmpeg,
        "-y",
        "-v",
        "error",
        "-i",
        str(video),
        "-i",
        str(audio),
        "-map",
        "0:v:0",
        "-map",
        "1:a:0",
        "-c:v",
        "copy",
        "-c:a",
        audio_codec,
        str(output),
    ]
    logger.info(f"Merging into {output}")
    proc = process_manager.run(cmd)
    if proc.returncode != 0:
        tail = "\n".join(proc.stderr.strip().splitlines()[-5:])
        raise MuxFailure(
            f"FFmpeg failed to merge streams (code={proc.returncode})",
            detail=tail,
        )
    return output

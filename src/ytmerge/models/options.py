from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True, slots=True)
class Options:
    """Parsed command line, built once by the CLI."""

    url: str
    output_path: str = ""
    force: bool = False
    quiet: bool = False


@dataclass(frozen=True, slots=True)
class StreamPair:
    """Downloaded files after classification."""

    audio: Path
    video: Path
    # Files that carried both audio and video and were taken as video
    dual_stream: tuple[Path, ...] = ()

"""
Stream classification and muxing with ffprobe / FFmpeg.
"""

from .ffmpeg_tools import count_streams, mux
from .stream_classifier import classify_streams

__all__ = [
    "count_streams",
    "mux",
    "classify_streams",
]

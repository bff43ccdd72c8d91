"""
ytmerge data models.
"""

from .options import Options, StreamPair

__all__ = [
    "Options",
    "StreamPair",
]

"""
ytmerge

Download the best audio and video streams of a YouTube video with yt-dlp and
merge them into one file with FFmpeg.
"""

__version__ = "0.1.0"

import re
from dataclasses import dataclass


@dataclass
class ErrorDefinition:
    keywords: list[str]
    title: str
    action: str


# Known yt-dlp / ffmpeg failure signatures
YTDLP_ERRORS = [
    ErrorDefinition(
        keywords=[
            "Sign in to confirm you're not a bot",
            "This video is only available to registered users",
        ],
        title="YouTube requires sign-in for this video",
        action="Pass browser cookies to yt-dlp through its own config file, or try again later.",
    ),
    ErrorDefinition(
        keywords=["Video unavailable in your country", "Geo-restricted", "not available in your country"],
        title="Video is geo-restricted",
        action="Try again through a network location where the video is available.",
    ),
    ErrorDefinition(
        keywords=["Members only content", "members-only"],
        title="Members-only video",
        action="Only channel members with valid cookies can download this video.",
    ),
    ErrorDefinition(
        keywords=["Premiere"],
        title="Premiere has not started",
        action="Wait until the premiere is over and try again.",
    ),
    ErrorDefinition(
        keywords=["Private video"],
        title="Private video",
        action="Make sure you have access to the video.",
    ),
    ErrorDefinition(
        keywords=["Video unavailable", "This video has been removed"],
        title="Video unavailable",
        action="Check that the link is correct and the video still exists.",
    ),
    ErrorDefinition(
        keywords=["Connection reset by peer", "timed out", "Connection refused", "Name or service not known"],
        title="Network connection failed",
        action="Check your internet connection or proxy settings.",
    ),
    ErrorDefinition(
        keywords=["Requested format is not available"],
        title="No matching audio/video stream",
        action="The video does not offer separate audio and video streams.",
    ),
    ErrorDefinition(
        keywords=["ffprobe/ffmpeg not found", "ffmpeg isn't installed", "ffmpeg not found"],
        title="FFmpeg is missing",
        action="Install FFmpeg and make sure ffmpeg and ffprobe are on PATH.",
    ),
    ErrorDefinition(
        keywords=["No space left on device"],
        title="Disk is full",
        action="Free some disk space or choose another output location.",
    ),
]


def parse_ytdlp_error(error_msg: str) -> tuple[str, str]:
    """
    Turn raw yt-dlp or ffmpeg output into a short ``(title, suggestion)`` pair.
    """
    if not error_msg:
        return "Unknown error", "The tool failed without printing a reason."

    clean_msg = " ".join(error_msg.splitlines()).lower()

    for err_def in YTDLP_ERRORS:
        for keyword in err_def.keywords:
            if keyword.lower() in clean_msg:
                return err_def.title, err_def.action

    # Fallback: the first "ERROR:" line, if any
    match = re.search(r"ERROR:\s*(.*?)(?:\n|$)", error_msg, flags=re.IGNORECASE)
    if match:
        extracted = match.group(1).strip()
        if len(extracted) > 100:
            extracted = extracted[:97] + "..."
        return extracted, "Check the link, or update yt-dlp and try again."

    fallback = error_msg.strip()
    if len(fallback) > 100:
        fallback = fallback[:97] + "..."
    return fallback, "Check the link, or update yt-dlp and try again."


def describe_failure(prefix: str, error_msg: str) -> str:
    """Build a one-line message such as ``"<prefix>: Private video"``."""

    title, _ = parse_ytdlp_error(error_msg)
    return f"{prefix}: {title}"

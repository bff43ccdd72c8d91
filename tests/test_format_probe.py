from ytmerge.youtube.format_probe import inspect_formats, warn_missing_formats

LISTING = """\
[info] Available formats for dQw4w9WgXcQ:
ID  EXT   RESOLUTION FPS CH |   FILESIZE   TBR PROTO | VCODEC          VBR ACODEC      ABR ASR MORE INFO
139 m4a   audio only      2 |    1.25MiB   49k https | audio only          mp4a.40.5   49k 22k low, m4a_dash
140 m4a   audio only      2 |    3.27MiB  130k https | audio only          mp4a.40.2  130k 44k medium, m4a_dash
137 mp4   1920x1080   25    |   78.15MiB 3111k https | avc1.640028   3111k video only              1080p, mp4_dash
"""


def test_listing_with_both_categories():
    report = inspect_formats(LISTING)
    assert report.has_audio
    assert report.has_video


def test_resolution_counts_as_video():
    report = inspect_formats("18  mp4   640x360     25  2 |  9.12MiB  363k https | avc1 mp4a 360p")
    assert report.has_video
    assert not report.has_audio


def test_empty_listing():
    report = inspect_formats("")
    assert not report.has_audio
    assert not report.has_video


def test_missing_categories_only_warn():
    messages = []
    from ytmerge.utils.logger import logger

    sink_id = logger.add(messages.append, level="WARNING", format="{message}")
    try:
        report = warn_missing_formats("139 m4a audio only")
    finally:
        logger.remove(sink_id)

    assert report.has_audio and not report.has_video
    assert len(messages) == 1
    assert "video" in messages[0]

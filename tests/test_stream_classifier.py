import pytest

from ytmerge.core.errors import StreamClassificationFailure
from ytmerge.processing.stream_classifier import classify_streams


def _make(fake_tools, workdir, files):
    for name, kinds in files.items():
        path = workdir / name
        path.write_bytes(b"data")
        fake_tools.stream_files[path] = set(kinds)


def test_one_audio_one_video(tmp_path, fake_tools):
    _make(fake_tools, tmp_path, {"a.m4a": {"audio"}, "b.mp4": {"video"}})
    pair = classify_streams(tmp_path, "ffprobe")
    assert pair.audio == tmp_path / "a.m4a"
    assert pair.video == tmp_path / "b.mp4"
    assert pair.dual_stream == ()


def test_missing_audio_fails(tmp_path, fake_tools):
    _make(fake_tools, tmp_path, {"b.mp4": {"video"}})
    with pytest.raises(StreamClassificationFailure) as exc:
        classify_streams(tmp_path, "ffprobe")
    assert "audio" in str(exc.value)


def test_empty_workspace_fails(tmp_path, fake_tools):
    with pytest.raises(StreamClassificationFailure) as exc:
        classify_streams(tmp_path, "ffprobe")
    assert "audio or video" in str(exc.value)


def test_dual_stream_file_is_video_and_flagged(tmp_path, fake_tools):
    # Known deviation point: the audio role of a muxed file is not used
    _make(fake_tools, tmp_path, {"a.m4a": {"audio"}, "b.mp4": {"audio", "video"}})
    pair = classify_streams(tmp_path, "ffprobe")
    assert pair.video == tmp_path / "b.mp4"
    assert pair.audio == tmp_path / "a.m4a"
    assert pair.dual_stream == (tmp_path / "b.mp4",)


def test_lone_dual_stream_file_leaves_audio_unfilled(tmp_path, fake_tools):
    _make(fake_tools, tmp_path, {"b.mp4": {"audio", "video"}})
    with pytest.raises(StreamClassificationFailure):
        classify_streams(tmp_path, "ffprobe")


def test_first_match_wins_and_junk_is_ignored(tmp_path, fake_tools):
    _make(
        fake_tools,
        tmp_path,
        {"1.webm": {"video"}, "2.webm": {"video"}, "3.txt": set(), "4.m4a": {"audio"}},
    )
    (tmp_path / "subdir").mkdir()
    pair = classify_streams(tmp_path, "ffprobe")
    assert pair.video == tmp_path / "1.webm"
    assert pair.audio == tmp_path / "4.m4a"

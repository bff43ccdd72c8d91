from __future__ import annotations

import subprocess
from pathlib import Path

import pytest

from ytmerge.core.process_manager import process_manager

LISTING = "140 m4a audio only 2 | 3.27MiB\n137 mp4 1920x1080 25 | 78.15MiB video only\n"


class FakeTools:
    """Stand-in for yt-dlp, ffprobe and ffmpeg.

    ``downloads`` maps file names to the stream kinds ffprobe should report.
    """

    def __init__(self):
        self.calls: list[list[str]] = []
        self.title = "Demo"
        self.downloads: dict[str, set[str]] = {
            "Demo.f140.m4a": {"audio"},
            "Demo.f137.mp4": {"video"},
        }
        self.simulate_rc = 0
        self.formats_rc = 0
        self.title_rc = 0
        self.download_rc = 0
        self.mux_rc = 0
        self.workdirs: list[Path] = []
        self.stream_files: dict[Path, set[str]] = {}

    def tools(self, name: str) -> list[list[str]]:
        return [c for c in self.calls if Path(c[0]).name == name]

    def __call__(self, cmd):
        cmd = [str(c) for c in cmd]
        self.calls.append(cmd)
        name = Path(cmd[0]).name
        if name == "yt-dlp":
            return self._yt_dlp(cmd)
        if name == "ffprobe":
            return self._ffprobe(cmd)
        if name == "ffmpeg":
            return self._ffmpeg(cmd)
        raise AssertionError(f"unexpected command {cmd}")

    def _yt_dlp(self, cmd):
        if "--simulate" in cmd:
            return self._done(cmd, self.simulate_rc, stderr="ERROR: [youtube] x: Video unavailable")
        if "-F" in cmd:
            return self._done(cmd, self.formats_rc, stdout=LISTING)
        if "--print" in cmd:
            return self._done(cmd, self.title_rc, stdout=f"{self.title}\n")
        if "-o" in cmd:
            workdir = Path(cmd[cmd.index("-o") + 1]).parent
            self.workdirs.append(workdir)
            if self.download_rc == 0:
                for file_name, kinds in self.downloads.items():
                    path = workdir / file_name
                    path.write_bytes(b"data")
                    self.stream_files[path] = kinds
            return self._done(cmd, self.download_rc, stderr="ERROR: Requested format is not available")
        raise AssertionError(f"unexpected yt-dlp call {cmd}")

    def _ffprobe(self, cmd):
        kind = {"a": "audio", "v": "video"}[cmd[cmd.index("-select_streams") + 1]]
        kinds = self.stream_files.get(Path(cmd[-1]), set())
        return self._done(cmd, 0, stdout="0\n" if kind in kinds else "")

    def _ffmpeg(self, cmd):
        # Like real ffmpeg -y, the target is written before the exit status is known
        Path(cmd[-1]).write_bytes(b"merged" if self.mux_rc == 0 else b"partial")
        return self._done(cmd, self.mux_rc, stderr="Invalid data found when processing input")

    @staticmethod
    def _done(cmd, rc, stdout="", stderr=""):
        return subprocess.CompletedProcess(cmd, rc, stdout, stderr if rc else "")


@pytest.fixture
def fake_tools(monkeypatch):
    fake = FakeTools()
    monkeypatch.setattr(process_manager, "run", fake)
    return fake


@pytest.fixture
def tools_on_path(monkeypatch):
    monkeypatch.setattr(
        "ytmerge.core.environment_checker.shutil.which",
        lambda name: f"/usr/bin/{name}",
    )

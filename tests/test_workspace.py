import pytest

from ytmerge.core.process_manager import process_manager
from ytmerge.core.workspace import scratch_workspace


def test_workspace_removed_after_use(tmp_path):
    with scratch_workspace("ytmerge-test-", parent=tmp_path) as workdir:
        (workdir / "file.bin").write_bytes(b"x")
        assert workdir.is_dir()
        assert workdir.name.startswith("ytmerge-test-")
    assert not workdir.exists()


def test_workspace_removed_on_error(tmp_path):
    with pytest.raises(RuntimeError):
        with scratch_workspace(parent=tmp_path) as workdir:
            (workdir / "file.bin").write_bytes(b"x")
            raise RuntimeError("boom")
    assert not workdir.exists()


def test_workspace_removed_on_system_exit(tmp_path):
    with pytest.raises(SystemExit):
        with scratch_workspace(parent=tmp_path) as workdir:
            raise SystemExit(143)
    assert not workdir.exists()


def test_process_cleanup_removes_live_workspace(tmp_path):
    with scratch_workspace(parent=tmp_path) as workdir:
        process_manager.cleanup()
        assert not workdir.exists()
    assert not workdir.exists()


def test_signal_guard_restores_handlers():
    import signal

    before = signal.getsignal(signal.SIGTERM)
    with process_manager.signal_guard():
        assert signal.getsignal(signal.SIGTERM) == process_manager._signal_handler
    assert signal.getsignal(signal.SIGTERM) == before


def test_signal_handler_exits_and_cleans_up(tmp_path):
    with pytest.raises(SystemExit) as exc:
        with scratch_workspace(parent=tmp_path) as workdir:
            process_manager._signal_handler(15, None)
    assert exc.value.code == 143
    assert not workdir.exists()

"""
Runs the external tools one at a time and makes sure that an interrupted
invocation leaves neither child processes nor scratch files behind:
- every running child pid is tracked
- SIGINT/SIGTERM terminate tracked children, run cleanup callbacks and
  unwind the interpreter with ``SystemExit(128 + signum)``
- cleanup callbacks also run at interpreter exit
"""

from __future__ import annotations

import atexit
import signal
import subprocess
import sys
from collections.abc import Callable, Iterator, Sequence
from contextlib import contextmanager

import psutil

from ..utils.logger import logger


class ProcessManager:
    """
    Child process lifecycle manager.

    One instance per process; see ``process_manager`` below.
    """

    _instance: ProcessManager | None = None

    def __new__(cls) -> ProcessManager:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._initialized = False
        return cls._instance

    def __init__(self):
        if self._initialized:
            return

        self._child_pids: set[int] = set()
        self._on_cleanup_callbacks: list[Callable[[], None]] = []

        atexit.register(self._on_exit)

        self._initialized = True

    def run(self, cmd: Sequence[str]) -> subprocess.CompletedProcess[str]:
        """
        Run one command to completion and capture its text output.

        There is no timeout: a tool that hangs hangs the invocation.
        """
        cmd = [str(c) for c in cmd]
        logger.debug("Running: {}", subprocess.list2cmdline(cmd))

        proc = subprocess.Popen(
            cmd,
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
            text=True,
            encoding="utf-8",
            errors="replace",
        )
        self.register(proc.pid)
        try:
            stdout, stderr = proc.communicate()
        finally:
            self.unregister(proc.pid)

        logger.debug("Finished (code={}): {}", proc.returncode, cmd[0])
        return subprocess.CompletedProcess(cmd, proc.returncode, stdout or "", stderr or "")

    def register(self, pid: int) -> None:
        self._child_pids.add(pid)

    def unregister(self, pid: int) -> None:
        self._child_pids.discard(pid)

    def on_cleanup(self, callback: Callable[[], None]) -> None:
        """Register a callback to run on cleanup."""
        self._on_cleanup_callbacks.append(callback)

    def remove_cleanup(self, callback: Callable[[], None]) -> None:
        try:
            self._on_cleanup_callbacks.remove(callback)
        except ValueError:
            pass

    def cleanup(self) -> int:
        """
        Terminate tracked children and run pending cleanup callbacks.

        Returns:
            number of children terminated
        """
        killed = 0
        for pid in list(self._child_pids):
            if self._kill_pid(pid):
                killed += 1

        # Callbacks run after the children are gone so their files are unlocked
        callbacks = list(self._on_cleanup_callbacks)
        self._on_cleanup_callbacks.clear()
        for callback in callbacks:
            try:
                callback()
            except Exception as e:
                logger.warning(f"Cleanup callback failed: {e}")

        if killed > 0:
            logger.debug(f"Terminated {killed} child process(es)")
        return killed

    def _kill_pid(self, pid: int) -> bool:
        """Terminate one child, killing it if it does not exit in time."""
        try:
            proc = psutil.Process(pid)
            proc.terminate()
            try:
                proc.wait(timeout=3)
            except psutil.TimeoutExpired:
                proc.kill()
                try:
                    proc.wait(timeout=1)
                except psutil.TimeoutExpired:
                    pass
            return True
        except psutil.NoSuchProcess:
            return False
        except psutil.AccessDenied:
            logger.warning(f"No permission to terminate process {pid}")
            return False
        finally:
            self._child_pids.discard(pid)

    @contextmanager
    def signal_guard(self) -> Iterator[None]:
        """Install SIGINT/SIGTERM handlers for one invocation, then restore the old ones."""

        previous: dict[int, object] = {}
        for name in ("SIGINT", "SIGTERM"):
            signum = getattr(signal, name, None)
            if signum is None:
                continue
            try:
                previous[signum] = signal.signal(signum, self._signal_handler)
            except (ValueError, OSError) as e:
                # Not in the main thread
                logger.debug(f"Signal handlers not installed: {e}")
        try:
            yield
        finally:
            for signum, handler in previous.items():
                signal.signal(signum, handler)

    def _signal_handler(self, signum: int, frame) -> None:
        logger.warning(f"Interrupted by signal {signum}, cleaning up")
        self.cleanup()
        sys.exit(128 + signum)

    def _on_exit(self) -> None:
        self.cleanup()


# Process-wide singleton
process_manager = ProcessManager()

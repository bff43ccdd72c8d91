from __future__ import annotations

import shutil
import tempfile
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

from ..utils.logger import logger
from .process_manager import process_manager


@contextmanager
def scratch_workspace(prefix: str = "ytmerge-", parent: str | Path | None = None) -> Iterator[Path]:
    """
    Create a private scratch directory and remove it on every exit path.

    Removal is also registered with the process manager, so a signal or an
    interpreter exit that bypasses ``finally`` still cleans up.
    """
    workdir = Path(tempfile.mkdtemp(prefix=prefix, dir=parent))
    logger.debug(f"Scratch workspace: {workdir}")

    def _remove() -> None:
        shutil.rmtree(workdir, ignore_errors=True)

    process_manager.on_cleanup(_remove)
    try:
        yield workdir
    finally:
        process_manager.remove_cleanup(_remove)
        _remove()
        logger.debug(f"Removed scratch workspace: {workdir}")

from __future__ import annotations

from pathlib import Path

from ..core.errors import DestinationConflict
from .filesystem import sanitize_filename


def resolve_output_path(user_path: str | Path | None, title: str, extension: str = "mp4") -> Path:
    """Work out where the merged file goes.

    - no path: ``./<title>.<ext>``
    - an existing directory: ``<dir>/<title>.<ext>``
    - anything else whose file name contains a dot: used as given
    - anything else: ``<path>.<ext>``

    Only the existence of a directory at ``user_path`` is consulted.
    """

    ext = extension.lstrip(".")
    default_name = f"{sanitize_filename(title)}.{ext}"

    raw = str(user_path or "").strip()
    if not raw:
        return Path(".") / default_name

    candidate = Path(raw).expanduser()
    if candidate.is_dir():
        return candidate / default_name

    # Only the final component counts: "./out" has no extension
    if "." in candidate.name:
        return candidate

    return candidate.with_name(f"{candidate.name}.{ext}")


def check_destination(path: Path, force: bool) -> None:
    """Refuse to start when the destination is an existing file and force is off."""

    if path.is_file() and not force:
        raise DestinationConflict(
            f"Output file already exists: {path}. Use -f/--force to overwrite it."
        )

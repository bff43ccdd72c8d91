"""
File name safety helpers.

Video titles end up as file names, so they may not contain path separators
or characters other platforms reject:
- illegal characters (<>:"/\\|?*) are replaced
- control characters are dropped
- reserved Windows device names (CON, NUL, COM1, ...) are prefixed
- over-long names are truncated
"""

from __future__ import annotations

import re
import unicodedata

ILLEGAL_CHARS_PATTERN = re.compile(r'[<>:"/\\|?*]')
CONTROL_CHARS_PATTERN = re.compile(r"[\x00-\x1f]")

RESERVED_NAMES = frozenset(
    {"CON", "PRN", "AUX", "NUL"}
    | {f"COM{i}" for i in range(1, 10)}
    | {f"LPT{i}" for i in range(1, 10)}
)

# Leaves room for ".mp4" and a directory prefix
DEFAULT_MAX_FILENAME_LENGTH = 200


def sanitize_filename(
    name: str,
    replacement: str = "_",
    max_length: int = DEFAULT_MAX_FILENAME_LENGTH,
) -> str:
    """
    Make ``name`` safe to use as a single path component.

    Examples:
        >>> sanitize_filename('AC/DC: Live?')
        'AC_DC_ Live_'
        >>> sanitize_filename('  ')
        'unnamed'
    """
    if not name:
        return "unnamed"

    name = unicodedata.normalize("NFC", name)
    name = CONTROL_CHARS_PATTERN.sub("", name)
    name = ILLEGAL_CHARS_PATTERN.sub(replacement, name)

    # Leading/trailing dots and spaces: hidden files on POSIX, invalid on Windows
    name = name.strip(". ")

    if name.split(".", 1)[0].upper() in RESERVED_NAMES:
        name = f"_{name}"

    if len(name) > max_length:
        name = name[:max_length].rstrip(". ")

    if not name:
        return "unnamed"

    return name

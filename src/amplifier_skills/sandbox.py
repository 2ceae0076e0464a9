"""Path containment checks for untrusted relative paths.

Every path taken from fetched content or user input is resolved against its root
and compared *after* normalization. Nothing here touches the filesystem.
"""

import os
from pathlib import Path


def _normalized(root: Path | str, candidate: str) -> tuple[str, str]:
    root_str = os.path.normpath(os.path.abspath(os.fspath(root)))
    # Absolute candidates replace the root in os.path.join and are caught below
    resolved = os.path.normpath(os.path.join(root_str, candidate))
    return root_str, resolved


def is_safe_path(root: Path | str, candidate: str) -> bool:
    """Check whether ``candidate`` stays inside ``root`` once resolved.

    Args:
        root: Directory that must contain the result (made absolute if relative)
        candidate: Untrusted relative path

    Returns:
        True if the resolved path equals root or lies strictly beneath it

    Example:
        >>> is_safe_path("/srv/skills/demo", "docs/guide.md")
        True
        >>> is_safe_path("/srv/skills/demo", "../other/secret")
        False
    """
    root_str, resolved = _normalized(root, candidate)
    if resolved == root_str:
        return True
    # Root "/" already ends with the separator
    prefix = root_str if root_str.endswith(os.sep) else root_str + os.sep
    return resolved.startswith(prefix)


def resolve_inside(root: Path | str, candidate: str) -> Path | None:
    """Return the normalized absolute path for ``candidate``, or None if it escapes ``root``."""
    if not is_safe_path(root, candidate):
        return None
    return Path(_normalized(root, candidate)[1])

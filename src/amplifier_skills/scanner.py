"""Reference discovery in skill documents.

A skill document points at sibling files in two ways:

- Markdown links: ``[label](target)``; external, anchor and mailto targets are ignored
- Inline code naming a file: ```config.json``` or ```scripts/run.py```

Paths are returned raw. Containment is checked by the caller (see sandbox.py).
Only the primary document is scanned; fetched references are never scanned.
"""

import re

_LINK_RE = re.compile(r"\[([^\]]*)\]\(([^)]+)\)")
_BACKTICK_RE = re.compile(r"`([^`\s]+\.\w{1,10})`", re.ASCII)
_PLAIN_PATH_RE = re.compile(r"[\w\-/.]+", re.ASCII)

_SKIPPED_LINK_PREFIXES = ("http", "#", "mailto:")


def _is_plain_filename(token: str) -> bool:
    return bool(_PLAIN_PATH_RE.fullmatch(token)) and not token.startswith(".") and ".." not in token


def find_referenced_files(content: str) -> list[str]:
    """Find relative file paths referenced by a skill document.

    Args:
        content: Document text (markdown)

    Returns:
        Unique referenced paths in discovery order (links first, then inline code)

    Example:
        >>> find_referenced_files("See [guide](guide.md) and [site](https://x.com/a)")
        ['guide.md']
    """
    refs: dict[str, None] = {}

    for match in _LINK_RE.finditer(content):
        href = match.group(2)
        if not href.startswith(_SKIPPED_LINK_PREFIXES):
            refs[href] = None

    for match in _BACKTICK_RE.finditer(content):
        token = match.group(1)
        if _is_plain_filename(token):
            refs[token] = None

    return list(refs)

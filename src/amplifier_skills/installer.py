"""Skill installation from a URL.

A skill is a markdown document plus any sibling files it references. Install:

1. Derive the skill name and base URL from the document URL
2. Fetch the document (no directory is created if this fails)
3. Write it to ``<skills_dir>/<name>/<filename>``
4. Scan it for referenced files, then guard, fetch and write each one

Expected failures are returned in the InstallReport. Files already written stay
in place when later references fail, and files from an earlier install of the
same name are not pruned.
"""

import logging
import os
import re
import shutil
from pathlib import Path

from .exceptions import InvalidSkillNameError
from .exceptions import SkillInstallError
from .exceptions import SkillNotFoundError
from .fetcher import HttpFetcher
from .lock import SkillLock
from .protocols import FetcherProtocol
from .sandbox import resolve_inside
from .scanner import find_referenced_files
from .schema import FailedReference
from .schema import FailureReason
from .schema import InstallReport

logger = logging.getLogger(__name__)

INSTALL_USAGE = "Usage: install_skill(url: 'https://example.com/skill.md')"
UNINSTALL_USAGE = "Usage: uninstall_skill(name: 'skill-name')"

_UNSAFE_NAME_CHARS = re.compile(r"[^\w\-]", re.ASCII)
_EXTENSION = re.compile(r"\.\w+$", re.ASCII)


def sanitize_skill_name(name: str) -> str:
    """Replace every character outside ``[A-Za-z0-9_-]`` with ``-``."""
    return _UNSAFE_NAME_CHARS.sub("-", name)


def _last_segment(url: str) -> str:
    return url.rsplit("/", 1)[-1]


def _derive_skill_name(url: str, name: str | None) -> str:
    """Skill name from the override, else the URL filename without extension."""
    if name and name.strip():
        return sanitize_skill_name(name.strip())
    stem = _EXTENSION.sub("", _last_segment(url) or "skill")
    return sanitize_skill_name(stem or "skill")


def _base_url(url: str) -> str:
    """Strip the final path segment, unless the only slashes belong to ``://``.

    >>> _base_url("https://example.com/skills/demo.md")
    'https://example.com/skills'
    >>> _base_url("https://example.com")
    'https://example.com'
    """
    last_slash = url.rfind("/")
    return url[:last_slash] if last_slash > url.find("://") + 2 else url


def _failure(message: str, status: int | None = None, url: str | None = None) -> InstallReport:
    logger.warning(message)
    return InstallReport(success=False, url=url, error=message, status=status)


async def install_skill(
    url: str,
    skills_dir: Path,
    name: str | None = None,
    fetcher: FetcherProtocol | None = None,
    lock: SkillLock | None = None,
    error_snippet_chars: int = 200,
) -> InstallReport:
    """
    Install a skill document and the files it references.

    Args:
        url: http(s) URL of the skill document
        skills_dir: Directory holding one subdirectory per skill (app policy)
        name: Optional skill name override (sanitized like derived names)
        fetcher: Content source; defaults to a short-lived HttpFetcher
        lock: Optional lock file to record the install in
        error_snippet_chars: How much of a failed response to quote in the error

    Returns:
        InstallReport. ``success`` is False only when nothing was installed
        (invalid input or the document itself could not be fetched).

    Example:
        >>> report = await install_skill(
        ...     "https://example.com/skills/pdf-tools.md",
        ...     skills_dir=Path("skills"),
        ... )
        >>> report.fetched
        ['pdf-tools.md', 'scripts/extract.py']
    """
    url = (url or "").strip()
    if not url:
        return _failure(INSTALL_USAGE)
    if not url.startswith(("http://", "https://")):
        return _failure("URL must start with http:// or https://", url=url)

    if fetcher is None:
        async with HttpFetcher() as http_fetcher:
            return await install_skill(url, skills_dir, name, http_fetcher, lock, error_snippet_chars)

    skills_dir = Path(os.path.abspath(skills_dir))
    skill_name = _derive_skill_name(url, name)
    skill_dir = skills_dir / skill_name
    base_url = _base_url(url)

    main_filename = _last_segment(url) or "skill.md"
    main_path = resolve_inside(skill_dir, main_filename)
    if main_path is None or main_path == skill_dir:
        return _failure(f"Cannot derive a safe filename from {url}", url=url)

    main_result = await fetcher.fetch(url)
    if not main_result.ok:
        return _failure(
            f"Failed to fetch {url} (HTTP {main_result.status}): {main_result.text[:error_snippet_chars]}",
            status=main_result.status,
            url=url,
        )

    logger.info(f"Installing skill {skill_name} from {url}")
    skill_dir.mkdir(parents=True, exist_ok=True)
    main_path.write_text(main_result.text, encoding="utf-8")

    fetched = [main_filename]
    failed: list[FailedReference] = []

    for ref in find_referenced_files(main_result.text):
        dest = resolve_inside(skill_dir, ref)
        if dest is None:
            logger.warning(f"Blocked reference outside skill directory: {ref}")
            failed.append(FailedReference(path=ref, reason=FailureReason.BLOCKED))
            continue
        if dest == skill_dir:
            logger.debug(f"Skipping reference to the skill directory itself: {ref}")
            failed.append(FailedReference(path=ref, reason=FailureReason.NOT_A_FILE))
            continue

        ref_result = await fetcher.fetch(f"{base_url}/{ref}")
        if not ref_result.ok:
            failed.append(FailedReference(path=ref, reason=FailureReason.HTTP, status=ref_result.status))
            continue

        try:
            dest.parent.mkdir(parents=True, exist_ok=True)
            dest.write_text(ref_result.text, encoding="utf-8")
        except (IsADirectoryError, NotADirectoryError, FileExistsError) as e:
            # Reference collides with a file or directory already in the skill
            logger.warning(f"Cannot write reference {ref}: {e}")
            failed.append(FailedReference(path=ref, reason=FailureReason.NOT_A_FILE))
            continue

        fetched.append(ref)
        logger.debug(f"Fetched reference {ref}")

    if lock is not None:
        lock.add_entry(name=skill_name, source=url, path=skill_dir, files=fetched)

    logger.info(f"Installed skill {skill_name}: {len(fetched)} fetched, {len(failed)} failed")
    return InstallReport(
        success=True,
        skill_name=skill_name,
        url=url,
        skill_dir=skill_dir,
        fetched=fetched,
        failed=failed,
    )


def uninstall_skill(name: str, skills_dir: Path, lock: SkillLock | None = None) -> Path:
    """
    Remove an installed skill directory and everything in it.

    Args:
        name: Skill name (a directory directly under skills_dir)
        skills_dir: Directory holding installed skills (app policy)
        lock: Optional lock file to drop the entry from

    Returns:
        Path of the removed directory

    Raises:
        InvalidSkillNameError: If name is blank or does not denote a direct child of skills_dir
        SkillNotFoundError: If no such skill directory exists (nothing is touched)
        SkillInstallError: If removal itself failed
    """
    name = (name or "").strip()
    if not name:
        raise InvalidSkillNameError(UNINSTALL_USAGE)

    skills_dir = Path(os.path.abspath(skills_dir))
    skill_path = resolve_inside(skills_dir, name)
    if skill_path is None or skill_path.parent != skills_dir:
        raise InvalidSkillNameError(
            f'Invalid skill name "{name}"',
            context={"name": name, "skills_dir": str(skills_dir)},
        )

    if not skill_path.is_dir():
        raise SkillNotFoundError(
            f'Skill "{name}" not found in skills/',
            context={"name": name, "skills_dir": str(skills_dir)},
        )

    try:
        logger.info(f"Uninstalling skill: {name}")
        shutil.rmtree(skill_path)
    except OSError as e:
        raise SkillInstallError(f'Failed to remove skill "{name}": {e}', context={"path": str(skill_path)}) from e

    if lock is not None:
        lock.remove_entry(name)

    logger.info(f"Successfully uninstalled: {name}")
    return skill_path

"""Installed skill discovery - one directory per skill under the skills dir.

Convention over configuration: every immediate subdirectory of the skills
directory is an installed skill; no manifest is required.
"""

import logging
from pathlib import Path

from .lock import SkillLock
from .schema import InstalledSkill

logger = logging.getLogger(__name__)


def list_skills(skills_dir: Path, lock: SkillLock | None = None) -> list[InstalledSkill]:
    """
    List installed skills and their immediate entries.

    The skills directory is created if it does not exist yet, so a fresh
    install reports an empty list rather than an error.

    Args:
        skills_dir: Directory containing one subdirectory per skill
        lock: Optional lock file used to attach each skill's source URL

    Returns:
        Installed skills sorted by name; ``files`` holds sorted entry names
        directly inside each skill directory (no recursion)

    Example:
        >>> for skill in list_skills(Path("skills")):
        ...     print(skill.name, skill.files)
        pdf-tools ['pdf-tools.md', 'scripts']
    """
    skills_dir.mkdir(parents=True, exist_ok=True)

    skills = []
    for skill_dir in sorted(skills_dir.iterdir(), key=lambda p: p.name):
        if not skill_dir.is_dir():
            continue

        entry = lock.get_entry(skill_dir.name) if lock is not None else None
        skills.append(
            InstalledSkill(
                name=skill_dir.name,
                path=skill_dir,
                files=sorted(child.name for child in skill_dir.iterdir()),
                source=entry.source if entry is not None else None,
            )
        )

    logger.debug(f"Found {len(skills)} installed skills in {skills_dir}")
    return skills


def list_skill_names(skills_dir: Path) -> list[str]:
    """List installed skill names (helper)."""
    return [skill.name for skill in list_skills(skills_dir)]

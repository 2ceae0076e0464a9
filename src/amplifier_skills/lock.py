"""Skill lock file management.

Records where each installed skill came from and which files were written.
Bookkeeping only: the lock never prunes, versions or deduplicates skills.

The lock path is injected by the app, never hardcoded.
"""

import json
import logging
from dataclasses import asdict
from dataclasses import dataclass
from dataclasses import field
from datetime import UTC
from datetime import datetime
from pathlib import Path

logger = logging.getLogger(__name__)


@dataclass
class SkillLockEntry:
    """Entry in skills lock file."""

    name: str
    source: str
    path: str
    installed_at: str
    files: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict) -> "SkillLockEntry":
        """Create from dictionary."""
        return cls(**data)


class SkillLock:
    """
    Skills lock file manager (with injected lock path).

    Lock format (JSON):
    {
      "version": "1.0",
      "skills": {
        "pdf-tools": {
          "name": "pdf-tools",
          "source": "https://example.com/skills/pdf-tools.md",
          "path": "/home/me/project/skills/pdf-tools",
          "installed_at": "2025-10-26T12:00:00+00:00",
          "files": ["pdf-tools.md", "scripts/extract.py"]
        }
      }
    }

    Read and write failures are logged, never raised.
    """

    VERSION = "1.0"

    def __init__(self, lock_path: Path):
        """Initialize lock manager with app-provided lock path.

        Args:
            lock_path: Path to lock file (app determines location)
        """
        self.lock_path = lock_path
        self._data: dict[str, SkillLockEntry] = {}
        self._load()

    def _load(self) -> None:
        """Load lock file if it exists."""
        if not self.lock_path.exists():
            self._data = {}
            return

        try:
            with open(self.lock_path, encoding="utf-8") as f:
                data = json.load(f)

            if data.get("version") != self.VERSION:
                logger.warning(f"Lock file version mismatch: expected {self.VERSION}, got {data.get('version')}")

            skills = data.get("skills", {})
            self._data = {name: SkillLockEntry.from_dict(entry) for name, entry in skills.items()}

            logger.debug(f"Loaded {len(self._data)} skills from lock file")

        except (OSError, ValueError, TypeError, AttributeError) as e:
            logger.error(f"Failed to load lock file {self.lock_path}: {e}")
            self._data = {}

    def _save(self) -> None:
        """Save lock file."""
        data = {
            "version": self.VERSION,
            "skills": {name: entry.to_dict() for name, entry in self._data.items()},
        }

        try:
            self.lock_path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.lock_path, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=2)
            logger.debug(f"Saved lock file with {len(self._data)} skills")
        except OSError as e:
            logger.error(f"Failed to save lock file {self.lock_path}: {e}")

    def add_entry(self, name: str, source: str, path: Path, files: list[str]) -> None:
        """
        Add or replace a skill in the lock file.

        Args:
            name: Skill name (directory name under the skills dir)
            source: URL the skill was installed from
            path: Installation path
            files: Relative paths written by the install
        """
        self._data[name] = SkillLockEntry(
            name=name,
            source=source,
            path=str(path),
            installed_at=datetime.now(UTC).isoformat(),
            files=list(files),
        )
        self._save()

        logger.debug(f"Added {name} to lock file")

    def remove_entry(self, name: str) -> None:
        """Remove skill from lock file (no-op if absent)."""
        if name in self._data:
            del self._data[name]
            self._save()
            logger.debug(f"Removed {name} from lock file")

    def get_entry(self, name: str) -> SkillLockEntry | None:
        return self._data.get(name)

    def list_entries(self) -> list[SkillLockEntry]:
        return list(self._data.values())

    def is_installed(self, name: str) -> bool:
        return name in self._data

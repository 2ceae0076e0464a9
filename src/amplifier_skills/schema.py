"""Skill installer data model - immutable results returned by every operation.

Expected failures (bad URL, HTTP errors, blocked paths) are carried in these
values rather than raised.
"""

from enum import Enum
from pathlib import Path

from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field


class FetchResult(BaseModel):
    """Outcome of a single GET.

    ``status`` is 0 when no response was received; ``text`` then holds a short
    diagnostic instead of the body.
    """

    model_config = ConfigDict(frozen=True)

    ok: bool
    status: int
    text: str


class FailureReason(str, Enum):
    """Why a reference was not installed."""

    BLOCKED = "blocked: path traversal"
    HTTP = "http"
    NOT_A_FILE = "not a file"


class FailedReference(BaseModel):
    """A discovered reference that was blocked or could not be fetched."""

    model_config = ConfigDict(frozen=True)

    path: str
    reason: FailureReason
    status: int | None = None

    def describe(self) -> str:
        """Render as ``"<path> (<reason>)"`` for reports."""
        if self.reason is FailureReason.HTTP:
            return f"{self.path} (HTTP {self.status})"
        return f"{self.path} ({self.reason.value})"


class InstallReport(BaseModel):
    """
    Outcome of one install operation.

    A successful report always lists the primary document first in ``fetched``.
    Partial success (some references failed) is still ``success=True``.
    """

    model_config = ConfigDict(frozen=True)

    success: bool
    skill_name: str | None = None
    url: str | None = None
    skill_dir: Path | None = None
    fetched: list[str] = Field(default_factory=list)
    failed: list[FailedReference] = Field(default_factory=list)

    # Set only when success is False
    error: str | None = None
    status: int | None = None

    @property
    def primary_file(self) -> str | None:
        return self.fetched[0] if self.fetched else None

    def summary(self) -> str:
        """Human-readable summary enumerating fetched and failed files."""
        if not self.success:
            return self.error or "Install failed"

        text = f'Installed skill "{self.skill_name}" to skills/{self.skill_name}/\n\nFiles fetched:\n'
        text += "\n".join(f"  - {name}" for name in self.fetched)
        if self.failed:
            text += "\n\nCould not fetch:\n"
            text += "\n".join(f"  - {failure.describe()}" for failure in self.failed)
        return text

    def details(self) -> dict:
        """Machine-readable details for callers of the tool surface."""
        if not self.success:
            return {"success": False, "error": self.error, "status": self.status}
        return {
            "success": True,
            "skillName": self.skill_name,
            "fetched": list(self.fetched),
            "failed": [failure.describe() for failure in self.failed],
        }


class InstalledSkill(BaseModel):
    """An installed skill directory and its immediate files."""

    model_config = ConfigDict(frozen=True)

    name: str
    path: Path
    files: list[str] = Field(default_factory=list)
    source: str | None = None

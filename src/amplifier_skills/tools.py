"""Agent-facing skill tools: install_skill, uninstall_skill, list_skills.

Each tool returns a ToolResult holding summary text for the agent plus a
``details`` dict whose ``success`` key reports the outcome. Expected failures
never raise; unexpected filesystem errors do.
"""

import logging
from typing import Any

from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field

from .config import SkillSettings
from .discovery import list_skills
from .exceptions import InvalidSkillNameError
from .exceptions import SkillNotFoundError
from .fetcher import HttpFetcher
from .installer import install_skill
from .installer import uninstall_skill
from .lock import SkillLock
from .protocols import FetcherProtocol
from .schema import InstallReport

logger = logging.getLogger(__name__)

TOOL_DEFINITIONS: list[dict[str, Any]] = [
    {
        "name": "install_skill",
        "label": "Install Skill",
        "description": (
            "Install a skill from a URL. Fetches the skill file and any files it references from the same "
            "base URL. Files are saved to skills/<name>/. "
            "Example: install_skill(url: 'https://example.com/cool-skill.md')"
        ),
        "parameters": {
            "type": "object",
            "properties": {
                "url": {
                    "type": "string",
                    "description": "URL to the skill file (e.g. https://example.com/skills/my-skill.md)",
                },
                "name": {
                    "type": "string",
                    "description": "Override the skill name (defaults to the filename without extension)",
                },
            },
            "required": ["url"],
        },
    },
    {
        "name": "uninstall_skill",
        "label": "Uninstall Skill",
        "description": "Remove an installed skill by name (the directory name under skills/)",
        "parameters": {
            "type": "object",
            "properties": {"name": {"type": "string", "description": "Name of the skill to remove"}},
            "required": ["name"],
        },
    },
    {
        "name": "list_skills",
        "label": "List Skills",
        "description": "List all installed skills and their files",
        "parameters": {"type": "object", "properties": {}},
    },
]


class ToolResult(BaseModel):
    """Result handed back to the calling agent."""

    model_config = ConfigDict(frozen=True)

    text: str
    details: dict[str, Any] = Field(default_factory=dict)

    @property
    def success(self) -> bool:
        return bool(self.details.get("success"))


class SkillTools:
    """
    Skill tools bound to one skills directory.

    Example:
        >>> tools = SkillTools(SkillSettings(skills_dir=Path("skills")))
        >>> result = await tools.install("https://example.com/skills/pdf-tools.md")
        >>> result.details["fetched"]
        ['pdf-tools.md']
    """

    def __init__(
        self,
        settings: SkillSettings | None = None,
        fetcher: FetcherProtocol | None = None,
        lock: SkillLock | None = None,
    ):
        self.settings = settings or SkillSettings()
        self.fetcher = fetcher
        if lock is None and self.settings.lock_path is not None:
            lock = SkillLock(lock_path=self.settings.lock_path)
        self.lock = lock

    async def install(self, url: str, name: str | None = None) -> ToolResult:
        if self.fetcher is not None:
            report = await self._install_with(self.fetcher, url, name)
        else:
            async with HttpFetcher.from_settings(self.settings) as fetcher:
                report = await self._install_with(fetcher, url, name)
        return ToolResult(text=report.summary(), details=report.details())

    async def _install_with(self, fetcher: FetcherProtocol, url: str, name: str | None) -> InstallReport:
        return await install_skill(
            url,
            skills_dir=self.settings.skills_dir,
            name=name,
            fetcher=fetcher,
            lock=self.lock,
            error_snippet_chars=self.settings.error_snippet_chars,
        )

    async def uninstall(self, name: str) -> ToolResult:
        try:
            uninstall_skill(name, skills_dir=self.settings.skills_dir, lock=self.lock)
        except (InvalidSkillNameError, SkillNotFoundError) as e:
            return ToolResult(text=e.message, details={"success": False})

        name = name.strip()
        return ToolResult(text=f'Removed skill "{name}"', details={"success": True, "name": name})

    async def list(self) -> ToolResult:
        skills = list_skills(self.settings.skills_dir, lock=self.lock)
        entries = [{"name": skill.name, "files": skill.files} for skill in skills]

        if not entries:
            return ToolResult(text="No skills installed.", details={"success": True, "skills": []})

        listing = "\n".join(f"- {entry['name']}/ ({', '.join(entry['files'])})" for entry in entries)
        return ToolResult(text=f"Installed skills:\n{listing}", details={"success": True, "skills": entries})

    async def call(self, tool_name: str, params: dict[str, Any] | None = None) -> ToolResult:
        """Dispatch a tool call by its TOOL_DEFINITIONS name."""
        params = params or {}
        logger.debug(f"Skill tool call: {tool_name}")

        if tool_name == "install_skill":
            return await self.install(params.get("url", ""), params.get("name"))
        if tool_name == "uninstall_skill":
            return await self.uninstall(params.get("name", ""))
        if tool_name == "list_skills":
            return await self.list()

        return ToolResult(text=f"Unknown skill tool: {tool_name}", details={"success": False})

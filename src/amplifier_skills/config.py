"""Skill installer settings.

Paths are app policy: the skills directory is always passed in explicitly,
never read from module-level state.
"""

import os
from collections.abc import Mapping
from pathlib import Path

from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field
from pydantic import field_validator

DEFAULT_USER_AGENT = "amplifier-skills/0.1.0"

ENV_SKILLS_DIR = "AMPLIFIER_SKILLS_DIR"
ENV_LOCK_PATH = "AMPLIFIER_SKILLS_LOCK"
ENV_TIMEOUT = "AMPLIFIER_SKILLS_TIMEOUT"


class SkillSettings(BaseModel):
    """
    Settings for installing and managing skills.

    Example:
        >>> settings = SkillSettings(skills_dir=Path("/tmp/skills"), timeout=10)
        >>> settings.skills_dir
        PosixPath('/tmp/skills')
    """

    model_config = ConfigDict(frozen=True)

    skills_dir: Path = Field(default_factory=lambda: Path("skills"), validate_default=True)
    lock_path: Path | None = None
    timeout: float = Field(default=30.0, gt=0)
    user_agent: str = DEFAULT_USER_AGENT
    follow_redirects: bool = True
    error_snippet_chars: int = Field(default=200, ge=0)

    @field_validator("skills_dir")
    @classmethod
    def _absolute_skills_dir(cls, value: Path) -> Path:
        # Containment checks compare absolute paths
        return Path(os.path.abspath(value.expanduser()))

    @field_validator("lock_path")
    @classmethod
    def _expand_lock_path(cls, value: Path | None) -> Path | None:
        return value.expanduser() if value is not None else None

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None, **overrides) -> "SkillSettings":
        """Build settings from AMPLIFIER_SKILLS_* environment variables.

        Args:
            environ: Mapping to read (defaults to os.environ)
            **overrides: Explicit values that win over the environment

        Raises:
            pydantic.ValidationError: If a variable holds an invalid value
        """
        env = os.environ if environ is None else environ
        values: dict = {}
        if env.get(ENV_SKILLS_DIR):
            values["skills_dir"] = env[ENV_SKILLS_DIR]
        if env.get(ENV_LOCK_PATH):
            values["lock_path"] = env[ENV_LOCK_PATH]
        if env.get(ENV_TIMEOUT):
            values["timeout"] = env[ENV_TIMEOUT]
        values.update(overrides)
        return cls(**values)

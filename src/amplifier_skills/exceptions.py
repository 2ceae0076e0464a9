"""Skill-specific exceptions.

Expected install failures are reported as values (see schema.InstallReport).
These exceptions cover inventory operations and truly invalid input.
"""


class SkillError(Exception):
    """Base exception for skill operations."""

    def __init__(self, message: str, context: dict | None = None):
        """Initialize with message and optional context.

        Args:
            message: Human-readable error message
            context: Optional dict with additional context (file paths, names, etc.)
        """
        super().__init__(message)
        self.message = message
        self.context = context or {}


class SkillInstallError(SkillError):
    """Skill installation or removal failed unexpectedly."""


class SkillNotFoundError(SkillError):
    """Skill not found under the skills directory."""


class InvalidSkillNameError(SkillError):
    """Skill name is empty or would resolve outside the skills directory."""

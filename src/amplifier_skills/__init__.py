"""amplifier-skills - Install skill documents (and the files they reference) from URLs.

Public API. Apps inject policy (skills directory, lock path, fetcher).
"""

from .config import SkillSettings
from .discovery import list_skill_names
from .discovery import list_skills
from .exceptions import InvalidSkillNameError
from .exceptions import SkillError
from .exceptions import SkillInstallError
from .exceptions import SkillNotFoundError
from .fetcher import HttpFetcher
from .installer import install_skill
from .installer import sanitize_skill_name
from .installer import uninstall_skill
from .lock import SkillLock
from .lock import SkillLockEntry
from .protocols import FetcherProtocol
from .sandbox import is_safe_path
from .sandbox import resolve_inside
from .scanner import find_referenced_files
from .schema import FailedReference
from .schema import FailureReason
from .schema import FetchResult
from .schema import InstalledSkill
from .schema import InstallReport
from .tools import TOOL_DEFINITIONS
from .tools import SkillTools
from .tools import ToolResult

__all__ = [
    # Configuration
    "SkillSettings",
    # Installation
    "install_skill",
    "uninstall_skill",
    "sanitize_skill_name",
    # Inventory
    "list_skills",
    "list_skill_names",
    "InstalledSkill",
    # Fetching
    "FetcherProtocol",
    "HttpFetcher",
    "FetchResult",
    # Scanning and containment
    "find_referenced_files",
    "is_safe_path",
    "resolve_inside",
    # Reports
    "InstallReport",
    "FailedReference",
    "FailureReason",
    # Lock file
    "SkillLock",
    "SkillLockEntry",
    # Agent tools
    "SkillTools",
    "ToolResult",
    "TOOL_DEFINITIONS",
    # Exceptions
    "SkillError",
    "SkillInstallError",
    "SkillNotFoundError",
    "InvalidSkillNameError",
]

__version__ = "0.1.0"

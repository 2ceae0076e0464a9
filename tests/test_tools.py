"""Tests for the agent-facing skill tools."""

from pathlib import Path

import pytest
from amplifier_skills import TOOL_DEFINITIONS
from amplifier_skills import SkillSettings
from amplifier_skills import SkillTools

BASE = "https://example.com/skills"


@pytest.fixture
def settings(tmp_path: Path) -> SkillSettings:
    return SkillSettings(skills_dir=tmp_path / "skills")


@pytest.mark.asyncio
async def test_install_tool_result(settings, make_fetcher):
    fetcher = make_fetcher(
        {
            f"{BASE}/demo.md": "[guide](guide.md) [missing](missing.md) [evil](../evil.md)",
            f"{BASE}/guide.md": "guide",
        }
    )
    tools = SkillTools(settings, fetcher=fetcher)

    result = await tools.install(f"{BASE}/demo.md")

    assert result.success
    assert result.details == {
        "success": True,
        "skillName": "demo",
        "fetched": ["demo.md", "guide.md"],
        "failed": ["missing.md (HTTP 404)", "../evil.md (blocked: path traversal)"],
    }
    assert result.text == (
        'Installed skill "demo" to skills/demo/\n\n'
        "Files fetched:\n"
        "  - demo.md\n"
        "  - guide.md\n\n"
        "Could not fetch:\n"
        "  - missing.md (HTTP 404)\n"
        "  - ../evil.md (blocked: path traversal)"
    )


@pytest.mark.asyncio
async def test_install_tool_failure(settings, make_fetcher):
    tools = SkillTools(settings, fetcher=make_fetcher({}))

    result = await tools.install(f"{BASE}/demo.md")

    assert not result.success
    assert "HTTP 404" in result.text
    assert result.details["success"] is False
    assert result.details["status"] == 404


@pytest.mark.asyncio
async def test_install_tool_invalid_url(settings, make_fetcher):
    result = await SkillTools(settings, fetcher=make_fetcher({})).install("")

    assert not result.success
    assert result.text == "Usage: install_skill(url: 'https://example.com/skill.md')"


@pytest.mark.asyncio
async def test_uninstall_tool(settings, make_fetcher):
    tools = SkillTools(settings, fetcher=make_fetcher({f"{BASE}/demo.md": "hi"}))
    await tools.install(f"{BASE}/demo.md")

    result = await tools.uninstall(" demo ")

    assert result.success
    assert result.text == 'Removed skill "demo"'
    assert result.details == {"success": True, "name": "demo"}
    assert not (settings.skills_dir / "demo").exists()


@pytest.mark.asyncio
async def test_uninstall_tool_not_found(settings):
    result = await SkillTools(settings).uninstall("nonexistent")

    assert not result.success
    assert result.text == 'Skill "nonexistent" not found in skills/'
    assert result.details == {"success": False}


@pytest.mark.asyncio
async def test_uninstall_tool_blank_name(settings):
    result = await SkillTools(settings).uninstall("")

    assert not result.success
    assert result.text == "Usage: uninstall_skill(name: 'skill-name')"


@pytest.mark.asyncio
async def test_list_tool_empty(settings):
    result = await SkillTools(settings).list()

    assert result.success
    assert result.text == "No skills installed."
    assert result.details == {"success": True, "skills": []}
    assert settings.skills_dir.is_dir()


@pytest.mark.asyncio
async def test_list_tool_listing(settings, make_fetcher):
    tools = SkillTools(
        settings,
        fetcher=make_fetcher(
            {
                f"{BASE}/demo.md": "`scripts/run.py`",
                f"{BASE}/scripts/run.py": "pass",
                f"{BASE}/other.md": "other",
            }
        ),
    )
    await tools.install(f"{BASE}/demo.md")
    await tools.install(f"{BASE}/other.md")

    result = await tools.list()

    assert result.text == "Installed skills:\n- demo/ (demo.md, scripts)\n- other/ (other.md)"
    assert result.details["skills"] == [
        {"name": "demo", "files": ["demo.md", "scripts"]},
        {"name": "other", "files": ["other.md"]},
    ]


@pytest.mark.asyncio
async def test_call_dispatches_by_tool_name(settings, make_fetcher):
    tools = SkillTools(settings, fetcher=make_fetcher({f"{BASE}/demo.md": "hi"}))

    installed = await tools.call("install_skill", {"url": f"{BASE}/demo.md", "name": "renamed"})
    listed = await tools.call("list_skills")
    removed = await tools.call("uninstall_skill", {"name": "renamed"})
    unknown = await tools.call("format_disk", {})

    assert installed.details["skillName"] == "renamed"
    assert listed.details["skills"] == [{"name": "renamed", "files": ["demo.md"]}]
    assert removed.success
    assert not unknown.success


@pytest.mark.asyncio
async def test_lock_from_settings(tmp_path, make_fetcher):
    settings = SkillSettings(skills_dir=tmp_path / "skills", lock_path=tmp_path / "skills.lock")
    tools = SkillTools(settings, fetcher=make_fetcher({f"{BASE}/demo.md": "hi"}))

    await tools.install(f"{BASE}/demo.md")

    assert tools.lock is not None
    assert tools.lock.is_installed("demo")
    assert (tmp_path / "skills.lock").exists()

    await tools.uninstall("demo")

    assert not tools.lock.is_installed("demo")


def test_tool_definitions():
    names = [definition["name"] for definition in TOOL_DEFINITIONS]
    assert names == ["install_skill", "uninstall_skill", "list_skills"]
    install = TOOL_DEFINITIONS[0]
    assert install["parameters"]["required"] == ["url"]
    assert set(install["parameters"]["properties"]) == {"url", "name"}

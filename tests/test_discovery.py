"""Tests for installed skill discovery."""

import tempfile
from pathlib import Path

from amplifier_skills import SkillLock
from amplifier_skills import list_skill_names
from amplifier_skills import list_skills


def test_list_creates_missing_skills_dir():
    """An absent skills directory is created and reported as empty."""
    with tempfile.TemporaryDirectory() as tmpdir:
        skills_dir = Path(tmpdir) / "skills"

        skills = list_skills(skills_dir)

        assert skills == []
        assert skills_dir.is_dir()


def test_list_skills_sorted_with_immediate_entries():
    with tempfile.TemporaryDirectory() as tmpdir:
        skills_dir = Path(tmpdir)
        (skills_dir / "zeta").mkdir()
        (skills_dir / "zeta" / "zeta.md").write_text("z")
        (skills_dir / "alpha" / "scripts").mkdir(parents=True)
        (skills_dir / "alpha" / "alpha.md").write_text("a")
        (skills_dir / "alpha" / "scripts" / "run.py").write_text("pass")

        skills = list_skills(skills_dir)

        assert [s.name for s in skills] == ["alpha", "zeta"]
        assert skills[0].files == ["alpha.md", "scripts"]
        assert skills[0].path == skills_dir / "alpha"
        assert skills[1].files == ["zeta.md"]
        assert skills[0].source is None


def test_list_ignores_loose_files():
    with tempfile.TemporaryDirectory() as tmpdir:
        skills_dir = Path(tmpdir)
        (skills_dir / "README.md").write_text("not a skill")
        (skills_dir / "demo").mkdir()

        assert [s.name for s in list_skills(skills_dir)] == ["demo"]


def test_list_empty_skill_directory():
    with tempfile.TemporaryDirectory() as tmpdir:
        skills_dir = Path(tmpdir)
        (skills_dir / "empty").mkdir()

        skills = list_skills(skills_dir)

        assert len(skills) == 1
        assert skills[0].files == []


def test_list_attaches_lock_source():
    with tempfile.TemporaryDirectory() as tmpdir:
        skills_dir = Path(tmpdir) / "skills"
        (skills_dir / "demo").mkdir(parents=True)
        (skills_dir / "manual").mkdir()
        lock = SkillLock(lock_path=Path(tmpdir) / "skills.lock")
        lock.add_entry(
            name="demo", source="https://example.com/demo.md", path=skills_dir / "demo", files=["demo.md"]
        )

        skills = {s.name: s for s in list_skills(skills_dir, lock=lock)}

        assert skills["demo"].source == "https://example.com/demo.md"
        assert skills["manual"].source is None


def test_list_skill_names():
    with tempfile.TemporaryDirectory() as tmpdir:
        skills_dir = Path(tmpdir)
        (skills_dir / "b").mkdir()
        (skills_dir / "a").mkdir()

        assert list_skill_names(skills_dir) == ["a", "b"]

"""Tests for agent inheritance (the distribution copier)."""

import tempfile
from pathlib import Path

import pytest

from ai_handbook.config import HandbookLayout
from ai_handbook.distribution.inherit import (
    inherit,
    inherit_agents,
    resolve_source_dir,
    try_inherit_agents,
)
from ai_handbook.errors import SourceNotFoundError


def _write_agents(directory: Path, names: list[str]) -> None:
    directory.mkdir(parents=True, exist_ok=True)
    for name in names:
        (directory / name).write_text(f"# {name}\n")


def _snapshot(directory: Path) -> dict[str, bytes]:
    return {p.name: p.read_bytes() for p in directory.iterdir()}


def test_inherit_copies_documents():
    with tempfile.TemporaryDirectory() as tmpdir:
        source = Path(tmpdir) / "agents"
        target = Path(tmpdir) / "project" / ".claude" / "agents"
        _write_agents(source, ["a.md", "b.md", "README.md", "notes.txt"])

        report = inherit(source, target)

        assert report.count == 2
        assert sorted(report.succeeded) == ["a.md", "b.md"]
        assert report.failed == []
        assert (target / "a.md").read_text() == "# a.md\n"
        assert not (target / "README.md").exists()
        assert not (target / "notes.txt").exists()


def test_inherit_is_idempotent():
    with tempfile.TemporaryDirectory() as tmpdir:
        source = Path(tmpdir) / "agents"
        target = Path(tmpdir) / "target"
        _write_agents(source, ["a.md", "b.md", "c.md"])

        inherit(source, target)
        first = _snapshot(target)
        inherit(source, target)
        assert _snapshot(target) == first


def test_inherit_overwrites_existing_target_files():
    with tempfile.TemporaryDirectory() as tmpdir:
        source = Path(tmpdir) / "agents"
        target = Path(tmpdir) / "target"
        _write_agents(source, ["a.md"])
        target.mkdir()
        (target / "a.md").write_text("local edits")

        inherit(source, target)
        assert (target / "a.md").read_text() == "# a.md\n"


def test_inherit_continues_past_failures(monkeypatch):
    with tempfile.TemporaryDirectory() as tmpdir:
        source = Path(tmpdir) / "agents"
        target = Path(tmpdir) / "target"
        names = ["a.md", "b.md", "broken.md", "c.md"]
        _write_agents(source, names)

        original = Path.read_text

        def flaky_read(self, *args, **kwargs):
            if self.name == "broken.md" and self.parent == source:
                raise PermissionError(13, "Permission denied", str(self))
            return original(self, *args, **kwargs)

        monkeypatch.setattr(Path, "read_text", flaky_read)
        report = inherit(source, target)

        assert report.count == len(names) - 1
        assert [name for name, _ in report.failed] == ["broken.md"]
        assert "Permission denied" in report.failed[0][1]
        for name in ["a.md", "b.md", "c.md"]:
            assert (target / name).read_text() == f"# {name}\n"
        assert not (target / "broken.md").exists()


def test_present_includes_files_from_other_sources():
    with tempfile.TemporaryDirectory() as tmpdir:
        source = Path(tmpdir) / "agents"
        target = Path(tmpdir) / "target"
        _write_agents(source, ["a.md"])
        _write_agents(target, ["local.md"])

        report = inherit(source, target)
        assert report.succeeded == ["a.md"]
        assert sorted(report.present) == ["a.md", "local.md"]


def test_resolve_prefers_vendored_copy():
    with tempfile.TemporaryDirectory() as tmpdir:
        cwd = Path(tmpdir) / "project"
        vendored = cwd / "vendor" / "ai-handbook" / "agents"
        _write_agents(vendored, ["v.md"])
        bundled_root = Path(tmpdir) / "bundled"
        _write_agents(bundled_root / "agents", ["b.md"])

        layout = HandbookLayout(install_root=bundled_root)
        assert resolve_source_dir("agents", cwd=cwd, layout=layout) == vendored


def test_resolve_falls_back_to_install_root():
    with tempfile.TemporaryDirectory() as tmpdir:
        cwd = Path(tmpdir) / "project"
        cwd.mkdir()
        bundled_root = Path(tmpdir) / "bundled"
        _write_agents(bundled_root / "agents", ["b.md"])

        layout = HandbookLayout(install_root=bundled_root)
        assert resolve_source_dir("agents", cwd=cwd, layout=layout) == bundled_root / "agents"


def test_resolve_missing_raises():
    with tempfile.TemporaryDirectory() as tmpdir:
        layout = HandbookLayout(install_root=Path(tmpdir) / "nowhere")
        with pytest.raises(SourceNotFoundError):
            resolve_source_dir("agents", cwd=tmpdir, layout=layout)


def test_inherit_agents_default_target():
    with tempfile.TemporaryDirectory() as tmpdir:
        cwd = Path(tmpdir) / "project"
        cwd.mkdir()
        bundled_root = Path(tmpdir) / "bundled"
        _write_agents(bundled_root / "agents", ["one.md", "two.md"])

        report = inherit_agents(cwd=cwd, layout=HandbookLayout(install_root=bundled_root))
        assert report.count == 2
        assert report.target_dir == cwd / ".claude" / "agents"
        assert (cwd / ".claude" / "agents" / "one.md").exists()


def test_try_inherit_agents_reports_instead_of_raising():
    with tempfile.TemporaryDirectory() as tmpdir:
        missing = HandbookLayout(install_root=Path(tmpdir) / "nowhere")
        result = try_inherit_agents(cwd=tmpdir, layout=missing)
        assert result["success"] is False
        assert "Could not find agents directory" in result["message"]

        bundled_root = Path(tmpdir) / "bundled"
        _write_agents(bundled_root / "agents", ["one.md"])
        result = try_inherit_agents(cwd=tmpdir, layout=HandbookLayout(install_root=bundled_root))
        assert result["success"] is True

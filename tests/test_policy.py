"""Tests for the CLAUDE.md policy inheritance check."""

import tempfile
from pathlib import Path

from ai_handbook.policy import validate_policy, validate_policy_file


def test_declaration_on_first_line():
    result = validate_policy("Inherits: @ascendvent/ai-handbook\n# Project\nbody...")
    assert result.valid
    assert not result.warning


def test_leading_blank_lines_are_ignored():
    result = validate_policy("\n\n  Inherits: @ascendvent/ai-handbook\nbody")
    assert result.valid
    assert not result.warning


def test_declaration_elsewhere_warns():
    result = validate_policy("# Project\nbody...\nInherits: @ascendvent/ai-handbook")
    assert result.valid
    assert result.warning
    assert "first line" in result.message


def test_package_name_alone_warns():
    result = validate_policy("# Project\nWe follow @ascendvent/ai-handbook rules.")
    assert result.valid
    assert result.warning


def test_no_declaration_is_invalid():
    result = validate_policy("# Project\nno mention")
    assert not result.valid
    assert not result.warning
    assert "Inherits: @ascendvent/ai-handbook" in result.message


def test_empty_document_is_invalid():
    assert not validate_policy("").valid


def test_validate_policy_file():
    with tempfile.TemporaryDirectory() as tmpdir:
        path = Path(tmpdir) / "CLAUDE.md"
        path.write_text("Inherits: @ascendvent/ai-handbook\n")
        assert validate_policy_file(path).valid

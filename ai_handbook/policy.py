"""Policy inheritance check for a consumer project's ``CLAUDE.md``.

A consumer declares that it extends the handbook with an
``Inherits: @ascendvent/ai-handbook`` line. The declaration belongs on the
first line; a declaration found anywhere else is still accepted but flagged
with a warning.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from ai_handbook.config import PACKAGE_NAME

INHERITS_PREFIX = "Inherits:"
INHERITANCE_MARKER = f"{INHERITS_PREFIX} {PACKAGE_NAME}"


@dataclass
class PolicyCheck:
    """Result of checking one document for the inheritance declaration."""

    valid: bool
    message: str
    warning: bool = False


def validate_policy(text: str) -> PolicyCheck:
    """Check *text* for the inheritance declaration.

    Only line-splitting and substring search; nothing is parsed.
    """
    lines = text.strip().split("\n")
    first_line = lines[0] if lines else ""

    if INHERITANCE_MARKER in first_line:
        return PolicyCheck(
            valid=True,
            message="Policy inheritance correctly declared on first line",
        )

    if INHERITS_PREFIX in text or PACKAGE_NAME in text:
        return PolicyCheck(
            valid=True,
            warning=True,
            message="Policy inheritance found but should be on first line of CLAUDE.md",
        )

    return PolicyCheck(
        valid=False,
        message=f'No policy inheritance found. Add "{INHERITANCE_MARKER}" as first line',
    )


def validate_policy_file(path: str | Path) -> PolicyCheck:
    """Read *path* and run :func:`validate_policy` on its contents."""
    return validate_policy(Path(path).read_text(encoding="utf-8"))

"""Refactoring analysis report — scan a repo's scope and write a markdown report.

The report records which files are in scope and lays out the sections
reviewers fill in (duplication, dead code, architecture, consolidation).
"""

from __future__ import annotations

import fnmatch
import os
from collections import Counter
from datetime import datetime, timezone
from pathlib import Path

DEFAULT_REPORT = "docs/reports/refactor-analysis.md"
DEFAULT_INCLUDE = "client/**,server/**,src/**"
DEFAULT_EXCLUDE = (
    "**/node_modules/**,**/dist/**,**/build/**,**/.next/**,**/coverage/**,**/generated/**"
)

# Directories to always skip
SKIP_DIRS = {".git", "__pycache__", "node_modules", ".venv", "venv", ".tox"}

# File extensions we care about, mapped to language
LANGUAGE_MAP = {
    ".py": "python",
    ".js": "javascript",
    ".cjs": "javascript",
    ".mjs": "javascript",
    ".jsx": "javascript",
    ".ts": "typescript",
    ".tsx": "typescript",
    ".go": "go",
    ".rs": "rust",
    ".java": "java",
    ".rb": "ruby",
    ".sh": "shell",
}

_SECTIONS = [
    ("DRY Violations Found", "DRY (duplicate-code)"),
    ("Dead Code Identified", "Dead code (unused exports/imports, orphaned files)"),
    ("Architecture Quality Notes", "Architecture (circular deps, cohesion)"),
    ("Consolidation Opportunities", "Consolidation (shared utils/hooks/components)"),
]

_RECOMMENDED = """\
1. Create branch `refactor/focus-area`.
2. Remove dead code and unused exports.
3. Extract shared utilities/components.
4. Add/adjust tests to keep coverage bar green."""


def _split(value: str) -> list[str]:
    return [p.strip() for p in value.split(",") if p.strip()]


def _glob_match(rel: str, pattern: str) -> bool:
    # Leading "**/" should also match at the repo root.
    return fnmatch.fnmatch(rel, pattern) or fnmatch.fnmatch(f"/{rel}", pattern)


def scan_scope(root: Path, include: list[str], exclude: list[str]) -> list[Path]:
    """Return source files under *root* matching *include* and not *exclude*."""
    files = []
    for item in root.rglob("*"):
        if not item.is_file() or item.suffix not in LANGUAGE_MAP:
            continue
        if any(part in SKIP_DIRS for part in item.relative_to(root).parts):
            continue
        rel = item.relative_to(root).as_posix()
        if not any(_glob_match(rel, p) for p in include):
            continue
        if any(_glob_match(rel, p) for p in exclude):
            continue
        files.append(item)
    return sorted(files)


def _section(title: str, body: str) -> str:
    return f"## {title}\n\n{body}\n\n"


def _inventory(files: list[Path]) -> str:
    if not files:
        return "No source files matched the configured scope."
    counts = Counter(LANGUAGE_MAP[f.suffix] for f in files)
    rows = ["| Language | Files |", "|----------|-------|"]
    rows.extend(f"| {lang} | {n} |" for lang, n in sorted(counts.items()))
    return "\n".join(rows)


def write_analysis_report(
    root: str | Path = ".",
    report_path: str | Path | None = None,
    include: list[str] | None = None,
    exclude: list[str] | None = None,
) -> Path:
    """Scan *root* and write the refactoring analysis report.

    Unset arguments fall back to the ``REPORT_PATH``, ``INCLUDE`` and
    ``EXCLUDE`` environment variables, then to the built-in defaults.
    A relative *report_path* is resolved against *root*.

    Returns:
        Path of the written report.
    """
    root = Path(root)
    report = Path(report_path or os.getenv("REPORT_PATH") or DEFAULT_REPORT)
    if not report.is_absolute():
        report = root / report
    include = include or _split(os.getenv("INCLUDE") or DEFAULT_INCLUDE)
    exclude = exclude or _split(os.getenv("EXCLUDE") or DEFAULT_EXCLUDE)

    files = scan_scope(root, include, exclude)
    generated = datetime.now(timezone.utc).isoformat()

    md = (
        "# Refactoring Analysis Report\n\n"
        f"Generated: {generated}\n\n"
        f"> Scope include: {', '.join(include)}\n"
        f"> Scope exclude: {', '.join(exclude)}\n\n"
    )
    md += _section(f"Scope Inventory ({len(files)} files)", _inventory(files))
    for title, analyzer in _SECTIONS:
        md += _section(title, f"- No {analyzer} analyzer configured; list findings here.")
    md += _section("Recommended Actions (Prioritized)", _RECOMMENDED)

    report.parent.mkdir(parents=True, exist_ok=True)
    report.write_text(md, encoding="utf-8")
    return report

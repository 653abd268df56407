"""Agent inheritance — copy handbook agents into a consumer's ``.claude/agents``.

The copy is a full overwrite on every run: no merging, no diffing, no conflict
detection. Re-running with unchanged sources leaves the target unchanged.

A document that fails to copy is logged and recorded in the report, and the
batch carries on with the next one; re-running recovers it.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from ai_handbook.config import (
    AGENTS_TARGET,
    PACKAGE_NAME,
    VENDORED_COPY,
    HandbookLayout,
    list_documents,
)
from ai_handbook.errors import HandbookError, SourceNotFoundError

logger = logging.getLogger(__name__)


@dataclass
class CopyReport:
    """Outcome of one inheritance run."""

    source_dir: Path
    target_dir: Path
    succeeded: list[str] = field(default_factory=list)
    failed: list[tuple[str, str]] = field(default_factory=list)
    present: list[str] = field(default_factory=list)
    """Documents found in the target afterwards, including ones from earlier runs."""

    @property
    def count(self) -> int:
        return len(self.succeeded)

    def summary(self) -> str:
        return f"{self.count} copied, {len(self.failed)} failed, {len(self.present)} present"


def resolve_source_dir(
    category: str = "agents",
    cwd: str | Path | None = None,
    layout: HandbookLayout | None = None,
) -> Path:
    """Find the directory to copy *category* documents from.

    A vendored copy under ``<cwd>/vendor/ai-handbook`` wins; otherwise the
    layout's own install root is used.

    Raises:
        SourceNotFoundError: If neither candidate is an existing directory.
    """
    cwd = Path(cwd) if cwd is not None else Path.cwd()
    layout = layout or HandbookLayout.default()

    vendored = cwd / VENDORED_COPY / layout.category_dirs.get(category, category)
    if vendored.is_dir():
        logger.debug("Using vendored %s from %s", category, vendored)
        return vendored

    bundled = layout.category_dir(category)
    if bundled.is_dir():
        logger.debug("Using bundled %s from %s", category, bundled)
        return bundled

    raise SourceNotFoundError(
        f"Could not find {category} directory in {PACKAGE_NAME} package"
    )


def inherit(source_dir: str | Path, target_dir: str | Path) -> CopyReport:
    """Copy every document in *source_dir* into *target_dir*, overwriting.

    The target directory (and any parents) is created if needed.
    """
    source = Path(source_dir)
    target = Path(target_dir)
    target.mkdir(parents=True, exist_ok=True)

    report = CopyReport(source_dir=source, target_dir=target)

    for name in list_documents(source):
        try:
            content = (source / name).read_text(encoding="utf-8")
            (target / name).write_text(content, encoding="utf-8")
        except (OSError, UnicodeError) as e:
            logger.warning("Failed to copy %s: %s", name, e)
            report.failed.append((name, str(e)))
            continue
        logger.info("Inherited agent: %s", name)
        report.succeeded.append(name)

    report.present = list_documents(target)
    return report


def inherit_agents(
    target_dir: str | Path | None = None,
    cwd: str | Path | None = None,
    layout: HandbookLayout | None = None,
) -> CopyReport:
    """Copy the handbook agents into ``<cwd>/.claude/agents`` (or *target_dir*).

    Raises:
        SourceNotFoundError: If no agents directory can be resolved.
    """
    cwd = Path(cwd) if cwd is not None else Path.cwd()
    source = resolve_source_dir("agents", cwd=cwd, layout=layout)
    target = Path(target_dir) if target_dir is not None else cwd / AGENTS_TARGET
    return inherit(source, target)


def try_inherit_agents(
    target_dir: str | Path | None = None,
    cwd: str | Path | None = None,
    layout: HandbookLayout | None = None,
) -> dict:
    """Embedding-friendly wrapper around :func:`inherit_agents`.

    Returns ``{"success": bool, "message": str}`` instead of raising.
    """
    try:
        report = inherit_agents(target_dir=target_dir, cwd=cwd, layout=layout)
    except (HandbookError, OSError) as e:
        return {"success": False, "message": str(e)}
    return {
        "success": True,
        "message": f"Agents inherited successfully ({report.summary()})",
    }

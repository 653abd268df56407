"""Constraint evaluation for package manifests.

Constraints are data (see ``variants.yaml``). Each names an ``op``, an
optional dotted ``field`` path into the manifest, an expected ``value`` and a
``message`` template. Only the first failing constraint is ever reported.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, Optional

from ai_handbook.config import is_document

_MISSING = object()


@dataclass
class Constraint:
    """A single named check against a manifest."""

    name: str
    op: str
    message: str
    field: str = ""  # Dotted path, e.g. "publishConfig.registry"
    value: Any = None


@dataclass
class Variant:
    """An ordered constraint list for one deployment target."""

    name: str
    constraints: list[Constraint] = field(default_factory=list)
    summary: list[str] = field(default_factory=list)
    description: str = ""


@dataclass
class ManifestCheck:
    """Outcome of evaluating a manifest against one variant."""

    variant: str
    passed: bool
    message: str = ""
    failed: Optional[Constraint] = None
    summary: list[str] = field(default_factory=list)


def lookup(manifest: dict, path: str) -> Any:
    """Resolve a dotted *path* in *manifest*; missing keys yield ``None``."""
    node: Any = manifest
    for part in path.split("."):
        if not isinstance(node, dict):
            return None
        node = node.get(part, _MISSING)
        if node is _MISSING:
            return None
    return node


# ---------------------------------------------------------------------------
# Operations
#
# Each returns None when the constraint holds, or a dict of values for the
# message template when it does not.
# ---------------------------------------------------------------------------


def _startswith(c: Constraint, manifest: dict, root: Path) -> dict | None:
    actual = lookup(manifest, c.field)
    if isinstance(actual, str) and actual.startswith(c.value):
        return None
    return {"actual": actual}


def _equals(c: Constraint, manifest: dict, root: Path) -> dict | None:
    actual = lookup(manifest, c.field)
    return None if actual == c.value else {"actual": actual}


def _not_equals(c: Constraint, manifest: dict, root: Path) -> dict | None:
    actual = lookup(manifest, c.field)
    return None if actual != c.value else {"actual": actual}


def _includes_all(c: Constraint, manifest: dict, root: Path) -> dict | None:
    declared = lookup(manifest, c.field)
    if not isinstance(declared, list):
        declared = []
    missing = [name for name in c.value if name not in declared]
    return {"missing": ", ".join(missing)} if missing else None


def _paths_exist(c: Constraint, manifest: dict, root: Path) -> dict | None:
    missing = [p for p in c.value if not (root / p).exists()]
    return {"missing": ", ".join(missing)} if missing else None


def _has_documents(c: Constraint, manifest: dict, root: Path) -> dict | None:
    directory = root / c.value
    if directory.is_dir() and any(
        p.is_file() and is_document(p.name) for p in directory.iterdir()
    ):
        return None
    return {}


def _file_exists(c: Constraint, manifest: dict, root: Path) -> dict | None:
    return None if (root / c.value).is_file() else {}


OPERATIONS: dict[str, Callable[[Constraint, dict, Path], Optional[dict]]] = {
    "startswith": _startswith,
    "equals": _equals,
    "not_equals": _not_equals,
    "includes_all": _includes_all,
    "paths_exist": _paths_exist,
    "has_documents": _has_documents,
    "file_exists": _file_exists,
}


def check_manifest(
    manifest: dict,
    variant: Variant,
    root: str | Path | None = None,
) -> ManifestCheck:
    """Evaluate *variant*'s constraints in order, stopping at the first failure.

    Args:
        manifest: Parsed manifest mapping.
        variant: The constraint list to apply.
        root: Package root for filesystem constraints (defaults to cwd).
    """
    root = Path(root) if root is not None else Path.cwd()

    for constraint in variant.constraints:
        failure = OPERATIONS[constraint.op](constraint, manifest, root)
        if failure is None:
            continue
        context = {"missing": "", "actual": None, "value": constraint.value}
        context.update(failure)
        return ManifestCheck(
            variant=variant.name,
            passed=False,
            message=constraint.message.format(**context),
            failed=constraint,
        )

    fields = {
        "name": manifest.get("name", ""),
        "version": manifest.get("version", ""),
    }
    return ManifestCheck(
        variant=variant.name,
        passed=True,
        message=f"{fields['name']}@{fields['version']} passed {variant.name} validation",
        summary=[line.format(**fields) for line in variant.summary],
    )

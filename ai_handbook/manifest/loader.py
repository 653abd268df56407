"""Load manifests and variant tables from disk."""

from __future__ import annotations

import json
import string
from pathlib import Path

import yaml

from ai_handbook.errors import ManifestError, UnknownVariantError, VariantError
from ai_handbook.manifest.constraints import (
    OPERATIONS,
    Constraint,
    ManifestCheck,
    Variant,
    check_manifest,
)

DEFAULT_MANIFEST = "handbook.json"
VARIANTS_FILE = Path(__file__).resolve().parent / "variants.yaml"
YAML_SUFFIXES = {".yml", ".yaml"}

# Placeholders available to constraint messages and success summary lines
MESSAGE_FIELDS = {"missing", "actual", "value"}
SUMMARY_FIELDS = {"name", "version"}


def load_manifest(path: str | Path) -> dict:
    """Parse a manifest: YAML for ``.yml``/``.yaml`` files, JSON otherwise.

    Raises:
        ManifestError: If the file is missing, unparsable, or not a mapping.
    """
    path = Path(path)
    if not path.is_file():
        raise ManifestError(f"Manifest not found: {path}")

    try:
        with open(path, encoding="utf-8") as f:
            if path.suffix.lower() in YAML_SUFFIXES:
                data = yaml.safe_load(f)
            else:
                data = json.load(f)
    except (json.JSONDecodeError, yaml.YAMLError, UnicodeDecodeError) as e:
        raise ManifestError(f"Invalid manifest {path}: {e}") from e

    if not isinstance(data, dict):
        raise ManifestError(f"Manifest {path} must be a mapping of keys to values")
    return data


def _check_placeholders(template: str, allowed: set[str], where: str) -> None:
    try:
        names = {name for _, name, _, _ in string.Formatter().parse(template) if name is not None}
    except ValueError as e:
        raise VariantError(f"{where}: malformed template {template!r}: {e}") from e
    unknown = names - allowed
    if unknown:
        raise VariantError(
            f"{where}: unknown placeholder(s) {', '.join(sorted(unknown))} in {template!r}"
        )


def load_variants(path: str | Path | None = None) -> dict[str, Variant]:
    """Load the variant tables, keyed by variant name.

    Raises:
        VariantError: If the file is missing, unparsable, or defines an
            unknown op or message placeholder.
    """
    path = Path(path) if path is not None else VARIANTS_FILE
    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except OSError as e:
        raise VariantError(f"Cannot read variants file {path}: {e.strerror or e}") from e
    except (yaml.YAMLError, UnicodeDecodeError) as e:
        raise VariantError(f"Invalid variants file {path}: {e}") from e

    if not isinstance(data, dict) or not isinstance(data.get("variants") or {}, dict):
        raise VariantError(f"Variants file {path} must map 'variants' to named tables")

    variants: dict[str, Variant] = {}
    for name, entry in (data.get("variants") or {}).items():
        if not isinstance(entry, dict):
            raise VariantError(f"Variant {name!r} must be a mapping")
        constraints = []
        for i, raw in enumerate(entry.get("constraints", [])):
            where = f"Variant {name!r} constraint {i + 1}"
            if not isinstance(raw, dict):
                raise VariantError(f"{where}: must be a mapping")
            op = raw.get("op", "")
            if op not in OPERATIONS:
                raise VariantError(f"{where}: unknown op {op!r}")
            message = raw.get("message", f"Constraint {op} failed")
            _check_placeholders(message, MESSAGE_FIELDS, where)
            constraints.append(
                Constraint(
                    name=raw.get("name", f"{name}-{i + 1}"),
                    op=op,
                    message=message,
                    field=raw.get("field", ""),
                    value=raw.get("value"),
                )
            )
        summary = entry.get("summary", [])
        for line in summary:
            _check_placeholders(line, SUMMARY_FIELDS, f"Variant {name!r} summary")
        variants[name] = Variant(
            name=name,
            constraints=constraints,
            summary=summary,
            description=entry.get("description", ""),
        )
    return variants


def validate_manifest(
    manifest_path: str | Path = DEFAULT_MANIFEST,
    variant: str = "github",
    root: str | Path | None = None,
    variants_path: str | Path | None = None,
) -> ManifestCheck:
    """Load the manifest at *manifest_path* and check it against *variant*.

    Filesystem constraints resolve relative to *root*, which defaults to the
    manifest's directory.

    Raises:
        ManifestError: If the manifest cannot be loaded.
        UnknownVariantError: If *variant* is not defined.
        VariantError: If the variant tables cannot be loaded.
    """
    variants = load_variants(variants_path)
    if variant not in variants:
        raise UnknownVariantError(
            f"Unknown variant {variant!r}. Choose one of: {', '.join(sorted(variants))}"
        )

    manifest = load_manifest(manifest_path)
    if root is None:
        root = Path(manifest_path).resolve().parent
    return check_manifest(manifest, variants[variant], root=root)

"""Manifest validation — fail-fast precondition checks run before publishing.

Each deployment variant is a list of constraints in ``variants.yaml``; one
generic evaluator walks the list and stops at the first violation.
"""

from ai_handbook.manifest.constraints import (
    Constraint,
    ManifestCheck,
    Variant,
    check_manifest,
)
from ai_handbook.manifest.loader import load_manifest, load_variants, validate_manifest

__all__ = [
    "Constraint",
    "ManifestCheck",
    "Variant",
    "check_manifest",
    "load_manifest",
    "load_variants",
    "validate_manifest",
]

"""Refactor tooling — analysis report scaffold and refactor branch helper."""

from ai_handbook.refactor.analysis import scan_scope, write_analysis_report
from ai_handbook.refactor.git_ops import create_refactor_branch

__all__ = ["create_refactor_branch", "scan_scope", "write_analysis_report"]

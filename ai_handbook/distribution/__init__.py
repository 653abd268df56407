"""Distribution — copy handbook documents into consumer projects."""

from ai_handbook.distribution.inherit import (
    CopyReport,
    inherit,
    inherit_agents,
    resolve_source_dir,
    try_inherit_agents,
)

__all__ = [
    "CopyReport",
    "inherit",
    "inherit_agents",
    "resolve_source_dir",
    "try_inherit_agents",
]

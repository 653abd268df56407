"""Handbook layout — where the markdown documents live.

Every accessor and the distribution copier take a :class:`HandbookLayout`
instead of assuming a fixed location, so the same code serves the packaged
content, a development checkout, and temporary directories in tests.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

# Environment variable overriding the default install root
ROOT_ENV_VAR = "AI_HANDBOOK_ROOT"

DEFAULT_POLICY = "CLAUDE_GLOBAL.md"
TEMPLATE_NAME = "CLAUDE.template.md"
DOCUMENT_SUFFIX = ".md"
RESERVED_NAME = "README.md"

# Consumer-side locations, relative to the working directory
VENDORED_COPY = Path("vendor") / "ai-handbook"
AGENTS_TARGET = Path(".claude") / "agents"

PACKAGE_SCOPE = "@ascendvent/"
PACKAGE_NAME = "@ascendvent/ai-handbook"

_DEFAULT_CATEGORIES = {
    "agents": "agents",
    "templates": "templates",
    "playbooks": "playbooks",
}


def packaged_root() -> Path:
    """Return the ``content/`` directory shipped inside the package."""
    return Path(__file__).resolve().parent / "content"


@dataclass(frozen=True)
class HandbookLayout:
    """Install root plus the category directories beneath it."""

    install_root: Path
    category_dirs: dict[str, str] = field(default_factory=lambda: dict(_DEFAULT_CATEGORIES))

    @classmethod
    def default(cls) -> "HandbookLayout":
        """Layout for the packaged content, honouring ``AI_HANDBOOK_ROOT``."""
        env_root = os.getenv(ROOT_ENV_VAR)
        if env_root:
            return cls(install_root=Path(env_root))
        return cls(install_root=packaged_root())

    def category_dir(self, category: str) -> Path:
        """Return the directory for *category* (``agents``, ``templates``, ...)."""
        try:
            return self.install_root / self.category_dirs[category]
        except KeyError:
            raise ValueError(f"Unknown document category: {category}") from None

    def root_file(self, name: str) -> Path:
        return self.install_root / name


def is_document(name: str) -> bool:
    """True for markdown documents other than the reserved README."""
    return name.endswith(DOCUMENT_SUFFIX) and name != RESERVED_NAME


def list_documents(directory: Path) -> list[str]:
    """List document filenames in *directory*.

    Order is whatever ``os.listdir`` returns, which is filesystem-dependent
    and not sorted.
    """
    return [name for name in os.listdir(directory) if is_document(name)]

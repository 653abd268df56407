"""Accessor library — read handbook documents by category.

Pure read wrappers: nothing is cached, every call goes back to storage, and a
missing document surfaces as :class:`FileNotFoundError`.
"""

from __future__ import annotations

from ai_handbook.config import (
    DEFAULT_POLICY,
    DOCUMENT_SUFFIX,
    TEMPLATE_NAME,
    HandbookLayout,
    list_documents,
)


def _normalize(name: str) -> str:
    return name if name.endswith(DOCUMENT_SUFFIX) else f"{name}{DOCUMENT_SUFFIX}"


class Handbook:
    """Read-only view over one handbook layout."""

    def __init__(self, layout: HandbookLayout | None = None):
        self.layout = layout or HandbookLayout.default()

    def get_policy(self, name: str = DEFAULT_POLICY) -> str:
        """Return the contents of a policy file at the install root."""
        return self.layout.root_file(name).read_text(encoding="utf-8")

    def get_claude_global(self) -> str:
        return self.get_policy(DEFAULT_POLICY)

    def get_template(self) -> str:
        """Return the consumer ``CLAUDE.md`` template."""
        path = self.layout.category_dir("templates") / TEMPLATE_NAME
        return path.read_text(encoding="utf-8")

    def get_agent(self, name: str) -> str:
        """Return an agent document; the ``.md`` suffix is optional."""
        path = self.layout.category_dir("agents") / _normalize(name)
        return path.read_text(encoding="utf-8")

    def get_playbook(self, name: str) -> str:
        path = self.layout.category_dir("playbooks") / _normalize(name)
        return path.read_text(encoding="utf-8")

    def get_available_agents(self) -> list[str]:
        """Agent filenames, excluding ``README.md``, in directory-listing order."""
        return list_documents(self.layout.category_dir("agents"))

    def get_available_playbooks(self) -> list[str]:
        return list_documents(self.layout.category_dir("playbooks"))


# ── Module-level surface ─────────────────────────────────────────────


def get_policy(name: str = DEFAULT_POLICY, layout: HandbookLayout | None = None) -> str:
    return Handbook(layout).get_policy(name)


def get_claude_global(layout: HandbookLayout | None = None) -> str:
    return Handbook(layout).get_claude_global()


def get_template(layout: HandbookLayout | None = None) -> str:
    return Handbook(layout).get_template()


def get_agent(name: str, layout: HandbookLayout | None = None) -> str:
    return Handbook(layout).get_agent(name)


def get_playbook(name: str, layout: HandbookLayout | None = None) -> str:
    return Handbook(layout).get_playbook(name)


def get_available_agents(layout: HandbookLayout | None = None) -> list[str]:
    return Handbook(layout).get_available_agents()


def get_available_playbooks(layout: HandbookLayout | None = None) -> list[str]:
    return Handbook(layout).get_available_playbooks()

"""ai-handbook — global AI engineering guardrails, agents and templates.

The package ships the handbook markdown under ``content/`` together with the
utilities that read it, distribute agents into consumer projects, check
inheritance declarations and validate the publishing manifest.
"""

__version__ = "1.3.0"

from ai_handbook.library import (
    Handbook,
    get_agent,
    get_available_agents,
    get_available_playbooks,
    get_claude_global,
    get_playbook,
    get_policy,
    get_template,
)
from ai_handbook.distribution.inherit import inherit, inherit_agents, try_inherit_agents
from ai_handbook.policy import validate_policy

__all__ = [
    "__version__",
    "Handbook",
    "get_agent",
    "get_available_agents",
    "get_available_playbooks",
    "get_claude_global",
    "get_playbook",
    "get_policy",
    "get_template",
    "inherit",
    "inherit_agents",
    "try_inherit_agents",
    "validate_policy",
]

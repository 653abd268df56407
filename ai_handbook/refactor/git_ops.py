"""Git operations for refactor branches."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from git import GitCommandError, InvalidGitRepositoryError, NoSuchPathError, Repo

logger = logging.getLogger(__name__)

DEFAULT_SCOPE = "general-cleanup"


def create_refactor_branch(repo_path: str | Path = ".", scope: str | None = None) -> str:
    """Create ``refactor/<scope>``, stage everything and commit it.

    *scope* falls back to the ``SCOPE`` environment variable, then to
    ``general-cleanup``. A clean tree is not an error: the branch is still
    created, just without a new commit.

    Returns:
        The branch name.

    Raises:
        ValueError: If *repo_path* is not a Git repository or the branch
            cannot be created (e.g. it already exists).
    """
    scope = scope or os.getenv("SCOPE") or DEFAULT_SCOPE
    branch = f"refactor/{scope}"

    try:
        repo = Repo(repo_path)
    except (InvalidGitRepositoryError, NoSuchPathError):
        raise ValueError(f"Not a Git repo: {repo_path}") from None

    try:
        repo.git.checkout("-b", branch)
    except GitCommandError as e:
        raise ValueError(f"Cannot create branch {branch}: {e}") from e
    repo.git.add(A=True)
    try:
        repo.git.commit(m=f"refactor: {scope} (automated branch creation)")
    except GitCommandError as e:
        logger.info("Nothing committed on %s: %s", branch, e)
    return branch

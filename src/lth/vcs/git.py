"""
Create a git repository holding the freshly scaffolded files.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import List, Mapping, Optional

from git import Actor, Repo
from git.exc import GitError

logger = logging.getLogger(__name__)

DEFAULT_COMMIT_MESSAGE = "Initial commit"


class VcsError(RuntimeError):
    """Raised when the repository cannot be initialized or committed."""


def _tracked_paths(root: Path) -> List[str]:
    """Every file under root except the .git directory, as sorted posix paths."""
    paths: List[str] = []
    for dirpath, dirnames, filenames in os.walk(root):
        dirnames[:] = sorted(name for name in dirnames if name != ".git")
        for filename in filenames:
            paths.append((Path(dirpath) / filename).relative_to(root).as_posix())
    return sorted(paths)


def resolve_signature(repo: Repo, environ: Optional[Mapping[str, str]] = None) -> Actor:
    """
    Build the commit identity from the environment or the git configuration.

    GIT_AUTHOR_NAME / GIT_AUTHOR_EMAIL win over user.name / user.email.

    Raises:
        VcsError: If either the name or the email cannot be determined.
    """
    env = os.environ if environ is None else environ
    name = env.get("GIT_AUTHOR_NAME", "")
    email = env.get("GIT_AUTHOR_EMAIL", "")
    if not (name and email):
        with repo.config_reader() as reader:
            name = name or str(reader.get_value("user", "name", default=""))
            email = email or str(reader.get_value("user", "email", default=""))
    if not name or not email:
        raise VcsError("no git identity configured (set user.name and user.email)")
    return Actor(name, email)


class GitInitializer:
    """
    Initialize a repository, stage every file, and create one commit.

    Staging lists the files explicitly, so a freshly written .gitignore does
    not filter anything out.
    """

    def __init__(self, commit_message: str = DEFAULT_COMMIT_MESSAGE) -> None:
        self.commit_message = commit_message

    def initialize(self, root: Path | str) -> str:
        """
        Returns:
            The hexsha of the created commit.

        Raises:
            VcsError: If init, staging, signature lookup, or commit fails.
        """
        root = Path(root)
        try:
            repo = Repo.init(root)
            logger.info("Initialized a new git repository at %s", root)
            signature = resolve_signature(repo)
            paths = _tracked_paths(root)
            if paths:
                repo.index.add(paths)
                repo.index.write()
            logger.info("Added %d files to the repository", len(paths))
            commit = repo.index.commit(self.commit_message, author=signature, committer=signature)
        except VcsError:
            raise
        except (GitError, OSError, ValueError) as exc:
            raise VcsError(str(exc)) from exc
        logger.info("Committed the files to the repository (%s)", commit.hexsha[:7])
        return commit.hexsha

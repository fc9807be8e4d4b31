"""Git SCM provider."""

from __future__ import annotations

import logging
import threading
from concurrent.futures import Future
from typing import Dict, Optional

from ..errors import ScmNotImplementedError
from ..workspace import Folder, Project, Resource
from .base import FileStatus, ScmProjectOperations, ScmProvider

logger = logging.getLogger(__name__)


class GitScmProvider(ScmProvider):
    """Git provider; a project is under Git when it has a ``.git`` folder."""

    def __init__(self) -> None:
        self._operations: Dict[Project, GitScmProjectOperations] = {}
        self._lock = threading.Lock()

    @property
    def id(self) -> str:
        return "git"

    def is_under_scm(self, project: Project) -> bool:
        # Shallow: no parent walk, and a .git file (worktree pointer) does not count.
        return isinstance(project.get_child(".git"), Folder)

    def get_operations_for(self, project: Project) -> Optional["GitScmProjectOperations"]:
        with self._lock:
            operations = self._operations.get(project)
            if operations is None and self.is_under_scm(project):
                operations = GitScmProjectOperations(self, project)
                self._operations[project] = operations
                logger.debug(f"Created git operations for {project.path}")
            return operations

    def discard_operations(self, project: Project) -> bool:
        """Drop the cached operations for ``project``; return whether one existed."""
        with self._lock:
            removed = self._operations.pop(project, None) is not None
        if removed:
            logger.debug(f"Discarded git operations for {project.path}")
        return removed


class GitScmProjectOperations(ScmProjectOperations):
    """Git operations for one project."""

    def get_file_status(self, resource: Resource) -> "Future[FileStatus]":
        # TODO: map index and working-tree state (git status --porcelain) to FileStatus.
        future: "Future[FileStatus]" = Future()
        future.set_exception(ScmNotImplementedError("getFileStatus"))
        logger.debug(f"getFileStatus unavailable for {resource}")
        return future

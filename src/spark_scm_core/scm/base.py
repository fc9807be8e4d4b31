"""SCM abstraction base types.

This is a lowest-common-denominator interface. Some callers may need to use a
concrete provider type to get at provider-specific functionality.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from concurrent.futures import Future
from enum import Enum
from typing import Optional

from ..workspace import Project, Resource


class FileStatus(Enum):
    """SCM status of a file or folder."""

    COMMITTED = "committed"
    DIRTY = "dirty"
    UNKNOWN = "unknown"

    def __str__(self) -> str:
        return self.value


class ScmProvider(ABC):
    """A pluggable implementation supporting one kind of SCM."""

    @property
    @abstractmethod
    def id(self) -> str:
        """Short identifier of this provider, e.g. ``git``."""
        ...

    @abstractmethod
    def is_under_scm(self, project: Project) -> bool:
        """Return whether this provider manages the project.

        Implementations must return quickly: a cheap existence check at most.
        """
        ...

    @abstractmethod
    def get_operations_for(self, project: Project) -> Optional["ScmProjectOperations"]:
        """Return the operations bound to ``project``, or None if not managed."""
        ...

    def __repr__(self) -> str:
        return f"{type(self).__name__}(id={self.id!r})"


class ScmProjectOperations(ABC):
    """SCM operations bound to a single project."""

    def __init__(self, provider: ScmProvider, project: Project) -> None:
        self._provider = provider
        self._project = project

    @property
    def provider(self) -> ScmProvider:
        return self._provider

    @property
    def project(self) -> Project:
        return self._project

    @abstractmethod
    def get_file_status(self, resource: Resource) -> "Future[FileStatus]":
        """Return the SCM status for the given file or folder."""
        ...

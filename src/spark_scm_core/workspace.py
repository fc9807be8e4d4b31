"""Filesystem-backed workspace resource model.

Projects are top-level folders linked into a :class:`Workspace`. Resources are
lightweight handles over paths; they are not cached and always reflect what is
on disk at the time of the call.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Dict, List, Optional, Union

from .errors import ResourceNotFoundError

logger = logging.getLogger(__name__)


def absolute_path(path: Union[str, Path]) -> Path:
    """Absolute, normalized path; symlinks are kept as-is."""
    return Path(os.path.normpath(Path(path).absolute()))


class Resource:
    """A file or folder inside a project."""

    def __init__(self, path: Path, parent: Optional["Folder"] = None) -> None:
        self.path = absolute_path(path)
        self.parent = parent

    @property
    def name(self) -> str:
        return self.path.name

    @property
    def project(self) -> Optional["Project"]:
        """The project that owns this resource, if it was reached from one."""
        current: Optional[Resource] = self
        while current is not None:
            if isinstance(current, Project):
                return current
            current = current.parent
        return None

    def exists(self) -> bool:
        return self.path.exists()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Resource):
            return NotImplemented
        return type(self) is type(other) and self.path == other.path

    def __hash__(self) -> int:
        return hash((type(self).__name__, self.path))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({str(self.path)!r})"


class File(Resource):
    """A regular file."""


class Folder(Resource):
    """A directory that can contain other resources."""

    def _wrap(self, path: Path) -> Optional[Resource]:
        if path.is_dir():
            return Folder(path, parent=self)
        if path.is_file():
            return File(path, parent=self)
        return None

    def get_child(self, name: str) -> Optional[Resource]:
        """Return the direct child called ``name``, or None when absent."""
        return self._wrap(self.path / name)

    def get_children(self) -> List[Resource]:
        if not self.path.is_dir():
            return []
        children = []
        for entry in sorted(self.path.iterdir(), key=lambda p: p.name):
            child = self._wrap(entry)
            if child is not None:
                children.append(child)
        return children


class Project(Folder):
    """A top-level folder linked into a workspace."""

    def __init__(self, path: Path) -> None:
        super().__init__(path, parent=None)


class Workspace:
    """Set of linked projects."""

    def __init__(self) -> None:
        self._projects: Dict[Path, Project] = {}

    def link_project(self, path: Union[str, Path]) -> Project:
        """Link a directory as a project; linking the same root twice is a no-op."""
        root = absolute_path(path)
        existing = self._projects.get(root)
        if existing is not None:
            return existing
        if not root.is_dir():
            raise ResourceNotFoundError(root)
        project = Project(root)
        self._projects[root] = project
        logger.debug(f"Linked project {root}")
        return project

    def unlink_project(self, project: Project) -> bool:
        return self._projects.pop(project.path, None) is not None

    def get_projects(self) -> List[Project]:
        return list(self._projects.values())

    def resolve(self, path: Union[str, Path]) -> Resource:
        """Return the resource at ``path`` inside one of the linked projects.

        Paths are matched lexically, so symlinks inside a project stay in it.
        With nested projects the innermost one owns the resource.
        """
        target = absolute_path(path)
        owners = [root for root in self._projects if root == target or root in target.parents]
        if not owners:
            raise ResourceNotFoundError(target)
        root = max(owners, key=lambda r: len(r.parts))

        resource: Optional[Resource] = self._projects[root]
        for part in target.relative_to(root).parts:
            if not isinstance(resource, Folder):
                raise ResourceNotFoundError(target)
            resource = resource.get_child(part)
            if resource is None:
                raise ResourceNotFoundError(target)
        return resource

"""Exception taxonomy for spark-scm-core."""

from pathlib import Path


class ScmError(Exception):
    """Base exception for all SCM errors."""

    pass


# Config errors


class ConfigError(ScmError):
    """Failed to load configuration or build the provider registry."""

    pass


# Workspace errors


class ResourceNotFoundError(ScmError):
    """Path does not map to a resource in any linked project."""

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"Resource not found: {path}")


# SCM operation errors


class ScmNotImplementedError(ScmError):
    """SCM operation has no backing implementation."""

    def __init__(self, operation: str) -> None:
        self.operation = operation
        super().__init__(f"unimplemented - {operation}()")

"""Spark SCM Core - source control abstraction for workspace projects."""

from .__version__ import __version__, __version_info__

from .workspace import File, Folder, Project, Resource, Workspace
from .scm import (
    FileStatus,
    GitScmProjectOperations,
    GitScmProvider,
    ScmProjectOperations,
    ScmProvider,
    ScmRegistry,
    build_registry,
    get_default_registry,
    get_provider_type,
    get_providers,
    get_scm_operations_for,
    is_under_scm,
)
from .config import LogConfig, ScmConfig, ScmConfigLoader
from .errors import (
    ConfigError,
    ResourceNotFoundError,
    ScmError,
    ScmNotImplementedError,
)

__all__ = [
    # Version
    "__version__",
    "__version_info__",
    # Workspace
    "File",
    "Folder",
    "Project",
    "Resource",
    "Workspace",
    # SCM
    "FileStatus",
    "GitScmProjectOperations",
    "GitScmProvider",
    "ScmProjectOperations",
    "ScmProvider",
    "ScmRegistry",
    "build_registry",
    "get_default_registry",
    "get_provider_type",
    "get_providers",
    "get_scm_operations_for",
    "is_under_scm",
    # Config
    "LogConfig",
    "ScmConfig",
    "ScmConfigLoader",
    # Errors
    "ConfigError",
    "ResourceNotFoundError",
    "ScmError",
    "ScmNotImplementedError",
]

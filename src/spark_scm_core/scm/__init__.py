"""SCM abstraction layer: provider registry, provider and operations interfaces."""

from .base import FileStatus, ScmProjectOperations, ScmProvider
from .git_provider import GitScmProjectOperations, GitScmProvider
from .registry import (
    PROVIDER_FACTORIES,
    ScmRegistry,
    build_registry,
    get_default_registry,
    get_provider_type,
    get_providers,
    get_scm_operations_for,
    is_under_scm,
)

__all__ = [
    "FileStatus",
    "ScmProvider",
    "ScmProjectOperations",
    "GitScmProvider",
    "GitScmProjectOperations",
    "PROVIDER_FACTORIES",
    "ScmRegistry",
    "build_registry",
    "get_default_registry",
    "get_provider_type",
    "get_providers",
    "get_scm_operations_for",
    "is_under_scm",
]

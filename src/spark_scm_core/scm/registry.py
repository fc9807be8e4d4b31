"""Provider registry and the process-wide default registry."""

from __future__ import annotations

import logging
import threading
from typing import Callable, Dict, Iterable, Optional, Tuple

from ..errors import ConfigError
from ..workspace import Project
from .base import ScmProjectOperations, ScmProvider
from .git_provider import GitScmProvider

logger = logging.getLogger(__name__)

PROVIDER_FACTORIES: Dict[str, Callable[[], ScmProvider]] = {
    "git": GitScmProvider,
}


class ScmRegistry:
    """Fixed, ordered set of SCM providers.

    Built once and handed to whatever needs SCM queries. Providers are never
    added or removed after construction.
    """

    def __init__(self, providers: Iterable[ScmProvider]) -> None:
        providers = tuple(providers)
        seen = set()
        for provider in providers:
            if provider.id in seen:
                raise ConfigError(f"Duplicate SCM provider id: {provider.id}")
            seen.add(provider.id)
        self._providers: Tuple[ScmProvider, ...] = providers

    def claiming_provider(self, project: Project) -> Optional[ScmProvider]:
        """Return the first provider that manages ``project``, if any."""
        for provider in self._providers:
            if provider.is_under_scm(project):
                return provider
        return None

    def is_under_scm(self, project: Project) -> bool:
        return self.claiming_provider(project) is not None

    def list_providers(self) -> Tuple[ScmProvider, ...]:
        return self._providers

    def lookup_provider(self, provider_id: str) -> Optional[ScmProvider]:
        for provider in self._providers:
            if provider.id == provider_id:
                return provider
        return None

    def operations_for(self, project: Project) -> Optional[ScmProjectOperations]:
        """Return operations from the first provider that claims ``project``."""
        provider = self.claiming_provider(project)
        if provider is None:
            return None
        return provider.get_operations_for(project)

    def __repr__(self) -> str:
        ids = ", ".join(p.id for p in self._providers)
        return f"ScmRegistry([{ids}])"


def build_registry(provider_ids: Iterable[str]) -> ScmRegistry:
    """Create a registry with one fresh provider per id, in the given order."""
    providers = []
    for provider_id in provider_ids:
        factory = PROVIDER_FACTORIES.get(provider_id)
        if factory is None:
            known = ", ".join(sorted(PROVIDER_FACTORIES))
            raise ConfigError(f"Unknown SCM provider '{provider_id}' (known: {known})")
        providers.append(factory())
    registry = ScmRegistry(providers)
    logger.debug(f"Built {registry!r}")
    return registry


_default_registry: Optional[ScmRegistry] = None
_default_lock = threading.Lock()


def get_default_registry() -> ScmRegistry:
    """Process-wide registry holding a single Git provider."""
    global _default_registry
    with _default_lock:
        if _default_registry is None:
            _default_registry = ScmRegistry([GitScmProvider()])
        return _default_registry


def is_under_scm(project: Project) -> bool:
    """Return True if any known provider manages the project."""
    return get_default_registry().is_under_scm(project)


def get_providers() -> Tuple[ScmProvider, ...]:
    """Return all SCM providers known to the system."""
    return get_default_registry().list_providers()


def get_provider_type(provider_id: str) -> Optional[ScmProvider]:
    """Return the provider for ``provider_id``; only ``git`` is known today."""
    return get_default_registry().lookup_provider(provider_id)


def get_scm_operations_for(project: Project) -> Optional[ScmProjectOperations]:
    """Return the project's SCM operations, or None if it is not under SCM."""
    return get_default_registry().operations_for(project)

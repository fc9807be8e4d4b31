"""Configuration for spark-scm.

Layer order (later wins):
1) System defaults (hardcoded)
2) <project_root>/.spark/scm_config.toml, or an explicit config file
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .errors import ConfigError
from .scm.registry import ScmRegistry, build_registry

# Conditional TOML import: stdlib tomllib (3.11+) or fallback tomli (<3.11)
try:
    import tomllib  # Python 3.11+
except ImportError:
    try:
        import tomli as tomllib  # type: ignore
    except ImportError:
        tomllib = None  # type: ignore

try:
    import tomli_w  # type: ignore
except ImportError:
    tomli_w = None  # type: ignore

logger = logging.getLogger(__name__)

CONFIG_DIR = ".spark"
CONFIG_FILENAME = "scm_config.toml"

_VERBOSITY_LEVELS = ("debug", "info", "warning", "error")


class LogConfig(BaseModel):
    """Logging settings."""

    debug: bool = Field(default=False, description="Force debug logging")
    verbosity: str = Field(default="warning", description="debug|info|warning|error")

    model_config = ConfigDict(extra="forbid")

    @field_validator("verbosity")
    @classmethod
    def validate_verbosity(cls, v: str) -> str:
        level = v.strip().lower()
        if level not in _VERBOSITY_LEVELS:
            raise ValueError(f"verbosity must be one of: {', '.join(_VERBOSITY_LEVELS)}")
        return level

    @property
    def level(self) -> int:
        if self.debug:
            return logging.DEBUG
        return getattr(logging, self.verbosity.upper())


class ScmConfig(BaseModel):
    """Effective spark-scm configuration."""

    providers: List[str] = Field(default_factory=lambda: ["git"], description="Provider ids in lookup order")
    log: LogConfig = Field(default_factory=LogConfig)

    model_config = ConfigDict(extra="forbid")

    @field_validator("providers")
    @classmethod
    def validate_providers(cls, v: List[str]) -> List[str]:
        if not v:
            raise ValueError("At least one SCM provider must be configured")
        ids = [p.strip().lower() for p in v]
        if any(not p for p in ids):
            raise ValueError("Provider id cannot be empty")
        duplicates = sorted({p for p in ids if ids.count(p) > 1})
        if duplicates:
            raise ValueError(f"Duplicate provider ids: {', '.join(duplicates)}")
        return ids

    def build_registry(self) -> ScmRegistry:
        return build_registry(self.providers)


class ScmConfigLoader:
    """Load and resolve spark-scm configuration."""

    @staticmethod
    def _deep_merge(base: Dict[str, Any], overlay: Dict[str, Any]) -> Dict[str, Any]:
        result: Dict[str, Any] = dict(base)
        for key, value in overlay.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = ScmConfigLoader._deep_merge(result[key], value)
            else:
                result[key] = value
        return result

    @staticmethod
    def _read_toml_optional(path: Path) -> Dict[str, Any]:
        """Read TOML config file; return {} if not found."""
        if not path.exists():
            return {}
        if tomllib is None:
            logger.warning("tomllib/tomli not available; install tomli for TOML support")
            return {}
        try:
            with open(path, "rb") as f:
                data = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise ConfigError(f"Invalid TOML in {path}: {e}")
        except OSError as e:
            raise ConfigError(f"Failed to load config from {path}: {e}")
        if not isinstance(data, dict):
            raise ConfigError(f"Config TOML must be a table: {path}")
        return data

    @staticmethod
    def config_path(project_root: Path) -> Path:
        return project_root / CONFIG_DIR / CONFIG_FILENAME

    @classmethod
    def load(
        cls,
        project_root: Optional[Path] = None,
        config_file: Optional[Path] = None,
    ) -> ScmConfig:
        """Return the effective config for a project (or defaults)."""
        if config_file is not None:
            if not config_file.is_file():
                raise ConfigError(f"Config file not found: {config_file}")
            path: Optional[Path] = config_file
        elif project_root is not None:
            path = cls.config_path(project_root)
        else:
            path = None

        data: Dict[str, Any] = ScmConfig().model_dump()
        if path is not None:
            overlay = cls._read_toml_optional(path)
            if overlay:
                logger.debug(f"Loaded SCM config from {path}")
            data = cls._deep_merge(data, overlay)

        try:
            return ScmConfig.model_validate(data)
        except ValidationError as e:
            source = path if path is not None else "defaults"
            raise ConfigError(f"Invalid SCM config ({source}): {e}")

    @classmethod
    def write_default(cls, path: Path, force: bool = False) -> Path:
        """Write the default config to ``path``."""
        if tomli_w is None:
            raise ConfigError("tomli_w is required to write TOML config")
        if path.exists() and not force:
            raise ConfigError(f"Config already exists: {path} (use --force to overwrite)")
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "wb") as f:
            tomli_w.dump(ScmConfig().model_dump(), f)
        logger.info(f"Wrote default SCM config to {path}")
        return path

from __future__ import annotations

import logging
import os
import sys
from pathlib import Path
from typing import Optional

import typer

from spark_scm_core.config import ScmConfig, ScmConfigLoader
from spark_scm_core.errors import ConfigError
from spark_scm_core.scm import ScmRegistry

# Global variable to store custom config file path
_global_config_file: Optional[Path] = None
_verbose: bool = False
_log_handler: Optional[logging.Handler] = None


def set_global_config_file(config_file: Optional[Path]) -> None:
    """Set the global config file path for use by commands."""
    global _global_config_file
    _global_config_file = config_file.resolve() if config_file else None


def get_global_config_file() -> Optional[Path]:
    """Get the global config file path if set."""
    return _global_config_file


def set_verbose(verbose: bool) -> None:
    global _verbose
    _verbose = verbose


def configure_stdio() -> None:
    """Make CLI output robust across Windows console encodings."""

    if os.name != "nt":
        return

    for stream in (sys.stdout, sys.stderr):
        try:
            stream.reconfigure(errors="replace")
        except (AttributeError, ValueError):
            continue


def configure_logging(config: ScmConfig) -> None:
    """Route spark_scm_core records to the current stderr at the configured level."""
    global _log_handler
    level = logging.DEBUG if _verbose else config.log.level
    core_logger = logging.getLogger("spark_scm_core")
    if _log_handler is not None:
        core_logger.removeHandler(_log_handler)
    _log_handler = logging.StreamHandler(sys.stderr)
    _log_handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
    core_logger.addHandler(_log_handler)
    core_logger.setLevel(level)


def load_config(project_root: Optional[Path] = None) -> ScmConfig:
    """Load effective config and apply its logging settings; exit 2 on error."""
    try:
        config = ScmConfigLoader.load(
            project_root=project_root,
            config_file=get_global_config_file(),
        )
    except ConfigError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(2)
    configure_logging(config)
    return config


def load_registry(project_root: Optional[Path] = None) -> ScmRegistry:
    """Build the provider registry from the effective config; exit 2 on error."""
    config = load_config(project_root)
    try:
        return config.build_registry()
    except ConfigError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(2)

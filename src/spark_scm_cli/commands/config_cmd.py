from __future__ import annotations

import json
from pathlib import Path

import typer

from spark_scm_core.config import ScmConfigLoader
from spark_scm_core.errors import ConfigError

from ..util import get_global_config_file, load_config

app = typer.Typer(help="Config inspection and initialization")


@app.command("show")
def show(
    project_dir: Path = typer.Option(Path("."), "--project", "-p", help="Project root directory"),
):
    """Print the effective config as JSON."""
    config = load_config(project_dir.resolve())
    typer.echo(json.dumps(config.model_dump(), ensure_ascii=True, indent=2))


@app.command("init")
def init(
    project_dir: Path = typer.Option(Path("."), "--project", "-p", help="Project root directory"),
    force: bool = typer.Option(False, "--force", help="Overwrite an existing config file"),
):
    """Write the default config to .spark/scm_config.toml."""
    target = get_global_config_file() or ScmConfigLoader.config_path(project_dir.resolve())
    try:
        path = ScmConfigLoader.write_default(target, force=force)
    except ConfigError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)
    typer.echo(f"OK: wrote {path}")

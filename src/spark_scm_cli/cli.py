from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from spark_scm_core import __version__

from .util import configure_stdio, set_global_config_file, set_verbose

app = typer.Typer(help="spark-scm: source control status for workspace projects")


@app.callback()
def _init(
    config_file: Optional[Path] = typer.Option(
        None,
        "--config-file",
        help="Path to SCM config file (.spark/scm_config.toml)",
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
):
    configure_stdio()
    set_verbose(verbose)
    set_global_config_file(config_file)


from .commands import providers as providers_cmd  # noqa: E402
from .commands import status as status_cmd  # noqa: E402
from .commands import config_cmd as config_cmd  # noqa: E402

app.add_typer(providers_cmd.app, name="providers", help="Inspect registered SCM providers")
app.add_typer(config_cmd.app, name="config", help="Config inspection and initialization")
app.command(name="check")(status_cmd.check)
app.command(name="status")(status_cmd.status)


@app.command("version")
def version():
    """Print the spark-scm version."""
    typer.echo(f"spark-scm {__version__}")


def main():
    app()

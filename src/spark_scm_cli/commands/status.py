from __future__ import annotations

import json
from pathlib import Path
from typing import Optional

import typer

from spark_scm_core.errors import ResourceNotFoundError, ScmError
from spark_scm_core.workspace import Workspace

from ..util import load_registry


def _link_project(workspace: Workspace, project_dir: Path):
    try:
        return workspace.link_project(project_dir)
    except ResourceNotFoundError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(2)


def check(
    project_dir: Path = typer.Argument(Path("."), help="Project root directory"),
    output_format: str = typer.Option("plain", "--format", "-f", help="Output format: plain|json"),
):
    """Report whether a project is under source control."""
    project = _link_project(Workspace(), project_dir)
    registry = load_registry(project.path)

    provider = registry.claiming_provider(project)
    claimed_by = provider.id if provider is not None else None

    if output_format == "json":
        payload = {
            "project": str(project.path),
            "under_scm": claimed_by is not None,
            "provider": claimed_by,
        }
        typer.echo(json.dumps(payload, ensure_ascii=True, indent=2))
        return

    if claimed_by is None:
        typer.echo(f"{project.path}: not under SCM")
    else:
        typer.echo(f"{project.path}: under SCM ({claimed_by})")


def status(
    path: Path = typer.Argument(..., help="File or folder to query (relative paths are taken from the project root)"),
    project_dir: Optional[Path] = typer.Option(
        None, "--project", "-p", help="Project root (default: current directory)"
    ),
    output_format: str = typer.Option("plain", "--format", "-f", help="Output format: plain|json"),
):
    """Show the SCM status of a file or folder."""
    workspace = Workspace()
    project = _link_project(workspace, project_dir or Path.cwd())
    registry = load_registry(project.path)

    try:
        resource = workspace.resolve(path if path.is_absolute() else project.path / path)
    except ResourceNotFoundError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(2)

    operations = registry.operations_for(project)
    if operations is None:
        typer.echo(f"Error: project is not under SCM: {project.path}", err=True)
        raise typer.Exit(1)

    try:
        file_status = operations.get_file_status(resource).result()
    except ScmError as e:
        if output_format == "json":
            payload = {"path": str(resource.path), "provider": operations.provider.id, "error": str(e)}
            typer.echo(json.dumps(payload, ensure_ascii=True, indent=2))
        else:
            typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    if output_format == "json":
        payload = {"path": str(resource.path), "provider": operations.provider.id, "status": str(file_status)}
        typer.echo(json.dumps(payload, ensure_ascii=True, indent=2))
        return
    typer.echo(f"{resource.path}: {file_status}")

from __future__ import annotations

import json

import typer
from rich.console import Console
from rich.table import Table

from ..util import load_registry

app = typer.Typer(help="Inspect registered SCM providers")
console = Console()


@app.command("list")
def list_providers(
    output_format: str = typer.Option("plain", "--format", "-f", help="Output format: plain|json"),
):
    """List registered providers in lookup order."""
    registry = load_registry()
    providers = registry.list_providers()

    if output_format == "json":
        payload = [
            {"position": i, "id": p.id, "class": type(p).__name__}
            for i, p in enumerate(providers, start=1)
        ]
        typer.echo(json.dumps(payload, ensure_ascii=True, indent=2))
        return

    table = Table(title="SCM Providers")
    table.add_column("#", justify="right")
    table.add_column("ID", style="cyan")
    table.add_column("Implementation")
    for i, provider in enumerate(providers, start=1):
        table.add_row(str(i), provider.id, type(provider).__name__)
    console.print(table)


@app.command("show")
def show_provider(
    provider_id: str = typer.Argument(..., help="Provider id, e.g. git"),
):
    """Show a single provider; exits 1 when it is not registered."""
    registry = load_registry()
    provider = registry.lookup_provider(provider_id)
    if provider is None:
        typer.echo(f"Unknown SCM provider: {provider_id}", err=True)
        raise typer.Exit(1)
    typer.echo(f"{provider.id}: {type(provider).__name__}")

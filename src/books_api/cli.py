"""Command-line interface for running and managing the Books API."""

import typer
import uvicorn
from rich.console import Console
from rich.table import Table

from books_api.runtime.context import get_config
from books_api.runtime.init_db import init_db

console = Console()

app = typer.Typer(
    name="books-api",
    help="Books API - serve the HTTP API and manage its database",
    rich_markup_mode="rich",
    no_args_is_help=True,
)


@app.command()
def serve(
    host: str | None = typer.Option(None, "--host", help="Bind address (defaults to config)"),
    port: int | None = typer.Option(None, "--port", "-p", help="Port (defaults to config)"),
    reload: bool = typer.Option(False, "--reload", help="Reload on code changes"),
) -> None:
    """Run the API with uvicorn."""
    config = get_config()
    bind_host = host or config.app.host
    bind_port = port or config.app.port

    console.print(
        f"[green]Starting Books API on http://{bind_host}:{bind_port}[/green]"
    )
    uvicorn.run(
        "books_api.api.http.app:app",
        host=bind_host,
        port=bind_port,
        reload=reload,
        access_log=False,  # We handle access logging in middleware
    )


@app.command("init-db")
def init_db_command() -> None:
    """Create the database schema if it does not exist."""
    config = get_config()
    try:
        init_db(config)
    except Exception as e:
        console.print(f"[red]Database initialization failed: {e}[/red]")
        raise typer.Exit(1) from e
    console.print(f"[green]Database ready at {config.database.url}[/green]")


@app.command("show-config")
def show_config() -> None:
    """Print the effective configuration."""
    config = get_config()
    table = Table(title="Books API configuration")
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="white")

    for section_name, section in config.model_dump().items():
        for key, value in section.items():
            table.add_row(f"{section_name}.{key}", str(value))

    console.print(table)


if __name__ == "__main__":
    app()

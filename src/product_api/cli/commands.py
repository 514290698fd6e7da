"""Server and database CLI commands."""

import typer
from rich.panel import Panel
from rich.table import Table
from sqlalchemy.engine import make_url

from src.product_api.runtime.context import get_config

from .utils import console


def serve(
    host: str | None = typer.Option(None, help="Host to bind the server to"),
    port: int | None = typer.Option(None, help="Port to bind the server to"),
    reload: bool = typer.Option(False, help="Enable auto-reload on code changes"),
    log_level: str = typer.Option(
        "info", help="Log level (debug, info, warning, error, critical)"
    ),
) -> None:
    """
    🚀 Start the Product API server.

    Host and port default to the values in config.yaml.
    """
    import uvicorn

    config = get_config()
    bind_host = host or config.app.host
    bind_port = port or config.app.port

    console.print(
        Panel.fit(
            "[bold green]Starting Product API[/bold green]",
            border_style="green",
        )
    )
    console.print(f"[blue]Server will be available at:[/blue] http://{bind_host}:{bind_port}")
    console.print("[dim]Press Ctrl+C to stop the server[/dim]")

    uvicorn.run(
        "src.product_api.api.http.app:app",
        host=bind_host,
        port=bind_port,
        reload=reload,
        log_level=log_level,
        access_log=False,  # Requests are logged by the HTTP middleware
    )


def init_db(
    drop: bool = typer.Option(
        False, "--drop", help="Drop existing tables before creating them"
    ),
) -> None:
    """
    🗄️ Create the database tables.
    """
    from src.product_api.runtime.init_db import init_db as create_tables

    if drop and not typer.confirm("This deletes every stored product. Continue?"):
        console.print("[yellow]Aborted[/yellow]")
        raise typer.Exit(1)

    create_tables(drop=drop)
    console.print("[green]✓ Database tables created[/green]")


def show_config() -> None:
    """
    ⚙️ Show the active configuration.
    """
    config = get_config()

    table = Table(title="Product API configuration")
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="white")

    table.add_row("environment", config.app.environment)
    table.add_row("base_url", config.app.base_url)
    table.add_row(
        "database.url", make_url(config.database.url).render_as_string(hide_password=True)
    )
    table.add_row("database.create_tables", str(config.database.create_tables))
    table.add_row("logging.level", config.logging.level)
    table.add_row("logging.format", config.logging.format)
    table.add_row("logging.file", config.logging.file or "-")

    console.print(table)

"""Main CLI application module."""

import typer

from .commands import init_db, serve, show_config

# Create the main CLI application
app = typer.Typer(
    help="🛒 Product API CLI - Run the server and manage its database",
    no_args_is_help=True,
    rich_markup_mode="rich",
)

app.command(name="serve")(serve)
app.command(name="init-db")(init_db)
app.command(name="show-config")(show_config)


def main() -> None:
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()

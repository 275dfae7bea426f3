"""Main CLI application module."""

import typer

from .db_commands import db_app
from .pet_commands import pets_app

app = typer.Typer(
    help="🐾 Pet Registry CLI - manage registered pet types",
    no_args_is_help=True,
    rich_markup_mode="rich",
)

app.add_typer(pets_app, name="pets")
app.add_typer(db_app, name="db")


def main() -> None:
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()

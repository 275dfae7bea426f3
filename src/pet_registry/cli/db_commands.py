"""Database schema CLI commands."""

import typer
from rich.prompt import Confirm
from sqlalchemy.exc import SQLAlchemyError

from src.pet_registry.core.services import DbManageService

from .utils import console, get_db_service

db_app = typer.Typer(help="Manage the pet registry database schema")


@db_app.command("init")
def init() -> None:
    """Create the pet table if it does not exist."""
    try:
        DbManageService(get_db_service().engine).create_all()
    except SQLAlchemyError as e:
        console.print(f"[red]❌ Failed to initialize database: {e}[/red]")
        raise typer.Exit(code=1) from e
    console.print("[green]✅ Database initialized[/green]")


@db_app.command("drop")
def drop(
    force: bool = typer.Option(False, "--force", "-f", help="Skip confirmation prompt"),
) -> None:
    """Drop all pet registry tables."""
    if not force and not Confirm.ask("[red]Drop all tables? This deletes every pet[/red]"):
        console.print("[yellow]Aborted[/yellow]")
        raise typer.Exit()

    try:
        DbManageService(get_db_service().engine).drop_all()
    except SQLAlchemyError as e:
        console.print(f"[red]❌ Failed to drop tables: {e}[/red]")
        raise typer.Exit(code=1) from e
    console.print("[green]✅ Tables dropped[/green]")

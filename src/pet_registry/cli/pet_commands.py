"""Pet management CLI commands."""

import typer
from rich.prompt import Confirm
from rich.table import Table
from sqlalchemy.exc import IntegrityError

from src.pet_registry.entities.service.pet import MAX_PET_ID, Pet, PetRepository

from .utils import console, get_db_service

pets_app = typer.Typer(help="Register, list, rename and remove pet types")


def _print_pets(pets: list[Pet], title: str) -> None:
    table = Table(title=title)
    table.add_column("ID", style="cyan", justify="right")
    table.add_column("Type", style="green")
    for pet in pets:
        table.add_row(str(pet.id), pet.type)
    console.print(table)


@pets_app.command("add")
def add_pet(
    pet_type: str = typer.Argument(..., metavar="TYPE", help="Pet type label"),
) -> None:
    """Register a new pet type."""
    try:
        with get_db_service().session_scope() as session:
            pet = PetRepository(session).create(Pet(type=pet_type))
    except IntegrityError as e:
        console.print(f"[red]❌ Pet type {pet_type!r} rejected: type must not be empty[/red]")
        raise typer.Exit(code=1) from e

    console.print(f"[green]✅ Registered pet {pet.id}: {pet.type}[/green]")


@pets_app.command("list")
def list_pets(
    pet_type: str | None = typer.Option(None, "--type", "-t", help="Only show this type"),
) -> None:
    """List registered pet types."""
    with get_db_service().session_scope() as session:
        repository = PetRepository(session)
        if pet_type is not None:
            pets = repository.find_by_type(pet_type)
        else:
            pets = repository.list_all()

    if not pets:
        console.print("[yellow]No pets found[/yellow]")
        return

    _print_pets(pets, "Pets")
    console.print(f"\n[green]Found {len(pets)} pets[/green]")


@pets_app.command("rename")
def rename_pet(
    pet_id: int = typer.Argument(..., min=1, max=MAX_PET_ID, help="ID of the pet"),
    pet_type: str = typer.Argument(..., metavar="TYPE", help="New type label"),
) -> None:
    """Overwrite the type of a registered pet."""
    try:
        with get_db_service().session_scope() as session:
            pet = PetRepository(session).update(Pet(id=pet_id, type=pet_type))
    except ValueError as e:
        console.print(f"[red]❌ {e}[/red]")
        raise typer.Exit(code=1) from e
    except IntegrityError as e:
        console.print(f"[red]❌ Pet type {pet_type!r} rejected: type must not be empty[/red]")
        raise typer.Exit(code=1) from e

    console.print(f"[green]✅ Pet {pet.id} is now {pet.type}[/green]")


@pets_app.command("remove")
def remove_pet(
    pet_id: int = typer.Argument(..., min=1, max=MAX_PET_ID, help="ID of the pet"),
    force: bool = typer.Option(False, "--force", "-f", help="Skip confirmation prompt"),
) -> None:
    """Remove a registered pet."""
    if not force and not Confirm.ask(f"Remove pet {pet_id}?"):
        console.print("[yellow]Aborted[/yellow]")
        raise typer.Exit()

    with get_db_service().session_scope() as session:
        deleted = PetRepository(session).delete(pet_id)

    if not deleted:
        console.print(f"[red]❌ Pet {pet_id} not found[/red]")
        raise typer.Exit(code=1)
    console.print(f"[green]✅ Removed pet {pet_id}[/green]")

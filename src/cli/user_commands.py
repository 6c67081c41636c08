"""User management CLI commands."""

import typer
from rich.table import Table

from src.users_service.core.exceptions import InvalidDataError, UserNotFoundError
from src.users_service.core.services import UserService
from src.users_service.entities.user import User, UserRepository

from .utils import console, get_database_service

users_app = typer.Typer(help="Manage users stored in the configured database")


def _render(users: list[User], title: str) -> None:
    table = Table(title=title)
    table.add_column("ID", style="cyan")
    table.add_column("Name", style="green")
    table.add_column("Phone", style="blue")
    for user in users:
        table.add_row(str(user.id), user.name or "", user.phone or "")
    console.print(table)


@users_app.command("list")
def list_users() -> None:
    """List all users."""
    with get_database_service().session_scope() as session:
        users = UserService(UserRepository(session)).find_all()

    if not users:
        console.print("[yellow]No users found[/yellow]")
        return
    _render(users, "Users")
    console.print(f"\n[green]Found {len(users)} users[/green]")


@users_app.command("find")
def find_users(
    prefix: str = typer.Argument(..., help="Start of the name, case is ignored"),
) -> None:
    """Find users whose name starts with PREFIX."""
    with get_database_service().session_scope() as session:
        users = UserService(UserRepository(session)).find_by_name(prefix)

    if not users:
        console.print(f"[yellow]No users matching '{prefix}'[/yellow]")
        return
    _render(users, f"Users matching '{prefix}'")


@users_app.command("add")
def add_user(
    name: str = typer.Argument(..., help="Name of the new user"),
    phone: str | None = typer.Option(None, "--phone", "-p", help="Phone number"),
) -> None:
    """Add a new user."""
    try:
        with get_database_service().session_scope() as session:
            user = UserService(UserRepository(session)).create(User(name=name, phone=phone))
    except InvalidDataError as e:
        console.print(f"[red]❌ {e.message}[/red]")
        raise typer.Exit(code=1) from e

    console.print(f"[green]✅ Created user {user.id} ({user.name})[/green]")


@users_app.command("remove")
def remove_user(
    user_id: int = typer.Argument(..., help="ID of the user to remove"),
) -> None:
    """Remove a user by ID."""
    try:
        with get_database_service().session_scope() as session:
            UserService(UserRepository(session)).remove(user_id)
    except UserNotFoundError as e:
        console.print(f"[red]❌ {e.message}[/red]")
        raise typer.Exit(code=1) from e

    console.print(f"[green]✅ Removed user {user_id}[/green]")

"""Main CLI application module."""

import typer

from .dev_commands import register_dev_commands
from .user_commands import users_app

# Create the main CLI application
app = typer.Typer(
    help="🛠️  Users Service CLI - database setup, server and user management",
    no_args_is_help=True,
    rich_markup_mode="rich",
)

register_dev_commands(app)
app.add_typer(users_app, name="users")


def main() -> None:
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()

"""UserHub CLI application using Typer.

This module provides command-line utilities for the UserHub backend:
serving the API, preparing the database and administering accounts.
"""

import asyncio
from typing import Awaitable, Callable, TypeVar
from uuid import UUID

import typer
import uvicorn
from rich.console import Console
from rich.table import Table

from userhub.application.services import UserService
from userhub.domain.shared.exceptions import DomainException
from userhub.presentation.api.dependencies import (
    build_user_service,
    create_tables,
    get_engine,
    get_password_service,
    get_session_maker,
)
from userhub_config.settings import get_settings

T = TypeVar("T")

app = typer.Typer(
    name="userhub",
    help="UserHub - user account management CLI",
    no_args_is_help=True,
)
console = Console()

db_app = typer.Typer(
    name="db",
    help="Database utilities",
    no_args_is_help=True,
)
app.add_typer(db_app)

users_app = typer.Typer(
    name="users",
    help="Manage user accounts",
    no_args_is_help=True,
)
app.add_typer(users_app)


async def _with_service(operation: Callable[[UserService], Awaitable[T]]) -> T:
    """Run ``operation`` in its own session and commit if it succeeds."""
    await create_tables()
    password_service = get_password_service(settings=get_settings())
    try:
        async with get_session_maker()() as session:
            service = build_user_service(session, password_service)
            try:
                result = await operation(service)
            except DomainException:
                await session.rollback()
                raise
            await session.commit()
            return result
    finally:
        await get_engine().dispose()


def _run(operation: Callable[[UserService], Awaitable[T]]) -> T:
    try:
        return asyncio.run(_with_service(operation))
    except DomainException as e:
        console.print(f"[red]Error ({e.code.value}):[/red] {e.message}")
        raise typer.Exit(code=1) from e


@app.command("serve")
def serve(
    host: str = typer.Option(None, help="Bind address (defaults to API_HOST)"),
    port: int = typer.Option(None, help="Port (defaults to API_PORT)"),
    reload: bool = typer.Option(False, help="Reload on code changes"),
) -> None:
    """Run the HTTP API with uvicorn."""
    settings = get_settings()
    uvicorn.run(
        "userhub.presentation.api.app:app",
        host=host or settings.api_host,
        port=port or settings.api_port,
        reload=reload,
    )


@db_app.command("init")
def init_db() -> None:
    """Create missing database tables."""

    async def _init() -> None:
        try:
            await create_tables()
        finally:
            await get_engine().dispose()

    asyncio.run(_init())
    console.print("[green]Database schema is up to date.[/green]")


@users_app.command("list")
def list_users() -> None:
    """List all user accounts."""
    users = _run(lambda service: service.list_users())

    if not users:
        console.print("[dim]No users.[/dim]")
        return

    table = Table(title="Users")
    table.add_column("ID", style="cyan", no_wrap=True)
    table.add_column("Name")
    table.add_column("Email", style="green")
    for user in users:
        table.add_row(str(user.id), user.name, user.email)
    console.print(table)


@users_app.command("create")
def create_user(
    name: str = typer.Option(..., prompt=True, help="Display name"),
    email: str = typer.Option(..., prompt=True, help="Email address"),
) -> None:
    """Create a user account, prompting for the password twice."""
    password = typer.prompt("Password", hide_input=True)
    password_confirm = typer.prompt("Repeat password", hide_input=True)

    created = _run(
        lambda service: service.create_user(
            name=name,
            email=email,
            password=password,
            password_confirm=password_confirm,
        )
    )
    console.print(f"[green]Created user[/green] {created.name} <{created.email}>")


@users_app.command("delete")
def delete_user(user_id: UUID = typer.Argument(..., help="ID of the user")) -> None:
    """Delete a user account."""
    deleted = _run(lambda service: service.delete_user(user_id))
    console.print(f"[green]Deleted user[/green] {deleted.id}")


def cli() -> None:
    """Entry point for the CLI application."""
    app()


if __name__ == "__main__":
    cli()

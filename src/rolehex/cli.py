"""Command-line interface for RoleHex.

This module provides the CLI commands for running the API server and
managing roles directly against the configured database.
"""

import asyncio
from typing import Awaitable, Callable, NoReturn, TypeVar

import click

from rolehex import __version__
from rolehex.core.config import get_settings
from rolehex.core.logging import configure_logging, get_logger
from rolehex.domain.entities.role import Role
from rolehex.domain.exceptions import RoleError
from rolehex.domain.services import NotificationDispatcher, RoleService
from rolehex.infrastructure.notification import build_role_notifier
from rolehex.infrastructure.persistence.database import get_db_manager, init_database
from rolehex.infrastructure.persistence.repositories import SQLAlchemyRoleRepository

T = TypeVar("T")


@click.group()
@click.version_option(version=__version__, prog_name="RoleHex")
def cli() -> None:
    """RoleHex - role catalog for authorization.

    Settings are read from ROLEHEX_* environment variables and .env.
    """


@cli.command()
@click.option("--host", type=str, default=None, help="Host to bind to (overrides config)")
@click.option("--port", type=int, default=None, help="Port to bind to (overrides config)")
@click.option(
    "--workers",
    type=int,
    default=None,
    help="Number of worker processes (overrides config)",
)
@click.option(
    "--reload",
    is_flag=True,
    default=False,
    help="Enable auto-reload for development",
)
def serve(host: str | None, port: int | None, workers: int | None, reload: bool) -> None:
    """Start the RoleHex API server."""
    import uvicorn

    settings = get_settings()

    bind_host = host or settings.host
    bind_port = port or settings.port
    bind_workers = workers or settings.workers

    if bind_workers > 1 and settings.database_url.startswith("sqlite"):
        click.echo(
            "Error: SQLite does not support multiple worker processes. "
            "Use --workers 1 or switch to PostgreSQL.",
            err=True,
        )
        raise SystemExit(1)

    configure_logging(settings)

    logger = get_logger(__name__)
    logger.info(
        "Starting RoleHex server",
        host=bind_host,
        port=bind_port,
        workers=bind_workers,
        reload=reload,
        environment=settings.environment,
    )

    uvicorn.run(
        "rolehex.infrastructure.api.app:app",
        host=bind_host,
        port=bind_port,
        workers=1 if reload else bind_workers,
        reload=reload,
        log_level=settings.log_level.lower(),
        access_log=True,
    )


@cli.command()
@click.option("--force", is_flag=True, help="Skip confirmation prompt")
def init_db(force: bool) -> None:
    """Initialize the database.

    Creates the roles table and seeds default roles. Use this only in
    development; in production, use migrations instead.
    """
    settings = get_settings()
    configure_logging(settings)

    if settings.is_production and not force:
        click.echo(
            "ERROR: Running in production mode. Use migrations instead of init-db.",
            err=True,
        )
        raise SystemExit(1)

    if not force:
        click.confirm(
            "This will create all database tables. Continue?",
            abort=True,
            default=False,
        )

    async def initialize() -> None:
        try:
            await init_database()
        finally:
            await get_db_manager().disconnect()

    asyncio.run(initialize())
    click.echo("Database initialized successfully.")


@cli.command()
def info() -> None:
    """Display RoleHex configuration."""
    settings = get_settings()

    click.echo(f"""
RoleHex v{settings.app_version}
{'=' * 40}

Configuration:
  Environment:  {settings.environment}
  Debug:        {settings.debug}
  API Prefix:   {settings.api_prefix}

Server:
  Host:         {settings.host}
  Port:         {settings.port}
  Workers:      {settings.workers}

Database:
  URL:          {settings.database_url}
  Echo:         {settings.db_echo}

Roles:
  Defaults:     {', '.join(settings.default_roles) or '-'}
  Guard rename: {settings.guard_reserved_renames}

Notifications:
  Service URL:  {settings.notification_service_url or '- (logging only)'}

Logging:
  Level:        {settings.log_level}
  Format:       {settings.log_format}
""")


def _run_role_command(operation: Callable[[RoleService], Awaitable[T]]) -> T:
    """Run a role service operation against the configured database.

    Pending notifications are delivered before the event loop closes.
    Role business-rule failures end the command with exit code 1.
    """
    settings = get_settings()
    configure_logging(settings)

    async def run() -> T:
        db = get_db_manager()
        dispatcher = NotificationDispatcher()
        try:
            async with db.session() as session:
                service = RoleService(
                    SQLAlchemyRoleRepository(session),
                    build_role_notifier(settings),
                    dispatcher,
                    guard_reserved_renames=settings.guard_reserved_renames,
                )
                return await operation(service)
        finally:
            await dispatcher.drain()
            await db.disconnect()

    try:
        return asyncio.run(run())
    except RoleError as e:
        click.echo(f"Error: {e.message}", err=True)
        raise SystemExit(1)


def _format_role(role: Role) -> str:
    marker = " [system]" if role.is_system_role() else ""
    return f"{role.id:>5}  {role.name}{marker}  (created {role.created_at:%Y-%m-%d %H:%M:%S})"


def _echo_roles(roles: list[Role]) -> None:
    for role in roles:
        click.echo(_format_role(role))
    click.echo(f"{len(roles)} role(s)")


@cli.group()
def roles() -> None:
    """Manage roles."""


@roles.command("list")
def list_roles() -> None:
    """List all roles."""
    _echo_roles(_run_role_command(lambda service: service.get_all_roles()))


@roles.command("create")
@click.argument("name")
def create_role(name: str) -> None:
    """Create a role named NAME."""
    role = _run_role_command(lambda service: service.create_role(name))
    click.echo(f"Created {_format_role(role)}")


@roles.command("rename")
@click.argument("role_id", type=int)
@click.argument("name")
def rename_role(role_id: int, name: str) -> None:
    """Rename role ROLE_ID to NAME."""
    role = _run_role_command(lambda service: service.update_role(role_id, name))
    click.echo(f"Renamed {_format_role(role)}")


@roles.command("delete")
@click.argument("role_id", type=int)
def delete_role(role_id: int) -> None:
    """Delete role ROLE_ID."""
    _run_role_command(lambda service: service.delete_role(role_id))
    click.echo(f"Deleted role {role_id}")


@roles.command("search")
@click.argument("pattern")
def search_roles(pattern: str) -> None:
    """List roles whose name contains PATTERN (any case)."""
    _echo_roles(_run_role_command(lambda service: service.search_roles_by_name(pattern)))


@roles.command("count")
def count_roles() -> None:
    """Print the number of roles."""
    click.echo(_run_role_command(lambda service: service.get_role_count()))


@roles.command("exists")
@click.argument("name")
def role_exists(name: str) -> None:
    """Check whether role NAME exists (exit code 1 if not)."""
    exists = _run_role_command(lambda service: service.role_exists(name))
    click.echo("yes" if exists else "no")
    if not exists:
        raise SystemExit(1)


def main() -> NoReturn:
    """Main entry point for the CLI.

    This function is called when the `rolehex` command is run
    or when using `python -m rolehex`.
    """
    cli()


if __name__ == "__main__":
    main()

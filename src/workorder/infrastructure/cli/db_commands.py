"""CLI commands for setting up the SQLite store."""

from __future__ import annotations

import click

from workorder.domain.exceptions import DataAccessError
from workorder.infrastructure.bootstrap import database_path, sqlite_repository


@click.command("init")
@click.option("--seed", is_flag=True, default=False, help="Load the sample data set.")
@click.pass_obj
def db_init(obj: dict, seed: bool) -> None:
    """Create the database schema."""
    path = database_path(obj.get("db_path"))
    if path.suffix.lower() == ".json":
        raise click.ClickException("JSON stores are read-only; use a .db path")

    try:
        sqlite_repository(path).initialize(seed=seed)
    except DataAccessError as exc:
        raise click.ClickException(str(exc))

    if seed:
        click.echo(f"Database initialized with sample data at {path}")
    else:
        click.echo(f"Database initialized at {path}")

from __future__ import annotations

import logging

import click

from workorder.infrastructure.cli.db_commands import db_init
from workorder.infrastructure.cli.work_order_commands import work_order_summary


@click.group()
@click.option(
    "--db",
    "db_path",
    default=None,
    type=click.Path(dir_okay=False),
    help="SQLite (.db) or JSON (.json) store. Defaults to $WORKORDER_DB.",
)
@click.option("-v", "--verbose", is_flag=True, default=False, help="Debug logging.")
@click.pass_context
def cli(ctx: click.Context, db_path: str | None, verbose: bool) -> None:
    """Work Order Summary reports"""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    ctx.obj = {"db_path": db_path}


@cli.group()
def db() -> None:
    """Manage the maintenance database."""


# Register subcommands
cli.add_command(work_order_summary)
db.add_command(db_init)

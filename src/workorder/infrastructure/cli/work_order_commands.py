"""CLI commands for work order summaries."""

from __future__ import annotations

import click

from workorder.application.report import render_report
from workorder.domain.exceptions import DataAccessError, DomainException
from workorder.infrastructure.bootstrap import work_order_summary_builder


@click.command("summary")
@click.option("--plate", required=True, help="Vehicle plate number.")
@click.pass_obj
def work_order_summary(obj: dict, plate: str) -> None:
    """Summarize the latest maintenance record for a vehicle."""
    builder = work_order_summary_builder(obj.get("db_path"))

    try:
        result = builder.build(plate)
    except (DomainException, DataAccessError) as exc:
        raise click.ClickException(str(exc))

    for line in render_report(result):
        click.echo(line)

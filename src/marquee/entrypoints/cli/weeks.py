"""``marquee weeks`` — partition a date range into anchor-aligned weeks.

Doubles as the regression fixture for the partitioner:

    $ marquee weeks 2025-01-05 2025-01-19 --expect 2

prints the two Sunday-to-Sunday weeks and exits 0; any other count exits 1.
"""

from __future__ import annotations

import json
import logging

import click

from marquee import config
from marquee.domain.calendar import Week, Weekday
from marquee.domain.errors import DomainError
from marquee.domain.weeks import (
    ResidencyWeekSeed,
    classify_week,
    partition_weeks_iso,
)
from marquee.labels import label_for_error

from .helpers import WEEKDAY, success

logger = logging.getLogger(__name__)


def _week_row(week: Week, seed: ResidencyWeekSeed | None) -> dict:
    row: dict = {"start": week.start.isoformat(), "end": week.end.isoformat()}
    if seed is not None:
        row.update(
            kind=seed.kind.value,
            performances_count=seed.performances_count,
            fee_cents=seed.fee_cents,
        )
    return row


def _week_line(week: Week, seed: ResidencyWeekSeed | None) -> str:
    line = f"{week.start}  {week.end}"
    if seed is not None:
        line += (
            f"  {seed.kind.value:<4}  {seed.performances_count} performances"
            f"  {seed.fee_cents / 100:.2f}"
        )
    return line


@click.command()
@click.argument("start")
@click.argument("end")
@click.option(
    "--anchor",
    type=WEEKDAY,
    default=config.DEFAULT_WEEK_ANCHOR.name.lower(),
    envvar=config.WEEK_ANCHOR_ENV,
    show_default=True,
    show_envvar=True,
    help="Weekday every week starts on.",
)
@click.option(
    "--expect",
    type=click.IntRange(min=0),
    default=None,
    help="Fail unless exactly this many weeks are produced.",
)
@click.option(
    "--seeds/--no-seeds",
    default=False,
    help="Classify each week CALM/BUSY and show its performances and fee.",
)
@click.option(
    "--json",
    "as_json",
    is_flag=True,
    help="Print the weeks as a JSON array on stdout.",
)
def weeks(  # pylint: disable=too-many-arguments, too-many-positional-arguments
    start: str,
    end: str,
    anchor: Weekday,
    expect: int | None,
    seeds: bool,
    as_json: bool,
) -> None:
    """Split START..END (inclusive, YYYY-MM-DD) into 7-day weeks."""
    try:
        result = partition_weeks_iso(start, end, anchor)
    except DomainError as e:
        raise click.ClickException(
            f"{label_for_error(e.code, 'en')} {e}"
        ) from e

    logger.debug("Partitioned %s..%s on %s: %d week(s)", start, end, anchor.name, len(result))

    week_seeds = [
        ResidencyWeekSeed.for_week(week, classify_week(week)) if seeds else None
        for week in result
    ]

    if as_json:
        click.echo(
            json.dumps(
                [_week_row(week, seed) for week, seed in zip(result, week_seeds)],
                indent=2,
            )
        )
    else:
        for week, seed in zip(result, week_seeds):
            click.echo(_week_line(week, seed))

    if expect is not None:
        if len(result) != expect:
            raise click.ClickException(
                f"Expected {expect} week(s), got {len(result)}."
            )
        success(f"{len(result)} week(s), as expected.")

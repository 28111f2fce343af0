"""``marquee statuses`` — show booking statuses, labels and legal transitions."""

from __future__ import annotations

import json

import click

from marquee.domain.booking import TRANSITIONS, Status
from marquee.labels import STATUS_LABELS, label_for_status


def _targets(status: Status) -> list[str]:
    return sorted(target.value for target in TRANSITIONS[status])


@click.command()
@click.option(
    "--locale",
    type=click.Choice(sorted(STATUS_LABELS), case_sensitive=False),
    default="fr",
    show_default=True,
    help="Language of the labels.",
)
@click.option(
    "--json",
    "as_json",
    is_flag=True,
    help="Print the statuses as a JSON array on stdout.",
)
def statuses(locale: str, as_json: bool) -> None:
    """Show every status with its label and the statuses it can move to."""
    if as_json:
        rows = [
            {
                "code": status.value,
                "label": label_for_status(status, locale),
                "terminal": status.is_terminal,
                "next": _targets(status),
            }
            for status in Status
        ]
        click.echo(json.dumps(rows, indent=2, ensure_ascii=False))
        return

    for status in Status:
        targets = ", ".join(_targets(status)) or "-"
        click.echo(
            f"{status.value:<10} {label_for_status(status, locale):<12} -> {targets}"
        )

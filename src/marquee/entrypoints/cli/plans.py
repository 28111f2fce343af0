"""``marquee plans`` — show the subscription plan table."""

from __future__ import annotations

import json

import click

from marquee.domain.plans import PLAN_QUOTAS, PlanQuota


def _limit(value: int | None) -> str:
    return "unlimited" if value is None else str(value)


def _plan_row(quota: PlanQuota) -> dict:
    return {
        "plan": quota.plan.value,
        "label": quota.label,
        "monthly_events_limit": quota.monthly_events_limit,
        "modifications_per_request": quota.modifications_per_request,
        "has_commission": quota.has_commission,
        "can_access_artist_catalog": quota.can_access_artist_catalog,
    }


@click.command()
@click.option(
    "--json",
    "as_json",
    is_flag=True,
    help="Print the plans as a JSON array on stdout.",
)
def plans(as_json: bool) -> None:
    """Show each plan's monthly event and per-request modification limits."""
    if as_json:
        click.echo(json.dumps([_plan_row(q) for q in PLAN_QUOTAS.values()], indent=2))
        return

    click.echo(f"{'PLAN':<9} {'LABEL':<16} {'EVENTS/MONTH':<13} {'EDITS/REQUEST':<14} CATALOG")
    for quota in PLAN_QUOTAS.values():
        click.echo(
            f"{quota.plan.value:<9} {quota.label:<16} "
            f"{_limit(quota.monthly_events_limit):<13} "
            f"{_limit(quota.modifications_per_request):<14} "
            f"{'yes' if quota.can_access_artist_catalog else 'no'}"
        )

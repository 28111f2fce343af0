"""Subscription plans and their quotas.

The plan table is static configuration. Plan identifiers come from the venue
account row; anything unrecognized falls back to the free plan so that data
drift never blocks a request outright.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType

logger = logging.getLogger(__name__)


class SubscriptionPlan(str, Enum):
    """Venue subscription tiers."""

    FREE = "free"
    STARTER = "starter"
    PRO = "pro"
    PREMIUM = "premium"


@dataclass(frozen=True)
class PlanQuota:
    """Limits attached to a subscription plan.

    A limit of ``None`` means unlimited.
    """

    plan: SubscriptionPlan
    label: str
    monthly_events_limit: int | None
    modifications_per_request: int | None
    has_commission: bool = False
    can_access_artist_catalog: bool = False

    def allows_confirmation(self, confirmed_this_month: int) -> bool:
        """Return True if another event may be confirmed this month."""
        if self.monthly_events_limit is None:
            return True
        return confirmed_this_month < self.monthly_events_limit

    def allows_modification(self, modifications_used: int) -> bool:
        """Return True if a request may have its terms modified once more."""
        if self.modifications_per_request is None:
            return True
        return modifications_used < self.modifications_per_request


DEFAULT_PLAN = SubscriptionPlan.FREE

PLAN_QUOTAS: Mapping[SubscriptionPlan, PlanQuota] = MappingProxyType(
    {
        SubscriptionPlan.FREE: PlanQuota(
            plan=SubscriptionPlan.FREE,
            label="Sans abonnement",
            monthly_events_limit=None,
            modifications_per_request=1,
        ),
        SubscriptionPlan.STARTER: PlanQuota(
            plan=SubscriptionPlan.STARTER,
            label="Starter",
            monthly_events_limit=2,
            modifications_per_request=2,
        ),
        SubscriptionPlan.PRO: PlanQuota(
            plan=SubscriptionPlan.PRO,
            label="Pro",
            monthly_events_limit=None,
            modifications_per_request=None,
        ),
        SubscriptionPlan.PREMIUM: PlanQuota(
            plan=SubscriptionPlan.PREMIUM,
            label="Premium",
            monthly_events_limit=None,
            modifications_per_request=None,
            can_access_artist_catalog=True,
        ),
    }
)


def resolve_plan(plan_id: str | SubscriptionPlan | None) -> SubscriptionPlan:
    """Map a stored plan identifier to a plan, defaulting to the free plan.

    Matching ignores case and surrounding whitespace. Unknown identifiers are
    logged at WARNING level; a missing identifier is not.
    """
    if isinstance(plan_id, SubscriptionPlan):
        return plan_id
    if not plan_id:
        return DEFAULT_PLAN
    try:
        return SubscriptionPlan(plan_id.strip().lower())
    except ValueError:
        logger.warning(
            "Unknown subscription plan %r; falling back to %s",
            plan_id,
            DEFAULT_PLAN.value,
        )
        return DEFAULT_PLAN


def get_plan_quota(plan_id: str | SubscriptionPlan | None) -> PlanQuota:
    """Return the quota for a plan identifier (see `resolve_plan`)."""
    return PLAN_QUOTAS[resolve_plan(plan_id)]

"""Click parameter types for MARQUEE options."""

from __future__ import annotations

import click

from marquee.domain.calendar import Weekday


class WeekdayParamType(click.ParamType):
    """Weekday given by name or three-letter abbreviation (``sunday``, ``Sun``)."""

    name = "weekday"

    def convert(self, value, param, ctx) -> Weekday:
        if isinstance(value, Weekday):
            return value
        try:
            return Weekday.parse(value)
        except ValueError:
            self.fail(f"{value!r} is not a weekday name.", param, ctx)


WEEKDAY = WeekdayParamType()

"""
Time-period selectors accepted by the tournament entry source.

The member names double as the GraphQL enum literals sent to edhtop16, so
they must not be renamed.

Usage example::

    from commander_cards.taxonomy.time_period import TimePeriod

    period = TimePeriod("SIX_MONTHS")
    period.label   # "six months"

This module has NO imports from any other ``commander_cards`` package.
"""

from enum import StrEnum


class TimePeriod(StrEnum):
    """Window of tournaments considered when fetching entries."""

    ALL_TIME = "ALL_TIME"
    ONE_MONTH = "ONE_MONTH"
    ONE_YEAR = "ONE_YEAR"
    POST_BAN = "POST_BAN"
    """Tournaments held since the most recent banned-list update."""

    SIX_MONTHS = "SIX_MONTHS"
    THREE_MONTHS = "THREE_MONTHS"

    @property
    def label(self) -> str:
        """Lower-case display form, e.g. ``"three months"``."""
        return self.value.replace("_", " ").lower()

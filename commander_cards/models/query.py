"""
Query and result models for a single commander analysis.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator

from commander_cards.models.entry import CardScore
from commander_cards.taxonomy.time_period import TimePeriod


class CommanderQuery(BaseModel):
    """Filters sent to the entry source.

    Attributes:
        commander_name: Commander to look up (surrounding whitespace removed).
        min_event_size: Smallest tournament to include; values below 1 are
            raised to 1.
        time_period: Tournament window.
    """

    model_config = ConfigDict(frozen=True)

    commander_name: str
    min_event_size: int = 1
    time_period: TimePeriod = TimePeriod.ONE_MONTH

    @field_validator("commander_name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("commander_name must not be empty.")
        return v

    @field_validator("min_event_size", mode="before")
    @classmethod
    def clamp_event_size(cls, v: Any) -> int:
        try:
            return max(1, int(v))
        except (TypeError, ValueError):
            return 1


@dataclass
class AnalysisResult:
    """Outcome of one fetch-then-aggregate run.

    Attributes:
        query:       The query that produced this result.
        entry_count: Number of tournament entries returned by the source.
        scores:      Ranked card scores (highest first).
    """

    query: CommanderQuery
    entry_count: int
    scores: list[CardScore] = field(default_factory=list)

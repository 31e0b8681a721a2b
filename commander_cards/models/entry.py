"""
Tournament entry and card score models.

``TournamentEntry`` and ``CardRef`` describe what the entry source returns:
one recorded placement of a deck built around the queried commander, and
the cards in that deck.  Upstream data is loosely typed, so every field is
optional and malformed values are coerced to ``None`` instead of failing
validation.  The aggregator decides what a missing value means.

``CardScore`` is the aggregator's output row.
"""

from __future__ import annotations

from typing import Any, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator


def _optional_int(v: Any, minimum: int) -> Optional[int]:
    """Return ``v`` as an int >= ``minimum``, or ``None`` if it is not one."""
    if v is None or isinstance(v, bool):
        return None
    if isinstance(v, float):
        if not v.is_integer():
            return None
        v = int(v)
    elif isinstance(v, str):
        try:
            v = int(v.strip())
        except ValueError:
            return None
    if not isinstance(v, int) or v < minimum:
        return None
    return v


class CardRef(BaseModel):
    """A card listed in an entry's maindeck.

    Attributes:
        name: Card name; ``None`` or ``""`` when the record is malformed.
            Such cards are skipped during aggregation.
        preview_image_url: Card image URL for hover previews; ``""`` if absent.
    """

    model_config = ConfigDict(frozen=True)

    name: Optional[str] = None
    preview_image_url: str = Field(
        default="",
        validation_alias=AliasChoices("preview_image_url", "cardPreviewImageUrl"),
    )

    @field_validator("name", mode="before")
    @classmethod
    def coerce_name(cls, v: Any) -> Optional[str]:
        if not isinstance(v, str) or not v:
            return None
        return v

    @field_validator("preview_image_url", mode="before")
    @classmethod
    def coerce_preview(cls, v: Any) -> str:
        return v if isinstance(v, str) else ""


class TournamentEntry(BaseModel):
    """One recorded tournament placement for a commander deck.

    Attributes:
        standing: Final placement (1 = winner); ``None`` if unknown.
        tournament_size: Total competitors in the event; ``None`` if unknown.
        maindeck: Cards in the deck, in upstream order.  May include the
            commander itself.
    """

    model_config = ConfigDict(frozen=True)

    standing: Optional[int] = None
    tournament_size: Optional[int] = None
    maindeck: tuple[CardRef, ...] = Field(default_factory=tuple)

    @field_validator("standing", mode="before")
    @classmethod
    def coerce_standing(cls, v: Any) -> Optional[int]:
        return _optional_int(v, minimum=1)

    @field_validator("tournament_size", mode="before")
    @classmethod
    def coerce_size(cls, v: Any) -> Optional[int]:
        return _optional_int(v, minimum=0)

    @field_validator("maindeck", mode="before")
    @classmethod
    def coerce_maindeck(cls, v: Any) -> tuple:
        if not isinstance(v, (list, tuple)):
            return ()
        return tuple(c for c in v if isinstance(c, (CardRef, dict)))

    @classmethod
    def from_node(cls, node: Any) -> "TournamentEntry":
        """Build an entry from an edhtop16 ``entries.edges[].node`` dict.

        Expected shape::

            {
              "standing": 3,
              "tournament": {"size": 64},
              "maindeck": [{"name": "Sol Ring", "cardPreviewImageUrl": "..."}]
            }

        Missing or wrong-shaped parts are treated as absent; this never raises.
        """
        if not isinstance(node, dict):
            return cls()
        tournament = node.get("tournament")
        size = tournament.get("size") if isinstance(tournament, dict) else None
        return cls(
            standing=node.get("standing"),
            tournament_size=size,
            maindeck=node.get("maindeck"),
        )


class CardScore(BaseModel):
    """Accumulated performance weight for one card across all entries.

    Attributes:
        name: Card name; unique within one aggregation result.
        score: Sum of per-entry performance weights (>= 0).
        preview_image_url: First non-empty preview URL seen; may be ``""``.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    score: float
    preview_image_url: str = ""

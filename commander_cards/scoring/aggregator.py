"""
Card performance aggregation: reduces tournament entries into a ranked
list of per-card scores.

Performance weight
------------------
Each entry contributes the same weight to every card in its maindeck::

    performance = 1 - standing / tournament_size

    winner of a 100-player event  -> 0.99
    last place                    -> 0.0
    unknown or zero size          -> 0.0

A missing standing is treated as last place (``standing = size``), so it
contributes nothing.  The weight is clamped to [0, 1] so corrupt rows with
a standing beyond the field size cannot push a score negative.

Ordering
--------
Results are sorted by score descending.  Equal scores are ordered by card
name ascending so that output is identical across runs.

Both functions are pure: no I/O, no shared state, no input mutation.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from commander_cards.models.entry import CardScore, TournamentEntry

logger = logging.getLogger(__name__)


def performance_weight(entry: TournamentEntry) -> float:
    """Return the per-card weight an entry contributes, in [0.0, 1.0]."""
    size = entry.tournament_size or 0
    standing = entry.standing if entry.standing is not None else size
    if size <= 0 or standing >= size:
        return 0.0
    return min(1.0, max(0.0, 1.0 - standing / size))


def compute_scores(entries: Iterable[TournamentEntry]) -> list[CardScore]:
    """Aggregate per-card performance across ``entries``.

    Cards without a name are skipped.  Items that are not
    ``TournamentEntry`` instances are parsed as raw edhtop16 nodes via
    ``TournamentEntry.from_node``.  A card's preview URL is the first
    non-empty one encountered, in entry order then maindeck order.

    Args:
        entries: Tournament entries, in source order.

    Returns:
        One ``CardScore`` per distinct card name, highest score first,
        ties broken by name ascending.  Empty input gives an empty list.
    """
    tally: dict[str, list] = {}     # name -> [score, preview_url]
    n_entries = 0
    n_skipped = 0

    for entry in entries:
        if not isinstance(entry, TournamentEntry):
            # Raw source nodes (or junk) collapse to whatever parses; never raise.
            entry = TournamentEntry.from_node(entry)
        n_entries += 1
        performance = performance_weight(entry)
        for card in entry.maindeck:
            if not card.name:
                n_skipped += 1
                continue
            acc = tally.setdefault(card.name, [0.0, ""])
            acc[0] += performance
            if not acc[1] and card.preview_image_url:
                acc[1] = card.preview_image_url

    scores = [
        CardScore(name=name, score=score, preview_image_url=preview)
        for name, (score, preview) in tally.items()
    ]
    scores.sort(key=lambda s: (-s.score, s.name))

    logger.debug(
        "compute_scores: %d entries -> %d cards (%d unnamed skipped)",
        n_entries, len(scores), n_skipped,
    )
    return scores

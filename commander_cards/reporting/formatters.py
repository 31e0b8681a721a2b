"""
ASCII terminal formatters for CLI reporting commands.

All formatters return plain multi-line strings suitable for ``typer.echo()``.
"""

from __future__ import annotations

from collections.abc import Sequence

from commander_cards.models.entry import CardScore
from commander_cards.models.query import CommanderQuery


def format_query_banner(query: CommanderQuery, entry_count: int) -> str:
    """Return the query header plus the entry count line::

        === Tymna the Weaver ===
          one month • Events ≥ 32
          Found 57 event entries.
    """
    lines = [
        f"=== {query.commander_name} ===",
        f"  {query.time_period.label} • Events ≥ {query.min_event_size}",
    ]
    if entry_count > 0:
        lines.append(f"  Found {entry_count} event entries.")
    else:
        lines.append("  No event entries found.")
    return "\n".join(lines)


def format_scores_table(
    scores: Sequence[CardScore],
    limit: int | None = None,
) -> str:
    """Format ranked card scores as an ASCII table.

    Args:
        scores: Ranked scores, highest first.
        limit:  Show at most this many rows (``None`` = all).

    Returns:
        Multi-line string; a one-line notice when ``scores`` is empty.
    """
    if not scores:
        return "  (no results: no cards found for this query)"

    shown = scores if limit is None else scores[: max(0, limit)]
    name_width = max([4] + [len(s.name) for s in shown])
    rank_width = max(4, len(f"#{len(shown)}"))

    lines = [
        f"  {'Rank':>{rank_width}}  {'Card':<{name_width}}  {'Score':>8}",
        "  " + "-" * (rank_width + name_width + 12),
    ]
    for i, s in enumerate(shown, start=1):
        rank = f"#{i}"
        lines.append(f"  {rank:>{rank_width}}  {s.name:<{name_width}}  {s.score:>8.3f}")
    if len(shown) < len(scores):
        lines.append(f"  ... {len(scores) - len(shown)} more")
    return "\n".join(lines)

"""
Export helpers for ranked card scores.

``format_top_n_export()`` produces the plain deck-list text that deck
builders (Moxfield, Archidekt, ...) accept on paste::

    1 Sol Ring
    1 Mana Crypt

    1 Tymna the Weaver

The file writers return the written ``Path``.  CSV exports are flat so they
load directly in a spreadsheet without pre-processing.
"""

from __future__ import annotations

import csv
import json
import math
from collections.abc import Sequence
from pathlib import Path
from typing import Any

from commander_cards.models.entry import CardScore

SCORE_FIELDNAMES = ["rank", "name", "score", "preview_image_url"]


def clamp_top_n(n: Any, available: int) -> int:
    """Clamp a requested export size to ``[1, available]``.

    Fractional requests truncate (``"2.5"`` -> 2), non-numeric or NaN requests
    count as 1, and infinite or oversized ones take everything.  With nothing
    available the result is still 1; slicing an empty list then yields no cards.
    """
    try:
        requested = float(n)
    except (TypeError, ValueError):
        return 1
    except OverflowError:
        requested = math.inf
    if math.isnan(requested):
        return 1
    return int(max(1, min(available, requested)))


def format_top_n_export(
    scores: Sequence[CardScore],
    n: Any,
    anchor_name: str,
) -> str:
    """Render the top ``n`` cards plus the commander as deck-list text.

    Args:
        scores:      Ranked scores (already sorted, highest first).
        n:           Requested card count; clamped by ``clamp_top_n``.
        anchor_name: Commander name appended after a blank line.

    Returns:
        ``"1 <card>"`` lines, a blank line, then ``"1 <anchor>"``.
    """
    top = scores[: clamp_top_n(n, len(scores))]
    card_lines = "\n".join(f"1 {s.name}" for s in top)
    return f"{card_lines}\n\n1 {anchor_name.strip()}"


def scores_to_records(scores: Sequence[CardScore]) -> list[dict]:
    """Flatten scores into row dicts with a 1-based ``rank`` column."""
    return [
        {
            "rank":              i,
            "name":              s.name,
            "score":             round(s.score, 6),
            "preview_image_url": s.preview_image_url,
        }
        for i, s in enumerate(scores, start=1)
    ]


def export_to_text(text: str, path: Path) -> Path:
    """Write ``text`` to ``path`` (parent dirs created if missing)."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path


def export_to_csv(
    records: list[dict],
    path: Path,
    fieldnames: list[str] | None = None,
) -> Path:
    """Write ``records`` to a UTF-8 CSV file.

    Args:
        records:    List of row dicts.
        path:       Destination file path (parent dirs created if missing).
        fieldnames: Column order.  If None, uses the keys of the first record.

    Returns:
        ``path`` as written.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    if not records:
        path.write_text("", encoding="utf-8")
        return path
    cols = fieldnames or list(records[0].keys())
    with path.open("w", newline="", encoding="utf-8") as f:
        writer = csv.DictWriter(f, fieldnames=cols, extrasaction="ignore")
        writer.writeheader()
        writer.writerows(records)
    return path


def export_to_json(data: dict | list, path: Path) -> Path:
    """Write ``data`` to a pretty-printed JSON file."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data, indent=2, default=str), encoding="utf-8")
    return path

"""
Commander analysis: fetch entries, then aggregate them into card scores.

This is the only place that combines the entry source with the aggregator;
``compute_scores`` itself never performs I/O.

Usage::

    query  = CommanderQuery(commander_name="Tymna the Weaver", min_event_size=32)
    result = run_analysis(query, EdhTop16Client())
    result.scores[:10]
"""

from __future__ import annotations

import asyncio
import logging

from commander_cards.ingestion.edhtop16_client import EdhTop16Client
from commander_cards.models.query import AnalysisResult, CommanderQuery
from commander_cards.scoring.aggregator import compute_scores

logger = logging.getLogger(__name__)


async def analyze_commander(
    query: CommanderQuery,
    client: EdhTop16Client,
) -> AnalysisResult:
    """Fetch entries for ``query`` and rank their cards.

    Raises:
        Whatever ``EdhTop16Client.fetch_entries`` raises; nothing is caught here.
    """
    entries = await client.fetch_entries(
        query.commander_name,
        query.min_event_size,
        query.time_period,
    )
    scores = compute_scores(entries)
    logger.info(
        "Analysis complete: commander=%r entries=%d cards=%d",
        query.commander_name, len(entries), len(scores),
    )
    return AnalysisResult(query=query, entry_count=len(entries), scores=scores)


def run_analysis(query: CommanderQuery, client: EdhTop16Client) -> AnalysisResult:
    """Synchronous wrapper around ``analyze_commander`` for CLI use."""
    return asyncio.run(analyze_commander(query, client))


def run_fixture_analysis(query: CommanderQuery, client: EdhTop16Client) -> AnalysisResult:
    """Rank the client's built-in fixture entries instead of calling the network."""
    entries = client.get_fixture_entries()
    logger.info("Fixture mode: using %d built-in entries", len(entries))
    return AnalysisResult(
        query=query,
        entry_count=len(entries),
        scores=compute_scores(entries),
    )

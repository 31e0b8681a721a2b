"""Tests for commander_cards.pipeline.analyze (fetch-then-aggregate runner)."""

from __future__ import annotations

import asyncio

import pytest

from commander_cards.ingestion.edhtop16_client import EdhTop16Client, EntrySourceError
from commander_cards.models.query import CommanderQuery
from commander_cards.pipeline.analyze import (
    analyze_commander,
    run_analysis,
    run_fixture_analysis,
)
from commander_cards.taxonomy.time_period import TimePeriod

_PAYLOAD = {
    "data": {
        "commander": {
            "entries": {
                "edges": [
                    {"node": {"standing": 1, "tournament": {"size": 10},
                              "maindeck": [{"name": "Sol Ring"}, {"name": "Mana Crypt"}]}},
                    {"node": {"standing": 6, "tournament": {"size": 10},
                              "maindeck": [{"name": "Mana Crypt"}]}},
                ]
            }
        }
    }
}


def test_analyze_commander_ranks_fetched_entries(graphql_client) -> None:
    client, seen = graphql_client(_PAYLOAD)
    query = CommanderQuery(
        commander_name="Kinnan, Bonder Prodigy", min_event_size=16, time_period=TimePeriod.ONE_YEAR
    )
    result = asyncio.run(analyze_commander(query, client))

    assert result.query is query
    assert result.entry_count == 2
    assert [s.name for s in result.scores] == ["Mana Crypt", "Sol Ring"]
    assert result.scores[0].score == pytest.approx(1.3)
    assert len(seen) == 1


def test_run_analysis_sync_wrapper(graphql_client) -> None:
    client, _ = graphql_client(_PAYLOAD)
    result = run_analysis(CommanderQuery(commander_name="Kinnan, Bonder Prodigy"), client)
    assert result.entry_count == 2


def test_errors_propagate(graphql_client) -> None:
    client, _ = graphql_client({"errors": [{"message": "Commander not found"}]})
    with pytest.raises(EntrySourceError):
        run_analysis(CommanderQuery(commander_name="Nobody"), client)


def test_empty_source_gives_empty_result(graphql_client) -> None:
    client, _ = graphql_client({"data": {"commander": {"entries": {"edges": []}}}})
    result = run_analysis(CommanderQuery(commander_name="Nobody"), client)
    assert result.entry_count == 0
    assert result.scores == []


def test_fixture_analysis_uses_builtin_entries() -> None:
    result = run_fixture_analysis(CommanderQuery(commander_name="Tymna"), EdhTop16Client())
    assert result.entry_count == len(EdhTop16Client.FIXTURE_NODES)
    assert result.scores[0].name == "Sol Ring"
    names = [s.name for s in result.scores]
    assert len(names) == len(set(names))

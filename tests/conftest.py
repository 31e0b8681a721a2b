"""
Shared pytest fixtures for the commander_cards test suite.

Provides:
  - ``sample_entries``: three hand-built ``TournamentEntry`` records with
    known performance weights (0.5, 0.3, 0.0).
  - ``graphql_client``: factory returning an ``EdhTop16Client`` wired to an
    ``httpx.MockTransport`` so no test touches the network.
"""

from __future__ import annotations

from typing import Callable

import httpx
import pytest

from commander_cards.ingestion.edhtop16_client import EdhTop16Client
from commander_cards.models.entry import CardRef, TournamentEntry


@pytest.fixture
def sample_entries() -> list[TournamentEntry]:
    """Entries weighted 0.5, 0.3 and 0.0 sharing "Sol Ring"."""
    return [
        TournamentEntry(
            standing=5,
            tournament_size=10,
            maindeck=(
                CardRef(name="Sol Ring", preview_image_url=""),
                CardRef(name="Mana Crypt", preview_image_url="https://img/crypt.jpg"),
            ),
        ),
        TournamentEntry(
            standing=7,
            tournament_size=10,
            maindeck=(
                CardRef(name="Sol Ring", preview_image_url="https://img/sol-ring.jpg"),
                CardRef(name="Rhystic Study"),
            ),
        ),
        TournamentEntry(
            standing=None,
            tournament_size=64,
            maindeck=(
                CardRef(name="Sol Ring", preview_image_url="https://img/other.jpg"),
                CardRef(name="Force of Will"),
            ),
        ),
    ]


@pytest.fixture
def graphql_client() -> Callable[..., tuple[EdhTop16Client, list[httpx.Request]]]:
    """Return a factory ``(payload, status_code=200) -> (client, seen_requests)``."""

    def _factory(payload, status_code: int = 200):
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(status_code, json=payload)

        http_client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
        return EdhTop16Client(endpoint="https://test.local/graphql", http_client=http_client), seen

    return _factory

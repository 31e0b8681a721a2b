"""
edhtop16 GraphQL client — tournament entries for a commander.

API:   https://edhtop16.com/api/graphql

One query is issued per call::

    commander(name: $name) {
      entries(sortBy: TOP, filters: {minEventSize: $eventSize, timePeriod: <P>}) {
        edges { node { standing tournament { size } maindeck { name cardPreviewImageUrl } } }
      }
    }

``timePeriod`` is a GraphQL enum literal, so it is written into the query
text from a validated ``TimePeriod`` member rather than sent as a variable.

No authentication is required.  There is no pagination, retry or caching;
the caller decides what to do with failures.
"""

from __future__ import annotations

import logging
from typing import Any, ClassVar, Optional

import httpx

from commander_cards.models.entry import TournamentEntry
from commander_cards.taxonomy.time_period import TimePeriod

logger = logging.getLogger(__name__)

_QUERY_TEMPLATE = """
query CommanderCards($name: String!, $eventSize: Int!) {
  commander(name: $name) {
    entries(
      sortBy: TOP
      filters: { minEventSize: $eventSize, timePeriod: %(time_period)s }
    ) {
      edges {
        node {
          standing
          tournament { size }
          maindeck {
            name
            cardPreviewImageUrl
          }
        }
      }
    }
  }
}
"""


class EntrySourceError(RuntimeError):
    """The entry source answered, but with an error payload."""


def build_query(time_period: TimePeriod | str) -> str:
    """Return the GraphQL query text for ``time_period``.

    Raises:
        ValueError: If ``time_period`` is not a known ``TimePeriod``.
    """
    return _QUERY_TEMPLATE % {"time_period": TimePeriod(time_period).value}


def parse_entries(payload: Any) -> list[TournamentEntry]:
    """Extract entries from a GraphQL response body.

    Raises:
        EntrySourceError: If the body carries an ``errors`` list.
    """
    if not isinstance(payload, dict):
        return []
    errors = payload.get("errors")
    if errors:
        first = errors[0] if isinstance(errors, list) else None
        message = first.get("message") if isinstance(first, dict) else None
        raise EntrySourceError(message or "Unknown GraphQL error")

    edges: Any = payload
    for key in ("data", "commander", "entries", "edges"):
        edges = edges.get(key) if isinstance(edges, dict) else None
    if not isinstance(edges, list):
        return []
    return [
        TournamentEntry.from_node(edge.get("node") if isinstance(edge, dict) else None)
        for edge in edges
    ]


class EdhTop16Client:
    """Async client for commander tournament entries.

    Usage::

        client = EdhTop16Client()
        entries = await client.fetch_entries("Kinnan, Bonder Prodigy", 32, "ONE_YEAR")

    Offline / test mode::

        entries = EdhTop16Client().get_fixture_entries()

    Attributes:
        endpoint: GraphQL URL.
        timeout: Request timeout in seconds.
        http_client: Optional shared ``httpx.AsyncClient``.  When ``None``
            a client is opened and closed per call.
    """

    DEFAULT_ENDPOINT: ClassVar[str] = "https://edhtop16.com/api/graphql"

    FIXTURE_NODES: ClassVar[list[dict]] = [
        {
            "standing": 1,
            "tournament": {"size": 64},
            "maindeck": [
                {"name": "Sol Ring", "cardPreviewImageUrl": "https://cards.scryfall.io/normal/front/sol-ring.jpg"},
                {"name": "Mana Crypt", "cardPreviewImageUrl": ""},
                {"name": "Rhystic Study", "cardPreviewImageUrl": "https://cards.scryfall.io/normal/front/rhystic-study.jpg"},
            ],
        },
        {
            "standing": 8,
            "tournament": {"size": 32},
            "maindeck": [
                {"name": "Sol Ring", "cardPreviewImageUrl": ""},
                {"name": "Mystic Remora", "cardPreviewImageUrl": None},
            ],
        },
        {
            "standing": None,
            "tournament": {"size": 120},
            "maindeck": [
                {"name": "Sol Ring", "cardPreviewImageUrl": ""},
                {"name": "Force of Will", "cardPreviewImageUrl": ""},
            ],
        },
        {
            "standing": 20,
            "tournament": {"size": 40},
            "maindeck": [
                {"name": "Mana Crypt", "cardPreviewImageUrl": "https://cards.scryfall.io/normal/front/mana-crypt.jpg"},
                {"name": "Force of Will", "cardPreviewImageUrl": ""},
            ],
        },
    ]

    def __init__(
        self,
        endpoint: str = DEFAULT_ENDPOINT,
        timeout: float = 30.0,
        http_client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        self.endpoint = endpoint
        self.timeout = timeout
        self.http_client = http_client

    async def fetch_entries(
        self,
        commander_name: str,
        min_event_size: int = 1,
        time_period: TimePeriod | str = TimePeriod.ONE_MONTH,
    ) -> list[TournamentEntry]:
        """Fetch tournament entries for a commander, best finishes first.

        Args:
            commander_name: Exact commander name as edhtop16 knows it.
            min_event_size: Smallest event to include; values below 1 are sent as 1.
            time_period:    Tournament window.

        Returns:
            Entries in the order the service returned them.  An unknown
            commander yields an empty list.

        Raises:
            ValueError:            If ``time_period`` is not a ``TimePeriod``.
            httpx.HTTPStatusError: On a non-2xx response.
            httpx.TransportError:  On connection failures and timeouts.
            EntrySourceError:      If the response carries GraphQL errors.
        """
        period = TimePeriod(time_period)
        body = {
            "query": build_query(period),
            "variables": {"name": commander_name, "eventSize": max(1, int(min_event_size))},
        }
        logger.info(
            "Fetching entries: commander=%r min_event_size=%d time_period=%s",
            commander_name, body["variables"]["eventSize"], period,
        )

        if self.http_client is not None:
            resp = await self._post(self.http_client, body)
        else:
            async with httpx.AsyncClient() as client:
                resp = await self._post(client, body)

        resp.raise_for_status()
        entries = parse_entries(resp.json())
        logger.info("edhtop16 returned %d entries for %r", len(entries), commander_name)
        return entries

    async def _post(self, client: httpx.AsyncClient, body: dict) -> httpx.Response:
        return await client.post(
            self.endpoint,
            json=body,
            headers={"Content-Type": "application/json"},
            timeout=self.timeout,
        )

    # ── Fixture / stub mode ────────────────────────────────────────────────────

    def get_fixture_entries(self) -> list[TournamentEntry]:
        """Return built-in sample entries for offline runs and tests.

        The records are synthetic but shaped like real responses, including a
        missing standing and empty preview URLs.
        """
        entries = [TournamentEntry.from_node(node) for node in self.FIXTURE_NODES]
        logger.debug("EdhTop16Client: returning %d fixture entries", len(entries))
        return entries

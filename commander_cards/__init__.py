"""
commander_cards — rank the cards behind a commander's strongest tournament finishes.

Packages:
  ingestion — edhtop16 GraphQL entry source
  scoring   — pure card performance aggregation
  reporting — terminal formatters and deck-list / CSV / JSON exports
  pipeline  — fetch-then-aggregate runner used by the CLI
"""

__version__ = "0.1.0"

"""
commander_cards.reporting — formatting and export of ranked card scores.

Modules:
  formatters — ASCII terminal formatters for Typer CLI commands.
  export     — deck-list text, CSV and JSON export helpers.
"""

"""
Commander card performance — CLI entry point.

All commands follow this pattern:
  1. Load ``AppConfig`` via ``load_config()``.
  2. Configure logging.
  3. Build a ``CommanderQuery`` (CLI flags override config defaults).
  4. Fetch entries and rank cards.
  5. Report result to stdout.

Install and run::

    pip install -e .
    commander-cards --help
    commander-cards analyze "Tymna the Weaver" --min-event-size 32 --time-period ONE_YEAR
    commander-cards export "Tymna the Weaver" --top 60 --output tymna.txt
    commander-cards validate-config
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Optional

import typer

from commander_cards.taxonomy.time_period import TimePeriod

app = typer.Typer(
    name="commander-cards",
    help="Rank the cards that show up in a commander's strongest tournament finishes.",
    add_completion=False,
)


# ── Helpers ───────────────────────────────────────────────────────────────────

def _load_config_or_exit(config_path: Optional[str] = None):
    """Load AppConfig, printing a friendly error and exiting on failure."""
    from pydantic import ValidationError

    from commander_cards.config import load_config

    try:
        cfg_path = Path(config_path) if config_path else None
        return load_config(cfg_path)
    except FileNotFoundError as exc:
        typer.echo(f"[ERROR] {exc}", err=True)
        raise typer.Exit(code=1)
    except (ValidationError, ValueError) as exc:
        typer.echo(f"[ERROR] Config validation failed: {exc}", err=True)
        raise typer.Exit(code=1)


def _configure_logging(config):
    """Set up logging from config."""
    from commander_cards.utils.logging import configure_logging
    configure_logging(config.logging)


def _analyze_or_exit(
    config,
    commander_name: str,
    min_event_size: Optional[int],
    time_period: Optional[TimePeriod],
    fixture: bool,
):
    """Build the query, run the analysis, and map failures to exit code 1."""
    import httpx
    from pydantic import ValidationError

    from commander_cards.ingestion.edhtop16_client import EdhTop16Client, EntrySourceError
    from commander_cards.models.query import CommanderQuery
    from commander_cards.pipeline.analyze import run_analysis, run_fixture_analysis

    try:
        query = CommanderQuery(
            commander_name=commander_name,
            min_event_size=min_event_size or config.query.min_event_size,
            time_period=time_period or config.query.time_period,
        )
    except ValidationError as exc:
        typer.echo(f"[ERROR] Invalid query: {exc.errors()[0]['msg']}", err=True)
        raise typer.Exit(code=1)

    client = EdhTop16Client(
        endpoint=config.source.endpoint,
        timeout=config.source.timeout_seconds,
    )
    if fixture:
        return run_fixture_analysis(query, client)

    try:
        return run_analysis(query, client)
    except httpx.HTTPStatusError as exc:
        typer.echo(f"[ERROR] Network error: {exc.response.status_code}", err=True)
        raise typer.Exit(code=1)
    except httpx.HTTPError as exc:
        typer.echo(f"[ERROR] Network error: {exc}", err=True)
        raise typer.Exit(code=1)
    except EntrySourceError as exc:
        typer.echo(f"[ERROR] {exc}", err=True)
        raise typer.Exit(code=1)


# ── Commands ──────────────────────────────────────────────────────────────────

@app.command("analyze")
def analyze(
    commander_name: str = typer.Argument(..., help="Commander name, e.g. 'Tymna the Weaver'."),
    min_event_size: Optional[int] = typer.Option(
        None,
        "--min-event-size",
        "-e",
        min=1,
        help="Smallest tournament to include (default from config).",
    ),
    time_period: Optional[TimePeriod] = typer.Option(
        None,
        "--time-period",
        "-t",
        case_sensitive=False,
        help="Tournament window (default from config).",
    ),
    limit: Optional[int] = typer.Option(
        None,
        "--limit",
        "-n",
        min=1,
        help="Show only the top N cards in the table.",
    ),
    csv_path: Optional[str] = typer.Option(
        None, "--csv", help="Also write the full ranking to this CSV file."
    ),
    json_path: Optional[str] = typer.Option(
        None, "--json", help="Also write the full ranking to this JSON file."
    ),
    fixture: bool = typer.Option(
        False, "--fixture", help="Use built-in sample entries instead of the network."
    ),
    config_path: Optional[str] = typer.Option(
        None, "--config", help="Path to TOML config file."
    ),
) -> None:
    """Fetch a commander's tournament entries and rank every card they played."""
    from commander_cards.reporting.export import (
        SCORE_FIELDNAMES,
        export_to_csv,
        export_to_json,
        scores_to_records,
    )
    from commander_cards.reporting.formatters import format_query_banner, format_scores_table

    config = _load_config_or_exit(config_path)
    _configure_logging(config)

    result = _analyze_or_exit(config, commander_name, min_event_size, time_period, fixture)

    typer.echo(format_query_banner(result.query, result.entry_count))
    typer.echo("")
    typer.echo(format_scores_table(result.scores, limit=limit))

    records = scores_to_records(result.scores)
    if csv_path:
        out = export_to_csv(records, Path(csv_path), fieldnames=SCORE_FIELDNAMES)
        typer.echo(f"\n[OK] CSV written: {out}")
    if json_path:
        out = export_to_json(
            {
                "commander": result.query.commander_name,
                "min_event_size": result.query.min_event_size,
                "time_period": str(result.query.time_period),
                "entry_count": result.entry_count,
                "cards": records,
            },
            Path(json_path),
        )
        typer.echo(f"\n[OK] JSON written: {out}")


@app.command("export")
def export(
    commander_name: str = typer.Argument(..., help="Commander name; appended as the last line."),
    top: Optional[int] = typer.Option(
        None,
        "--top",
        help="Number of cards to export (clamped to [1, cards found]; default from config).",
    ),
    output: Optional[str] = typer.Option(
        None, "--output", "-o", help="Write the deck list to this file instead of stdout."
    ),
    min_event_size: Optional[int] = typer.Option(None, "--min-event-size", "-e", min=1),
    time_period: Optional[TimePeriod] = typer.Option(
        None, "--time-period", "-t", case_sensitive=False
    ),
    fixture: bool = typer.Option(False, "--fixture"),
    config_path: Optional[str] = typer.Option(None, "--config"),
) -> None:
    """Print the top-N cards as a paste-ready deck list with the commander last."""
    from commander_cards.reporting.export import export_to_text, format_top_n_export

    config = _load_config_or_exit(config_path)
    _configure_logging(config)

    result = _analyze_or_exit(config, commander_name, min_event_size, time_period, fixture)
    if not result.scores:
        typer.echo("[ERROR] No cards found for this query; nothing to export.", err=True)
        raise typer.Exit(code=1)

    text = format_top_n_export(
        result.scores,
        top if top is not None else config.query.top_n,
        result.query.commander_name,
    )
    if output:
        out = export_to_text(text + "\n", Path(output))
        typer.echo(f"[OK] Deck list written: {out}")
    else:
        typer.echo(text)


@app.command("validate-config")
def validate_config(
    config_path: Optional[str] = typer.Option(
        None,
        "--config",
        help="Path to TOML config file (default: config/default.toml).",
    ),
    show_full: bool = typer.Option(
        False,
        "--full",
        help="Print full config including all fields.",
    ),
) -> None:
    """Validate the configuration file and print parsed values.

    Exits with code 1 if the config fails validation.
    """
    config = _load_config_or_exit(config_path)

    typer.echo("Configuration validated successfully.")
    typer.echo("")
    typer.echo(f"  Endpoint:        {config.source.endpoint}")
    typer.echo(f"  Timeout:         {config.source.timeout_seconds}s")
    typer.echo(f"  Min event size:  {config.query.min_event_size}")
    typer.echo(f"  Time period:     {config.query.time_period}")
    typer.echo(f"  Export size:     {config.query.top_n}")
    typer.echo(f"  Log level:       {config.logging.level}")
    typer.echo(f"  Debug mode:      {config.debug}")

    if show_full:
        typer.echo("")
        typer.echo("Full config (JSON):")
        typer.echo(json.dumps(config.model_dump(), indent=2, default=str))

    typer.echo("")
    typer.echo("[OK] Config valid.")


if __name__ == "__main__":
    app()

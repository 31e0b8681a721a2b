"""
Tests for commander_cards.cli, driven through ``typer.testing.CliRunner``.

Network access is never used: commands run with ``--fixture`` or with
``EdhTop16Client.fetch_entries`` monkeypatched.
"""

from __future__ import annotations

import csv
import json
import logging
from pathlib import Path

import httpx
import pytest
from typer.testing import CliRunner

from commander_cards.cli import app
from commander_cards.ingestion.edhtop16_client import EdhTop16Client, EntrySourceError

runner = CliRunner()


@pytest.fixture(autouse=True)
def _reset_logging():
    yield
    root = logging.getLogger()
    for handler in list(root.handlers):
        root.removeHandler(handler)


def test_analyze_fixture_prints_ranking() -> None:
    result = runner.invoke(app, ["analyze", "Tymna the Weaver", "--fixture", "-e", "16"])
    assert result.exit_code == 0, result.output
    assert "=== Tymna the Weaver ===" in result.output
    assert "Events ≥ 16" in result.output
    assert "Sol Ring" in result.output


def test_analyze_writes_csv_and_json(tmp_path: Path) -> None:
    csv_path = tmp_path / "scores.csv"
    json_path = tmp_path / "scores.json"
    result = runner.invoke(
        app,
        ["analyze", "Tymna the Weaver", "--fixture",
         "--csv", str(csv_path), "--json", str(json_path), "-t", "ONE_YEAR"],
    )
    assert result.exit_code == 0, result.output

    with csv_path.open(encoding="utf-8") as f:
        rows = list(csv.DictReader(f))
    assert rows[0]["rank"] == "1"
    assert rows[0]["name"] == "Sol Ring"

    data = json.loads(json_path.read_text(encoding="utf-8"))
    assert data["commander"] == "Tymna the Weaver"
    assert data["time_period"] == "ONE_YEAR"
    assert data["entry_count"] == len(EdhTop16Client.FIXTURE_NODES)


def test_export_writes_deck_list(tmp_path: Path) -> None:
    out = tmp_path / "deck.txt"
    result = runner.invoke(
        app, ["export", "Tymna the Weaver", "--fixture", "--top", "2", "-o", str(out)]
    )
    assert result.exit_code == 0, result.output
    lines = out.read_text(encoding="utf-8").splitlines()
    assert lines == ["1 Sol Ring", "1 Mana Crypt", "", "1 Tymna the Weaver"]


def test_export_top_clamped_to_available(tmp_path: Path) -> None:
    out = tmp_path / "deck.txt"
    result = runner.invoke(
        app, ["export", "Tymna the Weaver", "--fixture", "--top", "500", "-o", str(out)]
    )
    assert result.exit_code == 0, result.output
    card_lines = out.read_text(encoding="utf-8").split("\n\n")[0].splitlines()
    assert len(card_lines) == 5


def test_upstream_error_exits_1(monkeypatch) -> None:
    async def _boom(self, *args, **kwargs):
        raise EntrySourceError("Commander not found")

    monkeypatch.setattr(EdhTop16Client, "fetch_entries", _boom)
    result = runner.invoke(app, ["analyze", "Nobody"])
    assert result.exit_code == 1
    assert "Commander not found" in result.output


def test_network_error_exits_1(monkeypatch) -> None:
    async def _refused(self, *args, **kwargs):
        raise httpx.ConnectError("connection refused")

    monkeypatch.setattr(EdhTop16Client, "fetch_entries", _refused)
    result = runner.invoke(app, ["export", "Tymna the Weaver"])
    assert result.exit_code == 1
    assert "Network error" in result.output


def test_export_with_no_cards_exits_1(monkeypatch) -> None:
    async def _empty(self, *args, **kwargs):
        return []

    monkeypatch.setattr(EdhTop16Client, "fetch_entries", _empty)
    result = runner.invoke(app, ["export", "Nobody"])
    assert result.exit_code == 1


def test_blank_commander_exits_1() -> None:
    result = runner.invoke(app, ["analyze", "   ", "--fixture"])
    assert result.exit_code == 1
    assert "Invalid query" in result.output


def test_validate_config() -> None:
    result = runner.invoke(app, ["validate-config", "--full"])
    assert result.exit_code == 0, result.output
    assert "[OK] Config valid." in result.output
    assert '"top_n": 99' in result.output


def test_validate_config_missing_file(tmp_path: Path) -> None:
    result = runner.invoke(app, ["validate-config", "--config", str(tmp_path / "none.toml")])
    assert result.exit_code == 1

# tests/test_cli.py

from __future__ import annotations

import json

from typer.testing import CliRunner

from edi_parser.cli import app
from edi_parser.utils import mock_file_path

runner = CliRunner()


def test_stats_command() -> None:
    result = runner.invoke(app, ["stats", str(mock_file_path("edifact_orders.edi"))])

    assert result.exit_code == 0, result.output
    assert "Messages" in result.output
    assert "UNH" in result.output


def test_segments_command_with_limit() -> None:
    result = runner.invoke(app, ["segments", str(mock_file_path("x12_850.edi")), "--limit", "3"])

    assert result.exit_code == 0, result.output
    assert "ISA" in result.output


def test_export_command_writes_json(tmp_path) -> None:
    out = tmp_path / "out.json"
    result = runner.invoke(
        app,
        ["export", str(mock_file_path("edifact_orders.edi")), "--out", str(out), "--pretty"],
    )

    assert result.exit_code == 0, result.output
    data = json.loads(out.read_text(encoding="utf-8"))
    assert data["separators"]["escape"] == "?"
    assert data["segments"][0] == {"tag": "UNA", "raw": "UNA:+.? "}
    assert data["segments"][2]["elements"][1] == ["ORDERS", "D", "96A", "UN"]
    assert data["segments"][3]["elements"][1] == ["PO+123"]


def test_regenerate_command(tmp_path) -> None:
    out = tmp_path / "out.edi"
    result = runner.invoke(
        app,
        ["regenerate", str(mock_file_path("edifact_orders.edi")), "--out", str(out), "--line-breaks"],
    )

    assert result.exit_code == 0, result.output
    lines = out.read_text(encoding="utf-8").split("\n")
    assert lines[0].startswith("UNB+")
    assert lines[-2] == "UNT+4+0001'"
    assert lines[-1] == "UNZ+1+REF001'"


def test_unknown_format_exits_with_error(tmp_path) -> None:
    bad = tmp_path / "bad.edi"
    bad.write_text("XYZ+1'", encoding="utf-8")

    result = runner.invoke(app, ["stats", str(bad)])

    assert result.exit_code == 1


def test_preset_option(tmp_path) -> None:
    plain = tmp_path / "plain.edi"
    plain.write_text("ST*850*0001~BEG*00*SA~", encoding="utf-8")

    result = runner.invoke(app, ["stats", str(plain), "--preset", "x12"])

    assert result.exit_code == 0, result.output
    assert "ST" in result.output

"""Tests for the command-line entry point."""

import json

import pytest

from svgpoly.main import build_summary, main
from svgpoly.svg.walker import load_svg
from tests.conftest import DRAWING_SVG, SPLIT_RECT_SVG


def test_summary_counts():
    summary = build_summary(load_svg(DRAWING_SVG), "drawing.svg")
    assert [p.id for p in summary.paths] == ["square", "moved", "stroke"]
    assert summary.failures == ["broken"]
    assert summary.closed_count == 2
    assert summary.open_count == 1
    assert summary.closed_area == pytest.approx(200.0)
    moved = summary.paths[1]
    assert moved.transformed
    assert moved.bbox == (50.0, 0.0, 60.0, 10.0)


def test_main_json(tmp_path, capsys):
    f = tmp_path / "rect.svg"
    f.write_text(SPLIT_RECT_SVG, encoding="utf-8")

    assert main([str(f), "--json", "--samples", "4"]) == 0

    data = json.loads(capsys.readouterr().out)
    assert data["samples"] == 4
    assert len(data["paths"]) == 4
    assert data["chains"] == [{"points": 5, "closed": True, "signed_area": 800.0}]


def test_main_text(tmp_path, capsys):
    f = tmp_path / "drawing.svg"
    f.write_text(DRAWING_SVG, encoding="utf-8")

    assert main([str(f)]) == 0

    out = capsys.readouterr().out
    assert "[drawing.svg]" in out
    assert "3 loaded, 1 failed" in out
    assert "broken: FAILED" in out


def test_main_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "nope.svg")]) == 1
    assert "File not found" in capsys.readouterr().out

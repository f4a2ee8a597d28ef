"""Tests for the easel CLI."""

import json
import logging
import shutil
from pathlib import Path

import pytest
from typer.testing import CliRunner

from easel.cli import app


FIXTURES_DIR = Path(__file__).parent / "fixtures"

runner = CliRunner()


@pytest.fixture(autouse=True)
def restore_logging():
    """Undo setup_logging() so later tests can capture easel log records."""
    logger = logging.getLogger("easel")
    handlers, level, propagate = logger.handlers[:], logger.level, logger.propagate
    yield
    logger.handlers[:] = handlers
    logger.setLevel(level)
    logger.propagate = propagate


@pytest.fixture
def track_canvas(tmp_path):
    path = tmp_path / "canvas.json"
    shutil.copy(FIXTURES_DIR / "canvas_sound_empty.json", path)
    return path


class TestValidate:
    """Tests for the validate command."""

    def test_valid_canvas(self):
        result = runner.invoke(app, ["validate", str(FIXTURES_DIR / "canvas_image.json")])
        assert result.exit_code == 0
        assert "Validation passed" in result.output

    def test_valid_manifest(self):
        result = runner.invoke(app, ["validate", str(FIXTURES_DIR / "manifest_simple.json")])
        assert result.exit_code == 0

    def test_invalid_canvas(self):
        """Test that issues are listed and exit with code 2."""
        result = runner.invoke(app, ["validate", str(FIXTURES_DIR / "canvas_invalid.json")])

        assert result.exit_code == 2
        assert "2 issue(s)" in result.output
        assert "items[0].items[1].target" in result.output

    def test_missing_file(self, tmp_path):
        """Test that an unreadable document exits with code 1."""
        result = runner.invoke(app, ["validate", str(tmp_path / "missing.json")])
        assert result.exit_code == 1


class TestDescribe:
    """Tests for the describe command."""

    def test_describe_manifest(self):
        """Test one summary line per canvas."""
        result = runner.invoke(app, ["describe", str(FIXTURES_DIR / "manifest_simple.json")])

        assert result.exit_code == 0
        lines = result.output.strip().splitlines()
        assert lines == [
            "https://example.org/iiif/book1/page1/canvas-1\tspatial\tpainting=1\tsupplementing=0",
            "https://example.org/iiif/book1/page2/canvas-2\tspatial\tpainting=0\tsupplementing=0",
        ]

    def test_describe_canvas(self):
        result = runner.invoke(app, ["describe", str(FIXTURES_DIR / "canvas_sound_choice.json")])
        assert result.exit_code == 0
        assert "\ttemporal\tpainting=1\t" in result.output


class TestPaint:
    """Tests for the paint command."""

    def test_paint_track(self, track_canvas):
        """Test painting a track into a time range and writing the canvas."""
        result = runner.invoke(
            app,
            [
                "paint",
                str(track_canvas),
                str(FIXTURES_DIR / "sound_track1.json"),
                "--selector",
                "t=0,300",
            ],
        )

        assert result.exit_code == 0, result.output
        data = json.loads(track_canvas.read_text(encoding="utf-8"))
        annotation = data["items"][0]["items"][0]
        assert annotation["id"] == "https://example.org/iiif/lp1/side1/track1/annotation/painting-1"
        assert annotation["target"]["selector"]["value"] == "t=0,300"
        assert annotation["body"]["type"] == "Sound"

    def test_paint_to_out(self, track_canvas, tmp_path):
        """Test that --out leaves the input canvas untouched."""
        out = tmp_path / "out" / "painted.json"
        original = track_canvas.read_text(encoding="utf-8")

        result = runner.invoke(
            app,
            [
                "paint",
                str(track_canvas),
                str(FIXTURES_DIR / "sound_track1.json"),
                "--supplement",
                "--out",
                str(out),
            ],
        )

        assert result.exit_code == 0, result.output
        assert track_canvas.read_text(encoding="utf-8") == original
        data = json.loads(out.read_text(encoding="utf-8"))
        assert data["annotations"][0]["items"][0]["motivation"] == "supplementing"

    def test_paint_out_of_bounds(self, track_canvas):
        """Test that a rejected placement exits with code 1 and writes nothing."""
        original = track_canvas.read_text(encoding="utf-8")

        result = runner.invoke(
            app,
            [
                "paint",
                str(track_canvas),
                str(FIXTURES_DIR / "sound_track1.json"),
                "--selector",
                "t=3600,7200",
            ],
        )

        assert result.exit_code == 1
        assert "selector-out-of-bounds" in result.output
        assert track_canvas.read_text(encoding="utf-8") == original

    def test_paint_malformed_selector(self, track_canvas):
        result = runner.invoke(
            app,
            [
                "paint",
                str(track_canvas),
                str(FIXTURES_DIR / "sound_track1.json"),
                "--selector",
                "t=",
            ],
        )
        assert result.exit_code == 1
        assert "argument" in result.output

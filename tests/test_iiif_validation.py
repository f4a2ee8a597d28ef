"""Tests for IIIF v3 validation."""

from pathlib import Path

from easel.iiif.v3 import (
    Annotation,
    AnnotationPage,
    Canvas,
    ImageContent,
    Manifest,
    Range,
    load_json,
    parse_canvas,
    parse_manifest,
    validate_canvas,
    validate_manifest,
)


FIXTURES_DIR = Path(__file__).parent / "fixtures"

CANVAS_ID = "https://example.org/iiif/book1/page1/canvas-1"


def load_fixture_canvas(name):
    return parse_canvas(load_json(str(FIXTURES_DIR / name)))


class TestCanvasValidation:
    """Tests for canvas validation."""

    def test_valid_canvas_passes(self):
        """Test that a canvas with fitting content passes validation."""
        assert validate_canvas(load_fixture_canvas("canvas_image.json")) == []

    def test_choice_canvas_passes(self):
        """Test that empty Choice slots are not reported."""
        assert validate_canvas(load_fixture_canvas("canvas_sound_choice.json")) == []

    def test_invalid_canvas_reports_each_annotation(self):
        """Test that oversized content and out-of-range targets are both reported."""
        issues = validate_canvas(load_fixture_canvas("canvas_invalid.json"))

        assert [issue.path for issue in issues] == [
            "items[0].items[0].body",
            "items[0].items[1].target",
        ]
        assert "960" in issues[0].message

    def test_wrong_page_reported(self):
        """Test that a supplementing annotation on a painting page is reported."""
        canvas = Canvas(id=CANVAS_ID, width=480, height=360)
        canvas.set_painting_pages(
            AnnotationPage(
                id="https://example.org/iiif/book1/page1/annotation/painting-page-1",
                items=[
                    Annotation(
                        id="https://example.org/iiif/book1/page1/annotation/supplementing-1",
                        motivation="supplementing",
                        body=[ImageContent(id="https://example.org/a.jpg")],
                        target=CANVAS_ID,
                    )
                ],
            )
        )

        issues = validate_canvas(canvas)
        assert [issue.path for issue in issues] == ["items[0].items[0].motivation"]

    def test_other_canvas_target_reported(self):
        """Test that an annotation targeting another canvas is reported."""
        canvas = Canvas(id=CANVAS_ID, width=480, height=360)
        canvas.set_painting_pages(
            AnnotationPage(
                id="https://example.org/iiif/book1/page1/annotation/painting-page-1",
                items=[
                    Annotation(
                        id="https://example.org/iiif/book1/page1/annotation/painting-1",
                        motivation="painting",
                        body=[ImageContent(id="https://example.org/a.jpg")],
                        target="https://example.org/iiif/book1/page2/canvas-2",
                    )
                ],
            )
        )

        issues = validate_canvas(canvas)
        assert len(issues) == 1
        assert issues[0].path == "items[0].items[0].target"
        assert "canvas-2" in issues[0].message

    def test_empty_body_reported(self):
        """Test that an annotation with no content is reported."""
        canvas = Canvas(id=CANVAS_ID, width=480, height=360)
        canvas.set_supplementing_pages(
            AnnotationPage(
                id="https://example.org/iiif/book1/page1/annotation/supplementing-page-1",
                items=[
                    Annotation(
                        id="https://example.org/iiif/book1/page1/annotation/supplementing-1",
                        motivation="supplementing",
                        target=CANVAS_ID,
                    )
                ],
            )
        )

        issues = validate_canvas(canvas)
        assert [issue.path for issue in issues] == ["annotations[0].items[0].body"]

    def test_malformed_selector_reported(self):
        """Test that an unreadable target selector is reported, not raised."""
        canvas = parse_canvas({
            "id": CANVAS_ID,
            "type": "Canvas",
            "width": 480,
            "height": 360,
            "items": [{
                "id": "https://example.org/iiif/book1/page1/annotation/painting-page-1",
                "type": "AnnotationPage",
                "items": [{
                    "id": "https://example.org/iiif/book1/page1/annotation/painting-1",
                    "type": "Annotation",
                    "motivation": "painting",
                    "body": {"id": "https://example.org/a.jpg", "type": "Image"},
                    "target": {"type": "SpecificResource", "source": CANVAS_ID, "selector": "xywh="},
                }],
            }],
        })

        issues = validate_canvas(canvas)
        assert [issue.path for issue in issues] == ["items[0].items[0].target"]


class TestManifestValidation:
    """Tests for manifest validation."""

    def test_valid_manifest_passes(self):
        """Test that a valid manifest passes validation."""
        data = load_json(str(FIXTURES_DIR / "manifest_simple.json"))
        manifest = parse_manifest(data)
        assert validate_manifest(manifest) == []

    def test_manifest_without_canvases_fails(self):
        """Test that a manifest without canvases fails validation."""
        manifest = Manifest(id="https://example.org/iiif/empty/manifest")
        issues = validate_manifest(manifest)

        assert len(issues) == 1
        assert issues[0].path == "items"

    def test_canvas_issues_prefixed(self):
        """Test that canvas issues carry the canvas position in the manifest."""
        manifest = Manifest(id="https://example.org/iiif/book1/manifest")
        manifest.add_canvas(load_fixture_canvas("canvas_invalid.json"))

        issues = validate_manifest(manifest)
        assert [issue.path for issue in issues] == [
            "items[0].items[0].items[0].body",
            "items[0].items[0].items[1].target",
        ]

    def test_duplicate_canvas_ids(self):
        """Test that repeated canvas ids are reported."""
        manifest = Manifest(id="https://example.org/iiif/book1/manifest")
        manifest.add_canvas(
            Canvas(id=CANVAS_ID, width=480, height=360),
            Canvas(id=CANVAS_ID, width=480, height=360),
        )

        issues = validate_manifest(manifest)
        assert [issue.path for issue in issues] == ["items[1].id"]

    def test_range_unknown_canvas(self):
        """Test that ranges must reference canvases in the manifest."""
        canvas = Canvas(id=CANVAS_ID, width=480, height=360)
        stray = Canvas(id="https://example.org/iiif/book2/page1/canvas-1", width=10, height=10)

        manifest = Manifest(id="https://example.org/iiif/book1/manifest")
        manifest.add_canvas(canvas)
        manifest.add_range(
            Range(id="https://example.org/iiif/book1/range/r1").add_canvas(canvas).add_canvas(stray)
        )

        issues = validate_manifest(manifest)
        assert len(issues) == 1
        assert issues[0].path == "structures[0]"
        assert stray.id in issues[0].message

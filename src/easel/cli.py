"""
Easel CLI

Commands:
- validate: Check painted content against canvas dimensions
- describe: Summarize the canvases of a manifest or canvas document
- paint: Paint content resources onto a canvas and write the result
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from datetime import datetime, timezone

import httpx
import pydantic
import typer
import logging

from easel.iiif.v3 import (
    Canvas,
    Motivation,
    PresentationError,
    dumps,
    is_manifest,
    load_canvas,
    load_json,
    parse_canvas,
    parse_content,
    parse_manifest,
    validate_canvas,
    validate_manifest,
)

app = typer.Typer(add_completion=False, help="IIIF Presentation 3.0 canvas tooling")


class JsonFormatter(logging.Formatter):
    """Simple JSON formatter for structured logs."""
    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "ts": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "msg": record.getMessage(),
            "logger": record.name,
        }
        # Include any custom attributes passed via `extra=`.
        reserved = {
            "name","msg","args","levelname","levelno","pathname","filename","module",
            "exc_info","exc_text","stack_info","lineno","funcName","created","msecs",
            "relativeCreated","thread","threadName","processName","process","taskName",
        }
        for k, v in record.__dict__.items():
            if k in reserved or k.startswith("_"):
                continue
            try:
                json.dumps(v)
                payload[k] = v
            except TypeError:
                payload[k] = repr(v)
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False)


def setup_logging(level: str) -> logging.Logger:
    logger = logging.getLogger("easel")
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    handler = logging.StreamHandler()
    handler.setFormatter(JsonFormatter())
    logger.handlers[:] = [handler]
    logger.propagate = False
    return logger


LOGGER = logging.getLogger("easel")


def _load_document(path_or_url: str) -> tuple[dict[str, Any], Any]:
    try:
        data = load_json(path_or_url)
    except (OSError, httpx.HTTPError, json.JSONDecodeError) as e:
        typer.echo(f"❌ Could not read {path_or_url}: {e}", err=True)
        raise typer.Exit(code=1)

    try:
        resource = parse_manifest(data) if is_manifest(data) else parse_canvas(data)
    except pydantic.ValidationError as e:
        typer.echo(f"❌ Not a IIIF v3 manifest or canvas: {e}", err=True)
        raise typer.Exit(code=1)
    return data, resource


@app.command("validate")
def validate_cmd(
    manifest_or_canvas: str = typer.Argument(..., help="Manifest or Canvas JSON path or URL"),
    log_level: str = typer.Option("WARNING", "--log-level", help="Log level"),
) -> None:
    """Check that painted and supplementing content fits its canvases."""
    global LOGGER
    LOGGER = setup_logging(log_level)

    _data, resource = _load_document(manifest_or_canvas)
    if isinstance(resource, Canvas):
        issues = validate_canvas(resource)
    else:
        issues = validate_manifest(resource)

    if issues:
        typer.echo(f"❌ Validation failed: {len(issues)} issue(s)\n")
        for i, issue in enumerate(issues, start=1):
            typer.echo(f"  {i:>3}. {issue.path}: {issue.message}")
        raise typer.Exit(code=2)

    typer.echo("✅ Validation passed.")


@app.command("describe")
def describe_cmd(
    manifest_or_canvas: str = typer.Argument(..., help="Manifest or Canvas JSON path or URL"),
) -> None:
    """Print one line per canvas: id, dimension kind, annotation counts."""
    _data, resource = _load_document(manifest_or_canvas)
    canvases = [resource] if isinstance(resource, Canvas) else resource.canvases()

    for canvas in canvases:
        painting = sum(1 for _ in canvas.annotations(Motivation.PAINTING))
        supplementing = sum(1 for _ in canvas.annotations(Motivation.SUPPLEMENTING))
        typer.echo(
            f"{canvas.id}\t{canvas.kind.value}\t"
            f"painting={painting}\tsupplementing={supplementing}"
        )


@app.command("paint")
def paint_cmd(
    canvas_path: Path = typer.Argument(..., help="Canvas JSON file"),
    resources: list[Path] = typer.Argument(
        ..., help="Content resource JSON files; several make a choice"
    ),
    selector: str | None = typer.Option(
        None, "--selector", help="Media fragment, e.g. xywh=0,0,480,360 or t=0,300"
    ),
    supplement: bool = typer.Option(
        False, "--supplement", help="Add a supplementing annotation instead of painting"
    ),
    out: Path | None = typer.Option(
        None, "--out", help="Output path (default: overwrite the canvas file)"
    ),
    log_level: str = typer.Option("INFO", "--log-level", help="Log level"),
) -> None:
    """
    Paint content onto a canvas (or a region of it) and write the canvas JSON.

    Example:
        easel paint canvas.json page1.json bitonal.json --selector xywh=0,0,480,360
    """
    global LOGGER
    LOGGER = setup_logging(log_level)

    canvas_path = canvas_path.expanduser()
    out = (out or canvas_path).expanduser()

    try:
        canvas = load_canvas(str(canvas_path))
        contents = [parse_content(load_json(str(p.expanduser()))) for p in resources]
    except (OSError, json.JSONDecodeError, ValueError) as e:
        typer.echo(f"❌ Could not read input: {e}", err=True)
        raise typer.Exit(code=1)

    try:
        if supplement:
            canvas.supplement_with(*contents, selector=selector)
        else:
            canvas.paint_with(*contents, selector=selector)
    except PresentationError as e:
        LOGGER.error("Placement rejected", extra={"kind": e.kind.value, "canvas_id": canvas.id})
        typer.echo(f"❌ {e.kind.value}: {e}", err=True)
        raise typer.Exit(code=1)

    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_text(dumps(canvas) + "\n", encoding="utf-8")
    typer.echo(f"✅ Wrote {out}")


def main() -> None:
    app()


if __name__ == "__main__":
    main()

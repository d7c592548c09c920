"""
CLI entry point for jsdocview.

Headless access to the documentation extractor and the HTML preview.
Uses Typer for the command surface.

Usage:
    jsdocview extract app.js
    jsdocview render app.js --output app.html
    jsdocview watch app.js --output app.html --interval 1.0
"""

from __future__ import annotations

import json
import logging
import sys
import time
from dataclasses import asdict
from pathlib import Path
from typing import Annotated, Any

import typer
from pydantic import ValidationError

from jsdocview.adapters.html import HtmlRenderer
from jsdocview.adapters.treesitter import Comment, SyntaxManager
from jsdocview.modules.extraction import Element, group_comments_by_proximity
from jsdocview.services.config_models import JsDocViewSettings
from jsdocview.services.extraction import DocumentAssembler, is_structured
from jsdocview.services.session import PreviewError, PreviewSession, SourceDocument, ensure_supported

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="jsdocview",
    help="jsdocview - Documentation preview for JavaScript source files",
    no_args_is_help=True,
)

FileArgument = Annotated[
    Path,
    typer.Argument(help="JavaScript source file", exists=True, dir_okay=False, readable=True),
]
LanguageOption = Annotated[
    str | None,
    typer.Option("--language", "-l", help="Language id (detected from the extension by default)"),
]


# =============================================================================
# Helpers
# =============================================================================


def _load_settings() -> JsDocViewSettings:
    try:
        settings = JsDocViewSettings()
    except ValidationError as e:
        typer.echo(f"Error: invalid configuration: {e}", err=True)
        raise typer.Exit(1)
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    return settings


def _language_for(path: Path, language: str | None) -> str:
    if language:
        return language
    return SyntaxManager.detect_language(str(path)) or path.suffix.lstrip(".") or "plaintext"


def _read_document(path: Path, language: str | None, version: int = 0) -> SourceDocument:
    return SourceDocument(
        uri=path.resolve().as_uri(),
        language_id=_language_for(path, language),
        text=path.read_text(encoding="utf-8"),
        version=version,
    )


def _item_to_dict(item: Element | Comment) -> dict[str, Any]:
    if isinstance(item, Element):
        return item.to_dict()
    return asdict(item)


def _write_output(output: Path | None, html: str) -> None:
    if output is None:
        typer.echo(html)
    else:
        output.write_text(html, encoding="utf-8")


# =============================================================================
# Commands
# =============================================================================


@app.command("extract")
def extract_file(file: FileArgument, language: LanguageOption = None) -> None:
    """Print the extracted documentation of a file as JSON."""
    _load_settings()
    try:
        document = ensure_supported(_read_document(file, language))
    except PreviewError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    program, items = DocumentAssembler().extract_with_program(document.text)

    if not items:
        mode = "empty"
    elif is_structured(items):
        mode = "structured"
    else:
        mode = "raw"

    payload: dict[str, Any] = {
        "mode": mode,
        "items": [_item_to_dict(item) for item in items],
    }

    if program is not None:
        elements = [item for item in items if isinstance(item, Element)]
        groups = group_comments_by_proximity(program.comments, elements)
        payload["stats"] = {
            "comments": len(program.comments),
            "attached": len(groups.attached),
            "inline": len(groups.inline),
            "standalone": len(groups.standalone),
        }

    typer.echo(json.dumps(payload, indent=2, default=str))


@app.command("render")
def render_file(
    file: FileArgument,
    output: Annotated[
        Path | None, typer.Option("--output", "-o", help="Write the HTML here instead of stdout")
    ] = None,
    language: LanguageOption = None,
) -> None:
    """Render the documentation of a file as HTML."""
    settings = _load_settings()
    renderer = HtmlRenderer(title=settings.document_title)
    session = PreviewSession(on_render=lambda html: _write_output(output, html), renderer=renderer)

    with session:
        try:
            session.open(_read_document(file, language))
        except PreviewError as e:
            typer.echo(f"Error: {e}", err=True)
            raise typer.Exit(1)

    if output is not None:
        typer.echo(f"Wrote {output}")


@app.command("watch")
def watch_file(
    file: FileArgument,
    output: Annotated[Path, typer.Option("--output", "-o", help="HTML file to keep up to date")],
    interval: Annotated[
        float | None,
        typer.Option("--interval", help="Polling interval in seconds", min=0.01),
    ] = None,
    language: LanguageOption = None,
) -> None:
    """Re-render a file's documentation whenever it changes. Stop with Ctrl+C."""
    settings = _load_settings()
    interval = interval or settings.watch_interval
    renderer = HtmlRenderer(title=settings.document_title)

    def write(html: str) -> None:
        output.write_text(html, encoding="utf-8")
        logger.info("Rendered %s", output)

    with PreviewSession(on_render=write, renderer=renderer) as session:
        version = 0
        last_mtime = file.stat().st_mtime_ns
        try:
            session.open(_read_document(file, language, version))
        except PreviewError as e:
            typer.echo(f"Error: {e}", err=True)
            raise typer.Exit(1)

        typer.echo(f"Watching {file} (every {interval}s), writing {output}")
        try:
            while True:
                time.sleep(interval)
                try:
                    mtime = file.stat().st_mtime_ns
                except FileNotFoundError:
                    typer.echo(f"Error: {file} was removed", err=True)
                    raise typer.Exit(1)
                if mtime == last_mtime:
                    continue
                last_mtime = mtime
                version += 1
                session.notify_change(_read_document(file, language, version))
        except KeyboardInterrupt:
            typer.echo("Stopped watching")


def main() -> int:
    """Main entry point."""
    try:
        app()
        return 0
    except SystemExit as e:
        return e.code if isinstance(e.code, int) else 1


if __name__ == "__main__":
    sys.exit(main())

"""
Services layer for jsdocview.

Shared orchestration for the CLI and any editor host:

    extraction: DocumentAssembler, the never-raising extract() entry point
    session: PreviewSession, live preview bound to one document
    config_models: JsDocViewSettings (pydantic-settings)

Usage:
    from jsdocview.services.extraction import extract
    from jsdocview.adapters.html import render_document

    html = render_document(extract(source))
"""

from __future__ import annotations

from . import config_models, extraction, session

__all__ = ["config_models", "extraction", "session"]

from __future__ import annotations

from fastapi import HTTPException, Request

from quotedoc.engine.renderer import QuoteDocumentRenderer


def get_renderer(request: Request) -> QuoteDocumentRenderer:
    """Renderer built at startup (see app.main)."""
    renderer = getattr(request.app.state, "renderer", None)
    if renderer is None:
        raise HTTPException(status_code=503, detail="Quote renderer not initialised")
    return renderer

# app/routers/quotes.py
from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import HTMLResponse

from app.core.logging_config import logger
from app.core.settings import get_settings, resolve_template_paths
from app.dependencies import get_renderer
from app.schemas.quote import RenderQuoteRequest, TemplateStatus
from quotedoc.engine.errors import MalformedTemplateError
from quotedoc.engine.renderer import QuoteDocumentRenderer

router = APIRouter(prefix="/quotes", tags=["quotes"])


@router.post("/render", response_class=HTMLResponse)
def render_quote(
    payload: RenderQuoteRequest,
    renderer: QuoteDocumentRenderer = Depends(get_renderer),
) -> HTMLResponse:
    try:
        html = renderer.render(payload.quote_data, payload.ui, payload.metadata)
    except MalformedTemplateError as e:
        logger.error("quote_render_failed", quote_id=payload.metadata.quote_id, error=str(e))
        raise HTTPException(status_code=500, detail=str(e))

    if html is None:
        # templates nog niet geladen
        raise HTTPException(status_code=503, detail="Quote templates are not loaded yet")
    return HTMLResponse(content=html)


@router.post("/reload-templates", response_model=TemplateStatus)
async def reload_templates(renderer: QuoteDocumentRenderer = Depends(get_renderer)) -> TemplateStatus:
    s = get_settings()
    ok = await renderer.initialize(resolve_template_paths(s), timeout=s.TEMPLATE_FETCH_TIMEOUT)
    if not ok:
        raise HTTPException(status_code=502, detail="Could not load quote templates")
    return TemplateStatus(templates_loaded=renderer.is_ready)

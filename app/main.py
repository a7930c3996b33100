# app/main.py
import time
import uuid

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from app.core.logging_config import bind_request_context, logger, setup_logging
from app.core.settings import resolve_template_paths, settings
from app.routers import quotes
from app.services.pricing import PrecomputedPricingProvider
from quotedoc.engine.renderer import QuoteDocumentRenderer


# ----------------------------------------------------
# App init
# ----------------------------------------------------
setup_logging(settings.LOG_LEVEL)

app = FastAPI(title=settings.APP_NAME, version="0.1.0")


@app.on_event("startup")
async def _load_quote_templates():
    # Templates worden één keer opgehaald; mislukt dit, dan geeft /quotes/render 503
    renderer = QuoteDocumentRenderer(PrecomputedPricingProvider(settings.ACCESSORY_PRICES))
    await renderer.initialize(
        resolve_template_paths(settings),
        timeout=settings.TEMPLATE_FETCH_TIMEOUT,
    )
    app.state.renderer = renderer
    logger.info("startup", service="rollerquote-api", templates_loaded=renderer.is_ready)


# ----------------------------------------------------
# Health
# ----------------------------------------------------
@app.get("/health", include_in_schema=True)
def health(request: Request) -> dict:
    renderer = getattr(request.app.state, "renderer", None)
    return {"status": "ok", "templates_loaded": bool(renderer and renderer.is_ready)}


# ----------------------------------------------------
# Logging middleware
# ----------------------------------------------------
@app.middleware("http")
async def logging_middleware(request: Request, call_next):
    start = time.time()

    request_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())
    client_ip = request.client.host if request.client else "unknown"

    bind_request_context(request_id=request_id)
    bound_logger = logger.bind(
        ip=client_ip,
        endpoint=str(request.url.path),
        method=request.method,
    )

    bound_logger.info("request_started")
    response = await call_next(request)
    latency_ms = round((time.time() - start) * 1000, 2)

    bound_logger.bind(status_code=response.status_code, latency_ms=latency_ms).info(
        "request_finished"
    )
    response.headers["X-Request-ID"] = request_id
    return response


# ----------------------------------------------------
# Middleware
# ----------------------------------------------------
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ----------------------------------------------------
# Routers
# ----------------------------------------------------
app.include_router(quotes.router)

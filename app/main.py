"""
Main FastAPI application for the discovery objections backend.
Handles CORS, request logging middleware, lifespan events, error mapping,
and router registration.
"""
import logging
import time
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.config import settings
from app.exceptions import DiscoveryError
from app.routers import discovery, health, ui
from app.services.llm_client import CompletionClient

# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Lifespan
# ---------------------------------------------------------------------------

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Build the completion client on startup and close it on shutdown."""
    logger.info("=" * 60)
    logger.info("  Starting discovery objections backend …")
    logger.info("=" * 60)

    app.state.completion_client = CompletionClient.from_settings(settings)
    logger.info("✓ Completion endpoint: %s (model %s)", settings.LLM_BASE_URL, settings.LLM_MODEL)
    if not settings.LLM_API_KEY:
        logger.warning(
            "⚠ LLM_API_KEY is not set — generation requests will fail until it is configured."
        )

    logger.info("=" * 60)
    logger.info("  Ready on http://%s:%d", settings.HOST, settings.PORT)
    logger.info("  Swagger UI : http://%s:%d/docs", settings.HOST, settings.PORT)
    logger.info("=" * 60)

    yield  # ← server is running

    logger.info("Shutting down …")
    await app.state.completion_client.aclose()
    logger.info("✓ Shutdown complete.")


# ---------------------------------------------------------------------------
# Application
# ---------------------------------------------------------------------------

app = FastAPI(
    title="Discovery Objections API",
    description=(
        "Generates objections and answers to legal discovery requests.\n\n"
        "Key endpoints:\n"
        "- `POST /process-document` — objections (plus answers with a fact pattern)\n"
        "- `POST /generate-answers` — objections and substantive answers\n"
        "- `POST /generate-docx` — download generated text as a Word document\n"
    ),
    version="0.1.0",
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
)


# ---------------------------------------------------------------------------
# CORS
# ---------------------------------------------------------------------------

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.get_allowed_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
    expose_headers=["Content-Disposition"],
)


# ---------------------------------------------------------------------------
# Request / response logging middleware
# ---------------------------------------------------------------------------

@app.middleware("http")
async def log_requests(request: Request, call_next):
    """
    Log every request with method, path, status code, and elapsed time.
    Attaches an ``X-Process-Time`` header (milliseconds) to every response.
    """
    t0 = time.monotonic()
    response = await call_next(request)
    elapsed_ms = round((time.monotonic() - t0) * 1000, 2)

    # Skip noisy health-check polling
    if request.url.path not in ("/health", "/health/"):
        logger.info(
            "%s %s → %d  (%.2f ms)",
            request.method,
            request.url.path,
            response.status_code,
            elapsed_ms,
        )

    response.headers["X-Process-Time"] = f"{elapsed_ms}ms"
    return response


# ---------------------------------------------------------------------------
# Exception handlers
# ---------------------------------------------------------------------------

@app.exception_handler(DiscoveryError)
async def discovery_error_handler(request: Request, exc: DiscoveryError):
    """Map domain errors to ``{"error": message}`` with their own status."""
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    else:
        logger.info("%s %s rejected: %s", request.method, request.url.path, exc.message)
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    """Report malformed bodies and form fields as 400 ``{"error": message}``."""
    message = validation_message(exc.errors())
    logger.info("%s %s rejected: %s", request.method, request.url.path, message)
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"error": message})


def validation_message(errors) -> str:
    """Turn the first validation error into a short, field-specific message."""
    if not errors:
        return "Invalid request"
    first = errors[0]
    if first.get("type") == "json_invalid":
        return "Request body is not valid JSON"
    fields = [part for part in first.get("loc", ()) if isinstance(part, str) and part != "body"]
    if fields:
        return f"Invalid value for '{fields[-1]}'"
    return "Invalid request body"


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Return a generic JSON error for any unhandled exception."""
    logger.error(
        "Unhandled exception on %s %s: %s",
        request.method,
        request.url.path,
        exc,
        exc_info=True,
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": "Internal server error"},
    )


# ---------------------------------------------------------------------------
# Routers
# ---------------------------------------------------------------------------

app.include_router(health.router,    prefix="/health", tags=["Health"])
app.include_router(discovery.router, tags=["Discovery"])
app.include_router(ui.router,        tags=["UI"])


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "app.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=True,
        log_level="info",
    )

import logging
import sys
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from typing import Any

from fastapi import FastAPI

from src.adapters.editor_handle import LazyEditor
from src.adapters.html_editor import HtmlClipboardEditor
from src.api.deps import get_settings
from src.rules.loader import load_rules

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler for startup/shutdown."""
    settings = get_settings()

    # Load rules and validate on startup (fail-fast)
    try:
        load_rules(settings.rules_path)
        logger.info("Rules loaded from %s", settings.rules_path)
    except (FileNotFoundError, ValueError) as e:
        logger.critical("Rules load failed: %s", e)
        sys.exit(1)

    app.state.editor = LazyEditor(HtmlClipboardEditor)
    yield


app = FastAPI(
    title="Delta Bridge API",
    version="0.1.0",
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)

# --- Routers ---
from src.api.routes import delta  # noqa: E402

app.include_router(delta.router, prefix="/api/delta", tags=["Delta"])


@app.get("/health")
def health_check() -> dict[str, Any]:
    """Health check endpoint."""
    return {"status": "ok", "service": "api"}

"""
FastAPI application for the portfolio backend.

Serves the showcase items to the public site and the admin dashboard, and
exposes the AI content-assist actions to the editing UI.
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Literal

from fastapi import Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ConfigDict, Field

from portfolio.auth import AuthContext, get_auth_context, require_auth
from portfolio.config import configure_logging, get_settings
from portfolio.core.errors import NotFoundError, ShowcaseError, ValidationError
from portfolio.core.locales import Locale, get_locale
from portfolio.core.models import ShowcaseDraft, ShowcasePatch
from portfolio.integrations.sentry import capture_exception, init_sentry
from portfolio.services.ai import AssistService, ContentField, GeminiClient, SuggestContext
from portfolio.services.showcase import ShowcaseStore
from portfolio.services.sitemap import build_sitemap
from portfolio.storage import create_local_storage

logger = logging.getLogger(__name__)


# =============================================================================
# App State
# =============================================================================


class AppState:
    """Application state - initialized at startup."""

    store: ShowcaseStore
    assist: AssistService


state = AppState()


# =============================================================================
# Lifespan
# =============================================================================


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Initialize and cleanup app resources."""
    settings = get_settings()
    configure_logging(settings)

    if init_sentry(settings):
        logger.info("Sentry error tracking enabled")

    state.store = ShowcaseStore(create_local_storage(settings))
    state.assist = AssistService(GeminiClient.from_settings(settings))

    logger.info("Portfolio API starting in %s mode", settings.environment)

    yield

    logger.info("Portfolio API shutting down")


# =============================================================================
# App Setup
# =============================================================================


app = FastAPI(
    title="Portfolio API",
    description="Bilingual showcase portfolio with AI content assist",
    version="0.1.0",
    lifespan=lifespan,
)


settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(ShowcaseError)
async def showcase_error_handler(request: Request, exc: ShowcaseError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error("%s on %s: %s", type(exc).__name__, request.url.path, exc.message)
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    capture_exception(exc, path=request.url.path)
    return JSONResponse(status_code=500, content={"error": "Internal server error"})


# =============================================================================
# Dependencies
# =============================================================================


def get_store() -> ShowcaseStore:
    return state.store


def get_assist() -> AssistService:
    return state.assist


# =============================================================================
# Request Models
# =============================================================================


class AssistRequest(BaseModel):
    """Body of POST /ai. Which fields are needed depends on ``action``."""

    model_config = ConfigDict(populate_by_name=True)

    action: Literal["translate", "suggest"]

    # translate
    text: str | None = None
    from_locale: Locale | None = Field(default=None, alias="fromLang")
    to_locale: Locale | None = Field(default=None, alias="toLang")

    # suggest
    context: SuggestContext | None = None
    field: ContentField | None = None
    language: Locale | None = None


# =============================================================================
# Health Check
# =============================================================================


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "service": "portfolio-api"}


# =============================================================================
# Showcase Items
# =============================================================================


@app.get("/showcase")
async def list_items(
    public: bool = False,
    ctx: AuthContext = Depends(get_auth_context),
    store: ShowcaseStore = Depends(get_store),
):
    """List items, newest first. Private items only for admins."""
    items = await store.list(include_private=ctx.is_authenticated and not public)
    return {"items": [item.model_dump(mode="json") for item in items]}


@app.post("/showcase", status_code=201)
async def create_item(
    draft: ShowcaseDraft,
    ctx: AuthContext = Depends(require_auth),
    store: ShowcaseStore = Depends(get_store),
):
    """Create an item. Slugs are derived from the titles when omitted."""
    item = await store.create(draft, created_by=ctx.user_email or "")
    return {"item": item.model_dump(mode="json")}


@app.get("/showcase/by-slug/{slug}")
async def get_item_by_slug(
    slug: str,
    locale: str | None = None,
    ctx: AuthContext = Depends(get_auth_context),
    store: ShowcaseStore = Depends(get_store),
):
    """
    Resolve a page slug, falling back to the legacy and other-locale slugs.
    
    ``locale`` accepts region variants and language names ("en-US", "dutch").
    """
    resolved = get_locale(locale) if locale else None
    if locale and resolved is None:
        raise ValidationError(f"Unsupported locale: {locale}", field="locale")
    
    item = await store.resolve_by_slug(slug, resolved, include_private=ctx.is_authenticated)
    if item is None:
        raise NotFoundError()
    return {"item": item.model_dump(mode="json")}


@app.get("/showcase/{item_id}")
async def get_item(
    item_id: str,
    ctx: AuthContext = Depends(get_auth_context),
    store: ShowcaseStore = Depends(get_store),
):
    """Get an item by ID. Private items look missing to anonymous callers."""
    item = await store.get(item_id, include_private=ctx.is_authenticated)
    return {"item": item.model_dump(mode="json")}


@app.put("/showcase/{item_id}")
async def update_item(
    item_id: str,
    patch: ShowcasePatch,
    ctx: AuthContext = Depends(require_auth),
    store: ShowcaseStore = Depends(get_store),
):
    """Partially update an item."""
    item = await store.update(item_id, patch)
    return {"item": item.model_dump(mode="json")}


@app.delete("/showcase/{item_id}")
async def delete_item(
    item_id: str,
    ctx: AuthContext = Depends(require_auth),
    store: ShowcaseStore = Depends(get_store),
):
    """Delete an item permanently."""
    await store.delete(item_id)
    return {"success": True}


# =============================================================================
# AI Content Assist
# =============================================================================


@app.post("/ai")
async def content_assist(
    request: AssistRequest,
    ctx: AuthContext = Depends(require_auth),
    assist: AssistService = Depends(get_assist),
):
    """Translate text or suggest a title/description."""
    if request.action == "translate":
        if request.text is None or request.from_locale is None or request.to_locale is None:
            raise ValidationError("Missing required fields: text, fromLang, toLang")
        result = await assist.translate(request.text, request.from_locale, request.to_locale)
        return {"result": result}

    if request.field is None or request.language is None:
        raise ValidationError("Missing required fields: field, language")
    result = await assist.suggest(request.context, request.field, request.language)
    return {"result": result}


# =============================================================================
# Sitemap
# =============================================================================


@app.get("/sitemap")
async def sitemap(store: ShowcaseStore = Depends(get_store)):
    """Sitemap entries for the public pages."""
    items = await store.list(include_private=False)
    entries = build_sitemap(items, get_settings().public_base_url)
    return {"entries": [entry.model_dump(mode="json") for entry in entries]}

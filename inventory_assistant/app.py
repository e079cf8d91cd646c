from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import FileResponse, JSONResponse
from fastapi.staticfiles import StaticFiles

from .assistant import InventoryAssistant
from .config import Settings, load_settings
from .fallback import GenerativeFallback
from .gemini_client import GeminiClient
from .locale_loader import LocalePack, load_locale
from .models import AssistantRequest, AssistantResponse, ErrorResponse

BASE_DIR = Path(__file__).resolve().parent

log_level_name = os.getenv("LOG_LEVEL", "INFO").upper()
log_level = getattr(logging, log_level_name, logging.INFO)
if not logging.getLogger().handlers:
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

logging.getLogger("inventory_assistant").setLevel(log_level)
logger = logging.getLogger("inventory_assistant.app")

ENV_PATH = (BASE_DIR / ".." / ".env").resolve()
if ENV_PATH.exists():
    load_dotenv(ENV_PATH)


def _error_response(locale: LocalePack) -> JSONResponse:
    return JSONResponse(status_code=500, content=ErrorResponse(error=locale.internal_error).model_dump())


def create_app(
    settings: Optional[Settings] = None,
    completion_client: Optional[object] = None,
) -> FastAPI:
    """Purpose: Build the FastAPI app with its assistant and static frontend.
    Inputs/Outputs: Optional Settings and completion client; returns a FastAPI app.
    Side Effects / State: Loads the locale pack; constructs a GeminiClient when no
        client is injected.
    Dependencies: load_settings, load_locale, GeminiClient, InventoryAssistant.
    Failure Modes: Unknown locale raises FileNotFoundError at startup.
    If Removed: The assistant has no HTTP surface.
    Testing Notes: Pass a fake completion client and use fastapi.testclient.
    """
    # Build the per-process collaborators once, then register routes.
    settings = settings or load_settings()
    locale = load_locale(settings.locales_dir, settings.prompts_dir, settings.locale)
    client = completion_client if completion_client is not None else GeminiClient(settings)
    fallback = GenerativeFallback(
        client,
        locale,
        temperature=settings.temperature,
        max_output_tokens=settings.max_output_tokens,
    )
    assistant = InventoryAssistant(locale=locale, fallback=fallback)

    application = FastAPI(title="Inventory Assistant")
    application.state.settings = settings
    application.state.assistant = assistant

    @application.exception_handler(RequestValidationError)
    async def _invalid_request(request: Request, exc: RequestValidationError) -> JSONResponse:
        logger.error("Invalid request body on %s: %s", request.url.path, exc.errors())
        return _error_response(locale)

    @application.exception_handler(Exception)
    async def _unhandled_error(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unhandled error on %s", request.url.path)
        return _error_response(locale)

    @application.post("/api/ai", response_model=AssistantResponse, responses={500: {"model": ErrorResponse}})
    def ask(request: AssistantRequest):
        """Purpose: Answer one inventory question.
        Inputs/Outputs: Input is AssistantRequest; output is AssistantResponse, or a
            500 ErrorResponse when handling fails unexpectedly.
        Side Effects / State: May call the completion service once.
        Dependencies: InventoryAssistant.handle.
        Failure Modes: Unexpected exceptions are logged and mapped to 500.
        If Removed: Clients cannot reach the assistant.
        Testing Notes: Post deterministic and unclassified messages.
        """
        # Keep the boundary catch here so a failure never escapes as a crash.
        try:
            return assistant.handle(request)
        except Exception:
            logger.exception("Error while processing assistant request")
            return _error_response(locale)

    public_dir = settings.public_dir
    if public_dir.is_dir():
        application.mount("/static", StaticFiles(directory=public_dir), name="static")

        @application.get("/", include_in_schema=False)
        def serve_index() -> FileResponse:
            return FileResponse(public_dir / "index.html")

    return application


app = create_app()

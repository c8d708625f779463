"""Exception handlers rendering service errors as ``{"error": ...}`` JSON."""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from src.agent.errors import AgentError, SummarizationFailure, SynthesisFailure

logger = logging.getLogger(__name__)


async def agent_error_handler(request: Request, exc: AgentError) -> JSONResponse:
    if isinstance(exc, SynthesisFailure):
        logger.error("Error in %s: %s", request.url.path, exc.message)
        content = {"error": "Internal server error", "details": exc.message}
    elif isinstance(exc, SummarizationFailure):
        content = {"error": "Failed to generate summary"}
    else:
        content = {"error": exc.message}
    return JSONResponse(status_code=exc.status_code, content=content)


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    # Malformed bodies are client errors (400), not FastAPI's default 422.
    errors = exc.errors()
    if errors:
        first = errors[0]
        field = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
        message = f"{field}: {first.get('msg')}" if field else str(first.get("msg"))
    else:
        message = "Invalid request body"
    return JSONResponse(status_code=400, content={"error": message})


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Error in %s", request.url.path, exc_info=exc)
    return JSONResponse(status_code=500, content={"error": "Internal server error"})


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(AgentError, agent_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(RequestValidationError, validation_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(Exception, unhandled_error_handler)

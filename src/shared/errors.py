"""HTTP translation of domain exceptions.

Domain code raises Protean's ``ValidationError`` (field -> messages) and
``ObjectNotFoundError``; the API answers 400 and 404 with the messages intact
so the storefront can show them inline.
"""

import structlog
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from protean.exceptions import ObjectNotFoundError, ValidationError

logger = structlog.get_logger(__name__)


def _first_message(messages) -> str:
    if isinstance(messages, dict):
        for value in messages.values():
            if isinstance(value, (list, tuple)) and value:
                return str(value[0])
            if value:
                return str(value)
    return "Invalid request"


async def validation_error_handler(request: Request, exc: ValidationError) -> JSONResponse:
    messages = getattr(exc, "messages", {}) or {}
    logger.info("request_validation_failed", path=request.url.path, errors=messages)
    return JSONResponse(status_code=400, content={"error": _first_message(messages), "errors": messages})


async def not_found_handler(request: Request, exc: ObjectNotFoundError) -> JSONResponse:
    logger.info("request_object_not_found", path=request.url.path)
    return JSONResponse(status_code=404, content={"error": "Not found"})


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ValidationError, validation_error_handler)
    app.add_exception_handler(ObjectNotFoundError, not_found_handler)

"""
Exception handlers shaping every error response as ``{"message": ...}``.

* ``HTTPException`` raised by endpoints (404, 400, 401) keeps its
  status code; its ``detail`` becomes the message.
* Request validation failures are reported as 400 with a readable
  summary of the first violated field constraints.  A non‑numeric id
  in the URL gets a short "Invalid firm ID" style message instead.
* Anything else is logged with its traceback and reported as a
  generic 500 without details.
"""

import logging
from typing import Any, Dict, Iterable, Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)

# Location prefixes FastAPI adds that mean nothing to API clients.
_LOCATION_SOURCES = {"body", "query", "path", "header", "cookie"}
_MAX_ISSUES = 5

# Messages for path ids that are not integers.
INVALID_PATH_ID_MESSAGES = {
    "firm_id": "Invalid firm ID",
    "resource_id": "Invalid resource ID",
}


def format_validation_errors(errors: Iterable[Dict[str, Any]]) -> str:
    """Join pydantic error entries into one message.

    Each issue is rendered as ``<msg> at "<field.path>"``, e.g.
    ``Validation error: Input should be less than or equal to 5 at "rating"``.
    """
    issues = []
    for error in list(errors)[:_MAX_ISSUES]:
        loc = error.get("loc", ())
        if loc and loc[0] in _LOCATION_SOURCES:
            loc = loc[1:]
        message = error.get("msg", "Invalid value")
        if loc:
            issues.append(f'{message} at "{".".join(str(part) for part in loc)}"')
        else:
            issues.append(message)
    if not issues:
        return "Invalid request body"
    return "Validation error: " + "; ".join(issues)


def _invalid_path_id_message(errors: Iterable[Dict[str, Any]]) -> Optional[str]:
    for error in errors:
        loc = error.get("loc", ())
        if len(loc) == 2 and loc[0] == "path" and loc[1] in INVALID_PATH_ID_MESSAGES:
            return INVALID_PATH_ID_MESSAGES[loc[1]]
    return None


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = exc.errors()
    message = _invalid_path_id_message(errors) or format_validation_errors(errors)
    logger.info("Rejected %s %s: %s", request.method, request.url.path, message)
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"message": message})


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"message": "Internal server error"},
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Attach the handlers above to ``app``."""
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)

"""HTTP error responses.

Every error body is JSON with "error" (a code) and "message". Domain errors
are mapped by error_code; store failures and unexpected exceptions become an
opaque 500 that carries the trace id when tracing is on.
"""

import logging
from typing import Any

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from taskhub.domain.exceptions import TaskHubException
from taskhub.shared.telemetry.tracing import get_trace_id

logger = logging.getLogger(__name__)

# error_code -> status; unknown codes are client errors (400).
_ERROR_CODE_STATUS: dict[str, int] = {
    "VALIDATION_ERROR": 400,
    "RESOURCE_NOT_FOUND": 404,
    "STORE_ERROR": 500,
}


def _internal_error_body(detail: Any) -> dict[str, Any]:
    body: dict[str, Any] = {"error": "INTERNAL_ERROR", "message": detail}
    trace_id = get_trace_id()
    if trace_id:
        body["trace_id"] = trace_id
    return body


def _taskhub_exception_handler(request: Request, exc: TaskHubException) -> JSONResponse:
    """Return JSON from TaskHubException.to_dict() with appropriate status code.

    Server-side failures are opaque: the body never carries store details.
    """
    status = _ERROR_CODE_STATUS.get(exc.error_code, 400)
    if status >= 500:
        logger.error("%s on %s %s", exc.message, request.method, request.url.path)
        return JSONResponse(status_code=status, content=_internal_error_body("Internal server error"))
    return JSONResponse(status_code=status, content=exc.to_dict())


def _validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Malformed body or path parameter: 422 with pydantic's error list."""
    return JSONResponse(
        status_code=422,
        content={
            "error": "VALIDATION_ERROR",
            "message": "Request validation failed",
            "details": jsonable_encoder(exc.errors()),
        },
    )


def _http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Routing errors (404 unknown path, 405 wrong method) as JSON."""
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": "HTTP_ERROR", "message": exc.detail},
    )


def _generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Anything unhandled: 500, with the exception text only in debug mode."""
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    detail: Any = str(exc) if request.app.state.settings.debug else "Internal server error"
    return JSONResponse(status_code=500, content=_internal_error_body(detail))


def register_exception_handlers(app: FastAPI) -> None:
    """Install the handlers above on app (once, in create_app)."""
    app.add_exception_handler(TaskHubException, _taskhub_exception_handler)
    app.add_exception_handler(RequestValidationError, _validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, _http_exception_handler)
    app.add_exception_handler(Exception, _generic_exception_handler)

import logging
from typing import Dict, Optional

from fastapi import Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .errors import AppError

logger = logging.getLogger(__name__)

DEFAULT_STATUS_CODE = 500
DEFAULT_MESSAGE = 'Internal Server Error'


def error_response(
    status_code: int,
    message: str,
    headers: Optional[Dict[str, str]] = None
) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={'status': 'error', 'message': message},
        headers=headers,
    )


async def global_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """
    Last stop for every error raised while handling a request.
    The status code and message are taken from the error when it carries
    them, otherwise a generic 500 is returned.
    """
    status_code = getattr(exc, 'status_code', None) or DEFAULT_STATUS_CODE
    message = getattr(exc, 'message', None) or DEFAULT_MESSAGE

    if isinstance(exc, AppError):
        logger.warning(
            "%s %s failed: %s (%s)",
            request.method, request.url.path, message, status_code
        )
    else:
        logger.error(
            "Unhandled error on %s %s",
            request.method, request.url.path, exc_info=exc
        )
    return error_response(status_code, message)


async def http_exception_handler(
    request: Request,
    exc: StarletteHTTPException
) -> JSONResponse:
    return error_response(
        exc.status_code, str(exc.detail), getattr(exc, 'headers', None)
    )


def format_validation_errors(exc: RequestValidationError) -> list:
    """Flatten pydantic errors into field/message pairs."""
    errors = []
    for err in exc.errors():
        loc = list(err.get('loc', ()))
        location = str(loc[0]) if loc else ''
        field = '.'.join(str(p) for p in loc[1:]) or location
        errors.append({
            'type': err.get('type', 'value_error'),
            'location': location,
            'field': field,
            'message': err.get('msg', ''),
            'value': err.get('input'),
        })
    return errors


async def validation_error_handler(
    request: Request,
    exc: RequestValidationError
) -> JSONResponse:
    errors = format_validation_errors(exc)
    logger.info(
        "Rejected %s %s: %d invalid parameter(s)",
        request.method, request.url.path, len(errors)
    )
    return JSONResponse(
        status_code=400,
        content=jsonable_encoder({'errors': errors}),
    )

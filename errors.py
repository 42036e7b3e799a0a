"""
Error taxonomy and the handlers that map it onto HTTP responses.

ValidationError -> 400 with a list of per-field error descriptors
NotFoundError   -> 404 with a plain-text message
StorageError    -> 500 with a plain-text message (details stay in the server log)
"""
import logging
from typing import Any, Dict, List, Optional

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, PlainTextResponse

logger = logging.getLogger(__name__)

# FastAPI location name -> name reported to clients
_LOCATIONS = {"body": "body", "path": "params", "query": "query", "header": "headers", "cookie": "cookies"}


class ApiError(Exception):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(ApiError):
    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, errors: List[Dict[str, Any]]):
        super().__init__("Validation failed.")
        self.errors = errors


class NotFoundError(ApiError):
    status_code = status.HTTP_404_NOT_FOUND


class StorageError(ApiError):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR


def field_error(path: str, msg: str, location: str = "body", value: Optional[Any] = None) -> Dict[str, Any]:
    return {"type": "field", "msg": msg, "path": path, "location": location, "value": value}


def _describe(error: Dict[str, Any]) -> Dict[str, Any]:
    loc = list(error.get("loc", ()))
    location = _LOCATIONS.get(str(loc[0]), str(loc[0])) if loc else "body"
    path = ".".join(str(part) for part in loc[1:])

    msg = error.get("msg", "Invalid value")
    if msg.startswith("Value error, "):
        msg = msg[len("Value error, "):]

    # For a missing field pydantic reports the enclosing object as the input
    value = None if error.get("type") == "missing" else error.get("input")
    return field_error(path, msg, location, value)


async def request_validation_handler(request: Request, exc: RequestValidationError):
    errors = [_describe(error) for error in exc.errors()]
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=jsonable_encoder({"errors": errors}),
    )


async def validation_error_handler(request: Request, exc: ValidationError):
    return JSONResponse(status_code=exc.status_code, content=jsonable_encoder({"errors": exc.errors}))


async def api_error_handler(request: Request, exc: ApiError):
    return PlainTextResponse(exc.message, status_code=exc.status_code)


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(ValidationError, validation_error_handler)
    app.add_exception_handler(ApiError, api_error_handler)

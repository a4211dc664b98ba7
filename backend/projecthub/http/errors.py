import logging
from typing import Any, Dict, List

from fastapi import FastAPI, Request, status
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import JSONResponse, RedirectResponse
from pydantic import ValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from ..templating import render
from .requests import wants_json

logger = logging.getLogger(__name__)

NON_FIELD_KEY = "__all__"

# Status codes that get a rendered page instead of a JSON body in the browser
PAGE_ERROR_TITLES = {
    status.HTTP_403_FORBIDDEN: "Forbidden",
    status.HTTP_404_NOT_FOUND: "Not Found",
}


def _field_message(field: str, error: Dict[str, Any]) -> str:
    label = field.replace("_", " ")
    error_type = error.get("type", "")
    ctx = error.get("ctx") or {}

    # A null value counts as absent
    if error_type in ("missing", "string_too_short") or ("input" in error and error["input"] is None):
        return f"The {label} field is required."
    if error_type == "string_too_long":
        return f"The {label} field must not be greater than {ctx.get('max_length')} characters."
    if error_type == "enum":
        return f"The selected {label} is invalid."
    if error_type == "string_type":
        return f"The {label} field must be a string."
    return str(error.get("msg", "Invalid value."))


def field_errors(exc: ValidationError) -> Dict[str, List[str]]:
    """Group pydantic errors by top-level field name."""
    errors: Dict[str, List[str]] = {}
    for error in exc.errors():
        loc = error.get("loc") or ()
        field = str(loc[0]) if loc else NON_FIELD_KEY
        errors.setdefault(field, []).append(_field_message(field, error))
    return errors


def validation_error_payload(errors: Dict[str, List[str]]) -> Dict[str, Any]:
    messages = [message for field_messages in errors.values() for message in field_messages]
    summary = messages[0] if messages else "The given data was invalid."
    remaining = len(messages) - 1
    if remaining > 0:
        summary = f"{summary} (and {remaining} more error{'s' if remaining > 1 else ''})"
    return {"message": summary, "errors": errors}


def validation_error_response(errors: Dict[str, List[str]]) -> JSONResponse:
    return JSONResponse(
        validation_error_payload(errors),
        status_code=422,
    )


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(StarletteHTTPException)
    async def _http_error_handler(request: Request, exc: StarletteHTTPException):
        if wants_json(request):
            return await http_exception_handler(request, exc)

        if exc.status_code == status.HTTP_401_UNAUTHORIZED:
            return RedirectResponse(url="/login", status_code=status.HTTP_303_SEE_OTHER)

        title = PAGE_ERROR_TITLES.get(exc.status_code)
        if title is not None:
            logger.info(f"{request.method} {request.url.path} -> {exc.status_code}")
            return render(
                request,
                "error.html",
                {"title": title, "status_code": exc.status_code, "detail": exc.detail},
                status_code=exc.status_code,
            )

        return await http_exception_handler(request, exc)

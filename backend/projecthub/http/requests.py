from typing import Any, Dict

from fastapi import HTTPException, Request, status

# Paths that only ever answer with JSON
API_PREFIXES = ("/auth/",)


def is_json_body(request: Request) -> bool:
    content_type = request.headers.get("content-type", "")
    return content_type.split(";")[0].strip().lower() == "application/json"


def wants_json(request: Request) -> bool:
    """True for fetch/API callers; plain browser navigation gets HTML."""
    if request.url.path.startswith(API_PREFIXES):
        return True
    accept = request.headers.get("accept", "").lower()
    return "application/json" in accept or is_json_body(request)


async def read_payload(request: Request) -> Dict[str, Any]:
    """Read a JSON object or form-encoded body into a plain dict."""
    if is_json_body(request):
        try:
            body = await request.json()
        except ValueError:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Malformed JSON body"
            )
        if not isinstance(body, dict):
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Expected a JSON object"
            )
        return body

    form = await request.form()
    return {key: value for key, value in form.items() if isinstance(value, str)}

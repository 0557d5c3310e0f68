"""Uniform JSON envelope: {success, data?, error?, message?, details?}"""

from typing import Any, Optional

from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from .pagination import Page


def _to_python(obj: Any) -> Any:
    # json-mode model dumps turn Decimal into strings; python mode keeps amounts numeric
    if isinstance(obj, BaseModel):
        return obj.model_dump()
    if isinstance(obj, (list, tuple)):
        return [_to_python(item) for item in obj]
    if isinstance(obj, dict):
        return {key: _to_python(value) for key, value in obj.items()}
    return obj


def _encode(payload: dict) -> dict:
    return jsonable_encoder(_to_python(payload))


def success_response(data: Any = None, message: Optional[str] = None, status_code: int = 200) -> JSONResponse:
    content = {"success": True, "data": data}
    if message:
        content["message"] = message
    return JSONResponse(status_code=status_code, content=_encode(content))


def paginated_response(page: Page, message: Optional[str] = None) -> JSONResponse:
    content = {
        "success": True,
        "data": page.items,
        "pagination": {
            "total": page.total,
            "limit": page.limit,
            "offset": page.offset,
            "hasMore": page.has_more,
        },
    }
    if message:
        content["message"] = message
    return JSONResponse(status_code=200, content=_encode(content))


def error_response(error: str, status_code: int = 400, details: Optional[dict] = None) -> JSONResponse:
    content = {"success": False, "error": error}
    if details:
        content["details"] = details
    return JSONResponse(status_code=status_code, content=_encode(content))

# src/cms_backend/utils/response.py
from __future__ import annotations

from typing import Any, Dict

from fastapi.encoders import jsonable_encoder

SUCCESS_CODE = 200
SUCCESS_MESSAGE = "成功"


def success(data: Any = None) -> Dict[str, Any]:
    """Wrap a payload in the {code, message, data} envelope (camelCase keys)."""
    return {
        "code": SUCCESS_CODE,
        "message": SUCCESS_MESSAGE,
        "data": jsonable_encoder(data, by_alias=True),
    }


def failure(code: int, message: str) -> Dict[str, Any]:
    return {"code": code, "message": message, "data": None}

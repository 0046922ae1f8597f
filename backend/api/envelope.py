"""
JSON envelope helpers.

Every response body is `{"success": bool, "message"?: str, <payload>?: ...}`.
"""
from typing import Any, Dict, Optional

from pydantic import BaseModel

from domain.errors import ValidationError


def success(message: Optional[str] = None, **payload: Any) -> Dict[str, Any]:
    body: Dict[str, Any] = {"success": True}
    if message:
        body["message"] = message
    body.update(payload)
    return body


def failure(message: str) -> Dict[str, Any]:
    return {"success": False, "message": message}


def require_fields(payload: BaseModel, *fields: str) -> None:
    """Raise ValidationError for the first field that is missing or blank."""
    for name in fields:
        value = getattr(payload, name, None)
        if value is None or (isinstance(value, str) and not value.strip()):
            raise ValidationError(f"{name} is required")

"""Uniform JSON envelopes for every API response."""
from typing import Any, Optional


def success_envelope(data: Any, message: Optional[str] = None) -> dict:
    envelope = {"success": True, "data": data}
    if message is not None:
        envelope["message"] = message
    return envelope


def paginated_envelope(data: list, total: int, limit: int, offset: int) -> dict:
    return {
        "success": True,
        "data": data,
        "total": total,
        "limit": limit,
        "offset": offset,
    }


def error_envelope(error: str) -> dict:
    return {"success": False, "error": error}

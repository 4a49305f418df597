"""Envelope shared by every om_* endpoint.

    {
        "code": 0,                    // 0 on success, AppError.code otherwise
        "message": "success",
        "data": {"phase": "JURY_VOTING", ...},   // null on error
        "timestamp": "2026-01-01T00:00:00+00:00",
        "request_id": "req_a1b2c3d4e5f6"
    }

Routers overwrite request_id with the one RequestLogMiddleware placed on
request.state, so log lines and responses correlate.
"""

import uuid
from typing import Any

from pydantic import BaseModel, Field

from src.om_common.datetime_utils import utc_now


def new_request_id() -> str:
    return f"req_{uuid.uuid4().hex[:12]}"


class ApiResponse(BaseModel):
    code: int = 0
    message: str = "success"
    data: Any = None
    timestamp: str = Field(default_factory=lambda: utc_now().isoformat())
    request_id: str = Field(default_factory=new_request_id)


def success_response(data: Any = None) -> ApiResponse:
    return ApiResponse(data=data)


def error_response(code: int, message: str) -> ApiResponse:
    return ApiResponse(code=code, message=message)

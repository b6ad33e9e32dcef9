"""
Response envelope shared by every endpoint.
"""
from typing import Any, Optional

from fastapi.encoders import jsonable_encoder
from pydantic import BaseModel, Field


class APIResponse(BaseModel):
    """{success, data, error, message}; unset fields are omitted on the wire."""
    success: bool = Field(..., description="Whether the request succeeded")
    data: Optional[Any] = Field(None, description="Payload (profile, insights, actions, analytics)")
    error: Optional[str] = Field(None, description="Error description when success is false")
    message: Optional[str] = Field(None, description="Human-readable summary")

    model_config = {"json_schema_extra": {"example": {
        "success": True,
        "data": {"total_users": 3, "vip_users": 2},
        "message": "Analytics data retrieved successfully"
    }}}


def ok(data: Any, message: str = None) -> APIResponse:
    """Wrap records (dataclasses, enums, datetimes) in a success envelope."""
    return APIResponse(success=True, data=jsonable_encoder(data), message=message)

"""
Base Schemas

Error envelope shared by every endpoint.
Matches AppError.to_dict() structure.
"""

from typing import Any, Dict, Optional
from pydantic import BaseModel, Field, ConfigDict


class ErrorResponse(BaseModel):
    """
    Standard error response structure.

    Returns:
    - code: Machine-readable error code (e.g. "no_slot_available")
    - message: Human-readable error message
    - details: Optional error context
    - trace_id: Request trace ID when available
    """
    code: str = Field(..., description="Error code")
    message: str = Field(..., description="User-facing error message")
    details: Optional[Dict[str, Any]] = Field(None, description="Error details")
    trace_id: Optional[str] = Field(None, description="Request trace ID")

    model_config = ConfigDict(extra="allow")

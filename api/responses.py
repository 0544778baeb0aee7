"""
Response models shared by the API routers, mostly for OpenAPI documentation.
"""

from typing import Optional
from pydantic import BaseModel, Field


class MessageResponse(BaseModel):
    """Error body returned by every failing request"""

    message: str = Field(..., description="Human-readable error message")


class HealthResponse(BaseModel):
    """Health check response"""

    status: str = Field(..., description="Service status")
    service: str = Field(..., description="Service name")
    version: Optional[str] = Field(None, description="Service version")


UNAUTHORIZED = {401: {"model": MessageResponse, "description": "Missing or unknown session"}}
BAD_REQUEST = {400: {"model": MessageResponse, "description": "Invalid parameter"}}
NOT_FOUND = {404: {"model": MessageResponse, "description": "Meal not found"}}

"""Pydantic schemas for API requests and responses."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


class AddRedirectRequest(BaseModel):
    """Request to create a redirect."""

    id: Optional[str] = Field(None, description="Requested short id; generated if omitted")
    url: str = Field(..., description="The URL to redirect to")
    password: Optional[str] = Field(None, description="Global password, if the server requires one")

    model_config = {
        "json_schema_extra": {
            "examples": [
                {"url": "https://example.com/very/long/path/to/resource"},
                {"id": "myrepo", "url": "https://github.com/user/repo", "password": "hunter2"},
            ]
        }
    }


class AddRedirectResponse(BaseModel):
    """Response after creating a redirect."""

    id: str = Field(..., description="The short id")
    key: str = Field(..., description="Edit key required to delete the redirect")
    short_url: str = Field(..., description="The complete short URL")

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "id": "aZ3kQ9xPm2",
                    "key": "Lq81vXbN0c",
                    "short_url": "https://short.link/aZ3kQ9xPm2",
                }
            ]
        }
    }


class DeleteRedirectRequest(BaseModel):
    """Request to delete a redirect."""

    id: Optional[str] = Field(None, description="Short id; must match the path when given")
    key: str = Field(..., description="Edit key returned on creation")
    password: Optional[str] = Field(None, description="Global password, if the server requires one")


class RedirectRecordResponse(BaseModel):
    """A stored redirect record."""

    id: str
    url: str
    key: str


class MessageResponse(BaseModel):
    """Simple message response."""

    message: str


class ErrorResponse(BaseModel):
    """Error response."""

    error: str = Field(..., description="Error kind")
    message: str = Field(..., description="Human readable error message")


class HealthResponse(BaseModel):
    """Health check response."""

    status: str = Field(..., description="Overall status")
    store: str = Field(..., description="Key-value store status")
    authentication_required: bool = Field(..., description="Whether adding redirects needs a password")
    timestamp: datetime = Field(..., description="Check timestamp")

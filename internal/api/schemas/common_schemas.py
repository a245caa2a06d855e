"""
Common API schemas shared across different endpoints.
"""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict


class StandardResponse(BaseModel):
    """
    Standard API response format for all endpoints.

    - error_code: 0 = success, 1 = error
    - message: Success or error message
    - data: Response data (optional, only present on success)
    """

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {
                    "error_code": 0,
                    "message": "Success",
                    "data": {"id": "9b2f6c1e-8a43-4d4c-9f43-3f1b2a6d7e10"},
                },
                {"error_code": 1, "message": "task not found", "data": None},
            ]
        }
    )

    error_code: int = 0
    message: str
    data: Optional[Any] = None


class HealthResponse(BaseModel):
    """Response model for health check (internal use)."""

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {
                    "status": "healthy",
                    "service": "Todolist Service",
                    "version": "1.0.0",
                    "database": "connected",
                }
            ]
        }
    )

    status: str
    service: str
    version: str
    database: str

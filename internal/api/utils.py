"""
API utility functions for response formatting and error mapping.
"""

from typing import Any, Dict

from fastapi import status
from fastapi.responses import JSONResponse

from domain.errors import DomainError, ErrorKind

STATUS_BY_KIND = {
    ErrorKind.INVALID_ARGUMENT: status.HTTP_400_BAD_REQUEST,
    ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.ALREADY_EXISTS: status.HTTP_409_CONFLICT,
    ErrorKind.INTERNAL: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def success_response(message: str = "Success", data: Any = None) -> Dict:
    """
    Create a success response.

    Args:
        message: Success message
        data: Response data (optional)

    Returns:
        Standard response dictionary with error_code=0
    """
    return {"error_code": 0, "message": message, "data": data}


def error_response(message: str, error_code: int = 1, data: Any = None) -> Dict:
    """
    Create an error response.

    Args:
        message: Error message
        error_code: Error code (default: 1)
        data: Optional error data

    Returns:
        Standard response dictionary with error_code=1
    """
    return {"error_code": error_code, "message": message, "data": data}


def status_for(kind: ErrorKind) -> int:
    """HTTP status code of an error kind."""
    return STATUS_BY_KIND.get(kind, status.HTTP_500_INTERNAL_SERVER_ERROR)


def domain_error_response(exc: DomainError) -> JSONResponse:
    """
    Convert a DomainError to a JSON response.

    Only ``exc.message`` reaches the caller; the cause stays in the logs.
    """
    return JSONResponse(
        status_code=status_for(exc.kind),
        content=error_response(message=exc.message),
    )

"""
Health Check API Routes.
"""

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from core import get_settings
from core.database import Database
from internal.api.dependencies.todolist_dependencies import get_database
from internal.api.schemas import HealthResponse
from internal.api.schemas.common_schemas import StandardResponse
from internal.api.utils import error_response, success_response


def create_health_routes(app) -> APIRouter:
    """
    Factory function to create health routes.

    Args:
        app: FastAPI application instance

    Returns:
        APIRouter: Configured router with health endpoints
    """
    router = APIRouter(tags=["Health"])

    @router.get(
        "/",
        response_model=StandardResponse,
        summary="Root Endpoint",
        description="Get basic API information",
        operation_id="get_root",
    )
    async def root():
        """
        Root endpoint.

        Returns service name, version, and current status.
        """
        settings = get_settings()
        return success_response(
            message="API service is running",
            data={
                "service": settings.app_name,
                "version": settings.app_version,
                "status": "running",
            },
        )

    @router.get(
        "/health",
        response_model=StandardResponse,
        summary="Health Check",
        description="Check service and database health",
        operation_id="health_check",
        responses={
            200: {
                "description": "Health status",
                "content": {
                    "application/json": {
                        "examples": {
                            "healthy": {
                                "summary": "Service operational",
                                "value": {
                                    "error_code": 0,
                                    "message": "Service is healthy",
                                    "data": {
                                        "status": "healthy",
                                        "service": "Todolist Service",
                                        "version": "1.0.0",
                                        "database": "connected",
                                    },
                                },
                            },
                        }
                    }
                },
            },
            503: {
                "description": "Database unreachable",
                "content": {
                    "application/json": {
                        "examples": {
                            "unhealthy": {
                                "summary": "Database unreachable",
                                "value": {
                                    "error_code": 1,
                                    "message": "Service is unhealthy",
                                    "data": {
                                        "status": "unhealthy",
                                        "service": "Todolist Service",
                                        "version": "1.0.0",
                                        "database": "disconnected",
                                    },
                                },
                            },
                        }
                    }
                },
            }
        },
    )
    async def health_check(database: Database = Depends(get_database)):
        """
        Health check endpoint.

        **Returns:**
        Health status object indicating:
        - Overall health status (healthy / unhealthy)
        - Service name and version
        - Database connectivity

        Responds 503 when the database is unreachable.
        """
        settings = get_settings()
        db_healthy = await database.health_check()

        health_data = HealthResponse(
            status="healthy" if db_healthy else "unhealthy",
            service=settings.app_name,
            version=settings.app_version,
            database="connected" if db_healthy else "disconnected",
        )

        if db_healthy:
            return success_response(
                message="Service is healthy", data=health_data.model_dump()
            )
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content=error_response(
                message="Service is unhealthy", data=health_data.model_dump()
            ),
        )

    return router

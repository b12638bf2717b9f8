"""
Employee API - Health Check Route
==================================

What:  Health check endpoint for monitoring and load balancers.
How:   Runs SELECT 1 on a fresh database connection and reports the result.
Who:   Called by container health checks and monitoring systems.

Status levels:
    - healthy:   database reachable
    - unhealthy: database unreachable (still HTTP 200; the body says why)
"""

import time

from fastapi import APIRouter, Depends

from app import __version__
from app.schemas.employee import HealthResponse
from app.services.employee_service import EmployeeService, get_employee_service

router = APIRouter(tags=["Health"])

# Initialized once when the module loads
_start_time = time.time()


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Service health check",
)
async def health_check(
    service: EmployeeService = Depends(get_employee_service),
) -> HealthResponse:
    connected = await service.ping()
    return HealthResponse(
        status="healthy" if connected else "unhealthy",
        version=__version__,
        database="connected" if connected else "disconnected",
        uptime_seconds=round(time.time() - _start_time, 2),
    )

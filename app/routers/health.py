"""
Health Endpoint Module.

This module defines the `/test` endpoint used for liveness checks.
It only confirms the FastAPI application is running and responsive and
never touches the scratch directories.
"""

from fastapi import APIRouter

from app.models.document import StatusResponse

router = APIRouter(tags=['health'])

@router.get(
    "/test",
    summary="Health Check",
    response_description="Health status of the API",
    response_model=StatusResponse,
)
async def health_check() -> dict[str, str]:
    """
    Perform a basic health check.

    Returns a JSON response with:
    - `status`: Static string confirming the server is running.
    - `message`: Pointer to the parse endpoint.
    """
    return {
        "status": "Server is running correctly",
        "message": "You can use POST /parse-document to upload and parse documents",
    }

from fastapi import APIRouter, Depends, Response, status

from mdx_include.api.dependencies import get_workspace
from mdx_include.api.schemas import HealthResponse, ReadinessResponse
from mdx_include.core.workspace import Workspace

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    return HealthResponse()


@router.get("/healthz/live", response_model=HealthResponse)
async def liveness() -> HealthResponse:
    return HealthResponse()


@router.get("/healthz/ready", response_model=ReadinessResponse)
async def readiness(
    response: Response,
    workspace: Workspace = Depends(get_workspace),
) -> ReadinessResponse:
    """Ready unless a configured root directory override has gone missing."""
    root_dir = workspace.root_override
    if root_dir is None or workspace.fs.path_exists(root_dir):
        return ReadinessResponse(status="ok", root_dir=root_dir)
    response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    return ReadinessResponse(status="degraded", root_dir=root_dir)

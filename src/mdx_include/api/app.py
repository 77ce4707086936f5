from __future__ import annotations

from fastapi import FastAPI

from mdx_include.api.dependencies import set_workspace
from mdx_include.api.lifespan import lifespan
from mdx_include.api.routes.documents import router as documents_router
from mdx_include.api.routes.health import router as health_router
from mdx_include.core.workspace import Workspace


def create_app(workspace: Workspace | None = None) -> FastAPI:
    app = FastAPI(
        title="mdx-include API",
        description="Resolve, validate and complete file references in Markdown documents.",
        version="0.1.0",
        lifespan=lifespan,
    )
    if workspace is not None:
        set_workspace(workspace)

    app.include_router(health_router, include_in_schema=False)
    app.include_router(documents_router)
    return app

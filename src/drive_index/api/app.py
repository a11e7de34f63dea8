from __future__ import annotations

from fastapi import FastAPI

from drive_index.api.lifespan import lifespan
from drive_index.api.routes.health import router as health_router
from drive_index.api.routes.search import router as search_router


def create_app() -> FastAPI:
    app = FastAPI(
        title="Drive Index API",
        description="Search a cloud drive index, honouring password-protected routes.",
        version="0.1.0",
        lifespan=lifespan,
    )

    app.include_router(health_router, include_in_schema=False)
    app.include_router(search_router)

    return app

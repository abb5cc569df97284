"""
docmanager API - FastAPI surface over the entity services.
"""

from __future__ import annotations

import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from docmanager.config.settings import Settings
from docmanager.core.di import Container, bootstrap_dependencies
from docmanager.core.errors import DocManagerError, NotFoundError, StoreError
from docmanager.core.request_context import bind_request_id
from docmanager.infrastructure.logging import configure_logging

from .routes import documents, employees, roles

logger = logging.getLogger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"


def _error_body(exc: DocManagerError) -> dict:
    return {"detail": exc.message, "code": exc.code}


def create_app(settings: Optional[Settings] = None, container: Optional[Container] = None) -> FastAPI:
    settings = settings or Settings.load_from_file()
    configure_logging(settings.logging)

    app = FastAPI(
        title=settings.api.title,
        description="Documents, employees and roles with direct-to-storage uploads",
        version=settings.api.version,
    )
    app.state.settings = settings
    app.state.container = bootstrap_dependencies(settings, container=container or Container())

    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.api.allow_origins),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def request_id_middleware(request: Request, call_next):
        with bind_request_id(request.headers.get(REQUEST_ID_HEADER)) as request_id:
            response = await call_next(request)
        response.headers[REQUEST_ID_HEADER] = request_id
        return response

    @app.exception_handler(NotFoundError)
    async def _not_found(request: Request, exc: NotFoundError):
        return JSONResponse(status_code=404, content=_error_body(exc))

    @app.exception_handler(StoreError)
    async def _store_failure(request: Request, exc: StoreError):
        logger.error("Store failure on %s %s: %s", request.method, request.url.path, exc)
        return JSONResponse(status_code=500, content=_error_body(exc))

    @app.get("/health")
    async def health_check():
        return {"status": "healthy", "version": settings.api.version}

    app.include_router(documents.router, prefix="/api", tags=["Documents"])
    app.include_router(employees.router, prefix="/api", tags=["Employees"])
    app.include_router(roles.router, prefix="/api", tags=["Roles"])
    return app


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(create_app(), host="0.0.0.0", port=8000)

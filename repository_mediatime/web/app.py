"""
Application FastAPI du depot Media Time.

Initialise l'application web avec le Container DI, traduit les exceptions
du domaine en reponses HTTP et monte les routes.
"""

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from loguru import logger

from ..container import Container
from ..core.exceptions import (
    InstanceSaveError,
    InstanceValidationError,
    MediaFetchError,
    MissingCapabilityError,
    NotFoundError,
)
from .routes.instances import router as instances_router
from .routes.repository import router as repository_router


def create_app(container: Optional[Container] = None) -> FastAPI:
    """
    Cree l'application web.

    Args :
        container : Container a utiliser (un nouveau Container par defaut)
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Initialise la base de donnees au demarrage."""
        app.state.container.database.init()
        yield
        app.state.container.http_client().close()

    app = FastAPI(title="Media Time repository", lifespan=lifespan)
    app.state.container = container or Container()

    @app.exception_handler(NotFoundError)
    async def not_found_handler(request: Request, exc: NotFoundError) -> JSONResponse:
        return JSONResponse(status_code=404, content={"detail": str(exc)})

    @app.exception_handler(MissingCapabilityError)
    async def capability_handler(request: Request, exc: MissingCapabilityError) -> JSONResponse:
        return JSONResponse(
            status_code=403,
            content={"detail": str(exc), "capability": exc.capability},
        )

    @app.exception_handler(InstanceValidationError)
    async def validation_handler(request: Request, exc: InstanceValidationError) -> JSONResponse:
        return JSONResponse(status_code=422, content={"errors": exc.errors})

    @app.exception_handler(InstanceSaveError)
    async def save_handler(request: Request, exc: InstanceSaveError) -> JSONResponse:
        return JSONResponse(status_code=500, content={"detail": str(exc)})

    @app.exception_handler(MediaFetchError)
    async def fetch_handler(request: Request, exc: MediaFetchError) -> JSONResponse:
        logger.error("Echec de recuperation du media", error=str(exc))
        return JSONResponse(status_code=502, content={"detail": str(exc)})

    app.include_router(instances_router)
    app.include_router(repository_router)
    return app


app = create_app()

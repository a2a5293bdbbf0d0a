"""Plant Nurse FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from plantnurse.api.routers import plants, rooms, species
from plantnurse.api.schemas import ERROR_RESPONSES
from plantnurse.core import setup_logging
from plantnurse.core.config import get_settings
from plantnurse.core.errors import (
    InvariantViolation,
    NotFoundError,
    PlantNurseError,
    StorageWriteError,
    ValidationError,
)
from plantnurse.core.nurse import PlantNurse
from plantnurse.models import Base, create_session_factory

logger = logging.getLogger("plantnurse.api")

ERROR_STATUS_CODES: dict[type[PlantNurseError], int] = {
    ValidationError: 422,
    NotFoundError: 404,
    InvariantViolation: 409,
    StorageWriteError: 507,
}


async def handle_plant_nurse_error(request: Request, exc: PlantNurseError) -> JSONResponse:
    status_code = next(
        (code for cls, code in ERROR_STATUS_CODES.items() if isinstance(exc, cls)),
        500,
    )
    if status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
    else:
        logger.warning(f"{request.method} {request.url.path} rejected: {exc.message}")
    return JSONResponse(status_code=status_code, content={"error": exc.to_dict()})


def create_app(nurse: PlantNurse | None = None) -> FastAPI:
    """Build the app. Pass a ready `nurse` to skip database setup (tests)."""

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        settings = get_settings()
        setup_logging(settings.log_level)

        engine = None
        if nurse is None:
            engine, SessionFactory = create_session_factory(settings.database_url)
            Base.metadata.create_all(bind=engine)
            logger.info("Database tables initialized")
            app.state.nurse = PlantNurse.from_settings(settings, SessionFactory)
        else:
            app.state.nurse = nurse

        logger.info(f"Plant Nurse started on http://{settings.host}:{settings.port}")
        yield

        if engine is not None:
            engine.dispose()
        logger.info("Plant Nurse shutdown complete")

    app = FastAPI(
        title="Plant Nurse",
        description="Houseplant check-in tracker",
        version="1.0.0",
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(PlantNurseError, handle_plant_nurse_error)

    # API routers
    app.include_router(plants.router, prefix="/api/plants", tags=["plants"], responses=ERROR_RESPONSES)
    app.include_router(rooms.router, prefix="/api/rooms", tags=["rooms"], responses=ERROR_RESPONSES)
    app.include_router(species.router, prefix="/api/species", tags=["species"], responses=ERROR_RESPONSES)

    @app.get("/health", tags=["system"])
    async def health():
        return {"status": "ok", "service": "plantnurse", "version": "1.0.0"}

    return app


app = create_app()

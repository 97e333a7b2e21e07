from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from fleet_tracker import __version__
from fleet_tracker.entrypoints.http.exception_handlers import register_exception_handlers
from fleet_tracker.entrypoints.http.routes.car_maintenance import router as car_maintenance_router
from fleet_tracker.entrypoints.http.routes.cars import router as cars_router
from fleet_tracker.entrypoints.http.routes.drivers import router as drivers_router
from fleet_tracker.entrypoints.http.routes.health import router as health_router
from fleet_tracker.entrypoints.http.routes.maintenance_history import (
    router as maintenance_history_router,
)
from fleet_tracker.entrypoints.http.routes.maintenance_types import (
    router as maintenance_types_router,
)
from fleet_tracker.entrypoints.http.routes.oil_changes import router as oil_changes_router
from fleet_tracker.infra.db.session import dispose_engine


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    yield
    dispose_engine()


def build_app() -> FastAPI:
    app = FastAPI(
        title="Fleet Tracker API",
        description="""
        Fleet maintenance tracking API for vehicles, drivers and their service history.

        ## Features
        - Paginated, sortable listings of cars, drivers, oil changes and maintenance
        - Single-record lookups with joined car/driver/type details
        - Recording, editing and deleting car maintenance entries
        - Activating, deactivating and deleting cars; deleting drivers and history entries

        ## Listing parameters
        Every list endpoint accepts `page`, `limit`, `sortField` and `sortOrder`
        and returns `totalPages`, `currentPage`, `total`, `limit` and `validLimits`.

        ## Error Handling
        All errors return structured JSON responses with error codes.
        """,
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    register_exception_handlers(app)

    app.include_router(health_router)
    app.include_router(cars_router, prefix="/v1")
    app.include_router(drivers_router, prefix="/v1")
    app.include_router(car_maintenance_router, prefix="/v1")
    app.include_router(oil_changes_router, prefix="/v1")
    app.include_router(maintenance_history_router, prefix="/v1")
    app.include_router(maintenance_types_router, prefix="/v1")

    return app


app = build_app()

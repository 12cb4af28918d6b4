"""Application factory and top-level wiring.

Configuration, logging, middleware, error handlers and routers are brought
together here. ``app`` is the instance uvicorn serves.
"""

from __future__ import annotations

import logging

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from prometheus_fastapi_instrumentator import Instrumentator
from starlette.exceptions import HTTPException as StarletteHTTPException

from . import __version__
from .core.config import settings
from .core.errors import http_exception_handler, validation_exception_handler
from .core.logging import configure_logging
from .db.session import Base, engine
from .middlewares import RequestIdMiddleware, SecurityHeadersMiddleware

# Importing the models registers them with the metadata used by create_all.
from .models import category as _category  # noqa: F401
from .models import equipment as _equipment  # noqa: F401
from .models import faculty as _faculty  # noqa: F401
from .models import password_request as _password_request  # noqa: F401
from .models import room as _room  # noqa: F401
from .models import user as _user  # noqa: F401
from .routers import (
    api_auth,
    api_categories,
    api_dashboard,
    api_equipment,
    api_faculty,
    api_location_history,
    api_password_requests,
    api_rooms,
    api_status_history,
    api_users,
    health,
)

logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    configure_logging(settings.LOG_LEVEL)
    app = FastAPI(title=settings.APP_NAME, version=__version__)

    # Last added runs outermost.
    app.add_middleware(SecurityHeadersMiddleware, hsts=settings.APP_ENV != "dev")
    if settings.ALLOWED_ORIGINS:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=settings.ALLOWED_ORIGINS,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )
    app.add_middleware(RequestIdMiddleware)

    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)

    app.include_router(health.router)
    app.include_router(api_auth.router)
    app.include_router(api_users.router, prefix="/users")
    app.include_router(api_users.router, prefix="/user", include_in_schema=False)
    app.include_router(api_faculty.router, prefix="/faculty")
    app.include_router(api_faculty.router, prefix="/faculties", include_in_schema=False)
    app.include_router(api_categories.router)
    app.include_router(api_rooms.router)
    app.include_router(api_equipment.router, prefix="/equipment")
    app.include_router(api_equipment.router, prefix="/equipments", include_in_schema=False)
    app.include_router(api_status_history.router)
    app.include_router(api_location_history.router)
    app.include_router(api_password_requests.router)
    app.include_router(api_dashboard.router)

    @app.on_event("startup")
    def _create_tables() -> None:
        Base.metadata.create_all(bind=engine)
        logger.info("app.started", extra={"extra_data": {"env": settings.APP_ENV}})

    if settings.METRICS_ENABLED:
        Instrumentator().instrument(app).expose(app, include_in_schema=False)

    return app


app = create_app()

__all__ = ["app", "create_app"]

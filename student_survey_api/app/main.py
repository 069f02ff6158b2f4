"""
Main entrypoint for the Student Survey API.

This module assembles the FastAPI application, sets up logging and
includes versioned routers.  ``create_app`` builds and configures the
app, which is then instantiated at module import time as ``app`` so
it can be served directly::

    uvicorn student_survey_api.app.main:app --reload
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from .api.v1.router import router as v1_router
from .core.config import Settings, settings as default_settings
from .core.db import get_database_path, init_db
from .core.exceptions import SurveyNotFoundError
from .core.logging_config import setup_logging
from .services.survey_store import SQLiteSurveyStore

logger = logging.getLogger(__name__)


async def survey_not_found_handler(request: Request, exc: SurveyNotFoundError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content={"detail": exc.message, "id": exc.survey_id},
    )


def create_app(app_settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    app_settings : Optional[Settings]
        Settings to use instead of the environment-derived defaults.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    app_settings = app_settings or default_settings
    setup_logging(app_settings.log_level, app_settings.log_file or None)

    db_path = get_database_path(app_settings.database_url)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        # Creates the database file on first run.
        version = init_db(db_path)
        logger.info("Database %s at schema version %s", db_path, version)
        yield

    app = FastAPI(
        title=app_settings.project_name,
        version=app_settings.api_version,
        debug=app_settings.debug,
        lifespan=lifespan,
    )
    app.state.survey_store = SQLiteSurveyStore(db_path)

    app.add_exception_handler(SurveyNotFoundError, survey_not_found_handler)
    app.include_router(v1_router, prefix="/api/v1")

    return app


app = create_app()

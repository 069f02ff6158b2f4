"""Entry point for serving the Student Survey API.

Host, port, log level and database location come from environment
variables (see ``student_survey_api/app/core/config.py``).

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from student_survey_api.app.core.config import settings
from student_survey_api.app.main import app


async def run_api() -> None:
    """Serve the API with Uvicorn on ``HOST``:``PORT``."""
    config = Config(app=app, host=settings.host, port=settings.port, reload=False, log_level=settings.log_level.lower())
    server = Server(config)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(run_api())
    except (KeyboardInterrupt, SystemExit):
        logging.getLogger(__name__).info("Shutting down")

"""
Main application entry point
Starts the FastAPI server and wires services
"""
import uvicorn
from contextlib import asynccontextmanager
import logging

from guardian.config.logging_config import setup_logging
from guardian.api.rest_api import app
from guardian.config.settings import settings
from guardian.core.service_manager import ServiceManager

# Setup logging
setup_logging()
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app):
    """Application lifespan manager"""
    # Startup
    service_manager = ServiceManager.get_instance()
    await service_manager.initialize()
    logger.info(f"API on :{settings.PORT}")

    yield

    # Shutdown
    await service_manager.cleanup()


app.router.lifespan_context = lifespan


if __name__ == "__main__":
    uvicorn.run(
        "main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG,
        log_level=settings.LOG_LEVEL.lower()
    )

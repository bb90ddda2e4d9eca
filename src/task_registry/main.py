import uvicorn

from task_registry.infrastructure.configuration.main_settings import Settings
from task_registry.infrastructure.entrypoints.api.app_factory import create_app
from task_registry.infrastructure.observability.logger_factory_service import (
    LoggerFactoryService,
)

logger = LoggerFactoryService.build_logger(__name__)


def serve():
    """Run the server with the configured host and port."""
    logger.info(f"Server is running on http://localhost:{settings.port}")
    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
        log_config=None,
    )


# Instantiate global app for ASGI
settings = Settings()
app = create_app(settings)

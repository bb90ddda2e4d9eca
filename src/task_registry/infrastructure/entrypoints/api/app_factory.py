from datetime import datetime, timezone

from fastapi import FastAPI

from task_registry.core.application.services import TaskRegistryService
from task_registry.infrastructure.configuration.main_settings import Settings
from task_registry.infrastructure.entrypoints.api.error_handlers import register_error_handlers
from task_registry.infrastructure.entrypoints.api.health_router import (
    router as health_router,
)
from task_registry.infrastructure.entrypoints.api.tasks_router import (
    router as tasks_router,
)
from task_registry.infrastructure.observability.logger_factory_service import (
    LoggerFactoryService,
    configure_logging,
)
from task_registry.infrastructure.observability.logging import CorrelationMiddleware
from task_registry.infrastructure.repositories import (
    InMemoryTaskRepository,
    build_sample_tasks,
)

logger = LoggerFactoryService.build_logger(__name__)


def create_app(settings: Settings) -> FastAPI:
    configure_logging(
        level=settings.log_level,
        log_format=settings.log_format,
        env=settings.env,
        force=True,
    )

    seed = build_sample_tasks(created_at=datetime.now(timezone.utc)) if settings.seed_sample_task else []
    service = TaskRegistryService(InMemoryTaskRepository(seed=seed))

    logger.info("--- BOOT DIAGNOSTICS ---")
    logger.info(f"App Name: {settings.app_name}")
    logger.info(f"Env: {settings.env}")
    logger.info(f"Seeded sample task: {settings.seed_sample_task}")
    logger.info("------------------------")

    app = FastAPI(title=settings.app_name)
    app.state.settings = settings
    app.state.task_service = service

    register_error_handlers(app)
    app.add_middleware(CorrelationMiddleware)

    app.include_router(health_router)
    app.include_router(tasks_router)

    return app

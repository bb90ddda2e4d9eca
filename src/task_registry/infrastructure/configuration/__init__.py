from task_registry.infrastructure.configuration.main_settings import Settings

__all__ = ["Settings"]

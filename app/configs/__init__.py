from app.configs.logger import file_logger
from app.configs.settings import (
    ENTITY_NAME,
    FORBIDDEN_CODE,
    LimiterConfig,
    Settings,
    settings,
)

__all__ = [
    "ENTITY_NAME",
    "FORBIDDEN_CODE",
    "LimiterConfig",
    "Settings",
    "file_logger",
    "settings",
]

"""Utility helper functions."""

from app.utils.header_util import (
    create_alert,
    create_entity_creation_alert,
    create_entity_deletion_alert,
    create_entity_update_alert,
    create_failure_alert,
)
from app.utils.helpers import get_summary, host, today_str

__all__ = [
    "create_alert",
    "create_entity_creation_alert",
    "create_entity_deletion_alert",
    "create_entity_update_alert",
    "create_failure_alert",
    "get_summary",
    "host",
    "today_str",
]

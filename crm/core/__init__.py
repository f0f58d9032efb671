"""
CRM Core - Shared services for all modules.

Usage:
    from crm.core import get_config, get_logger, CRM_PATHS
"""

from crm.core.config import get_config, get_config_value, CRM_PATHS
from crm.core.logging import get_logger
from crm.core.paths import ensure_directory

__all__ = [
    "get_config",
    "get_config_value",
    "CRM_PATHS",
    "get_logger",
    "ensure_directory",
]

"""
Path utilities for CRM.

Directory creation and backing-file resolution.
"""

from pathlib import Path

from crm.core.config import CRM_PATHS


def ensure_directory(path: Path) -> Path:
    """Ensure a directory exists, creating if necessary. Returns path for chaining."""
    path.mkdir(parents=True, exist_ok=True)
    return path


def get_customers_path() -> Path:
    """Backing file for customer records, from config."""
    return CRM_PATHS.customers_file

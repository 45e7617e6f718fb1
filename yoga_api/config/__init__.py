"""
Configuration modules for the API service.
"""

from .logging import setup_application_logging, configure_structured_logging
from .settings import AppSettings, get_settings, get_app_settings

__all__ = [
    "setup_application_logging",
    "configure_structured_logging",
    "AppSettings",
    "get_settings",
    "get_app_settings",
]

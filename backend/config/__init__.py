"""
Configuration management module.
"""
from .settings import Settings, get_settings, reload_settings, load_environment_config
from .database import engine, SessionLocal, Base
from .dependencies import get_db
from .logging import configure_logging

__all__ = [
    # Settings
    "Settings",
    "get_settings",
    "reload_settings",
    "load_environment_config",
    # Database
    "engine",
    "SessionLocal",
    "Base",
    # Dependencies
    "get_db",
    # Logging
    "configure_logging",
]

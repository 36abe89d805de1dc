"""
Logging configuration for the API process.
"""
from logging.config import dictConfig
from typing import Optional

from .settings import Settings, get_settings


def build_logging_config(settings: Settings) -> dict:
    """Build a ``dictConfig`` mapping from the application settings."""
    formatter = 'json' if settings.log_format == 'json' else 'default'

    handlers = {
        'console': {
            'level': settings.log_level,
            'class': 'logging.StreamHandler',
            'formatter': formatter,
        },
    }
    if settings.log_file:
        handlers['file'] = {
            'level': settings.log_level,
            'class': 'logging.FileHandler',
            'filename': settings.log_file,
            'formatter': formatter,
        }

    return {
        'version': 1,
        'disable_existing_loggers': False,
        'formatters': {
            'default': {
                'format': '[%(asctime)s: %(levelname)s/%(name)s] %(message)s',
            },
            'json': {
                'class': 'pythonjsonlogger.jsonlogger.JsonFormatter',
                'format': '%(asctime)s %(name)s %(levelname)s %(message)s'
            }
        },
        'handlers': handlers,
        'loggers': {
            'backend': {
                'level': settings.log_level,
                'handlers': list(handlers),
                'propagate': False,
            },
        },
    }


def configure_logging(settings: Optional[Settings] = None) -> None:
    """Apply the logging configuration for the ``backend`` logger tree."""
    dictConfig(build_logging_config(settings or get_settings()))

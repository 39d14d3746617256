"""Daemon entry point serving the selection API."""

import sys

import uvicorn

from preferredimage.api.app import create_app
from preferredimage.config import Config
from preferredimage.utils.logger import get_logger, setup_logging

logger = get_logger(__name__)


def start_daemon(config: Config):
    """Start the API server.

    Args:
        config: Application configuration
    """
    setup_logging(config.logging)

    app = create_app(config)

    logger.info(
        "Starting daemon",
        host=config.api.host,
        port=config.api.port,
        workers=config.api.workers,
    )

    try:
        uvicorn.run(
            app,
            host=config.api.host,
            port=config.api.port,
            log_level=config.logging.level,
            access_log=False,  # RequestLoggingMiddleware logs requests
        )
    except KeyboardInterrupt:
        logger.info("Daemon interrupted by user")
    except Exception as e:
        logger.exception("Daemon error", error=str(e))
        sys.exit(1)
    finally:
        logger.info("Daemon stopped")

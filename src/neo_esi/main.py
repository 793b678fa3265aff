"""Neo ESI main entry point."""

import os

import uvicorn

from .config.logging_config import LoggingConfig
from .app import create_app

logger = LoggingConfig.get_logger(__name__)


def main() -> None:
    """Run the application."""
    host = os.getenv("HOST", "0.0.0.0")
    port = int(os.getenv("ESI_PORT", "8080"))
    debug = os.getenv("DEBUG", "false").lower() == "true"

    logger.info(f"Starting neo-esi on {host}:{port}")

    uvicorn.run(
        create_app(),
        host=host,
        port=port,
        log_level="debug" if debug else "info",
        access_log=True,
    )


if __name__ == "__main__":
    main()

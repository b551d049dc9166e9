"""Server module entry point for running with python -m server."""

import logging
import os

import uvicorn

from mdblocks.config import MDBLOCKS_LOG_LEVEL

logging.basicConfig(
    level=MDBLOCKS_LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

if __name__ == "__main__":
    # Get configuration from environment variables
    host = os.getenv("HOST", "0.0.0.0")  # noqa: S104
    port = int(os.getenv("PORT", "8000"))
    reload = os.getenv("RELOAD", "false").lower() == "true"

    logger.info("Starting mdblocks server on %s:%d", host, port)

    uvicorn.run(
        "server.main:app",
        host=host,
        port=port,
        reload=reload,
        log_config=None,  # Disable uvicorn's default logging config
    )

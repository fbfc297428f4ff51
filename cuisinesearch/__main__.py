"""
Restaurant search server runner.

Usage:
    python -m cuisinesearch                 # listen on 0.0.0.0:8080
    python -m cuisinesearch --port 9000

Environment Variables:
    HOST: Server host (default: 0.0.0.0)
    PORT: Server port (default: 8080)
    LOG_LEVEL, LOG_DIR: see cuisinesearch.log_config
"""
from __future__ import annotations

import argparse
import logging
import os

import uvicorn

from .log_config import DEFAULT_LOG_CONFIG, configure_logging

logger = logging.getLogger(__name__)


def main() -> None:
    parser = argparse.ArgumentParser(description="Restaurant search server")
    parser.add_argument(
        "--host",
        default=os.getenv("HOST", "0.0.0.0"),
        help="Host to bind to (default: 0.0.0.0)",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=int(os.getenv("PORT", 8080)),
        help="Port to bind to (default: 8080)",
    )
    args = parser.parse_args()

    log_path = configure_logging(DEFAULT_LOG_CONFIG)
    logger.info("[Startup] listening and serving on port %s (log file %s)", args.port, log_path)

    uvicorn.run(
        "cuisinesearch.app:app",
        host=args.host,
        port=args.port,
        log_config=None,
    )


if __name__ == "__main__":
    main()

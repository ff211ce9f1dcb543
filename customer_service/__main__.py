from __future__ import annotations

import argparse
import os

import uvicorn

from customer_service.config import get_settings


def main() -> None:
    settings = get_settings()
    parser = argparse.ArgumentParser(description="Customer Service REST API")
    parser.add_argument("--host", default=settings.host, help="Interface to bind")
    parser.add_argument("--port", type=int, default=settings.port, help="Port to listen on")
    parser.add_argument("--log-level", default=settings.log_level, help="Log level name, e.g. INFO or DEBUG")
    args = parser.parse_args()

    # The app reads its log level from settings when uvicorn imports it.
    os.environ["LOG_LEVEL"] = args.log_level
    get_settings.cache_clear()

    uvicorn.run(
        "customer_service.main:app",
        host=args.host,
        port=args.port,
        log_level=args.log_level.lower(),
        # Logging is configured by the app itself.
        log_config=None,
    )


if __name__ == "__main__":
    main()

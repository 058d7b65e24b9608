#!/usr/bin/env python3
"""Start the Roster API, reporting startup errors to Logfire."""

import sys

import logfire
import uvicorn

from roster.config import Settings
from roster.util.logging import setup_logging
from roster.util.observability import configure_logfire


def main() -> int:
    """Configure logging, then serve the app with uvicorn."""
    settings = Settings()

    # Logfire first so that import errors in the app are captured
    configure_logfire(settings)
    setup_logging(settings)

    try:
        logfire.info(
            "Starting Roster API",
            environment=settings.environment,
            git_sha=settings.git_sha,
        )
        uvicorn.run(
            "roster.interface.api.app:app",
            host="0.0.0.0",
            port=8000,
            log_level="debug" if settings.debug else "info",
        )
        return 0

    except Exception as e:
        logfire.error(
            "Roster API startup failed",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        raise


if __name__ == "__main__":
    sys.exit(main())

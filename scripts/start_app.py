#!/usr/bin/env python3
"""Serve the API with uvicorn.

Settings are validated before the server starts, and any startup failure is
reported to Logfire before the process exits.
"""

import sys

import logfire
import uvicorn

from folio.config import Settings
from folio.util.logging import get_logger, setup_logging
from folio.util.observability import configure_logfire

logger = get_logger("folio.start_app")


def main() -> int:
    settings = Settings()
    setup_logging(settings)
    configure_logfire(settings)

    try:
        settings.check_deployable()
        logger.info("Serving folio on port %s (%s)", settings.port, settings.environment)

        uvicorn.run(
            "folio.interface.api.app:app",
            host="0.0.0.0",
            port=settings.port,
            log_level="debug" if settings.debug else "info",
            proxy_headers=True,
        )
        return 0
    except Exception as e:
        logfire.error(
            "API startup failed",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        raise


if __name__ == "__main__":
    sys.exit(main())

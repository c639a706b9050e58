"""
Process entry point for the hello service.

Validates configuration before the application module is imported so a bad
environment produces a logged error and exit status 1 instead of a traceback.
"""

import sys
from typing import List, Optional

import uvicorn
from pydantic import ValidationError
from uvicorn.main import STARTUP_FAILURE

from .config import get_settings
from .exceptions import ConfigurationError
from .logging_config import get_logger, setup_logging

logger = get_logger("app.main")


class ListeningServer(uvicorn.Server):
    """
    uvicorn server that confirms readiness once its sockets are bound.
    """

    async def startup(self, sockets: Optional[List] = None) -> None:
        await super().startup(sockets=sockets)

        if self.started:
            logger.info(
                f"App listening on port {self.config.port}",
                extra={
                    "extra_fields": {
                        "host": self.config.host,
                        "port": self.config.port,
                    }
                },
            )


def main() -> int:
    """
    Start the HTTP server and block until it stops.

    Returns:
        Process exit code: 0 after a normal shutdown, 1 on invalid
        configuration, non-zero when the listener fails to bind.
    """
    try:
        settings = get_settings()
    except ValidationError as exc:
        error = ConfigurationError(
            fields=[".".join(str(part) for part in err["loc"]) for err in exc.errors()],
            details={"errors": str(exc)},
        )
        setup_logging(stream=sys.stderr)
        logger.error(error.message, extra={"extra_fields": error.details})
        return 1

    from .app import app

    config = uvicorn.Config(
        app,
        host=settings.HOST,
        port=settings.PORT,
        log_level=settings.LOG_LEVEL.lower(),
        log_config=None,
        access_log=False,
    )
    server = ListeningServer(config)
    server.run()

    if not server.started:
        return STARTUP_FAILURE
    return 0


if __name__ == "__main__":
    sys.exit(main())

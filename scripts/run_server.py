import logging

import uvicorn

from app.logging_config import configure_logging, parse_redact_fields
from app.settings import settings

configure_logging(
    level=settings.log_level,
    log_format=settings.log_format,
    redact_fields=parse_redact_fields(settings.log_redact_fields),
    include_uvicorn_access=settings.log_uvicorn_access,
)

logger = logging.getLogger(__name__)


def run_server() -> int:
    logger.info(
        "server.starting",
        extra={
            "event": "server.starting",
            "host": settings.app_host,
            "port": settings.app_port,
            "reload": settings.app_reload,
        },
    )
    uvicorn.run(
        "app.main:app",
        host=settings.app_host,
        port=settings.app_port,
        reload=settings.app_reload,
        log_config=None,
    )
    return 0


if __name__ == "__main__":
    raise SystemExit(run_server())

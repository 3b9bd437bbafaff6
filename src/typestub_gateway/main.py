"""Console entry point: ``typestub-gateway``."""

from __future__ import annotations

import logging

import uvicorn

from typestub_gateway.infrastructure.config import Settings, get_settings

LOG_FORMAT = "%(asctime)s  %(levelname)-8s  %(name)s  %(message)s"


def _configure_logging(settings: Settings) -> None:
    logging.basicConfig(level=settings.log_level.upper(), format=LOG_FORMAT)
    logging.getLogger(__name__).info(
        "Serving stubs on %s:%d (remote host %s)",
        settings.host,
        settings.port,
        settings.remote_host,
    )


def main() -> None:
    """Serve the gateway with uvicorn until interrupted."""
    settings = get_settings()
    _configure_logging(settings)
    uvicorn.run(
        "typestub_gateway.interface.app:create_app",
        factory=True,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()

"""Run the service: ``python -m feedwatch``."""

import logging
import sys

import uvicorn
from pydantic import ValidationError

from .config import Settings
from .main import create_app

logger = logging.getLogger("feedwatch")


def main() -> None:
    try:
        settings = Settings()
    except ValidationError as exc:
        logging.basicConfig(level=logging.ERROR)
        logger.error("Invalid configuration, refusing to start:\n%s", exc)
        sys.exit(1)

    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.info("Starting service on port %s", settings.port)

    uvicorn.run(
        create_app(settings),
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()

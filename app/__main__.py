import logging

import uvicorn

from .config import Settings
from .logging_config import setup_logging

logger = logging.getLogger("product_api")


def main() -> None:
    settings = Settings()
    setup_logging(settings.log_level, settings.log_file)
    logger.info("Server is running on http://localhost:%d", settings.port)
    uvicorn.run("app.main:app", host=settings.host, port=settings.port, log_config=None)


if __name__ == "__main__":
    main()

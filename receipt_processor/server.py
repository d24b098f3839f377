"""Process entry point - serve the receipt API with uvicorn"""

import logging
import uvicorn

from receipt_processor.config import settings
from receipt_processor.infrastructure.observability.logging import setup_logging


def main() -> None:
    setup_logging(settings.log_level)
    logging.info(f"Starting server on :{settings.port}...")
    uvicorn.run(
        "receipt_processor.api.main:app",
        host=settings.host,
        port=settings.port,
        log_config=None,
    )


if __name__ == "__main__":
    main()

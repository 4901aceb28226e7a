import logging

import uvicorn
from mangum import Mangum

from product_api.app import create_app
from product_api.config import Settings
from product_api.logging_config import configure_logging

logger = logging.getLogger("product_api")

settings = Settings.from_env()
configure_logging(settings.log_level)

app = create_app(settings)

handler = Mangum(app)


def main():
    logger.info("Backend listening on port %s", settings.port)
    uvicorn.run(app, host="0.0.0.0", port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    main()

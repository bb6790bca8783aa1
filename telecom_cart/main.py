import logging

import uvicorn

from telecom_cart.config import settings


def main() -> None:
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )

    logging.getLogger(__name__).info("Telecom Cart API running on %s:%s", settings.host, settings.port)
    uvicorn.run(
        "telecom_cart.web.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )

if __name__ == "__main__":
    main()

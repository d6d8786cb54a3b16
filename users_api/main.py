# users_api/main.py
import sys

import uvicorn

from users_api.api import create_app
from users_api.data.database import Store
from users_api.utils import settings
from users_api.utils.logging import configure_logging, get_logger

logger = get_logger(__name__)


def main() -> int:
    configure_logging(settings.LOG_LEVEL)

    logger.info("Initializing database...")
    store = Store(settings.DATABASE_URL, pool_pre_ping=True)
    result = store.initialize(ensure_schema=settings.AUTO_MIGRATE)
    if not result.ok:
        logger.critical(f"Failed to connect to database: {result.error}")
        return 1

    app = create_app(store)

    try:
        uvicorn.run(app, host=settings.HOST, port=settings.PORT)
    except Exception as e:
        logger.critical(f"Failed to run server: {e}")
        return 1
    finally:
        store.dispose()
    return 0


if __name__ == "__main__":
    sys.exit(main())

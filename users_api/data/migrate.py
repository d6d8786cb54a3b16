# users_api/data/migrate.py
"""Apply the bundled Alembic migrations to a database.

Meant to run once per deployment, before any service instance starts with
``AUTO_MIGRATE=false``. Databases whose ``users`` table was created at boot
(``AUTO_MIGRATE=true``) carry no version row yet; they are stamped at the
baseline revision before upgrading.
"""
import sys
from pathlib import Path

from alembic import command
from alembic.config import Config
from sqlalchemy import create_engine, inspect

from users_api.utils import settings
from users_api.utils.logging import configure_logging, get_logger

logger = get_logger(__name__)

MIGRATIONS_DIR = Path(__file__).parent / "migrations"
BASELINE_REVISION = "0001_create_users"


def alembic_config(database_url: str) -> Config:
    cfg = Config()
    cfg.set_main_option("script_location", str(MIGRATIONS_DIR))
    # configparser interpolation
    cfg.set_main_option("sqlalchemy.url", database_url.replace("%", "%%"))
    return cfg


def _needs_baseline_stamp(database_url: str) -> bool:
    engine = create_engine(database_url)
    try:
        tables = set(inspect(engine).get_table_names())
    finally:
        engine.dispose()
    return "users" in tables and "alembic_version" not in tables


def run_migrations(database_url: str, revision: str = "head") -> None:
    cfg = alembic_config(database_url)
    if _needs_baseline_stamp(database_url):
        logger.info(f"Existing unversioned schema, stamping {BASELINE_REVISION}")
        command.stamp(cfg, BASELINE_REVISION)
    logger.info(f"Upgrading database schema to {revision}")
    command.upgrade(cfg, revision)


def main() -> int:
    configure_logging(settings.LOG_LEVEL)
    try:
        run_migrations(settings.DATABASE_URL)
    except Exception as e:
        logger.critical(f"Migration failed: {e}")
        return 1
    logger.info("Migrations applied")
    return 0


if __name__ == "__main__":
    sys.exit(main())

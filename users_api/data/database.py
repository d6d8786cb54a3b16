# users_api/data/database.py
from dataclasses import dataclass
from typing import Iterator

from fastapi import HTTPException, Request
from sqlalchemy import create_engine, text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, declarative_base, sessionmaker

from users_api.utils.logging import get_logger

logger = get_logger(__name__)

Base = declarative_base()


class StoreNotInitialized(RuntimeError):
    pass


@dataclass
class StartupResult:
    ok: bool
    error: str | None = None


class Store:
    """
    Owns the engine and session factory for one database.

    Built explicitly and handed to the app factory, so tests can run against
    their own isolated database.
    """

    def __init__(self, database_url: str, **engine_kwargs):
        self.database_url = database_url
        self.engine = create_engine(database_url, **engine_kwargs)
        self._session_factory = sessionmaker(bind=self.engine, autoflush=False, expire_on_commit=False)
        self._ready = False

    def initialize(self, ensure_schema: bool = True) -> StartupResult:
        # model import registers the tables in Base.metadata
        from users_api.data import models  # noqa: F401

        try:
            with self.engine.connect() as conn:
                conn.execute(text("SELECT 1"))
            logger.info(f"Connected to database {self.engine.url.render_as_string(hide_password=True)}")

            if ensure_schema:
                Base.metadata.create_all(bind=self.engine)
                logger.info(f"Schema ensured: {list(Base.metadata.tables.keys())}")
        except SQLAlchemyError as e:
            logger.error(f"Store initialization failed: {e}")
            return StartupResult(ok=False, error=str(e))

        self._ready = True
        return StartupResult(ok=True)

    def session(self) -> Session:
        if not self._ready:
            raise StoreNotInitialized("Store.initialize() has not completed successfully")
        return self._session_factory()

    handle = session

    def dispose(self) -> None:
        self.engine.dispose()
        self._ready = False


def get_db(request: Request) -> Iterator[Session]:
    try:
        db = request.app.state.store.session()
    except StoreNotInitialized as e:
        logger.error(f"Request rejected: {e}")
        raise HTTPException(status_code=500, detail=str(e))
    try:
        yield db
    finally:
        db.close()

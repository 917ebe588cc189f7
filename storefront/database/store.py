"""
Relational store for the storefront

Owns the SQLAlchemy engine and session factory. One instance is created per
application and passed to request handlers; nothing here is module-global.
"""

import logging
from contextlib import contextmanager
from typing import Iterator, Optional

from sqlalchemy import create_engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from ..core.config import Settings
from ..core.errors import Internal
from .tables import Base
from .products import ProductDatabase, PRODUCTS
from .carts import CartDatabase

logger = logging.getLogger(__name__)


class Store:
    """Engine, session factory and the per-table databases"""

    def __init__(self, database_url: str = "sqlite://", echo: bool = False):
        engine_kwargs = {"echo": echo, "future": True}
        if database_url.startswith("sqlite"):
            engine_kwargs["connect_args"] = {"check_same_thread": False}
            if database_url in ("sqlite://", "sqlite:///:memory:"):
                # every session must see the same in-memory database
                engine_kwargs["poolclass"] = StaticPool

        self.database_url = database_url
        self.engine = create_engine(database_url, **engine_kwargs)
        self.session_factory = sessionmaker(self.engine, expire_on_commit=False)

        self.products = ProductDatabase(self)
        self.carts = CartDatabase(self)

    @contextmanager
    def transaction(self) -> Iterator[Session]:
        """
        Run a unit of work in one transaction.

        Commits on success. Storage errors are rolled back, logged and
        re-raised as Internal; domain errors propagate after the rollback.
        """
        session = self.session_factory()
        try:
            yield session
            session.commit()
        except SQLAlchemyError as exc:
            session.rollback()
            logger.exception(f"Storage failure: {exc}")
            raise Internal() from exc
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    def create_schema(self) -> None:
        """Create tables if they do not exist"""
        Base.metadata.create_all(self.engine)

    def dispose(self) -> None:
        """Release pooled connections"""
        self.engine.dispose()


def open_store(settings: Settings, products: Optional[list[dict]] = None) -> Store:
    """
    Create the store, its schema and the seeded catalog.

    Any failure here is fatal: the application must not start without a
    catalog.
    """
    store = Store(settings.database_url, echo=settings.database_echo)
    try:
        store.create_schema()
        seeded = store.products.seed(PRODUCTS if products is None else products)
    except Exception:
        logger.critical("Could not initialize the catalog store", exc_info=True)
        store.dispose()
        raise
    logger.info(f"Catalog seeded with {seeded} products ({settings.database_url})")
    return store

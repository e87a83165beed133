import contextlib
from functools import lru_cache
from typing import Callable, Iterator, Optional

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker, Session

from core.config_loader import load_config


def build_engine(url: str, **kwargs) -> Engine:
    """Create an engine; pool options only apply to server databases."""
    if url.startswith("sqlite"):
        return create_engine(url, **kwargs)
    return create_engine(
        url,
        pool_pre_ping=True,  # Verify connections before using
        pool_size=10,
        max_overflow=20,
        **kwargs
    )


def build_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@lru_cache()
def get_engine() -> Engine:
    return build_engine(load_config().database.url)


@lru_cache()
def get_session_factory() -> sessionmaker:
    return build_session_factory(get_engine())


@contextlib.contextmanager
def db_session_scope(session_factory: Optional[Callable[[], Session]] = None) -> Iterator[Session]:
    """Provide a transactional scope around a series of operations."""
    session = (session_factory or get_session_factory())()
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()

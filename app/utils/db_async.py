"""Async SQLAlchemy engine and session helpers."""

import asyncio
import ssl
from typing import Any, AsyncGenerator, Dict, Optional, Tuple
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel

from app.config import settings


def _normalize_db_url(url: str) -> str:
    """Pick an async driver for bare Postgres and SQLite URLs.

    "postgres://" and "postgresql://" become "postgresql+asyncpg://";
    "sqlite://" becomes "sqlite+aiosqlite://". Explicit drivers are kept.
    """
    u = make_url(url)
    driver = (u.drivername or "").lower()
    if "+" in driver:
        return u.render_as_string(hide_password=False)
    if driver in ("postgres", "postgresql"):
        u = u.set(drivername="postgresql+asyncpg")
    elif driver == "sqlite":
        u = u.set(drivername="sqlite+aiosqlite")
    return u.render_as_string(hide_password=False)


def is_sqlite_url(url: str) -> bool:
    return make_url(url).get_backend_name() == "sqlite"


def is_memory_sqlite_url(url: str) -> bool:
    u = make_url(url)
    return u.get_backend_name() == "sqlite" and u.database in (None, "", ":memory:")


def _sslmode_connect_args(sslmode: str) -> Dict[str, Any]:
    """Translate a libpq sslmode into asyncpg's ``ssl`` connect argument."""
    mode = sslmode.lower()
    if mode == "disable":
        return {"ssl": False}
    if mode in {"allow", "prefer"}:
        # asyncpg negotiates TLS itself when the server requires it
        return {}
    if mode == "require":
        ssl_context = ssl.create_default_context()
        ssl_context.check_hostname = False
        ssl_context.verify_mode = ssl.CERT_NONE
        return {"ssl": ssl_context}
    if mode == "verify-ca":
        ssl_context = ssl.create_default_context()
        ssl_context.check_hostname = False
        return {"ssl": ssl_context}
    return {"ssl": ssl.create_default_context()}


def prepare_connection(url: str) -> Tuple[str, Dict[str, Any]]:
    """Return the async URL plus the engine kwargs it needs.

    Postgres URLs lose the query args asyncpg rejects (``sslmode``,
    ``channel_binding``). File SQLite waits on locks instead of failing at
    once. In-memory SQLite shares one connection through a ``StaticPool`` so
    every session sees the same catalog; see ``SESSION_LOCK``.
    """
    normalized_url = _normalize_db_url(url)

    if is_sqlite_url(normalized_url):
        engine_kwargs: Dict[str, Any] = {
            "connect_args": {"check_same_thread": False, "timeout": 30},
        }
        if is_memory_sqlite_url(normalized_url):
            engine_kwargs["poolclass"] = StaticPool
        return normalized_url, engine_kwargs

    split = urlsplit(normalized_url)
    sslmode = None
    filtered_pairs = []
    for key, value in parse_qsl(split.query, keep_blank_values=True):
        if key == "sslmode":
            sslmode = value
            continue
        if key == "channel_binding":
            continue
        filtered_pairs.append((key, value))

    cleaned_query = urlencode(filtered_pairs, doseq=True)
    cleaned_url = urlunsplit(split._replace(query=cleaned_query)).rstrip("?")
    connect_args = _sslmode_connect_args(sslmode) if sslmode else {}
    return cleaned_url, {"connect_args": connect_args, "pool_pre_ping": True}


DATABASE_URL, ENGINE_KWARGS = prepare_connection(settings.database_url)

engine = create_async_engine(DATABASE_URL, **ENGINE_KWARGS)
SessionLocal = async_sessionmaker(bind=engine, expire_on_commit=False, class_=AsyncSession)

# Sessions on an in-memory database share one connection, and a rollback in
# one would discard another's pending writes. Those sessions run one at a time.
SESSION_LOCK: Optional[asyncio.Lock] = (
    asyncio.Lock() if is_memory_sqlite_url(DATABASE_URL) else None
)


async def get_session() -> AsyncGenerator[AsyncSession, None]:
    """Yield an async database session."""
    if SESSION_LOCK is None:
        async with SessionLocal() as session:
            yield session
        return

    async with SESSION_LOCK:
        async with SessionLocal() as session:
            yield session


async def init_db():
    """Initialize the database (create tables)."""
    # Import locally so the table is registered on SQLModel.metadata
    from app.schemas import movies  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)


async def dispose_engine() -> None:
    """Dispose of the async engine and its connection pool."""
    await engine.dispose()


def describe_database_url(url: str) -> str:
    """Return a sanitized, human-readable description of the DB URL for logging.

    Example: "postgresql+asyncpg://user@host:5432/dbname"
    Passwords are never included.
    """
    try:
        u = make_url(url)
    except Exception:
        return "<unparseable database URL>"
    if u.get_backend_name() == "sqlite":
        return f"{u.drivername}:///{u.database or ':memory:'}"
    auth = u.username or "?"
    host = u.host or "?"
    port = f":{u.port}" if u.port else ""
    db = u.database or "?"
    return f"{u.drivername}://{auth}@{host}{port}/{db}"

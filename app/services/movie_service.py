"""Movie catalog service functions.

Every function takes the caller's ``AsyncSession`` so each request (or
script run) works against its own store handle.
"""

from typing import Optional, Sequence

from sqlalchemy import asc, delete, desc, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.movies import MovieCreate, MovieUpdate
from app.schemas.movies import Movie


async def list_movies(db: AsyncSession) -> list[Movie]:
    """Return every movie, newest year first, then by title."""
    stmt = select(Movie).order_by(desc(Movie.year), asc(Movie.title))
    result = await db.execute(stmt)
    return list(result.scalars().all())


async def list_movies_by_year(db: AsyncSession, year: int) -> list[Movie]:
    stmt = (
        select(Movie)
        .where(Movie.year == year)  # type: ignore[arg-type]
        .order_by(asc(Movie.title))
    )
    result = await db.execute(stmt)
    return list(result.scalars().all())


async def list_movies_by_winner(db: AsyncSession, winner: bool) -> list[Movie]:
    stmt = (
        select(Movie)
        .where(Movie.winner.is_(winner))  # type: ignore[attr-defined]
        .order_by(asc(Movie.year), asc(Movie.id))
    )
    result = await db.execute(stmt)
    return list(result.scalars().all())


async def list_winning_records(db: AsyncSession) -> list[Movie]:
    """Return winning movies ordered by year, then id.

    The ordering keeps producer iteration stable across calls against
    unchanged data.
    """
    return await list_movies_by_winner(db, True)


async def get_movie(db: AsyncSession, movie_id: int) -> Optional[Movie]:
    return await db.get(Movie, movie_id)


async def create_movie(db: AsyncSession, data: MovieCreate) -> Movie:
    movie = Movie(**data.model_dump())
    db.add(movie)
    await db.commit()
    await db.refresh(movie)
    return movie


async def create_movies(db: AsyncSession, rows: Sequence[MovieCreate]) -> int:
    """Insert many movies in a single transaction.

    Returns:
        Number of rows inserted
    """
    db.add_all([Movie(**row.model_dump()) for row in rows])
    await db.commit()
    return len(rows)


async def update_movie(
    db: AsyncSession,
    movie_id: int,
    data: MovieCreate | MovieUpdate,
) -> Optional[Movie]:
    """Apply ``data`` to an existing movie.

    A ``MovieCreate`` replaces every field; a ``MovieUpdate`` only touches
    the fields the client actually sent.

    Returns:
        The updated movie, or None if no movie has that id
    """
    movie = await db.get(Movie, movie_id)
    if movie is None:
        return None

    changes = data.model_dump(exclude_unset=isinstance(data, MovieUpdate))
    for field, value in changes.items():
        setattr(movie, field, value)

    db.add(movie)
    await db.commit()
    await db.refresh(movie)
    return movie


async def delete_movie(db: AsyncSession, movie_id: int) -> bool:
    movie = await db.get(Movie, movie_id)
    if movie is None:
        return False
    await db.delete(movie)
    await db.commit()
    return True


async def delete_all_movies(db: AsyncSession) -> None:
    await db.execute(delete(Movie))
    await db.commit()


async def count_movies(db: AsyncSession) -> int:
    result = await db.execute(select(func.count()).select_from(Movie))
    return result.scalar() or 0


async def count_winners(db: AsyncSession) -> int:
    stmt = (
        select(func.count())
        .select_from(Movie)
        .where(Movie.winner.is_(True))  # type: ignore[attr-defined]
    )
    result = await db.execute(stmt)
    return result.scalar() or 0

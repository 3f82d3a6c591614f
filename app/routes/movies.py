from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Response
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.movies import MovieCreate, MovieRead, MovieUpdate
from app.services.movie_service import (
    create_movie,
    delete_movie,
    get_movie,
    list_movies,
    list_movies_by_winner,
    list_movies_by_year,
    update_movie,
)
from app.utils.db_async import get_session

router = APIRouter(prefix="/movies", tags=["movies"])

MOVIE_NOT_FOUND = "Movie not found"


@router.get("", response_model=List[MovieRead])
async def list_movies_handler(
    year: Optional[int] = Query(default=None, description="Only movies from this year"),
    winner: Optional[bool] = Query(default=None, description="Filter by winner flag"),
    db: AsyncSession = Depends(get_session),
) -> List[MovieRead]:
    """List movies, optionally filtered by year (takes precedence) or winner flag."""
    if year is not None:
        movies = await list_movies_by_year(db, year)
    elif winner is not None:
        movies = await list_movies_by_winner(db, winner)
    else:
        movies = await list_movies(db)
    return [MovieRead.model_validate(movie) for movie in movies]


@router.get("/{movie_id}", response_model=MovieRead)
async def get_movie_handler(
    movie_id: int,
    db: AsyncSession = Depends(get_session),
) -> MovieRead:
    movie = await get_movie(db, movie_id)
    if movie is None:
        raise HTTPException(status_code=404, detail=MOVIE_NOT_FOUND)
    return MovieRead.model_validate(movie)


@router.post("", response_model=MovieRead, status_code=201)
async def create_movie_handler(
    movie_data: MovieCreate,
    db: AsyncSession = Depends(get_session),
) -> MovieRead:
    movie = await create_movie(db, movie_data)
    return MovieRead.model_validate(movie)


@router.put("/{movie_id}", response_model=MovieRead)
async def replace_movie_handler(
    movie_id: int,
    movie_data: MovieCreate,
    db: AsyncSession = Depends(get_session),
) -> MovieRead:
    """Replace every field of an existing movie."""
    movie = await update_movie(db, movie_id, movie_data)
    if movie is None:
        raise HTTPException(status_code=404, detail=MOVIE_NOT_FOUND)
    return MovieRead.model_validate(movie)


@router.patch("/{movie_id}", response_model=MovieRead)
async def patch_movie_handler(
    movie_id: int,
    movie_data: MovieUpdate,
    db: AsyncSession = Depends(get_session),
) -> MovieRead:
    """Update only the fields present in the request body."""
    movie = await update_movie(db, movie_id, movie_data)
    if movie is None:
        raise HTTPException(status_code=404, detail=MOVIE_NOT_FOUND)
    return MovieRead.model_validate(movie)


@router.delete("/{movie_id}", status_code=204)
async def delete_movie_handler(
    movie_id: int,
    db: AsyncSession = Depends(get_session),
) -> Response:
    deleted = await delete_movie(db, movie_id)
    if not deleted:
        raise HTTPException(status_code=404, detail=MOVIE_NOT_FOUND)
    return Response(status_code=204)

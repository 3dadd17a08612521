from typing import Optional
from fastapi import APIRouter, Body, Depends, Query
from ..core.deps import get_movie_service
from ..models.auth import Message
from ..models.movie import MoviePage, MovieUpdate
from ..services.movies import MovieService
router = APIRouter(prefix="/movies", tags=["movies"])
# page/limit arrive as raw strings so junk falls back to defaults instead of 400
@router.get("", response_model=MoviePage)
async def list_movies(page: Optional[str] = None, limit: Optional[str] = None,
                      search: Optional[str] = None,
                      sort_by: Optional[str] = Query(None, alias="sortBy"),
                      sort_order: Optional[str] = Query(None, alias="sortOrder"),
                      movies: MovieService = Depends(get_movie_service)) -> MoviePage:
    return await movies.list(page, limit, search, sort_by, sort_order)
@router.get("/{movie_id}")
async def get_movie(movie_id: str, movies: MovieService = Depends(get_movie_service)) -> dict:
    return await movies.get(movie_id)
@router.put("/{movie_id}", response_model=Message)
async def update_movie(movie_id: str, payload: MovieUpdate = Body(...),
                       movies: MovieService = Depends(get_movie_service)) -> Message:
    await movies.update(movie_id, payload)
    return Message(message="Movie updated")

from fastapi import APIRouter

from . import auth, movies

api_router = APIRouter(prefix="/api")
api_router.include_router(auth.router)
api_router.include_router(movies.router)

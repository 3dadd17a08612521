from fastapi import Depends, Request
from ..services.database import Database
from ..services.movies import MovieService
from ..services.users import UserService
from .config import Settings
def get_app_settings(request: Request) -> Settings: return request.app.state.settings
def get_database(request: Request) -> Database: return request.app.state.db
def get_movie_service(db: Database = Depends(get_database)) -> MovieService:
    return MovieService(db.movies)
def get_user_service(db: Database = Depends(get_database),
                     settings: Settings = Depends(get_app_settings)) -> UserService:
    return UserService(db.users, settings)

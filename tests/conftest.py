import os

# mflix.main builds its module-level app at import time and refuses to start
# without a signing secret
os.environ.setdefault("JWT_SECRET", "test-secret-test-secret-test-secret-0123")

import pytest
from fastapi.testclient import TestClient

from mflix.core.config import Settings
from mflix.core.deps import get_movie_service, get_user_service
from mflix.main import create_app
from mflix.services.movies import MovieService
from mflix.services.users import UserService

from .fakes import FakeCollection

SAMPLE_MOVIES = [
    {"title": "A", "year": 2000, "plot": "first", "genres": ["Drama"]},
    {"title": "B", "year": 2001, "plot": "second", "genres": ["Comedy"]},
    {"title": "C", "year": 1999, "plot": "third", "genres": ["Drama"]},
]


@pytest.fixture
def settings() -> Settings:
    return Settings(
        jwt_secret="unit-test-secret-unit-test-secret-42",
        bcrypt_rounds=4,
        _env_file=None,
    )


@pytest.fixture
def movies_col() -> FakeCollection:
    return FakeCollection(SAMPLE_MOVIES)


@pytest.fixture
def users_col() -> FakeCollection:
    return FakeCollection(unique=("email",))


@pytest.fixture
def user_service(users_col, settings) -> UserService:
    return UserService(users_col, settings)


@pytest.fixture
def app(settings, movies_col, user_service):
    app = create_app(settings)
    app.dependency_overrides[get_movie_service] = lambda: MovieService(movies_col)
    app.dependency_overrides[get_user_service] = lambda: user_service
    return app


@pytest.fixture
def client(app) -> TestClient:
    # no context manager: startup would try to reach a real MongoDB
    return TestClient(app)

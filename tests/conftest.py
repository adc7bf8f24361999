import httpx
import pytest
from fastapi import FastAPI, HTTPException, Request, Response, status
from pydantic import BaseModel

from movie_catalog.core.config import get_settings
from movie_catalog.services.catalog_client import RemoteCatalogClient


BASE_URL = "http://catalog.test"


class MoviePayload(BaseModel):
    title: str
    director: str
    year: int | None = None
    rating: int = 0


class FakeMovieService:
    """In-memory stand-in for the remote service; records every request it sees."""

    def __init__(self, movies=None):
        self.movies: dict[int, dict] = {}
        self.requests: list[tuple[str, str]] = []
        self.bodies: list[dict] = []
        self.fail_methods: set[str] = set()
        self.next_id = 1
        for movie in movies or []:
            self.movies[movie["id"]] = dict(movie)
            self.next_id = max(self.next_id, movie["id"] + 1)
        self.app = self._build_app()

    def methods(self) -> list[str]:
        return [method for method, _ in self.requests]

    def _build_app(self) -> FastAPI:
        app = FastAPI(title="Fake Movie Service")

        @app.middleware("http")
        async def record_request(request: Request, call_next):
            self.requests.append((request.method, request.url.path))
            if request.method in self.fail_methods:
                return Response(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)
            return await call_next(request)

        @app.get("/movies")
        def list_movies() -> list[dict]:
            return list(self.movies.values())

        @app.post("/movies", status_code=status.HTTP_201_CREATED)
        def create_movie(payload: MoviePayload) -> dict:
            self.bodies.append(payload.model_dump())
            movie = {"id": self.next_id, **payload.model_dump()}
            self.movies[self.next_id] = movie
            self.next_id += 1
            return movie

        @app.put("/movies/{movie_id}")
        def update_movie(movie_id: int, payload: MoviePayload) -> dict:
            if movie_id not in self.movies:
                raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
            self.bodies.append(payload.model_dump())
            self.movies[movie_id] = {"id": movie_id, **payload.model_dump()}
            return self.movies[movie_id]

        @app.delete("/movies/{movie_id}")
        def delete_movie(movie_id: int) -> dict:
            if self.movies.pop(movie_id, None) is None:
                raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
            return {}

        return app


@pytest.fixture(autouse=True)
def reset_settings(monkeypatch):
    # Keep the developer's environment out of the tests
    for name in ("CATALOG_API_URL", "CATALOG_TIMEOUT", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def sample_movies():
    # Deliberately not sorted by id or title
    return [
        {"id": 7, "title": "Solaris", "director": "Tarkovsky", "year": 1972, "rating": 5},
        {"id": 2, "title": "Arrival", "director": "Villeneuve", "year": 2016, "rating": 4},
        {"id": 5, "title": "Heat", "director": "Mann", "year": 1995, "rating": 3},
    ]


@pytest.fixture
def fake_service(sample_movies):
    return FakeMovieService(sample_movies)


@pytest.fixture
def catalog_client(fake_service):
    return RemoteCatalogClient(
        base_url=BASE_URL,
        transport=httpx.ASGITransport(app=fake_service.app),
    )


@pytest.fixture
def unreachable_client():
    def _refuse(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    return RemoteCatalogClient(base_url=BASE_URL, transport=httpx.MockTransport(_refuse))

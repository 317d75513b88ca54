from fastapi import Depends, Request

from .clients.tmdb_client import TMDBClient
from .services.movie_service import MovieService


def get_tmdb_client(request: Request) -> TMDBClient:
    """Return the process-wide TMDB client created at startup."""
    return request.app.state.tmdb_client


def get_movie_service(client: TMDBClient = Depends(get_tmdb_client)) -> MovieService:
    return MovieService(client)

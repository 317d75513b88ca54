from typing import Any, Mapping, Optional

from ..clients.tmdb_client import TMDBClient
from ..schemas.movies_schemas import (
    MovieCreditsParams,
    MovieDetailParams,
    MovieGenresParams,
    MovieImagesParams,
    MovieListParams,
    MovieRecommendationsParams,
    MovieSearchParams,
    MovieVideosParams,
    TrendingMoviesParams,
)
from ..utils.errors import handle_httpx_error


class MovieService:
    """
    Movie endpoints of the TMDB API.
    Every method forwards its parameters to one upstream path and returns the
    response body untouched. Failures are normalized into AppError.
    """

    def __init__(self, client: TMDBClient):
        self.client = client

    async def _get(self, path: str, params: Optional[Mapping[str, Any]] = None) -> Any:
        try:
            return await self.client.get(path, params)
        except Exception as e:
            raise handle_httpx_error(e) from e

    async def search_movies(self, params: MovieSearchParams) -> Any:
        """
        Search movies by title.

        :param params: MovieSearchParams with the search term, paging and filters
        :return: Paginated search results as returned by TMDB
        """
        return await self._get('/3/search/movie', params.model_dump())

    async def get_movie_by_id(self, movie_id: int, params: MovieDetailParams) -> Any:
        """
        Fetch the details of a movie.

        :param movie_id: TMDB id of the movie
        :param params: MovieDetailParams (language, append_to_response)
        :return: Movie details as returned by TMDB
        """
        return await self._get(f'/3/movie/{movie_id}', params.model_dump())

    async def get_trending_movies(self, params: TrendingMoviesParams) -> Any:
        """
        Fetch trending movies for a time window ('day' or 'week').

        :param params: TrendingMoviesParams
        :return: Paginated trending movies
        """
        return await self._get(
            f'/3/trending/movie/{params.time_window}',
            {'language': params.language}
        )

    async def get_movie_genres(self, params: MovieGenresParams) -> Any:
        """Fetch the list of official movie genres."""
        return await self._get('/3/genre/movie/list', {'language': params.language})

    async def get_popular_movies(self, params: MovieListParams) -> Any:
        """Fetch movies ordered by popularity."""
        return await self._get('/3/movie/popular', params.model_dump())

    async def get_top_rated_movies(self, params: MovieListParams) -> Any:
        """Fetch movies ordered by rating."""
        return await self._get('/3/movie/top_rated', params.model_dump())

    async def get_movie_recommendations(
        self,
        movie_id: int,
        params: MovieRecommendationsParams
    ) -> Any:
        return await self._get(
            f'/3/movie/{movie_id}/recommendations', params.model_dump()
        )

    async def get_movie_credits(self, movie_id: int, params: MovieCreditsParams) -> Any:
        return await self._get(f'/3/movie/{movie_id}/credits', params.model_dump())

    async def get_movie_images(self, movie_id: int, params: MovieImagesParams) -> Any:
        return await self._get(f'/3/movie/{movie_id}/images', params.model_dump())

    async def get_movie_videos(self, movie_id: int, params: MovieVideosParams) -> Any:
        return await self._get(f'/3/movie/{movie_id}/videos', params.model_dump())

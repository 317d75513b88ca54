from fastapi import APIRouter, Depends

from ..dependencies import get_movie_service
from ..schemas.movies_schemas import (
    ErrorResponse,
    MovieCreditsParams,
    MovieDetailParams,
    MovieGenresParams,
    MovieImagesParams,
    MovieListParams,
    MovieRecommendationsParams,
    MovieSearchParams,
    MovieVideosParams,
    TrendingMoviesParams,
    ValidationErrorResponse,
)
from ..services.movie_service import MovieService

router = APIRouter(
    prefix='/movies',
    tags=['movies'],
    responses={
        400: {'model': ValidationErrorResponse},
        500: {'model': ErrorResponse},
        503: {'model': ErrorResponse},
    },
)

# Fixed paths are declared before '/{movie_id}' so they are never taken for ids.


@router.get('/search')
async def search_movies(
    params: MovieSearchParams = Depends(),
    service: MovieService = Depends(get_movie_service),
):
    return await service.search_movies(params)


@router.get('/trending')
async def get_trending_movies(
    params: TrendingMoviesParams = Depends(),
    service: MovieService = Depends(get_movie_service),
):
    return await service.get_trending_movies(params)


@router.get('/genres')
async def get_movie_genres(
    params: MovieGenresParams = Depends(),
    service: MovieService = Depends(get_movie_service),
):
    return await service.get_movie_genres(params)


@router.get('/popular')
async def get_popular_movies(
    params: MovieListParams = Depends(),
    service: MovieService = Depends(get_movie_service),
):
    return await service.get_popular_movies(params)


@router.get('/top-rated')
async def get_top_rated_movies(
    params: MovieListParams = Depends(),
    service: MovieService = Depends(get_movie_service),
):
    return await service.get_top_rated_movies(params)


@router.get('/{movie_id}', responses={404: {'model': ErrorResponse}})
async def get_movie_by_id(
    movie_id: int,
    params: MovieDetailParams = Depends(),
    service: MovieService = Depends(get_movie_service),
):
    return await service.get_movie_by_id(movie_id, params)


@router.get('/{movie_id}/recommendations', responses={404: {'model': ErrorResponse}})
async def get_movie_recommendations(
    movie_id: int,
    params: MovieRecommendationsParams = Depends(),
    service: MovieService = Depends(get_movie_service),
):
    return await service.get_movie_recommendations(movie_id, params)


@router.get('/{movie_id}/credits', responses={404: {'model': ErrorResponse}})
async def get_movie_credits(
    movie_id: int,
    params: MovieCreditsParams = Depends(),
    service: MovieService = Depends(get_movie_service),
):
    return await service.get_movie_credits(movie_id, params)


@router.get('/{movie_id}/images', responses={404: {'model': ErrorResponse}})
async def get_movie_images(
    movie_id: int,
    params: MovieImagesParams = Depends(),
    service: MovieService = Depends(get_movie_service),
):
    return await service.get_movie_images(movie_id, params)


@router.get('/{movie_id}/videos', responses={404: {'model': ErrorResponse}})
async def get_movie_videos(
    movie_id: int,
    params: MovieVideosParams = Depends(),
    service: MovieService = Depends(get_movie_service),
):
    return await service.get_movie_videos(movie_id, params)

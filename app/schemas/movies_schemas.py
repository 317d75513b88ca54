from typing import Any, List, Literal, Optional
from pydantic import BaseModel


class LanguageParams(BaseModel):
    language: str = 'en-US'


class MovieSearchParams(LanguageParams):
    query: Optional[str] = None
    include_adult: bool = False
    primary_release_year: Optional[str] = None
    page: int = 1
    region: Optional[str] = None
    year: Optional[str] = None


class MovieDetailParams(LanguageParams):
    append_to_response: Optional[str] = None


class TrendingMoviesParams(LanguageParams):
    time_window: Literal['day', 'week'] = 'day'


class MovieGenresParams(LanguageParams):
    pass


class MovieListParams(LanguageParams):
    page: int = 1
    region: Optional[str] = None


class MovieRecommendationsParams(LanguageParams):
    page: int = 1


class MovieCreditsParams(LanguageParams):
    pass


class MovieImagesParams(BaseModel):
    include_image_language: Optional[str] = None
    language: Optional[str] = None


class MovieVideosParams(LanguageParams):
    include_video_language: Optional[str] = None


class ErrorResponse(BaseModel):
    status: Literal['error'] = 'error'
    message: str


class FieldError(BaseModel):
    type: str
    location: str
    field: str
    message: str
    value: Optional[Any] = None


class ValidationErrorResponse(BaseModel):
    errors: List[FieldError]


class WelcomeResponse(BaseModel):
    message: str

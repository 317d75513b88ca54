import logging
from contextlib import asynccontextmanager

from fastapi import APIRouter, FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException

from .clients.tmdb_client import TMDBClient, build_tmdb_client
from .config import settings
from .routers import movies
from .schemas.movies_schemas import WelcomeResponse
from .utils.errors import AppError
from .utils.handlers import (
    global_error_handler,
    http_exception_handler,
    validation_error_handler,
)

logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    datefmt="%Y-%m-%dT%H:%M:%S",
)
logger = logging.getLogger("movie_api")

API_PREFIX = '/api'


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create the shared TMDB client on startup and close it on shutdown."""
    app.state.tmdb_client = TMDBClient(build_tmdb_client(settings))
    logger.info("TMDB client ready for %s", settings.TMDB_BASE_URL)
    yield
    await app.state.tmdb_client.aclose()
    logger.info("Shutting down Movie API")


app = FastAPI(title="Movie API", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_methods=["GET"],
    allow_headers=["*"],
)

app.add_exception_handler(AppError, global_error_handler)
app.add_exception_handler(Exception, global_error_handler)
app.add_exception_handler(RequestValidationError, validation_error_handler)
app.add_exception_handler(StarletteHTTPException, http_exception_handler)

root_router = APIRouter()


@root_router.get('/', response_model=WelcomeResponse)
async def get_hello():
    return WelcomeResponse(message='Welcome to the Movie API')


app.include_router(root_router, prefix=API_PREFIX)
app.include_router(movies.router, prefix=API_PREFIX)


def run():
    import uvicorn

    logger.info("Server is running on PORT %s", settings.PORT)
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)


if __name__ == '__main__':
    run()

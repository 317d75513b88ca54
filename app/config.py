from typing import List

from pydantic_settings import BaseSettings
from pydantic import ConfigDict


class Settings(BaseSettings):
    TMDB_ACCESS_TOKEN: str
    TMDB_BASE_URL: str = 'https://api.themoviedb.org'
    TMDB_TIMEOUT: float = 5.0

    HOST: str = '0.0.0.0'
    PORT: int = 3000
    LOG_LEVEL: str = 'INFO'
    CORS_ORIGINS: str = '*'

    model_config = ConfigDict(
        env_file=".env",
        extra="ignore"
    )

    @property
    def cors_origins_list(self) -> List[str]:
        return [o.strip() for o in self.CORS_ORIGINS.split(',') if o.strip()]


settings = Settings()

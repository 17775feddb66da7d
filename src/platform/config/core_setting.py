import json
from pathlib import Path
from typing import Annotated, List, Literal

from pydantic import SecretStr, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict


_PROJECT_ROOT = Path(__file__).resolve().parents[3]
_ENV_PATH = _PROJECT_ROOT / '.env'
_ENV_FILE = _ENV_PATH if _ENV_PATH.exists() else (_PROJECT_ROOT / '.env.example')


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=str(_ENV_FILE),
        env_ignore_empty=True,
        extra='ignore',
    )

    PROJECT_NAME: str = 'Webinar Management'
    VERSION: str = '0.1.0'
    DEBUG: bool = True  # Set to False in production

    # Database
    POSTGRES_SERVER: str = 'localhost'
    POSTGRES_USER: str = 'postgres'
    POSTGRES_PASSWORD: SecretStr = SecretStr('postgres')
    POSTGRES_DB: str = 'webinar_db'
    POSTGRES_PORT: int = 5432

    @property
    def DATABASE_URL_ASYNC(self) -> str:
        password = self.POSTGRES_PASSWORD.get_secret_value()
        return f'postgresql+asyncpg://{self.POSTGRES_USER}:{password}@{self.POSTGRES_SERVER}:{self.POSTGRES_PORT}/{self.POSTGRES_DB}'

    @property
    def DATABASE_URL_SYNC(self) -> str:
        password = self.POSTGRES_PASSWORD.get_secret_value()
        return f'postgresql://{self.POSTGRES_USER}:{password}@{self.POSTGRES_SERVER}:{self.POSTGRES_PORT}/{self.POSTGRES_DB}'

    # Connection pool
    DB_POOL_SIZE: int = 5
    DB_POOL_MAX_OVERFLOW: int = 5
    DB_POOL_TIMEOUT: int = 30  # seconds
    DB_POOL_RECYCLE: int = 1800  # seconds
    DB_POOL_PRE_PING: bool = True
    DB_CREATE_TABLES_ON_STARTUP: bool = False  # Alembic owns the schema outside local runs

    # CORS
    BACKEND_CORS_ORIGINS: Annotated[List[str], NoDecode] = []  # comma separated or JSON list

    @field_validator('BACKEND_CORS_ORIGINS', mode='before')
    @classmethod
    def assemble_cors_origins(cls, v: str | List[str]) -> List[str]:
        if isinstance(v, str) and v.strip().startswith('['):
            return json.loads(v)
        if isinstance(v, str):
            return [i.strip() for i in v.split(',') if i.strip()]
        elif isinstance(v, list):
            return v
        return []

    # Webinar
    WEBINAR_REPO_BACKEND: Literal['postgres', 'memory'] = 'postgres'
    WEBINAR_MIN_LEAD_DAYS: int = 3

    # Acting user when the request carries no X-User-Id header
    DEFAULT_USER_ID: str = 'test-user'


settings = Settings()  # type: ignore

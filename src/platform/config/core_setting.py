from pathlib import Path
from typing import List

from pydantic import SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


_PROJECT_ROOT = Path(__file__).resolve().parents[3]
_ENV_PATH = _PROJECT_ROOT / '.env'
_ENV_FILE = _ENV_PATH if _ENV_PATH.exists() else (_PROJECT_ROOT / '.env.example')


def _split_csv(v: str | List[str]) -> List[str] | None:
    if isinstance(v, str) and not v.startswith('['):
        return [i.strip() for i in v.split(',') if i.strip()]
    elif isinstance(v, list):
        return v
    return None


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=str(_ENV_FILE),
        env_ignore_empty=True,
        extra='ignore',
    )

    PROJECT_NAME: str = 'Ticket Inventory Service'
    VERSION: str = '0.1.0'
    DEBUG: bool = True  # Set to False in production

    # CORS
    BACKEND_CORS_ORIGINS: List[str] = []  # add your frontend URL here

    @field_validator('BACKEND_CORS_ORIGINS', mode='before')
    @classmethod
    def assemble_cors_origins(cls, v: str | List[str]) -> List[str]:
        return _split_csv(v) or []

    # Database
    POSTGRES_SERVER: str = 'localhost'
    POSTGRES_USER: str = 'postgres'
    POSTGRES_PASSWORD: SecretStr = SecretStr('postgres')
    POSTGRES_DB: str = 'ticket_inventory'
    POSTGRES_PORT: int = 5432

    @property
    def DATABASE_URL_ASYNC(self) -> str:
        password = self.POSTGRES_PASSWORD.get_secret_value()
        return f'postgresql+asyncpg://{self.POSTGRES_USER}:{password}@{self.POSTGRES_SERVER}:{self.POSTGRES_PORT}/{self.POSTGRES_DB}'

    # Connection pool
    DB_POOL_SIZE: int = 10
    DB_POOL_MAX_OVERFLOW: int = 5
    DB_POOL_TIMEOUT: int = 30  # seconds
    DB_POOL_RECYCLE: int = 3600  # seconds
    DB_POOL_PRE_PING: bool = True

    # Inventory reconciliation
    SOLD_ORDER_STATUSES: List[str] = ['pending', 'completed', 'confirmed']
    SALE_ORDER_STATUSES: List[str] = ['completed', 'confirmed']

    @field_validator('SOLD_ORDER_STATUSES', 'SALE_ORDER_STATUSES', mode='before')
    @classmethod
    def assemble_order_statuses(cls, v: str | List[str]) -> List[str]:
        statuses = _split_csv(v)
        if statuses is None:
            raise ValueError('order statuses must be a comma separated string or a list')
        return statuses

    # Audit log query
    INVENTORY_LOG_DEFAULT_LIMIT: int = 50
    INVENTORY_LOG_MAX_LIMIT: int = 500
    ACTIVITY_SALES_LIMIT: int = 20


settings = Settings()  # type: ignore

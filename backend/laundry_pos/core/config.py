from pydantic_settings import BaseSettings
from decouple import config
from typing import List

DEFAULT_JWT_SECRET = "default_secret"

class Settings(BaseSettings):
    API_PREFIX: str = config("API_PREFIX", default="")
    JWT_SECRET: str = config("JWT_SECRET", default=DEFAULT_JWT_SECRET, cast=str)
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_HOURS: int = config("ACCESS_TOKEN_EXPIRE_HOURS", default=24, cast=int)

    # Comma separated, added to the fixed origin whitelist in app.py
    BACKEND_CORS_ORIGINS: str = config("BACKEND_CORS_ORIGINS", default="")

    PROJECT_NAME: str = "LAUNDRY POS"
    DEBUG: bool = config("DEBUG", default=False, cast=bool)
    LOG_FILE: str = config("LOG_FILE", default="laundry_pos.log")

    MONGO_CONNECTION_STRING: str = config("MONGO_CONNECTION_STRING", default="mongodb://localhost:27017", cast=str)
    MONGO_DB_NAME: str = config("MONGO_DB_NAME", default="apkclaundry")
    MONGO_TIMEOUT_MS: int = config("MONGO_TIMEOUT_MS", default=10000, cast=int)

    @property
    def cors_origins(self) -> List[str]:
        return [url.strip() for url in self.BACKEND_CORS_ORIGINS.split(",") if url.strip()]

    @property
    def uses_default_secret(self) -> bool:
        return self.JWT_SECRET == DEFAULT_JWT_SECRET

    class Config:
        case_sensitive = True

settings = Settings()

from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    PROJECT_NAME: str = "CarMarket"
    DATABASE_URL: str = "sqlite:///./carmarket.db"

    # Auth Config
    JWT_SECRET: str = Field(min_length=1)
    ALGORITHM: Literal["HS256", "HS384", "HS512"] = "HS256"
    ACCESS_TOKEN_EXPIRE_HOURS: int = 30
    REVOCATION_SWEEP_SECONDS: int = 3600

    # Security
    PASSWORD_PEPPER: str = ""

    # HTTP
    CORS_ORIGINS: list[str] = ["*"]
    HOST: str = "0.0.0.0"
    PORT: int = 3000

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "dev"

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    @field_validator("JWT_SECRET", mode="before")
    @classmethod
    def strip_secret(cls, value):
        if isinstance(value, str):
            return value.strip()
        return value

settings = Settings()

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    DATABASE_URL: str = "sqlite:///./worktracker.db"
    SECRET_KEY: str
    ALGORITHM: str = "HS256"
    CACHE_TTL_MS: int = 5000
    DEFAULT_CURRENCY: str = "GBP"
    DEFAULT_HOURLY_RATE: float = 10
    LOG_LEVEL: str = "INFO"
    CORS_ORIGINS: list[str] = [
        "http://127.0.0.1:4321",
        "http://localhost:4321",
    ]

    class Config:
        env_file = ".env"

settings = Settings()

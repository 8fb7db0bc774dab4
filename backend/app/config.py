from pydantic_settings import BaseSettings
from typing import Optional


class Settings(BaseSettings):
    # App settings
    APP_NAME: str = "Assignment Copilot"
    APP_VERSION: str = "1.0.0"
    NODE_ENV: str = "development"
    LOG_LEVEL: str = "INFO"

    # Database
    DATABASE_URL: str = "sqlite:///./assignment_copilot.db"

    # Security
    SECRET_KEY: str = "your-secret-key-change-this-in-production"
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60 * 24 * 7

    # Shared secret sent by the cron scheduler as a bearer token
    CRON_SECRET: Optional[str] = None

    # CORS
    CORS_ORIGINS: Optional[str] = None

    class Config:
        env_file = ".env"
        case_sensitive = True

    @property
    def is_production(self) -> bool:
        return self.NODE_ENV.strip().lower() == "production"


settings = Settings()

# CORS - Get from environment or use defaults
def get_cors_origins() -> list:
    cors_env = settings.CORS_ORIGINS
    if cors_env:
        # Support comma-separated list
        return [origin.strip() for origin in cors_env.split(",")]
    return ["http://localhost:3000", "http://localhost:5173"]

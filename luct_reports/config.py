from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    APP_NAME: str = "LUCT Reporting System"
    ENVIRONMENT: str = "development"  # development | production | test
    LOG_LEVEL: str = "INFO"

    SECRET_KEY: str = "supersecretkey"
    JWT_ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 8 * 60

    DATABASE_URL: str = "sqlite:///luct.db"
    DB_POOL_SIZE: int = 10
    DB_POOL_TIMEOUT: int = 60  # seconds to wait for a free connection
    DB_ECHO: bool = False

    CORS_ORIGINS: list[str] = ["*"]
    SEED_DEFAULTS: bool = True

    @property
    def is_production(self) -> bool:
        return self.ENVIRONMENT.lower() == "production"


settings = Settings()

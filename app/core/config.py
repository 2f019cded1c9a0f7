from pydantic_settings import BaseSettings, SettingsConfigDict
from sqlalchemy.engine import URL
from typing import List

class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )

    APP_ENV: str = "local"
    APP_NAME: str = "form-schema-service"
    HOST: str = "0.0.0.0"
    PORT: int = 3000
    LOG_LEVEL: str = "INFO"

    CORS_ORIGINS: str = "*"

    # Full SQLAlchemy URL; when empty the URL is assembled from DB_* parts.
    DATABASE_URL: str = ""
    DB_USER: str = "postgres"
    DB_PASSWORD: str = ""
    DB_HOST: str = "localhost"
    DB_PORT: int = 5432
    DB_DATABASE: str = "postgres"
    DB_SSL: bool = False
    DB_SCHEMA: str = ""
    DB_POOL_SIZE: int = 5
    DB_MAX_OVERFLOW: int = 5
    DB_STATEMENT_TIMEOUT_MS: int = 10000

    UI_DATA_FETCH_TIMEOUT_SECONDS: float = 15.0
    DEFAULT_PRODUCT: str = "general"
    INITIAL_VALUE_TOKEN_CASE: str = "upper"  # upper | lower | both

    @property
    def cors_origins_list(self) -> List[str]:
        return [o.strip() for o in self.CORS_ORIGINS.split(",") if o.strip()]

    @property
    def database_url(self) -> str:
        if self.DATABASE_URL.strip():
            return self.DATABASE_URL.strip()
        url = URL.create(
            "postgresql+psycopg",
            username=self.DB_USER or None,
            password=self.DB_PASSWORD or None,
            host=self.DB_HOST,
            port=self.DB_PORT,
            database=self.DB_DATABASE,
        )
        return url.render_as_string(hide_password=False)

    @property
    def initial_value_tokens(self) -> dict[str, bool]:
        mode = str(self.INITIAL_VALUE_TOKEN_CASE or "").strip().lower()
        tokens: dict[str, bool] = {}
        if mode in {"upper", "both"}:
            tokens.update({"TRUE": True, "FALSE": False})
        if mode in {"lower", "both"}:
            tokens.update({"true": True, "false": False})
        if not tokens:
            tokens.update({"TRUE": True, "FALSE": False})
        return tokens

settings = Settings()

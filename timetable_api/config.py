from typing import List, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # --- HTTP listener ---
    HOST: str = "0.0.0.0"
    PORT: int = 8000

    # --- DB 設定 ---
    DB_HOST: str = "localhost"
    DB_PORT: int = 5432
    DB_USER: str = "postgres"
    DB_PASSWORD: str = ""
    DB_NAME: str = "timetable"
    DATABASE_URL: Optional[str] = None

    # --- Timetable ---
    # wall clock the stored start/end times are expressed in
    TIMEZONE: str = "Africa/Accra"

    CORS_ORIGINS: List[str] = ["*"]
    APP_INFO: str = "Ashesi Timetable API"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=True,
    )

    @property
    def database_url(self) -> str:
        if self.DATABASE_URL:
            return self.DATABASE_URL
        return (
            f"postgresql+psycopg2://{self.DB_USER}:{self.DB_PASSWORD}"
            f"@{self.DB_HOST}:{self.DB_PORT}/{self.DB_NAME}"
        )


settings = Settings()

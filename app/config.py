# app/config.py
from pathlib import Path
from typing import Literal, Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

PROJECT_ROOT = Path(__file__).resolve().parent.parent


class Settings(BaseSettings):
    database_url: str = f"sqlite+aiosqlite:///{PROJECT_ROOT / 'awards.db'}"
    env: Literal["dev", "stage", "prod"] = "dev"
    debug: bool = False
    log_level: str = "INFO"
    access_log: bool = True
    sql_echo: bool = False
    auto_init_db: bool = True

    # CSV loaded into an empty catalog at startup; unset to skip seeding.
    # Relative paths are taken from the project root, not the working directory.
    movies_csv_path: Optional[str] = str(PROJECT_ROOT / "data" / "movielist.csv")

    host: str = "0.0.0.0"
    port: int = 8080

    @field_validator("movies_csv_path")
    @classmethod
    def anchor_to_project_root(cls, v: Optional[str]) -> Optional[str]:
        if not v:
            return None
        path = Path(v).expanduser()
        if not path.is_absolute():
            path = PROJECT_ROOT / path
        return str(path)

    @property
    def is_dev(self) -> bool:
        return self.env == "dev" or self.debug is True

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="",
        case_sensitive=False,
        extra="ignore",
    )


settings = Settings()

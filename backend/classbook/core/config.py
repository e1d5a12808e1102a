from functools import lru_cache
import json
from pathlib import Path
from typing import Annotated

from pydantic import field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict


BACKEND_DIR = Path(__file__).resolve().parents[2]
BACKEND_ENV_FILE = BACKEND_DIR / ".env"
DEFAULT_REGULAR_CLASSES_FILE = BACKEND_DIR / "data" / "regular_classes.json"


def _split_list(value: str | list[str]) -> list[str]:
    if isinstance(value, str):
        stripped = value.strip()
        if stripped.startswith("["):
            try:
                parsed = json.loads(stripped)
                if isinstance(parsed, list):
                    return [str(item).strip() for item in parsed if str(item).strip()]
            except json.JSONDecodeError:
                pass
        return [item.strip() for item in value.split(",") if item.strip()]
    return value


class Settings(BaseSettings):
    # Resolve to backend/.env so `uvicorn --app-dir backend` works from any cwd.
    model_config = SettingsConfigDict(env_file=str(BACKEND_ENV_FILE), env_file_encoding="utf-8")

    project_name: str = "Classbook API"
    api_prefix: str = "/api"
    log_level: str = "INFO"

    database_url: str = f"sqlite+pysqlite:///{BACKEND_DIR / 'classbook.db'}"
    persist_bookings: bool = True
    seed_sample_data: bool = True

    regular_classes_path: Path | None = DEFAULT_REGULAR_CLASSES_FILE
    staff_rooms: Annotated[list[str], NoDecode] = ["CSE-103", "CSE-104", "CSE-203"]
    staff_room_label: str = "Teachers Department CSE-AI"
    building_prefix: str = "CSE"
    floor_count: int = 5
    rooms_per_floor: int = 6

    max_request_size_bytes: int = 2_500_000
    security_enable_hsts: bool = False
    security_hsts_max_age_seconds: int = 31536000

    cors_origins: Annotated[list[str], NoDecode] = [
        "http://localhost:3000",
        "http://127.0.0.1:3000",
    ]

    @field_validator("cors_origins", "staff_rooms", mode="before")
    @classmethod
    def split_list_values(cls, value: str | list[str]) -> list[str]:
        return _split_list(value)

    # Relative paths resolve against backend/, not the process cwd.
    @field_validator("regular_classes_path")
    @classmethod
    def resolve_regular_classes_path(cls, value: Path | None) -> Path | None:
        if value is None or value.is_absolute():
            return value
        return BACKEND_DIR / value

    @field_validator("database_url")
    @classmethod
    def resolve_sqlite_path(cls, value: str) -> str:
        scheme, separator, path = value.partition(":///")
        if not separator or not scheme.startswith("sqlite") or not path:
            return value
        if path.startswith("/") or path.startswith(":memory:"):
            return value
        return f"{scheme}:///{(BACKEND_DIR / path).resolve()}"

    @field_validator("floor_count", "rooms_per_floor")
    @classmethod
    def validate_grid_size(cls, value: int) -> int:
        if value < 1 or value > 99:
            raise ValueError("Grid dimensions must be between 1 and 99")
        return value


@lru_cache
def get_settings() -> Settings:
    return Settings()

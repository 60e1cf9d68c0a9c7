import os
from dataclasses import dataclass, field
from typing import List, Optional

from dotenv import load_dotenv

load_dotenv()


def _split_origins(value: str) -> List[str]:
    return [origin.strip() for origin in value.split(",") if origin.strip()]


@dataclass
class Settings:
    openai_api_key: Optional[str] = None
    openai_model: str = "gpt-3.5-turbo"
    database_url: str = "sqlite:///./quiz.db"
    archive_url: Optional[str] = None
    archive_timeout: float = 10.0
    output_dir: str = "."
    cors_origins: List[str] = field(default_factory=lambda: ["http://localhost:3000"])
    log_level: str = "INFO"
    log_dir: Optional[str] = None

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            openai_api_key=os.getenv("OPENAI_API_KEY") or None,
            openai_model=os.getenv("OPENAI_MODEL", "gpt-3.5-turbo"),
            database_url=os.getenv("DATABASE_URL", "sqlite:///./quiz.db"),
            archive_url=os.getenv("ARCHIVE_URL") or None,
            archive_timeout=float(os.getenv("ARCHIVE_TIMEOUT", "10")),
            output_dir=os.getenv("OUTPUT_DIR", "."),
            cors_origins=_split_origins(os.getenv("CORS_ORIGINS", "http://localhost:3000")),
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            log_dir=os.getenv("LOG_DIR") or None,
        )


def get_settings() -> Settings:
    return Settings.from_env()

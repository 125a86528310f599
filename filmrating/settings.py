import logging
import os
from dataclasses import dataclass, field
from typing import List

from dotenv import load_dotenv

ERROR_MESSAGE = "Missing or invalid environment variable:"

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


@dataclass(frozen=True)
class Settings:
    database_url: str
    database_name: str
    host: str = "0.0.0.0"
    port: int = 8000
    log_level: str = "INFO"
    cors_origins: List[str] = field(default_factory=lambda: ["*"])


def load_settings() -> Settings:
    """Read the process environment (and a local .env file, if any)."""
    load_dotenv()

    database_url = os.getenv("DATABASE_URL")
    if not database_url:
        raise EnvironmentError(f"{ERROR_MESSAGE} DATABASE_URL")

    database_name = os.getenv("DATABASE_NAME")
    if not database_name:
        raise EnvironmentError(f"{ERROR_MESSAGE} DATABASE_NAME")

    port = os.getenv("PORT", "8000")
    if not port.isdigit():
        raise EnvironmentError(f"{ERROR_MESSAGE} PORT")

    origins = os.getenv("CORS_ORIGINS", "*")

    return Settings(
        database_url=database_url,
        database_name=database_name,
        host=os.getenv("HOST", "0.0.0.0"),
        port=int(port),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        cors_origins=[o.strip() for o in origins.split(",") if o.strip()],
    )


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(level=level, format=LOG_FORMAT)

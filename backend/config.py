"""Environment configuration and gateway construction.

Variables (read from the process environment, after loading ./.env):

  STORE_BACKEND          firebase | file | memory       (default: file)
  FIREBASE_DATABASE_URL  https://<db>.firebasedatabase.app  (firebase only)
  FIREBASE_AUTH          database secret / ID token     (optional)
  DATA_DIR               base directory for the file store (default: ./data)
  BACKEND_API_URL        secondary backend root         (default: http://localhost:8080)
  STORE_TIMEOUT          database HTTP timeout, seconds (default: 10)
"""

import os
from pathlib import Path
from typing import Literal

from dotenv import load_dotenv
from pydantic import BaseModel

from palbox.gateway import FirebaseGateway, JsonFileGateway, MemoryGateway, StoreGateway

load_dotenv(Path(__file__).parent.parent / ".env")

DEFAULT_DATA_DIR = Path(__file__).parent.parent / "data"

_FIREBASE_HOSTS = ("firebasedatabase.app", "firebaseio.com")


class Settings(BaseModel):
    store_backend: Literal["firebase", "file", "memory"] = "file"
    firebase_database_url: str = ""
    firebase_auth: str = ""
    data_dir: Path = DEFAULT_DATA_DIR
    backend_api_url: str = "http://localhost:8080"
    store_timeout: float = 10.0


def load_settings() -> Settings:
    """Build Settings from the environment, leaving unset values at defaults."""
    env = {
        "store_backend": os.getenv("STORE_BACKEND"),
        "firebase_database_url": os.getenv("FIREBASE_DATABASE_URL"),
        "firebase_auth": os.getenv("FIREBASE_AUTH"),
        "data_dir": os.getenv("DATA_DIR"),
        "backend_api_url": os.getenv("BACKEND_API_URL"),
        "store_timeout": os.getenv("STORE_TIMEOUT"),
    }
    return Settings(**{k: v for k, v in env.items() if v})


def validate_firebase_url(url: str) -> None:
    """Reject anything that is not an https Firebase Realtime Database URL."""
    if not url:
        raise ValueError("FIREBASE_DATABASE_URL is required when STORE_BACKEND=firebase")
    if not url.startswith("https://") or not any(h in url for h in _FIREBASE_HOSTS):
        raise ValueError(f"Invalid Firebase database URL: {url}")


def build_gateway(settings: Settings) -> StoreGateway:
    if settings.store_backend == "firebase":
        validate_firebase_url(settings.firebase_database_url)
        return FirebaseGateway(
            settings.firebase_database_url,
            auth=settings.firebase_auth,
            timeout=settings.store_timeout,
        )
    if settings.store_backend == "memory":
        return MemoryGateway()
    return JsonFileGateway(settings.data_dir)

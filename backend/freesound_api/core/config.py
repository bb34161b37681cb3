from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv


load_dotenv()

DEFAULT_BASE_URL = "https://freesound.org/apiv2"


@dataclass(frozen=True)
class Settings:
    app_name: str = "Freesound API"
    freesound_token: str | None = os.getenv("FREESOUND_TOKEN")
    freesound_base_url: str = os.getenv("FREESOUND_BASE_URL", DEFAULT_BASE_URL)
    http_timeout_s: float = float(os.getenv("HTTP_TIMEOUT_S", "30.0"))
    log_level: str = os.getenv("LOG_LEVEL", "INFO")


settings = Settings()

# settings.py
import os
from functools import lru_cache
from pathlib import Path

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field

load_dotenv()

BASE_DIR = Path(__file__).resolve().parent


def _env(name: str, default: str):
    return Field(default_factory=lambda: os.getenv(name, default))


class Settings(BaseModel):
    # env values arrive as strings and are coerced on construction
    model_config = ConfigDict(validate_default=True)

    API_KEY: str = _env("GEMINI_API_KEY", "")
    MODEL_NAME: str = _env("MODEL_NAME", "gemini-2.5-flash")
    TEMPERATURE: float = _env("TEMPERATURE", "0.9")
    SYSTEM_INSTRUCTION: str = _env(
        "SYSTEM_INSTRUCTION", "Jawab hanya menggunakan bahasa Indonesia."
    )
    # 0 keeps the whole transcript
    MAX_HISTORY_TURNS: int = _env("MAX_HISTORY_TURNS", "0")

    HOST: str = _env("HOST", "0.0.0.0")
    PORT: int = _env("PORT", "3000")
    CORS_ALLOW_ORIGINS: str = _env("CORS_ALLOW_ORIGINS", "*")
    STATIC_DIR: str = _env("STATIC_DIR", str(BASE_DIR / "public"))
    LOG_LEVEL: str = _env("LOG_LEVEL", "INFO")

    # relay client side
    RELAY_URL: str = _env("RELAY_URL", "http://localhost:3000")
    RELAY_TIMEOUT: float = _env("RELAY_TIMEOUT", "30")

    @property
    def cors_origins(self):
        return [o.strip() for o in self.CORS_ALLOW_ORIGINS.split(",") if o.strip()]


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()

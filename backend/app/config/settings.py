# backend/app/config/settings.py
import os
from typing import List, Optional

from dotenv import load_dotenv
from pydantic import BaseModel

load_dotenv()

DEFAULT_MODEL = "gpt-4.1-mini"
DEFAULT_TIMEOUT_SECONDS = 60.0


class Settings(BaseModel):
    openai_api_key: Optional[str] = None
    openai_model: str = DEFAULT_MODEL
    openai_timeout: float = DEFAULT_TIMEOUT_SECONDS
    cors_origins: List[str] = ["*"]

    @classmethod
    def from_env(cls) -> "Settings":
        # Environment is read on every call
        origins = os.getenv("CORS_ORIGINS", "*")
        return cls(
            openai_api_key=os.getenv("OPENAI_API_KEY") or None,
            openai_model=os.getenv("OPENAI_MODEL") or DEFAULT_MODEL,
            openai_timeout=float(os.getenv("OPENAI_TIMEOUT") or DEFAULT_TIMEOUT_SECONDS),
            cors_origins=[o.strip() for o in origins.split(",") if o.strip()],
        )


def get_settings() -> Settings:
    return Settings.from_env()


def resolve_api_key(settings: Settings, request_key: Optional[str]) -> Optional[str]:
    """Server-side key wins; the request key is only a fallback."""
    return settings.openai_api_key or request_key or None


def resolve_model(settings: Settings, request_model: Optional[str]) -> str:
    return request_model or settings.openai_model

# smartcareer/config.py
from __future__ import annotations
import os
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

def _float_or_none(value: str | None, default: float | None) -> float | None:
    if value is None or value.strip() == "":
        return default
    if value.strip().lower() == "none":
        return None
    return float(value)

class Config:
    # Flask
    SECRET_KEY = os.environ.get("SECRET_KEY", "dev-key")

    # OpenRouter (OpenAI-compatible); the key never leaves the server
    OPENROUTER_API_KEY = os.environ.get("OPENROUTER_API_KEY", "")
    OPENROUTER_BASE_URL = os.environ.get("OPENROUTER_BASE_URL", "https://openrouter.ai/api/v1")

    # Quiz model settings: fixed per deployment, not selectable per request
    QUIZ_MODEL = os.environ.get("QUIZ_MODEL", "deepseek/deepseek-r1-0528:free")
    QUIZ_MAX_TOKENS = int(os.environ.get("QUIZ_MAX_TOKENS", "512"))
    QUIZ_TEMPERATURE = _float_or_none(os.environ.get("QUIZ_TEMPERATURE"), 0.5)
    QUIZ_REQUEST_TIMEOUT = float(os.environ.get("QUIZ_REQUEST_TIMEOUT", "60"))

    # Retry on 429/502/503: fixed delay, not exponential
    QUIZ_MAX_RETRIES = int(os.environ.get("QUIZ_MAX_RETRIES", "5"))
    QUIZ_RETRY_DELAY = float(os.environ.get("QUIZ_RETRY_DELAY", "6"))

    # OpenRouter attribution headers
    APP_REFERER = os.environ.get("APP_REFERER", "https://smartcareer.app")
    APP_TITLE = os.environ.get("APP_TITLE", "Smart Career Recommendation")

    # CORS origins (comma-separated); empty means "*"
    CORS_ORIGINS = [s.strip() for s in os.environ.get("CORS_ORIGINS", "").split(",") if s.strip()]
    CORS_ALLOW_HEADERS = ["authorization", "x-client-info", "apikey", "content-type"]

class DevConfig(Config):
    DEBUG = True

class ProdConfig(Config):
    DEBUG = False

class TestConfig(Config):
    TESTING = True
    DEBUG = True
    OPENROUTER_API_KEY = "sk-or-test-key"
    QUIZ_RETRY_DELAY = 0.0

def get_config(env: str | None = None):
    """Resolve config by env string or environment variables."""
    env = (env or os.environ.get("SMARTCAREER_ENV") or os.environ.get("FLASK_ENV") or "production").lower()
    if env in ("dev", "development"):
        return DevConfig
    if env in ("test", "testing"):
        return TestConfig
    return ProdConfig

"""
Application configuration and environment variables
"""
import os
from dotenv import load_dotenv
from app.core.constants import LLM_MODEL_DEFAULT

# Load environment variables
load_dotenv()


def _env_flag(name: str, default: bool = False) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


class Settings:
    """Application settings loaded from environment variables"""

    # Storage
    DATA_FILE: str = os.getenv("DATA_FILE", "")

    # AI
    OPENAI_API_KEY: str = os.getenv("OPENAI_API_KEY", "")
    LLM_MODEL: str = os.getenv("LLM_MODEL", LLM_MODEL_DEFAULT)

    # Calendar - empty means the server's local date
    APP_TIMEZONE: str = os.getenv("APP_TIMEZONE", "")

    # Streak alerts
    ALERTS_ENABLED: bool = _env_flag("ALERTS_ENABLED")
    ALERT_CHECK_INTERVAL_MINUTES: int = int(os.getenv("ALERT_CHECK_INTERVAL_MINUTES", "60"))

    # CLI
    API_BASE_URL: str = os.getenv("API_BASE_URL", "http://localhost:8000")


# Create a global settings instance
settings = Settings()

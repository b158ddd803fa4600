from pathlib import Path

from pydantic_settings import BaseSettings
from dotenv import load_dotenv

ENV_FILE = Path(__file__).resolve().parents[3] / ".env"
load_dotenv(dotenv_path=ENV_FILE)


class Settings(BaseSettings):
    # Upstream chat-completion API
    OPENAI_API_KEY: str = ""
    OPENAI_BASE_URL: str = ""

    LOG_LEVEL: str = "INFO"

    # Comma-separated list, "*" allows any origin
    CORS_ALLOW_ORIGINS: str = "*"

    @property
    def cors_origins(self) -> list[str]:
        origins = [item.strip() for item in (self.CORS_ALLOW_ORIGINS or "").split(",")]
        return [item for item in origins if item] or ["*"]

    class Config:
        env_file = str(ENV_FILE)
        extra = "ignore"


settings = Settings()

# model_compare/config.py
from functools import lru_cache
from pathlib import Path
from dotenv import dotenv_values
from pydantic import BaseModel, ConfigDict

# Load .env using pathlib
env_path = Path(__file__).parent.parent / '.env'
env = dotenv_values(dotenv_path=env_path)


class Settings(BaseModel):
    # values read from .env arrive as strings
    model_config = ConfigDict(validate_default=True)

    API_BASE_URL: str = env.get('API_BASE_URL', 'http://localhost:8000')
    # generation parameters sent with every model request
    MAX_TOKENS: int = env.get('MAX_TOKENS', 1000)
    TEMPERATURE: float = env.get('TEMPERATURE', 0.7)
    REQUEST_TIMEOUT: float = env.get('REQUEST_TIMEOUT', 30.0)
    LOG_LEVEL: str = env.get('LOG_LEVEL', 'INFO')


settings = Settings()


@lru_cache()
def get_settings() -> Settings:
    """
    Cache the application settings to avoid reloading from environment repeatedly.
    """
    return settings

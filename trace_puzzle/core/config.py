from pydantic_settings import BaseSettings, SettingsConfigDict
from pathlib import Path
from typing import Optional


BASE_DIR = Path(__file__).resolve().parent.parent.parent

class Settings(BaseSettings): # load all key=value pairs from .env
    """ Generator limits and service options"""
    MIN_GRID_SIZE: int = 4
    MAX_GRID_SIZE: int = 12
    DEFAULT_GRID_SIZE: int = 7

    MAX_ATTEMPTS: int = 50 # guided attempts before falling back
    MAX_CONSECUTIVE_FAILURES: int = 10 # dead-end rounds before a guided walk gives up
    PROBE_MIN_CELLS: int = 5 # walks this short skip the uniqueness probe

    RANDOM_SEED: Optional[int] = None # fixed seed for reproducible puzzles

    LOG_LEVEL: str = "INFO"
    LOG_FILE: str = f"{BASE_DIR / 'app_errors.log'}"

    model_config = SettingsConfigDict(
        env_file = BASE_DIR/".env",
        env_file_encoding = "utf-8",
        extra = "ignore",
    )

settings = Settings()

from pathlib import Path
from typing import Literal
from dotenv import dotenv_values
from pydantic import Field
from pydantic_settings import BaseSettings

import os

# Load .env for local runs, only for values missing from the real environment
BASE_DIR = Path(__file__).resolve().parent.parent
env_file = BASE_DIR / ".env"

if env_file.exists():
    file_env = dotenv_values(env_file)
    missing_keys = {k: v for k, v in file_env.items() if k not in os.environ and v is not None}
    for k, v in missing_keys.items():
        os.environ[k] = v


class Settings(BaseSettings):
    """Runner settings pulled from HEIGHTMAP_* environment variables."""

    # Logging Configuration
    log_level: str = Field(default="INFO", description="Logging level")
    log_format: Literal["json", "plain"] = Field(default="plain", description="Logging format (plain or json)")

    # Puzzle inputs
    inputs_dir: Path = Field(default=Path("inputs"), description="Directory holding <puzzle>.txt inputs")

    class Config:
        env_prefix = "HEIGHTMAP_"
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"


# Instantiate singleton settings object
settings = Settings()

from pathlib import Path
from dotenv import dotenv_values
from pydantic import Field
from pydantic_settings import BaseSettings

import os

BASE_DIR = Path(__file__).resolve().parent.parent.parent
env_file = BASE_DIR / ".env"


def load_env_file(path: Path) -> dict:
    """Copy values from a .env file into os.environ unless already set."""
    if not path.exists():
        return {}
    file_env = dotenv_values(path)
    missing_keys = {k: v for k, v in file_env.items() if k not in os.environ and v is not None}
    for k, v in missing_keys.items():
        os.environ[k] = v
    return missing_keys


# Explicitly load .env for local/dev environments
load_env_file(env_file)


class Settings(BaseSettings):
    """Application settings pulled from environment variables."""

    # Triangulation Configuration
    bbox_margin: float = Field(default=100.0, gt=0, description="Minimum padding around the input points")
    bbox_margin_scale: float = Field(default=1e4, ge=0, description="Padding as a multiple of the point extent")
    walk_limit_factor: int = Field(default=4, ge=1, description="Point location steps allowed per live quad-edge")
    flip_limit_factor: int = Field(default=4, ge=1, description="Legalization steps allowed per live quad-edge")

    # Logging Configuration
    log_level: str = Field(default="INFO", description="Logging level")
    log_format: str = Field(default="json", description="Logging format (json or console)")

    # API Configuration
    api_host: str = Field(default="0.0.0.0", description="API host")
    api_port: int = Field(default=8000, description="API port")
    max_points: int = Field(default=20000, ge=1, description="Max points accepted per request")

    class Config:
        env_prefix = "PY_DELAUNAY_"
        extra = "ignore"


# Instantiate singleton settings object
settings = Settings()

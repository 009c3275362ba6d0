"""
Server settings, read from environment variables with defaults.
"""
import os
from pathlib import Path

_DEFAULT_DATA_ROOT = Path(__file__).resolve().parents[2] / "data"


class Settings:
    # Data
    DATA_ROOT: Path = Path(
        os.getenv("DATASET_QUALITY_DATA_ROOT", str(_DEFAULT_DATA_ROOT))
    ).resolve()
    PREVIEW_ROWS: int = int(os.getenv("DATASET_QUALITY_PREVIEW_ROWS", "20"))

    # Server
    HOST: str = os.getenv("DATASET_QUALITY_HOST", "0.0.0.0")
    PORT: int = int(os.getenv("DATASET_QUALITY_PORT", "8082"))
    TRANSPORT: str = os.getenv("DATASET_QUALITY_TRANSPORT", "stdio")
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")


settings = Settings()

from pathlib import Path
from typing import Optional

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    clamp_negative_inputs: bool = False
    currency_symbol: str = "$"
    methodology_path: Optional[Path] = None
    cors_origins: list[str] = ["http://localhost:3000"]
    log_level: str = "INFO"
    host: str = "127.0.0.1"
    port: int = 8000

    class Config:
        env_file = ".env"
        env_prefix = "ROI_"

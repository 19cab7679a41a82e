"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings

from pathdata.engine.config import ParserConfig


class Settings(BaseSettings):
    pathdata_env: str = "development"
    pathdata_log_level: str = "info"

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    # Arc approximation: widest sub-arc drawn as one cubic
    arc_max_segment_degrees: float = 90.0

    # Samples per curve when computing sub-path bounds/winding
    curve_samples: int = 16

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    def parser_config(self) -> ParserConfig:
        return ParserConfig.from_degrees(self.arc_max_segment_degrees)


settings = Settings()

import os
from pathlib import Path
from typing import Any, Dict, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Length window used by `split` and chunk_text()
    CHUNKER_MIN_LENGTH: int = 5
    CHUNKER_MAX_LENGTH: int = 250

    # Length window used by the JSON regression harness
    CHUNKER_QA_MIN_LENGTH: int = 5
    CHUNKER_QA_MAX_LENGTH: int = 200

    # Observability & UI
    LOG_FORMAT: str = "auto"  # json|plain|auto
    LOG_LEVEL: str = Field(
        default="info",
        description="Minimum log level (debug shows per-split events)",
    )
    NO_COLOR: bool = False  # Disable colored output

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    @classmethod
    def load_config(cls, config_file: Optional[str] = None) -> "Settings":
        """Load settings with config file -> env -> CLI precedence."""
        config_data: Dict[str, Any] = {}

        # Find config file
        config_path: Optional[Path]
        if config_file:
            config_path = Path(config_file)
            if not config_path.exists():
                raise FileNotFoundError(f"Config file not found: {config_file}")
        else:
            # Auto-discover .sentence_chunker.{yaml,yml,toml}
            for ext in ["yaml", "yml", "toml"]:
                config_path = Path(f".sentence_chunker.{ext}")
                if config_path.exists():
                    break
            else:
                config_path = None

        # Load config file if found
        if config_path and config_path.exists():
            if config_path.suffix in [".yaml", ".yml"]:
                import yaml  # type: ignore[import-untyped]

                with open(config_path) as f:
                    config_data = yaml.safe_load(f) or {}
            elif config_path.suffix == ".toml":
                import tomllib

                with open(config_path, "rb") as f:
                    config_data = tomllib.load(f)

        # Init kwargs beat env vars in pydantic-settings, so drop file keys the
        # environment already sets. CLI flags are applied by the caller.
        file_only = {
            k: v for k, v in config_data.items() if k.upper() not in os.environ
        }
        return cls(**file_only)


# Default settings - will be replaced by load_config() during CLI startup
SETTINGS = Settings()

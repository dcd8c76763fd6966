"""
Pig - Application Settings

Loads configuration from environment variables using Pydantic Settings.
On Streamlit Cloud, bridges st.secrets into env vars so Pydantic can read them.
"""

import os
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from src.engine.base import DEFAULT_PLAYER_NAMES, ROLL_FRAME_INTERVAL, GameConfig

_SECRET_KEYS = (
    "PIG_PLAYER_ONE_NAME",
    "PIG_PLAYER_TWO_NAME",
    "PIG_DEBUG",
    "PIG_LOG_LEVEL",
    "PIG_ANIMATE_ROLLS",
    "PIG_ROLL_FRAME_INTERVAL",
)


def _load_streamlit_secrets() -> None:
    """Bridge Streamlit Cloud secrets into environment variables."""
    try:
        import streamlit as st

        for key in _SECRET_KEYS:
            if key not in os.environ and key in st.secrets:
                os.environ[key] = str(st.secrets[key])
    except Exception:
        pass


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Players
    player_one_name: str = DEFAULT_PLAYER_NAMES[0]
    player_two_name: str = DEFAULT_PLAYER_NAMES[1]

    # Application
    debug: bool = False
    log_level: str = "INFO"

    # Presentation
    animate_rolls: bool = True
    roll_frame_interval: float = Field(default=ROLL_FRAME_INTERVAL, ge=0)

    model_config = SettingsConfigDict(
        env_prefix="PIG_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    def game_config(self) -> GameConfig:
        """Build the engine configuration from these settings."""
        return GameConfig(
            player_one_name=self.player_one_name,
            player_two_name=self.player_two_name,
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Cached singleton settings instance."""
    _load_streamlit_secrets()
    return Settings()

"""
Configuration management for Lane Defense.
Uses pydantic-settings for environment variable parsing.
"""

from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings

from .constants import (
    DEFAULT_BOARD_WIDTH, DEFAULT_BOARD_HEIGHT, MAX_FRAME_DT, STARTING_BALANCE
)


class Settings(BaseSettings):
    """Runtime settings loaded from environment variables."""

    # Board
    board_width: int = Field(
        default=DEFAULT_BOARD_WIDTH,
        description="Initial board width in pixels"
    )
    board_height: int = Field(
        default=DEFAULT_BOARD_HEIGHT,
        description="Initial board height in pixels"
    )

    # Simulation
    seed: Optional[int] = Field(
        default=None,
        description="Seed for spawn lane and speed jitter. None means unseeded"
    )
    max_frame_dt: float = Field(
        default=MAX_FRAME_DT,
        description="Upper bound on a single tick's delta, in seconds"
    )
    starting_balance: int = Field(
        default=STARTING_BALANCE,
        description="Resource balance at the start of a game"
    )

    # Logging
    log_level: str = Field(
        default="INFO",
        description="Logging level for the command-line driver"
    )

    class Config:
        env_prefix = "LANE_DEFENSE_"
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.
    Tests should construct Settings directly instead.
    """
    return Settings()

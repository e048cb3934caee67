"""
Runtime configuration.

Values come from the environment and are read at call time, not cached.
Entry points seed the environment from a .env file with load_env().
"""

import os
from typing import Optional
from dotenv import load_dotenv

DEFAULT_LOG_LEVEL = "WARNING"


def load_env(dotenv_path: Optional[str] = None) -> None:
    """Load environment variables from a .env file, without overriding."""
    load_dotenv(dotenv_path)


def get_scene_key() -> str:
    """Returns the default codec key (SCENE_KEY), empty if unset."""
    return os.getenv('SCENE_KEY', '')


def get_log_level() -> str:
    return os.getenv('SCENEKEY_LOG_LEVEL', DEFAULT_LOG_LEVEL)

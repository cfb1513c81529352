"""
CLI Configuration

Centralized configuration for the phpsolver CLI.
"""

import os
from pathlib import Path
from typing import Optional

from phpsolver.user_config import get_user_config


class CLIConfig:
    """Configuration for CLI commands"""

    DEFAULT_INDEX_NAME = "phpsolver-index.json"

    _machine_mode: Optional[bool] = None

    @classmethod
    def set_machine_mode(cls, enabled: Optional[bool]) -> None:
        """Set machine mode (pure JSON output, no presentation)"""
        cls._machine_mode = enabled

    @classmethod
    def is_machine_mode(cls) -> bool:
        """
        Check if machine mode is active.

        Machine mode is the default. Human mode is opted into with --human
        or PHPSOLVER_HUMAN_MODE.
        """
        if cls._machine_mode is not None:
            return cls._machine_mode
        if os.getenv("PHPSOLVER_HUMAN_MODE", "").lower() in ("1", "true", "yes"):
            return False
        return True

    @staticmethod
    def get_default_index_path(cwd: Optional[Path] = None) -> Path:
        """Index path from user config, resolved against the working directory."""
        if cwd is None:
            cwd = Path.cwd()
        configured = get_user_config().get("index.path", CLIConfig.DEFAULT_INDEX_NAME)
        return cwd / configured

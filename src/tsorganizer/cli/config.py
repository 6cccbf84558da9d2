"""
CLI Configuration

Output mode switches for the tsorganizer command line.
"""

import os
from typing import Optional


class CLIConfig:
    """Configuration for CLI commands"""

    # Machine mode (JSON/plain output) is the default
    _machine_mode: Optional[bool] = None

    @classmethod
    def set_machine_mode(cls, enabled: bool) -> None:
        """Set machine mode (pure data output, no presentation)"""
        cls._machine_mode = enabled

    @classmethod
    def reset(cls) -> None:
        cls._machine_mode = None

    @classmethod
    def is_machine_mode(cls) -> bool:
        """
        Check if machine mode is active.

        Returns False only if human mode is explicitly requested.
        """
        if cls._machine_mode is not None:
            return cls._machine_mode
        if os.getenv("TSORGANIZER_HUMAN_MODE", "").lower() in ("1", "true", "yes"):
            return False
        return True

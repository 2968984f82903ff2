"""
Configuration management for commit-picker.

Settings live in memory only: the defaults below, overridden by command-line
flags. Nothing is read from or written to disk.
"""

import logging
from typing import Any, Optional

logger = logging.getLogger(__name__)

# Default configuration values
DEFAULT_CONFIG = {
    "theme": "standard",
    "use_color": True,
    "show_emoji": True,
    "page_size": 4,
    "single_page": False,
    "char_limit": 80,
    "repo_path": ".",
}

# argparse destination -> configuration key
_ARG_KEYS = {
    "theme": "theme",
    "page_size": "page_size",
    "single_page": "single_page",
    "char_limit": "char_limit",
    "repo_path": "repo_path",
}


class Configuration:
    """Holds the settings for one commit-picker run."""

    def __init__(self):
        self.config = dict(DEFAULT_CONFIG)

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get a configuration value.

        Args:
            key: Configuration key
            default: Default value if key is not found

        Returns:
            Configuration value or default
        """
        return self.config.get(key, default)

    def set(self, key: str, value: Any) -> None:
        self.config[key] = value

    def update_from_args(self, args: Any) -> None:
        """
        Apply parsed command-line arguments.

        Arguments that were not given (None) leave the current value alone.
        """
        for dest, key in _ARG_KEYS.items():
            value = getattr(args, dest, None)
            if value is not None:
                self.set(key, value)

        if getattr(args, "no_emoji", False):
            self.set("show_emoji", False)
        if getattr(args, "no_color", False):
            self.set("use_color", False)

        logger.debug(f"Effective configuration: {self.config}")

    @property
    def effective_page_size(self) -> Optional[int]:
        """Page size to use, or None when the whole catalog goes on one page."""
        if self.get("single_page"):
            return None
        return self.get("page_size")

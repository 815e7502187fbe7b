"""
Configuration management for shell-bookmarks.

This module wraps the Pydantic-based configuration with the accessors the
CLI and the generator need.
"""

from pathlib import Path
from typing import Any, Dict, List, Optional

from ..core.data_models import OutputTarget
from .pydantic_config import ConfigurationManager, ShellBookmarksConfig


class Configuration:
    """
    Configuration manager that wraps the Pydantic-based system.

    Values come from the configuration file (if any), then the
    environment, then command-line arguments passed to update_from_args().
    """

    def __init__(self, config_path: Optional[Path] = None):
        """
        Initialize configuration manager.

        Args:
            config_path: Optional path to user configuration file (TOML/JSON)
        """
        self._manager = ConfigurationManager(config_path)
        self._config = self._manager.config

    @property
    def config(self) -> ShellBookmarksConfig:
        """Get the underlying Pydantic configuration."""
        return self._config

    @property
    def loaded_from(self) -> Optional[Path]:
        """Configuration file that was loaded, if any."""
        return self._manager.loaded_from

    def update_from_args(self, args: Dict[str, Any]) -> None:
        """
        Update configuration from command-line arguments.

        Args:
            args: Dictionary of validated arguments
        """
        self._manager.update_from_cli_args(args)
        self._config = self._manager.config

    def get_input_path(self) -> Optional[Path]:
        return self._config.input.file

    def get_encoding(self) -> str:
        return self._config.input.encoding

    def get_blank_line_policy(self) -> str:
        return self._config.input.blank_lines

    def get_output_targets(self) -> List[OutputTarget]:
        """Get the selected outputs in registry order."""
        return [
            OutputTarget(format_name, path)
            for format_name, path in self._config.outputs.selected().items()
        ]

    def get_log_level(self) -> str:
        return self._config.logging.level

    def get_log_file(self) -> Optional[Path]:
        return self._config.logging.log_file

    def create_sample_config(self, output_path: Path) -> None:
        """Write a sample configuration file, TOML unless the suffix is .json."""
        output_path = Path(output_path)
        format = "json" if output_path.suffix.lower() == ".json" else "toml"
        self._manager.create_sample_config(output_path, format)


def create_configuration(config_path: Optional[Path] = None) -> Configuration:
    """
    Create a new Configuration instance.

    Args:
        config_path: Optional path to configuration file

    Returns:
        Configuration instance
    """
    return Configuration(config_path)

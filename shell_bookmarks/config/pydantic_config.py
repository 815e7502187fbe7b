"""
Pydantic-based configuration system for shell-bookmarks.

Configuration is read from a TOML or JSON file, overlaid with environment
variables and command-line arguments, and validated by the models below.
"""

import codecs
import json
import os
from pathlib import Path
from typing import Dict, Literal, Optional

import toml
from pydantic import (
    BaseModel,
    Field,
    ValidationError,
    field_validator,
    model_validator,
)

INPUT_ENV_VAR = "SHELL_BOOKMARKS_INPUT"

# Output group field for each exporter format
OUTPUT_FIELDS = {
    "lf": "lf_file",
    "zsh": "zsh_file",
    "cd-alias": "cd_alias_file",
}


class InputConfig(BaseModel):
    """Bookmarks file settings."""

    file: Optional[Path] = Field(
        default=None,
        description="Bookmarks file to read",
    )
    encoding: str = Field(
        default="utf-8",
        description="Text encoding of the bookmarks file",
    )
    blank_lines: Literal["skip", "error"] = Field(
        default="skip",
        description="How blank lines are treated",
    )

    @field_validator("encoding")
    @classmethod
    def validate_encoding(cls, v):
        """Reject codec names Python does not know."""
        try:
            codecs.lookup(v)
        except LookupError:
            raise ValueError(f"Unknown text encoding: {v}")
        return v

    @field_validator("file", mode="before")
    @classmethod
    def expand_file(cls, v):
        if isinstance(v, str):
            return Path(os.path.expanduser(v))
        return v


class OutputsConfig(BaseModel):
    """Destination files, one per output format."""

    lf_file: Optional[Path] = Field(
        default=None, description="lf jump-map script"
    )
    zsh_file: Optional[Path] = Field(
        default=None, description="zsh named-directory hash table"
    )
    cd_alias_file: Optional[Path] = Field(
        default=None, description="Shell cd aliases"
    )

    @field_validator("lf_file", "zsh_file", "cd_alias_file", mode="before")
    @classmethod
    def expand_output_path(cls, v):
        """Expand ~ and treat empty strings as unset."""
        if v == "":
            return None
        if isinstance(v, str):
            return Path(os.path.expanduser(v))
        return v

    def selected(self) -> Dict[str, Path]:
        """Map of format name to destination for every configured output."""
        targets = {}
        for format_name, field_name in OUTPUT_FIELDS.items():
            path = getattr(self, field_name)
            if path is not None:
                targets[format_name] = path
        return targets


class LoggingConfig(BaseModel):
    """Logging settings."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="WARNING",
        description="Root log level",
    )
    log_file: Optional[Path] = Field(
        default=None,
        description="Optional log file; console only when unset",
    )

    @field_validator("level", mode="before")
    @classmethod
    def normalize_level(cls, v):
        if isinstance(v, str):
            return v.upper()
        return v


class ShellBookmarksConfig(BaseModel):
    """Main configuration model."""

    input: InputConfig = Field(default_factory=InputConfig)
    outputs: OutputsConfig = Field(default_factory=OutputsConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @model_validator(mode="after")
    def validate_distinct_outputs(self):
        """Two formats may not be written to the same file."""
        seen = {}
        for format_name, path in self.outputs.selected().items():
            key = Path(path).expanduser().absolute()
            if key in seen:
                raise ValueError(
                    f"Outputs '{seen[key]}' and '{format_name}' "
                    f"both write to {path}"
                )
            seen[key] = format_name
        return self


class ConfigurationManager:
    """Manages loading and validation of configuration from multiple sources."""

    def __init__(self, config_path: Optional[Path] = None):
        """
        Initialize configuration manager.

        Args:
            config_path: Optional path to configuration file (TOML or JSON)
        """
        self._config: Optional[ShellBookmarksConfig] = None
        self.loaded_from: Optional[Path] = None
        self._load_configuration(config_path)

    def _get_default_config_paths(self) -> list[Path]:
        """Get list of default configuration file paths to try."""
        cwd = Path.cwd()
        return [
            cwd / "shell_bookmarks.toml",
            cwd / "shell_bookmarks.json",
            Path.home() / ".config" / "shell-bookmarks" / "config.toml",
        ]

    def _load_configuration(self, config_path: Optional[Path] = None) -> None:
        """Load configuration from file or use defaults."""
        config_data = {}

        if config_path:
            config_path = Path(config_path)
            config_data = self._load_config_file(config_path)
            self.loaded_from = config_path
        else:
            for path in self._get_default_config_paths():
                if path.exists():
                    config_data = self._load_config_file(path)
                    self.loaded_from = path
                    break

        self._load_input_from_env(config_data)

        try:
            self._config = ShellBookmarksConfig(**config_data)
        except ValidationError as e:
            raise ValueError(format_config_error(e))
        except Exception as e:
            raise ValueError(format_config_error(e))

    def _load_config_file(self, config_path: Path) -> Dict:
        """Load configuration from TOML or JSON file."""
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        try:
            if config_path.suffix.lower() == ".toml":
                return toml.load(config_path)
            elif config_path.suffix.lower() == ".json":
                with open(config_path, "r", encoding="utf-8") as f:
                    return json.load(f)
            else:
                raise ValueError(
                    f"Unsupported configuration file format: {config_path.suffix}"
                )
        except Exception as e:
            raise ValueError(f"Failed to load configuration from {config_path}: {e}")

    def _load_input_from_env(self, config_data: Dict) -> None:
        """Use the input file from the environment when none is configured."""
        input_section = config_data.setdefault("input", {})
        env_input = os.getenv(INPUT_ENV_VAR)
        if env_input and not input_section.get("file"):
            input_section["file"] = env_input

    def update_from_cli_args(self, args: Dict) -> None:
        """Update configuration from command-line arguments."""
        if not self._config:
            raise RuntimeError("Configuration not loaded")

        config_dict = self._config.model_dump()

        if args.get("input_path"):
            config_dict["input"]["file"] = args["input_path"]

        if args.get("blank_lines"):
            config_dict["input"]["blank_lines"] = args["blank_lines"]

        for format_name, field_name in OUTPUT_FIELDS.items():
            output_path = args.get("outputs", {}).get(format_name)
            if output_path:
                config_dict["outputs"][field_name] = output_path

        if args.get("verbose") and config_dict["logging"]["level"] == "WARNING":
            config_dict["logging"]["level"] = "INFO"

        try:
            self._config = ShellBookmarksConfig(**config_dict)
        except ValidationError as e:
            raise ValueError(format_config_error(e))

    @property
    def config(self) -> ShellBookmarksConfig:
        """Get the current configuration."""
        if not self._config:
            raise RuntimeError("Configuration not loaded")
        return self._config

    def create_sample_config(self, output_path: Path, format: str = "toml") -> None:
        """Create a sample configuration file."""
        sample_config = {
            "input": {
                "file": "~/.config/shell-bookmarks/bookmarks",
                "encoding": "utf-8",
                "blank_lines": "skip",
            },
            "outputs": {
                "lf_file": "~/.config/lf/bookmarks",
                "zsh_file": "~/.config/zsh/named_dirs.zsh",
                "cd_alias_file": "~/.config/shell/cd_aliases.sh",
            },
            "logging": {"level": "WARNING"},
        }

        if format.lower() == "toml":
            with open(output_path, "w", encoding="utf-8") as f:
                toml.dump(sample_config, f)
        elif format.lower() == "json":
            with open(output_path, "w", encoding="utf-8") as f:
                json.dump(sample_config, f, indent=2)
        else:
            raise ValueError(f"Unsupported format: {format}")


class ConfigurationErrorFormatter:
    """Formats Pydantic validation errors into user-friendly messages."""

    @staticmethod
    def format_validation_error(error: ValidationError) -> str:
        """
        Convert Pydantic ValidationError into a user-friendly error message.

        Args:
            error: Pydantic ValidationError instance

        Returns:
            Formatted error message with helpful guidance
        """
        error_messages = []

        for error_detail in error.errors():
            location = ConfigurationErrorFormatter._format_error_location(
                error_detail["loc"]
            )
            error_type = error_detail["type"]
            input_value = error_detail.get("input", "N/A")

            error_messages.append(
                ConfigurationErrorFormatter._format_by_error_type(
                    location, error_type, error_detail, input_value
                )
            )

        header = "Configuration Validation Failed:\n"
        formatted_errors = "\n".join(error_messages)
        footer = (
            "\n\nTips:\n"
            "- Check the configuration file format (TOML or JSON)\n"
            "- Use 'shell-bookmarks --create-config FILE' to generate a sample file"
        )

        return header + formatted_errors + footer

    @staticmethod
    def _format_error_location(location: tuple) -> str:
        """Format the error location path."""
        if not location:
            return "Configuration"

        path_parts = []
        for part in location:
            if isinstance(part, str):
                path_parts.append(part)
            else:
                path_parts.append(f"[{part}]")

        return ".".join(path_parts)

    @staticmethod
    def _format_by_error_type(
        location: str, error_type: str, error_detail: dict, input_value
    ) -> str:
        """Format error message based on Pydantic error type."""

        if error_type == "missing":
            return f"- {location}: Required field is missing"

        elif error_type == "value_error":
            msg = error_detail.get("msg", "Invalid value")
            return f"- {location}: {msg} (got: {input_value})"

        elif error_type == "literal_error":
            expected = error_detail.get("ctx", {}).get("expected", "valid option")
            return f"- {location}: Must be one of {expected} (got: {input_value})"

        else:
            msg = error_detail.get("msg", "Invalid configuration value")
            return f"- {location}: {msg} (got: {input_value})"


def format_config_error(error: Exception) -> str:
    """
    Format any configuration-related error into a user-friendly message.

    Args:
        error: Exception that occurred during configuration

    Returns:
        Formatted error message
    """
    if isinstance(error, ValidationError):
        return ConfigurationErrorFormatter.format_validation_error(error)

    elif isinstance(error, FileNotFoundError):
        return (
            f"Configuration File Not Found: {error.filename or error}\n"
            f"Create one with: shell-bookmarks --create-config FILE"
        )

    else:
        return f"Configuration Error: {error}"

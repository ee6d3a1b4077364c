"""
Custom exceptions for the configuration loader.
"""
from pathlib import Path
from typing import Union


class ConfigError(Exception):
    """Base exception for configuration loading errors."""
    pass


class ConfigFileNotFoundError(ConfigError, FileNotFoundError):
    """Raised when a required configuration path does not exist."""

    def __init__(self, path: Union[str, Path]):
        self.path = path
        super().__init__(f"Configuration file: [{path}] cannot be found")


class EmptyDirectoryError(ConfigError):
    """Raised when a configuration directory holds no usable files."""

    def __init__(self, path: Union[str, Path]):
        self.path = path
        super().__init__(f"Configuration directory: [{path}] is empty")


class UnsupportedFormatError(ConfigError):
    """Raised when no registered parser claims a file extension."""

    def __init__(self, extension: str):
        self.extension = extension
        super().__init__(f"Unsupported configuration format: {extension!r}")


class ParseError(ConfigError):
    """Raised when a parser cannot read a configuration file."""

    def __init__(self, path: Union[str, Path], reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to parse {path}: {reason}")

"""
confloader - load configuration from Python, INI, XML, JSON and YAML files
into one tree with dotted-path access.
"""

__version__ = "0.1.0"

# Errors
from .exceptions import (
    ConfigError,
    ConfigFileNotFoundError,
    EmptyDirectoryError,
    UnsupportedFormatError,
    ParseError,
)

# Settings
from .settings import LoaderSettings, DEFAULT_SETTINGS

# Path resolution
from .paths import (
    PathEntry,
    PathGroup,
    Resolution,
    normalize_path_spec,
    expand_directory,
    resolve_path,
    resolve_group,
    resolve_path_spec,
)

# Parsers
from .parsers import (
    FileParser,
    PythonParser,
    IniParser,
    XmlParser,
    JsonParser,
    YamlParser,
)
from .registry import ParserRegistry

# Loading and access
from .loader import ConfigLoader, derive_extension, derive_stem
from .merger import deep_merge
from .accessor import Config, load_config

__all__ = [
    "__version__",
    # Errors
    "ConfigError",
    "ConfigFileNotFoundError",
    "EmptyDirectoryError",
    "UnsupportedFormatError",
    "ParseError",
    # Settings
    "LoaderSettings",
    "DEFAULT_SETTINGS",
    # Path resolution
    "PathEntry",
    "PathGroup",
    "Resolution",
    "normalize_path_spec",
    "expand_directory",
    "resolve_path",
    "resolve_group",
    "resolve_path_spec",
    # Parsers
    "FileParser",
    "PythonParser",
    "IniParser",
    "XmlParser",
    "JsonParser",
    "YamlParser",
    "ParserRegistry",
    # Loading and access
    "ConfigLoader",
    "derive_extension",
    "derive_stem",
    "deep_merge",
    "Config",
    "load_config",
]

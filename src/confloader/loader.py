"""
Configuration loader.

This module turns a path spec into a single configuration tree: paths are
resolved to files, each file is parsed by the parser matching its extension,
and the fragments are combined.

A single resolved file becomes the whole tree. With several files, each
fragment is stored under the file's stem, later files replacing earlier ones
with the same stem.
"""
import logging
import os
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple, Union

from .exceptions import UnsupportedFormatError
from .paths import RawPathSpec, resolve_path_spec
from .registry import ParserRegistry
from .settings import DEFAULT_SETTINGS, LoaderSettings

logger = logging.getLogger(__name__)


def _split_name(path: Union[str, Path], dist_marker: str) -> Tuple[List[str], str]:
    parts = os.path.basename(os.fspath(path)).split(".")

    extension = parts.pop()
    if extension == dist_marker:
        if not parts:
            raise UnsupportedFormatError("")
        extension = parts.pop()

    return parts, extension


def derive_extension(path: Union[str, Path], dist_marker: str = "dist") -> str:
    """
    Get the format extension of a file, ignoring a trailing dist marker.

    Examples:
        >>> derive_extension("config/app.json")
        'json'
        >>> derive_extension("config/app.json.dist")
        'json'
    """
    return _split_name(path, dist_marker)[1]


def derive_stem(path: Union[str, Path], dist_marker: str = "dist") -> str:
    """
    Get the key a file's contents are stored under in a multi-file load.

    Examples:
        >>> derive_stem("config/app.json.dist")
        'app'
        >>> derive_stem("config/my.app.yaml")
        'my.app'
    """
    return ".".join(_split_name(path, dist_marker)[0])


class ConfigLoader:
    """
    Builds configuration trees from path specs.

    Usage:
        tree = ConfigLoader().build(["config/", "?config/local.yaml"])

        # Equivalent shortcut
        tree = ConfigLoader.load("config/app.yaml")
    """

    def __init__(
        self,
        registry: Optional[ParserRegistry] = None,
        settings: Optional[LoaderSettings] = None
    ):
        self.registry = registry or ParserRegistry()
        self.settings = settings or DEFAULT_SETTINGS

    @staticmethod
    def load(spec: Optional[RawPathSpec] = None) -> Dict[str, Any]:
        """Build a tree with the default registry and settings."""
        return ConfigLoader().build(spec)

    def resolve(self, spec: RawPathSpec) -> List[Path]:
        """Resolve a path spec to the files that would be loaded."""
        return resolve_path_spec(spec, self.settings)

    def parse_file(self, path: Union[str, Path]) -> Dict[str, Any]:
        """
        Parse one file with the parser matching its extension.

        Raises:
            UnsupportedFormatError: If no parser supports the extension
            ParseError: If the file content is malformed
        """
        extension = derive_extension(path, self.settings.dist_marker)
        parser = self.registry.get_parser(extension)
        logger.debug(f"Parsing {path} with {type(parser).__name__}")
        return parser.parse(path)

    def build(self, spec: Optional[RawPathSpec] = None) -> Dict[str, Any]:
        """
        Load every file named by ``spec`` into one tree.

        Args:
            spec: A file, a directory, a (nested) sequence of those, or None

        Returns:
            The configuration tree (empty when ``spec`` is None)

        Raises:
            ConfigFileNotFoundError: If a required path does not exist
            EmptyDirectoryError: If a directory holds no matching files
            UnsupportedFormatError: If a file has no matching parser
            ParseError: If a file content is malformed
        """
        if spec is None:
            return {}

        paths = self.resolve(spec)

        if len(paths) == 1:
            logger.debug(f"Loading single config file: {paths[0]}")
            return self.parse_file(paths[0])

        data: Dict[str, Any] = {}
        for path in paths:
            items = self.parse_file(path)
            data[derive_stem(path, self.settings.dist_marker)] = items

        logger.debug(f"Loaded {len(paths)} config files into {len(data)} keys")
        return data

"""
Base interface for configuration file parsers.
"""
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, List, Union


class FileParser(ABC):
    """
    Abstract base class for file parsers.
    A parser claims a set of file extensions and turns a file into a dict.
    """

    extensions: List[str] = []

    def get_supported_extensions(self) -> List[str]:
        """Extensions (without the leading dot) handled by this parser."""
        return list(self.extensions)

    def supports(self, extension: str) -> bool:
        return extension in self.get_supported_extensions()

    @abstractmethod
    def parse(self, path: Union[str, Path]) -> Dict[str, Any]:
        """
        Parse a file into a configuration tree.
        Raises ParseError if the content is malformed or not a mapping.
        """
        pass

    def __repr__(self) -> str:
        return f"{type(self).__name__}({', '.join(self.get_supported_extensions())})"

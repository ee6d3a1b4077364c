"""
Parser lookup by file extension.
"""
import logging
from typing import Iterable, List, Optional

from .exceptions import UnsupportedFormatError
from .parsers import DEFAULT_PARSERS, FileParser

logger = logging.getLogger(__name__)


class ParserRegistry:
    """
    Ordered collection of file parsers.

    Parsers are scanned in registration order and the first one claiming an
    extension wins, so a parser registered later never shadows an earlier one.

    Usage:
        registry = ParserRegistry()
        parser = registry.get_parser("yaml")
        data = parser.parse("settings.yaml")
    """

    def __init__(self, parsers: Optional[Iterable[FileParser]] = None):
        """
        Initialize the registry.

        Args:
            parsers: Parser instances in lookup order (defaults to the Python,
                INI, XML, JSON and YAML parsers)
        """
        if parsers is None:
            parsers = [parser_cls() for parser_cls in DEFAULT_PARSERS]
        self._parsers: List[FileParser] = list(parsers)

    @property
    def parsers(self) -> List[FileParser]:
        return list(self._parsers)

    def register(self, parser: FileParser) -> None:
        """Append a parser to the end of the lookup order."""
        self._parsers.append(parser)
        logger.debug(f"Registered parser {parser!r}")

    def get_parser(self, extension: str) -> FileParser:
        """
        Get the parser for a file extension.

        Args:
            extension: Extension without the leading dot (e.g. "json")

        Returns:
            The first registered parser supporting the extension

        Raises:
            UnsupportedFormatError: If no parser supports the extension
        """
        for parser in self._parsers:
            if parser.supports(extension):
                return parser

        raise UnsupportedFormatError(extension)

    def supported_extensions(self) -> List[str]:
        """All claimed extensions in lookup order, without duplicates."""
        seen = set()
        result = []

        for parser in self._parsers:
            for extension in parser.get_supported_extensions():
                if extension not in seen:
                    seen.add(extension)
                    result.append(extension)

        return result

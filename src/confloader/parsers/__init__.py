"""File parsers, one per supported configuration format."""

from .base import FileParser
from .python_parser import PythonParser
from .ini_parser import IniParser
from .xml_parser import XmlParser
from .json_parser import JsonParser
from .yaml_parser import YamlParser

# Default lookup order
DEFAULT_PARSERS = (PythonParser, IniParser, XmlParser, JsonParser, YamlParser)

__all__ = [
    "FileParser",
    "PythonParser",
    "IniParser",
    "XmlParser",
    "JsonParser",
    "YamlParser",
    "DEFAULT_PARSERS",
]

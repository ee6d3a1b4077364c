"""
Parser for INI files.

Sections become nested dictionaries and dotted keys are expanded, so

    [database]
    host = localhost
    pool.size = 5

yields ``{"database": {"host": "localhost", "pool": {"size": "5"}}}``.
Keys that appear before the first section are kept at the top level.
Values are returned as strings.
"""
import configparser
import logging
from pathlib import Path
from typing import Any, Dict, Union

from ..exceptions import ParseError
from .base import FileParser

logger = logging.getLogger(__name__)

# Section header injected so that keys outside any section can be read
_ROOT_SECTION = "__confloader_root__"


def expand_dotted_keys(items: Dict[str, Any]) -> Dict[str, Any]:
    """
    Expand ``{"a.b": 1}`` into ``{"a": {"b": 1}}``.

    A dotted key that collides with a plain scalar key replaces it.

    Examples:
        >>> expand_dotted_keys({"a.b": "1", "a.c": "2", "d": "3"})
        {'a': {'b': '1', 'c': '2'}, 'd': '3'}
    """
    result: Dict[str, Any] = {}

    for key, value in items.items():
        parts = key.split(".")
        node = result
        for part in parts[:-1]:
            if not isinstance(node.get(part), dict):
                node[part] = {}
            node = node[part]
        node[parts[-1]] = value

    return result


class IniParser(FileParser):
    extensions = ["ini"]

    def parse(self, path: Union[str, Path]) -> Dict[str, Any]:
        parser = configparser.ConfigParser(interpolation=None)
        parser.optionxform = str

        try:
            with open(path, "r", encoding="utf-8") as f:
                parser.read_string(f"[{_ROOT_SECTION}]\n" + f.read(), source=str(path))
        except configparser.Error as e:
            raise ParseError(path, f"Invalid INI: {e}") from e
        except OSError as e:
            raise ParseError(path, str(e)) from e

        data: Dict[str, Any] = {}
        for section in parser.sections():
            values = expand_dotted_keys(dict(parser.items(section, raw=True)))
            if section == _ROOT_SECTION:
                data.update(values)
            else:
                data[section] = values

        logger.debug(f"Loaded INI config: {path}")
        return data

"""
Parser for configuration written as Python source.

The file is executed and must define a module-level ``config`` that is either
a mapping or a callable returning one::

    config = {"database": {"host": "localhost"}}

    def config():
        return {"debug": True}
"""
import logging
import runpy
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Dict, Union

from ..exceptions import ParseError
from .base import FileParser

logger = logging.getLogger(__name__)

CONFIG_NAME = "config"


class PythonParser(FileParser):
    extensions = ["py"]

    def parse(self, path: Union[str, Path]) -> Dict[str, Any]:
        try:
            namespace = runpy.run_path(str(path))
        except Exception as e:
            raise ParseError(path, f"Python file raised {type(e).__name__}: {e}") from e

        if CONFIG_NAME not in namespace:
            raise ParseError(path, f"Python file does not define '{CONFIG_NAME}'")

        data = namespace[CONFIG_NAME]
        if callable(data):
            try:
                data = data()
            except Exception as e:
                raise ParseError(path, f"'{CONFIG_NAME}()' raised {type(e).__name__}: {e}") from e

        if not isinstance(data, Mapping):
            raise ParseError(path, f"Expected mapping, got {type(data).__name__}")

        logger.debug(f"Loaded Python config: {path}")
        return dict(data)

import json
import logging
from pathlib import Path
from typing import Any, Dict, Union

from ..exceptions import ParseError
from .base import FileParser

logger = logging.getLogger(__name__)


class JsonParser(FileParser):
    extensions = ["json"]

    def parse(self, path: Union[str, Path]) -> Dict[str, Any]:
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise ParseError(path, f"Invalid JSON: {e}") from e
        except OSError as e:
            raise ParseError(path, str(e)) from e

        if not isinstance(data, dict):
            raise ParseError(path, f"Expected object, got {type(data).__name__}")

        logger.debug(f"Loaded JSON config: {path}")
        return data

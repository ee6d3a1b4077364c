import logging
from pathlib import Path
from typing import Any, Dict, Union

import yaml

from ..exceptions import ParseError
from .base import FileParser

logger = logging.getLogger(__name__)


class YamlParser(FileParser):
    extensions = ["yaml", "yml"]

    def parse(self, path: Union[str, Path]) -> Dict[str, Any]:
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ParseError(path, f"Invalid YAML: {e}") from e
        except OSError as e:
            raise ParseError(path, str(e)) from e

        # An empty document loads as None
        if data is None:
            data = {}

        if not isinstance(data, dict):
            raise ParseError(path, f"Expected mapping, got {type(data).__name__}")

        logger.debug(f"Loaded YAML config: {path}")
        return data

"""
Dotted-path access to a configuration tree.

    config = Config.load(["config/", "?config/local.yaml"])
    config.get("database.host", "localhost")
    config.set("database.port", 5432)
    "database.port" in config
"""
import logging
from collections.abc import MutableMapping
from typing import Any, Dict, Iterator, List, Mapping, Optional, Tuple, Union

from .loader import ConfigLoader
from .merger import deep_merge
from .paths import RawPathSpec

logger = logging.getLogger(__name__)

SEPARATOR = "."

_MISSING = object()


class Config(MutableMapping):
    """
    A configuration tree with dotted-path keys.

    Subclasses can override ``get_defaults`` to provide values that loaded
    data is layered over.
    """

    def __init__(self, data: Optional[Mapping[str, Any]] = None):
        self._data: Dict[str, Any] = deep_merge(self.get_defaults(), data or {})

    @classmethod
    def load(cls, spec: Optional[RawPathSpec] = None, loader: Optional[ConfigLoader] = None) -> "Config":
        """
        Load files named by ``spec`` into a new instance.

        Args:
            spec: A file, a directory, a (nested) sequence of those, or None
            loader: Loader to use (a default loader when omitted)
        """
        loader = loader or ConfigLoader()
        return cls(loader.build(spec))

    def get_defaults(self) -> Dict[str, Any]:
        return {}

    def _split(self, key: str) -> List[str]:
        if not isinstance(key, str) or not key:
            raise KeyError(key)
        return key.split(SEPARATOR)

    def _locate(self, segments: List[str]) -> Tuple[str, List[str]]:
        """
        Split key segments into a top-level key and the remaining path.

        Top-level keys may contain the separator (e.g. a "my.app" file stem),
        so the longest joined prefix naming an existing top-level key wins.
        """
        for end in range(len(segments), 0, -1):
            head = SEPARATOR.join(segments[:end])
            if head in self._data:
                return head, segments[end:]
        return segments[0], segments[1:]

    def _lookup(self, key: str) -> Any:
        if not isinstance(key, str) or not key:
            return _MISSING

        head, rest = self._locate(key.split(SEPARATOR))
        if head not in self._data:
            return _MISSING

        node: Any = self._data[head]
        for segment in rest:
            if not isinstance(node, dict) or segment not in node:
                return _MISSING
            node = node[segment]
        return node

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get the value at a dotted key.

        Examples:
            >>> Config({"a": {"b": 1}}).get("a.b")
            1
            >>> Config({"a": {"b": 1}}).get("a.c", "fallback")
            'fallback'
        """
        value = self._lookup(key)
        return default if value is _MISSING else value

    def has(self, key: str) -> bool:
        return self._lookup(key) is not _MISSING

    def set(self, key: str, value: Any) -> None:
        """
        Set the value at a dotted key, creating intermediate dicts.

        An intermediate value that is not a dict is replaced.
        """
        head, rest = self._locate(self._split(key))
        if not rest:
            self._data[head] = value
            return

        node = self._data
        for segment in [head] + rest[:-1]:
            if not isinstance(node.get(segment), dict):
                if segment in node:
                    logger.debug(f"Replacing non-dict value at '{segment}' while setting '{key}'")
                node[segment] = {}
            node = node[segment]

        node[rest[-1]] = value

    def remove(self, key: str) -> None:
        """
        Remove the value at a dotted key.

        Raises:
            KeyError: If the key does not exist
        """
        head, rest = self._locate(self._split(key))
        if not rest:
            if head not in self._data:
                raise KeyError(key)
            del self._data[head]
            return

        parent: Any = self._data.get(head)
        for segment in rest[:-1]:
            if not isinstance(parent, dict):
                break
            parent = parent.get(segment)

        if not isinstance(parent, dict) or rest[-1] not in parent:
            raise KeyError(key)
        del parent[rest[-1]]

    def all(self) -> Dict[str, Any]:
        """The backing dictionary."""
        return self._data

    def merge(self, other: Union["Config", Mapping[str, Any]]) -> "Config":
        """
        Deep merge another configuration into this one.

        Values from ``other`` win. Returns self for chaining.
        """
        if isinstance(other, Config):
            other = other.all()
        self._data = deep_merge(self._data, other)
        return self

    def __getitem__(self, key: str) -> Any:
        value = self._lookup(key)
        if value is _MISSING:
            raise KeyError(key)
        return value

    def __setitem__(self, key: str, value: Any) -> None:
        self.set(key, value)

    def __delitem__(self, key: str) -> None:
        self.remove(key)

    def __contains__(self, key: object) -> bool:
        return self.has(key)

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._data!r})"


def load_config(spec: Optional[RawPathSpec] = None) -> Config:
    """Load files named by ``spec`` into a ``Config``."""
    return Config.load(spec)

"""
Path resolution for configuration loading.

A raw path specification (a string, a path object, or a nested sequence of
those) is first normalised into a small tagged union of ``PathEntry`` and
``PathGroup`` values, then resolved against the filesystem into an ordered
list of concrete files.

Resolution primitives return a ``Resolution`` value instead of raising, so
that a group can decide per entry whether a missing path is acceptable.
Only ``resolve_path_spec`` raises.
"""
import glob
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Sequence, Tuple, Union

from .exceptions import ConfigError, ConfigFileNotFoundError, EmptyDirectoryError
from .settings import DEFAULT_SETTINGS, LoaderSettings

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PathEntry:
    """
    A single file or directory path.

    Whether the path is a file or a directory is decided when it is resolved.

    Attributes:
        path: The path with any optional marker already stripped
        optional: Whether a missing path is silently skipped
    """
    path: str
    optional: bool = False


@dataclass(frozen=True)
class PathGroup:
    """An ordered group of path specs. Groups are never optional."""
    entries: Tuple[Union[PathEntry, "PathGroup"], ...] = ()


PathSpec = Union[PathEntry, PathGroup]
RawPathSpec = Union[str, os.PathLike, Sequence["RawPathSpec"], PathEntry, PathGroup]


@dataclass
class Resolution:
    """
    Outcome of resolving a path spec.

    Attributes:
        files: Resolved files in order (empty when ``error`` is set)
        error: The failure, if resolution failed
    """
    files: List[Path] = field(default_factory=list)
    error: Optional[ConfigError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> List[Path]:
        """Return the files, raising the carried error if there is one."""
        if self.error is not None:
            raise self.error
        return self.files


def normalize_path_spec(
    spec: RawPathSpec,
    settings: LoaderSettings = DEFAULT_SETTINGS,
    nested: bool = False
) -> PathSpec:
    """
    Turn a raw path spec into ``PathEntry``/``PathGroup`` values.

    Only string elements inside a sequence can be optional. A top-level string
    is taken literally, and nested sequences or path objects are never
    optional.

    Args:
        spec: The raw spec
        settings: Loader settings providing the optional marker
        nested: Whether ``spec`` is an element of a sequence

    Returns:
        The normalised spec

    Raises:
        TypeError: If ``spec`` is not a string, path or sequence

    Examples:
        >>> normalize_path_spec(["?local.yaml", "app.json"])
        PathGroup(entries=(PathEntry(path='local.yaml', optional=True), PathEntry(path='app.json', optional=False)))
    """
    if isinstance(spec, (PathEntry, PathGroup)):
        return spec

    if isinstance(spec, str):
        marker = settings.optional_marker
        if nested and spec.startswith(marker):
            return PathEntry(spec.lstrip(marker), optional=True)
        return PathEntry(spec)

    if isinstance(spec, os.PathLike):
        return PathEntry(os.fspath(spec))

    if isinstance(spec, (list, tuple)):
        return PathGroup(tuple(
            normalize_path_spec(item, settings, nested=True) for item in spec
        ))

    raise TypeError(f"Unsupported path spec type: {type(spec).__name__}")


def expand_directory(directory: str, pattern: str = "*.*") -> List[Path]:
    """
    List the files of a directory whose names match ``pattern``.

    Hidden files and subdirectories are not returned. The result is sorted by
    name so that expansion does not depend on the filesystem.
    """
    matches = glob.glob(os.path.join(glob.escape(directory), pattern))
    return sorted(Path(match) for match in matches if os.path.isfile(match))


def resolve_path(spec: PathSpec, settings: LoaderSettings = DEFAULT_SETTINGS) -> Resolution:
    """
    Resolve one normalised spec to concrete files.

    Args:
        spec: A ``PathEntry`` or ``PathGroup``
        settings: Loader settings

    Returns:
        A ``Resolution`` carrying either the files or an
        ``EmptyDirectoryError``/``ConfigFileNotFoundError``
    """
    if isinstance(spec, PathGroup):
        return resolve_group(spec, settings)

    if os.path.isdir(spec.path):
        files = expand_directory(spec.path, settings.directory_pattern)
        if not files:
            return Resolution(error=EmptyDirectoryError(spec.path))

        logger.debug(f"Expanded config directory {spec.path} to {len(files)} file(s)")
        return Resolution(files=files)

    if not os.path.isfile(spec.path):
        return Resolution(error=ConfigFileNotFoundError(spec.path))

    return Resolution(files=[Path(spec.path)])


def resolve_group(group: PathGroup, settings: LoaderSettings = DEFAULT_SETTINGS) -> Resolution:
    """
    Resolve every entry of a group, concatenating results in order.

    A missing optional entry is skipped. Any other failure, including an
    empty directory behind an optional entry, ends resolution.
    """
    files: List[Path] = []

    for entry in group.entries:
        result = resolve_path(entry, settings)

        if result.ok:
            files.extend(result.files)
            continue

        optional = isinstance(entry, PathEntry) and entry.optional
        if optional and isinstance(result.error, ConfigFileNotFoundError):
            logger.debug(f"Skipping missing optional config path: {entry.path}")
            continue

        return result

    return Resolution(files=files)


def resolve_path_spec(spec: RawPathSpec, settings: Optional[LoaderSettings] = None) -> List[Path]:
    """
    Resolve a raw path spec to an ordered list of existing files.

    Args:
        spec: A file, a directory, or a (nested) sequence of those
        settings: Loader settings (defaults apply when omitted)

    Returns:
        The resolved files, duplicates and input order preserved

    Raises:
        ConfigFileNotFoundError: If a required path does not exist
        EmptyDirectoryError: If a directory holds no matching files
    """
    settings = settings or DEFAULT_SETTINGS
    return resolve_path(normalize_path_spec(spec, settings), settings).unwrap()

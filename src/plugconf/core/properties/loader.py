"""Layered ``.properties`` loading.

Resolution order for :meth:`PropertiesLoader.load`:

1. ``name`` is an existing regular file on disk: load exactly that file.
2. Otherwise look up every resource called ``name`` on the search path.
3. No match: empty result (warning unless ``optional``).
4. Single file expected: warn when several matched, then load the one
   returned by the single-resource lookup.
5. Several files allowed: load all matches in discovery order, later
   files overwriting keys of earlier ones.

Problems with individual sources are logged and never raised; a failing
source simply contributes nothing.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional

from plugconf.core.constants import DEFAULT_PROPERTIES_ENCODING
from plugconf.core.exceptions import (
    AmbiguousResourceError,
    ReadFailureError,
    ResourceError,
    ResourceNotFoundError,
)

from .parser import PropertySet, read_properties_file, read_text_file
from .resources import ResourceSearchPath

logger = logging.getLogger(__name__)


def _report(error: ResourceError, *, exc_info: bool = False) -> None:
    """Log ``error`` as a warning with its structured payload attached."""
    logger.warning("%s", error, exc_info=exc_info, extra={"error": error.to_json_error()})


def _is_disk_file(name: str) -> bool:
    try:
        return Path(name).is_file()
    except (OSError, ValueError):
        return False


class PropertiesLoader:
    """Load property sets from the filesystem or a resource search path."""

    def __init__(
        self,
        search_path: Optional[ResourceSearchPath] = None,
        *,
        encoding: str = DEFAULT_PROPERTIES_ENCODING,
    ) -> None:
        self.search_path = search_path if search_path is not None else ResourceSearchPath()
        self.encoding = encoding

    def _read(self, path: Path, name: str) -> PropertySet:
        try:
            return read_properties_file(path, encoding=self.encoding)
        except ReadFailureError as err:
            err.context.setdefault("name", name)
            _report(err, exc_info=True)
            return {}

    def _discover(self, name: str) -> List[Path]:
        try:
            return self.search_path.get_resources(name)
        except OSError as exc:
            _report(
                ReadFailureError(f"Failed to look up {name} on the search path: {exc}", resource=name),
                exc_info=True,
            )
            return []

    def _lookup(self, name: str) -> Optional[Path]:
        try:
            return self.search_path.get_resource(name)
        except OSError as exc:
            _report(ReadFailureError(f"Failed to look up {name}: {exc}", resource=name), exc_info=True)
            return None

    def load(self, name: str, allow_multiple: bool = False, optional: bool = False) -> PropertySet:
        """Load properties called ``name``.

        Args:
            name: Filesystem path or resource name (e.g. ``app.properties``,
                ``conf/foo.properties``).
            allow_multiple: Merge every match on the search path instead of
                expecting a single one.
            optional: Suppress the warning when nothing matches.

        Returns:
            A fresh key -> value mapping; empty when nothing could be loaded.
        """
        if _is_disk_file(name):
            return self._read(Path(name), name)

        found = self._discover(name)
        if not found:
            if not optional:
                _report(ResourceNotFoundError(f"No {name} found on the resource search path.", resource=name))
            return {}

        if not allow_multiple:
            if len(found) > 1:
                _report(
                    AmbiguousResourceError(
                        f"Only 1 {name} file is expected, but {len(found)} {name} files were found "
                        f"on the resource search path: {[str(p) for p in found]}",
                        resource=name,
                        sources=[str(p) for p in found],
                    )
                )
            # Fall back to the single-resource lookup.
            resource = self._lookup(name)
            if resource is None:
                return {}
            return self._read(resource, name)

        logger.info("Loading %s properties from %s", name, [str(p) for p in found])
        properties: PropertySet = {}
        for path in found:
            properties.update(self._read(path, name))
        return properties

    def load_migration_rule(self, name: str) -> str:
        """Return the raw text of rule file ``name``, or "" when unavailable.

        A file on disk wins; otherwise only the single-resource lookup result
        is read. Multiple matches are never merged.
        """
        path = Path(name) if _is_disk_file(name) else self._lookup(name)
        if path is None:
            return ""
        try:
            return read_text_file(path, encoding="utf-8")
        except ReadFailureError as err:
            _report(err, exc_info=True)
            return ""


def load_properties(
    name: str,
    allow_multiple: bool = False,
    optional: bool = False,
    *,
    search_path: Optional[ResourceSearchPath] = None,
    encoding: str = DEFAULT_PROPERTIES_ENCODING,
) -> PropertySet:
    """Functional shortcut for :meth:`PropertiesLoader.load`."""
    return PropertiesLoader(search_path, encoding=encoding).load(name, allow_multiple, optional)


def load_migration_rule(name: str, *, search_path: Optional[ResourceSearchPath] = None) -> str:
    """Functional shortcut for :meth:`PropertiesLoader.load_migration_rule`."""
    return PropertiesLoader(search_path).load_migration_rule(name)


__all__ = ["PropertiesLoader", "load_properties", "load_migration_rule"]

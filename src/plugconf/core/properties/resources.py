"""Resource search path: ordered roots that resources are looked up in.

Layering model (low -> high precedence, which is also discovery order):
1. Bundled resources shipped in plugconf.data/resources
2. User resources under the user config directory (~/.plugconf/resources)
3. Project resources under the project config directory (<repo>/.plugconf/resources)
4. Extra roots listed in ``resources.searchPath``
"""
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path, PurePosixPath
from typing import TYPE_CHECKING, Iterable, List, Optional, Tuple, Union

from plugconf.data import get_data_path

if TYPE_CHECKING:
    from plugconf.core.config.domains import ResourcesConfig


@dataclass(frozen=True)
class ResourceRoot:
    """A single resource root (bundled, user, project, extra)."""

    kind: str
    path: Path


def _relative_parts(name: str) -> Optional[Tuple[str, ...]]:
    """Split a resource name into path parts, or None if it is not a relative, contained name."""
    pure = PurePosixPath(name.replace("\\", "/"))
    if not name or pure.is_absolute() or ".." in pure.parts:
        return None
    parts = tuple(p for p in pure.parts if p not in ("", "."))
    return parts or None


class ResourceSearchPath:
    """Ordered, possibly empty list of resource roots.

    Usage:
        search_path = ResourceSearchPath([Path("conf"), Path("/etc/app")])
        search_path.get_resources("app.properties")  # every match, in root order
        search_path.get_resource("app.properties")   # first match or None
    """

    def __init__(self, roots: Iterable[Union[ResourceRoot, Path, str]] = ()) -> None:
        normalized: List[ResourceRoot] = []
        for root in roots:
            if isinstance(root, ResourceRoot):
                normalized.append(root)
            else:
                normalized.append(ResourceRoot(kind="extra", path=Path(root)))
        self._roots: Tuple[ResourceRoot, ...] = tuple(normalized)

    @property
    def roots(self) -> Tuple[ResourceRoot, ...]:
        return self._roots

    def get_resources(self, name: str) -> List[Path]:
        """Return every root's ``name`` that exists as a regular file, in root order."""
        parts = _relative_parts(name)
        if parts is None:
            return []
        found: List[Path] = []
        for root in self._roots:
            candidate = root.path.joinpath(*parts)
            if candidate.is_file():
                found.append(candidate)
        return found

    def get_resource(self, name: str) -> Optional[Path]:
        """Single-resource lookup: the first match on the search path."""
        found = self.get_resources(name)
        return found[0] if found else None

    @classmethod
    def from_config(cls, resources: "ResourcesConfig") -> "ResourceSearchPath":
        """Build the search path from a :class:`ResourcesConfig` accessor."""
        from plugconf.core.config.paths import get_project_config_dir, get_user_config_dir

        repo_root = resources.repo_root
        roots: List[ResourceRoot] = []
        if resources.include_bundled:
            roots.append(ResourceRoot(kind="bundled", path=get_data_path("resources")))
        roots.append(ResourceRoot(kind="user", path=get_user_config_dir() / "resources"))
        roots.append(ResourceRoot(kind="project", path=get_project_config_dir(repo_root) / "resources"))
        for entry in resources.search_path:
            p = Path(entry).expanduser()
            if not p.is_absolute():
                p = repo_root / p
            roots.append(ResourceRoot(kind="extra", path=p))
        return cls(roots)

    def __len__(self) -> int:
        return len(self._roots)

    def __repr__(self) -> str:
        return f"ResourceSearchPath({[str(r.path) for r in self._roots]!r})"


__all__ = ["ResourceRoot", "ResourceSearchPath"]

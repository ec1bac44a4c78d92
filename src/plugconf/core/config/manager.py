"""
plugconf configuration management (YAML layers + environment overrides).
"""
from __future__ import annotations

import json
import logging
import os
import re
from pathlib import Path
from typing import Any, Dict, Iterator, List, Optional, Tuple, Union

import yaml
from jsonschema import Draft202012Validator

from plugconf.core.constants import ENV_PREFIX, SYSTEM_PROPERTY_KEYS
from plugconf.core.exceptions import ConfigValidationError
from plugconf.core.utils.merge import deep_merge as _deep_merge
from plugconf.data import get_data_path

from .paths import get_project_config_dir, get_user_config_dir

logger = logging.getLogger(__name__)

EnvPath = List[Union[str, int]]


def iter_yaml_files(dir_path: Path) -> List[Path]:
    """Return YAML files in ``dir_path`` in deterministic order.

    When both ``<name>.yaml`` and ``<name>.yml`` exist, only ``.yaml`` is used.
    """
    d = Path(dir_path)
    if not d.is_dir():
        return []
    yml_files = {p.stem: p for p in d.glob("*.yml")}
    yaml_files = {p.stem: p for p in d.glob("*.yaml")}
    return [yaml_files.get(stem) or yml_files[stem] for stem in sorted(set(yml_files) | set(yaml_files))]


class ConfigManager:
    """Load, merge, and validate plugconf configuration.

    Configuration sources (highest to lowest priority):
    1. Environment variables: PLUGCONF_* (``__`` separates nested keys)
    2. Project config: <repo>/.plugconf/config/*.yaml (alphabetical order)
    3. User config: ~/.plugconf/config/*.yaml (alphabetical order)
    4. Bundled defaults: plugconf.data/config/*.yaml (alphabetical order)
    """

    def __init__(self, repo_root: Optional[Path] = None) -> None:
        self.repo_root = Path(repo_root) if repo_root is not None else Path.cwd()

        self.core_config_dir = get_data_path("config")
        self.user_config_dir = get_user_config_dir() / "config"
        self.project_config_dir = get_project_config_dir(self.repo_root) / "config"
        self.schema_path = get_data_path("schemas", "config.schema.yaml")

    def deep_merge(self, base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
        return _deep_merge(base, override)

    def load_yaml(self, path: Path) -> Dict[str, Any]:
        # Fail closed: configuration must never silently ignore invalid YAML.
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ConfigValidationError(
                f"Config file {path} must contain a mapping", context={"path": str(path)}
            )
        return data

    def _load_directory(self, directory: Path, cfg: Dict[str, Any]) -> Dict[str, Any]:
        for path in iter_yaml_files(directory):
            cfg = self.deep_merge(cfg, self.load_yaml(path))
        return cfg

    # ========== Environment overrides ==========

    def _as_bool(self, v: str) -> Optional[bool]:
        low = v.strip().lower()
        if low in {"true", "false"}:
            return low == "true"
        return None

    def _as_int(self, v: str) -> Optional[int]:
        if re.fullmatch(r"[-+]?\d+", v.strip() or " "):
            return int(v)
        return None

    def _as_float(self, v: str) -> Optional[float]:
        s = v.strip()
        if re.fullmatch(r"[-+]?\d*\.\d+", s) or re.fullmatch(r"[-+]?\d+\.\d*", s):
            return float(s)
        return None

    def _as_json(self, v: str) -> Optional[Any]:
        s = v.strip()
        if (s.startswith("{") and s.endswith("}")) or (s.startswith("[") and s.endswith("]")):
            try:
                return json.loads(s)
            except ValueError:
                return None
        return None

    def _coerce_type(self, value: str) -> Any:
        for caster in (self._as_bool, self._as_int, self._as_float, self._as_json):
            result = caster(value)
            if result is not None:
                return result
        return value.strip()

    def _parse_env_key(self, raw: str, *, strict: bool) -> EnvPath:
        if not raw:
            return []
        segs = raw.split("__") if "__" in raw else raw.split("_")
        processed: EnvPath = []
        for seg in segs:
            if seg == "":
                if strict:
                    raise ValueError(f"Malformed {ENV_PREFIX}* key: empty segment in '{raw}'.")
                return []
            processed.append(int(seg) if seg.isdigit() else seg)
        return processed

    def _iter_env_overrides(self, *, strict: bool) -> Iterator[Tuple[EnvPath, Any]]:
        for key in sorted(os.environ.keys()):
            if not key.startswith(ENV_PREFIX):
                continue
            raw = key[len(ENV_PREFIX):]
            if key in SYSTEM_PROPERTY_KEYS:
                continue
            path = self._parse_env_key(raw, strict=strict)
            if path:
                yield path, self._coerce_type(os.environ[key])

    def _set_nested(self, root: Dict[str, Any], path: EnvPath, value: Any) -> None:
        cur: Any = root
        for i, part in enumerate(path):
            is_last = i == len(path) - 1
            if isinstance(part, int):
                if not isinstance(cur, list) or not is_last:
                    raise ValueError("Invalid path: list index may only appear at leaf")
                while len(cur) <= part:
                    cur.append(None)
                cur[part] = value
                return
            if not isinstance(cur, dict):
                raise ValueError("Path traverses non-dict container")
            # Case-insensitive match against existing keys keeps env names shell friendly.
            key = {k.lower(): k for k in cur if isinstance(k, str)}.get(part.lower(), part)
            if is_last:
                cur[key] = value
                return
            if key not in cur or not isinstance(cur[key], (dict, list)):
                cur[key] = [] if isinstance(path[i + 1], int) else {}
            cur = cur[key]

    def apply_env_overrides(self, cfg: Dict[str, Any], *, strict: bool) -> None:
        for path, typed_value in self._iter_env_overrides(strict=strict):
            self._set_nested(cfg, path, typed_value)

    # ========== Validation ==========

    def validate_schema(self, cfg: Dict[str, Any]) -> None:
        schema = self.load_yaml(self.schema_path)
        validator = Draft202012Validator(schema)
        errors = sorted(validator.iter_errors(cfg), key=lambda e: list(e.path))
        if errors:
            details = [f"{'.'.join(str(p) for p in e.path) or '<root>'}: {e.message}" for e in errors]
            raise ConfigValidationError(
                "Invalid plugconf configuration:\n  " + "\n  ".join(details),
                context={"errors": details},
            )

    # ========== Loading ==========

    def _load_config_uncached(self, validate: bool = True) -> Dict[str, Any]:
        """Load and merge configuration from every layer (UNCACHED)."""
        cfg: Dict[str, Any] = {}
        cfg = self._load_directory(self.core_config_dir, cfg)
        cfg = self._load_directory(self.user_config_dir, cfg)
        cfg = self._load_directory(self.project_config_dir, cfg)
        self.apply_env_overrides(cfg, strict=validate)

        if validate:
            self.validate_schema(cfg)
        logger.debug("Loaded plugconf config for %s", self.repo_root)
        return cfg

    def load_config(self, validate: bool = True) -> Dict[str, Any]:
        """Return the merged configuration (cached per repo root)."""
        from .cache import get_cached_config

        return get_cached_config(self.repo_root, validate=validate)


__all__ = ["ConfigManager", "iter_yaml_files"]

"""Tests for layered YAML configuration, env overrides and schema validation."""
from __future__ import annotations

from pathlib import Path

import pytest
import yaml

from plugconf.core.config import (
    ConfigManager,
    LoggingConfig,
    PropertiesConfig,
    ResourcesConfig,
    clear_all_caches,
    get_cached_config,
    is_cached,
)
from plugconf.core.exceptions import ConfigValidationError


def _project_yaml(repo_root: Path, name: str, content: str) -> None:
    config_dir = repo_root / ".plugconf" / "config"
    config_dir.mkdir(parents=True, exist_ok=True)
    (config_dir / name).write_text(content, encoding="utf-8")


def test_bundled_defaults(tmp_path: Path) -> None:
    cfg = ConfigManager(tmp_path).load_config()
    assert cfg["properties"]["fileName"] == "plugconf.properties"
    assert cfg["properties"]["encoding"] == "iso-8859-1"
    assert cfg["resources"] == {"includeBundled": True, "searchPath": []}
    assert cfg["logging"]["level"] == "WARNING"


def test_project_config_overrides_defaults(tmp_path: Path) -> None:
    _project_yaml(tmp_path, "props.yaml", "properties:\n  encoding: utf-8\n")
    cfg = ConfigManager(tmp_path).load_config()
    assert cfg["properties"]["encoding"] == "utf-8"
    assert cfg["properties"]["fileName"] == "plugconf.properties"


def test_project_config_wins_over_user_config(tmp_path: Path) -> None:
    user_dir = tmp_path / "home" / ".plugconf" / "config"
    user_dir.mkdir(parents=True)
    (user_dir / "user.yaml").write_text(
        "properties:\n  fileName: user.properties\nlogging:\n  level: DEBUG\n", encoding="utf-8"
    )
    _project_yaml(tmp_path, "project.yaml", "properties:\n  fileName: project.properties\n")

    cfg = ConfigManager(tmp_path).load_config()
    assert cfg["properties"]["fileName"] == "project.properties"
    assert cfg["logging"]["level"] == "DEBUG"


def test_yaml_preferred_over_yml(tmp_path: Path) -> None:
    _project_yaml(tmp_path, "props.yaml", "properties:\n  fileName: from-yaml.properties\n")
    _project_yaml(tmp_path, "props.yml", "properties:\n  fileName: from-yml.properties\n")
    assert ConfigManager(tmp_path).load_config()["properties"]["fileName"] == "from-yaml.properties"


def test_env_overrides_are_type_coerced(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PLUGCONF_properties__encoding", "utf-8")
    monkeypatch.setenv("PLUGCONF_resources__includeBundled", "false")
    monkeypatch.setenv("PLUGCONF_resources__searchPath", '["conf", "/opt/conf"]')

    cfg = ConfigManager(tmp_path).load_config()
    assert cfg["properties"]["encoding"] == "utf-8"
    assert cfg["resources"]["includeBundled"] is False
    assert cfg["resources"]["searchPath"] == ["conf", "/opt/conf"]


def test_env_override_matches_existing_keys_case_insensitively(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.setenv("PLUGCONF_logging_level", "ERROR")
    assert ConfigManager(tmp_path).load_config()["logging"]["level"] == "ERROR"


def test_properties_file_system_property_is_not_a_config_override(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.setenv("PLUGCONF_PROPERTIES_FILE", "/etc/app.properties")
    cfg = ConfigManager(tmp_path).load_config()
    assert cfg["properties"]["fileName"] == "plugconf.properties"


def test_malformed_env_key_fails_when_validating(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.setenv("PLUGCONF_logging____level", "ERROR")
    with pytest.raises(ValueError):
        ConfigManager(tmp_path)._load_config_uncached(validate=True)


def test_schema_violation_raises(tmp_path: Path) -> None:
    _project_yaml(tmp_path, "bad.yaml", "properties:\n  encoding: ebcdic\n")
    with pytest.raises(ConfigValidationError) as excinfo:
        ConfigManager(tmp_path).load_config()
    assert any("properties.encoding" in e for e in excinfo.value.context["errors"])


def test_unknown_section_keys_are_rejected(tmp_path: Path) -> None:
    _project_yaml(tmp_path, "bad.yaml", "resources:\n  searchPaths: [a]\n")
    with pytest.raises(ConfigValidationError):
        ConfigManager(tmp_path).load_config()


def test_invalid_yaml_raises(tmp_path: Path) -> None:
    _project_yaml(tmp_path, "broken.yaml", "properties: [unclosed\n")
    with pytest.raises(yaml.YAMLError):
        ConfigManager(tmp_path).load_config()


def test_non_mapping_yaml_raises(tmp_path: Path) -> None:
    _project_yaml(tmp_path, "list.yaml", "- a\n- b\n")
    with pytest.raises(ConfigValidationError):
        ConfigManager(tmp_path).load_config()


def test_config_is_cached_until_cleared(tmp_path: Path) -> None:
    first = get_cached_config(tmp_path)
    assert is_cached(tmp_path)
    assert get_cached_config(tmp_path) is first

    clear_all_caches()
    assert not is_cached(tmp_path)
    assert get_cached_config(tmp_path) is not first


def test_env_change_invalidates_cache(tmp_path: Path, monkeypatch) -> None:
    first = get_cached_config(tmp_path)
    monkeypatch.setenv("PLUGCONF_logging__level", "INFO")
    second = get_cached_config(tmp_path)
    assert second is not first
    assert second["logging"]["level"] == "INFO"


def test_deep_merge_replaces_lists() -> None:
    mgr = ConfigManager()
    merged = mgr.deep_merge({"a": {"x": 1, "y": [1, 2]}, "b": 1}, {"a": {"y": [3]}, "c": 2})
    assert merged == {"a": {"x": 1, "y": [3]}, "b": 1, "c": 2}


class TestDomainConfigs:
    def test_properties_config(self, tmp_path: Path) -> None:
        _project_yaml(tmp_path, "p.yaml", "properties:\n  fileName: app.properties\n  encoding: utf-8\n")
        cfg = PropertiesConfig(repo_root=tmp_path)
        assert cfg.file_name == "app.properties"
        assert cfg.encoding == "utf-8"

    def test_resources_config(self, tmp_path: Path) -> None:
        _project_yaml(tmp_path, "r.yaml", "resources:\n  includeBundled: false\n  searchPath: [conf]\n")
        cfg = ResourcesConfig(repo_root=tmp_path)
        assert cfg.include_bundled is False
        assert cfg.search_path == ["conf"]
        roots = cfg.build_search_path().roots
        assert [r.kind for r in roots] == ["user", "project", "extra"]
        assert roots[-1].path == tmp_path / "conf"

    def test_logging_config_resolves_relative_path(self, tmp_path: Path) -> None:
        _project_yaml(tmp_path, "l.yaml", "logging:\n  level: INFO\n  path: logs/plugconf.log\n")
        cfg = LoggingConfig(repo_root=tmp_path)
        assert cfg.level == "INFO"
        assert cfg.path == tmp_path / "logs" / "plugconf.log"

    def test_explicit_config_dict_skips_loading(self) -> None:
        cfg = PropertiesConfig(config={"properties": {"fileName": "x.properties"}})
        assert cfg.file_name == "x.properties"
        assert cfg.encoding == "iso-8859-1"

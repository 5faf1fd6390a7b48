from __future__ import annotations

from pathlib import Path

import pytest

from inspire_core.core.config import ConfigManager, clear_all_caches, get_cached_config
from inspire_core.core.exceptions import ConfigError, SchemaValidationError
from helpers.io_utils import write_project_config


def test_bundled_defaults(isolated_project_env: Path) -> None:
    cfg = ConfigManager(isolated_project_env).load_config_uncached()

    assert cfg["commandline"] == {"operator_prefixes": "-/", "bare_value_key": "parameter"}
    assert cfg["time"]["iso8601"]["timespec"] == "seconds"
    assert cfg["locale"]["default"] == "en-US"
    assert cfg["filenames"]["default_extension"] == ".xml"


def test_project_overlay_merges_over_defaults(isolated_project_env: Path) -> None:
    write_project_config(isolated_project_env, "commandline", {"commandline": {"bare_value_key": "input"}})

    manager = ConfigManager(isolated_project_env)

    assert manager.get("commandline.bare_value_key") == "input"
    assert manager.get("commandline.operator_prefixes") == "-/"


def test_env_overrides_win_and_are_coerced(isolated_project_env: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    write_project_config(isolated_project_env, "locale", {"locale": {"default": "de-DE"}})
    monkeypatch.setenv("INSPIRE_LOCALE__DEFAULT", "fr-FR")
    monkeypatch.setenv("INSPIRE_TIME__ISO8601__USE_Z_SUFFIX", "false")
    monkeypatch.setenv("INSPIRE_EXTRA__RETRIES", "3")
    monkeypatch.setenv("INSPIRE_EXTRA__RATIO", "0.5")
    monkeypatch.setenv("INSPIRE_EXTRA__PREFIXES", '["-", "/"]')

    manager = ConfigManager(isolated_project_env)

    assert manager.get("locale.default") == "fr-FR"
    assert manager.get("time.iso8601.use_z_suffix") is False
    assert manager.get("extra") == {"retries": 3, "ratio": 0.5, "prefixes": ["-", "/"]}


def test_project_root_env_is_not_an_override(isolated_project_env: Path) -> None:
    assert "project_root" not in ConfigManager().get_all()


def test_get_default_and_section(isolated_project_env: Path) -> None:
    manager = ConfigManager(isolated_project_env)
    assert manager.get("nonexistent.key", "fallback") == "fallback"
    assert manager.get("commandline.bare_value_key.deeper") is None
    assert manager.section("locale") == {"default": "en-US"}
    assert manager.section("missing") == {}


def test_malformed_env_key_raises(isolated_project_env: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("INSPIRE_LOCALE____DEFAULT", "x")
    with pytest.raises(ConfigError):
        ConfigManager(isolated_project_env).load_config_uncached()
    # Non-validating loads skip malformed keys.
    cfg = ConfigManager(isolated_project_env).load_config_uncached(validate=False)
    assert cfg["locale"]["default"] == "en-US"


def test_invalid_yaml_raises_config_error(isolated_project_env: Path) -> None:
    bad = isolated_project_env / ".inspire" / "config" / "broken.yaml"
    bad.write_text("commandline: [unclosed\n", encoding="utf-8")
    with pytest.raises(ConfigError) as exc_info:
        ConfigManager(isolated_project_env).load_config_uncached()
    assert exc_info.value.context["path"] == str(bad.resolve())


def test_non_mapping_yaml_raises_config_error(isolated_project_env: Path) -> None:
    (isolated_project_env / ".inspire" / "config" / "list.yaml").write_text("- a\n- b\n", encoding="utf-8")
    with pytest.raises(ConfigError):
        ConfigManager(isolated_project_env).load_config_uncached()


def test_schema_violation_names_location(isolated_project_env: Path) -> None:
    write_project_config(isolated_project_env, "locale", {"locale": {"default": "english"}})
    with pytest.raises(SchemaValidationError) as exc_info:
        ConfigManager(isolated_project_env).load_config_uncached()
    assert exc_info.value.context["path"] == "locale.default"
    assert "locale.default" in str(exc_info.value)


def test_cached_config_reloads_when_project_files_change(isolated_project_env: Path) -> None:
    first = get_cached_config(isolated_project_env)
    assert get_cached_config(isolated_project_env) is first

    write_project_config(isolated_project_env, "locale", {"locale": {"default": "de-DE"}})
    second = get_cached_config(isolated_project_env)

    assert second is not first
    assert second["locale"]["default"] == "de-DE"


def test_cached_config_tracks_env(isolated_project_env: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    first = get_cached_config(isolated_project_env)
    monkeypatch.setenv("INSPIRE_LOCALE__DEFAULT", "it-IT")
    assert get_cached_config(isolated_project_env)["locale"]["default"] == "it-IT"
    assert first["locale"]["default"] == "en-US"


def test_clear_all_caches(isolated_project_env: Path) -> None:
    first = get_cached_config(isolated_project_env)
    clear_all_caches()
    assert get_cached_config(isolated_project_env) is not first

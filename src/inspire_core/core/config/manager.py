"""
Inspire configuration management (YAML layers + environment overrides).
"""
from __future__ import annotations

import json
import logging
import os
import re
from pathlib import Path
from typing import Any, Dict, Iterator, List, Optional, Tuple, Union

import jsonschema
import yaml

from inspire_core.core.exceptions import ConfigError, SchemaValidationError
from inspire_core.core.utils.io import iter_yaml_files, read_yaml
from inspire_core.core.utils.merge import deep_merge
from inspire_core.data import get_data_path

logger = logging.getLogger(__name__)

ENV_PREFIX = "INSPIRE_"
PROJECT_ROOT_ENV = "INSPIRE_PROJECT_ROOT"
PROJECT_CONFIG_DIRNAME = ".inspire"

# Environment keys that are not config overrides.
_RESERVED_ENV_KEYS = {PROJECT_ROOT_ENV}


def resolve_project_root(repo_root: Optional[Path] = None) -> Path:
    """Return the root whose ``.inspire/config`` directory overlays defaults.

    Explicit argument wins, then ``INSPIRE_PROJECT_ROOT``, then the working
    directory.
    """
    if repo_root is not None:
        return Path(repo_root).expanduser().resolve()
    env_root = os.environ.get(PROJECT_ROOT_ENV, "").strip()
    if env_root:
        return Path(env_root).expanduser().resolve()
    return Path.cwd().resolve()


def merge_yaml_directory(base: Dict[str, Any], directory: Path) -> Dict[str, Any]:
    """Merge all YAML files from ``directory`` into ``base``.

    Files are merged in deterministic order. Missing directories are ignored.
    YAML must be valid; invalid YAML raises.
    """
    cfg: Dict[str, Any] = dict(base)
    for path in iter_yaml_files(directory):
        try:
            module_cfg = read_yaml(path, default={}, raise_on_error=True) or {}
        except yaml.YAMLError as exc:
            raise ConfigError(f"Invalid YAML in {path}: {exc}", context={"path": str(path)}) from exc
        if not isinstance(module_cfg, dict):
            raise ConfigError(f"Config file must contain a mapping: {path}", context={"path": str(path)})
        cfg = deep_merge(cfg, module_cfg)
    return cfg


class ConfigManager:
    """Load, merge, and validate Inspire configuration.

    Configuration sources (highest to lowest priority):
    1. Environment variables: INSPIRE_* (``__`` separates nested keys)
    2. Project config: <project-root>/.inspire/config/*.yaml (alphabetical order)
    3. Bundled defaults: inspire_core.data/config/*.yaml (alphabetical order)
    """

    def __init__(self, repo_root: Optional[Path] = None) -> None:
        self.repo_root = resolve_project_root(repo_root)
        self.core_config_dir = get_data_path("config")
        self.project_config_dir = self.repo_root / PROJECT_CONFIG_DIRNAME / "config"
        self.schemas_dir = get_data_path("schemas")

    # ---------- environment overrides ----------

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
            except json.JSONDecodeError:
                return None
        return None

    def _coerce_type(self, value: str) -> Any:
        for caster in (self._as_bool, self._as_int, self._as_float, self._as_json):
            result = caster(value)
            if result is not None:
                return result
        return value.strip()

    def _parse_env_key(self, raw: str, *, strict: bool) -> List[str]:
        segs = raw.split("__")
        if any(seg == "" for seg in segs):
            if strict:
                raise ConfigError(
                    f"Malformed {ENV_PREFIX}* key: empty segment in '{raw}'.",
                    context={"key": raw},
                )
            return []
        # Normalize so overrides land on canonical lowercase keys.
        return [seg.lower() for seg in segs]

    def iter_env_overrides(self, *, strict: bool) -> Iterator[Tuple[List[str], Any]]:
        for key in sorted(os.environ.keys()):
            if not key.startswith(ENV_PREFIX) or key in _RESERVED_ENV_KEYS:
                continue
            path = self._parse_env_key(key[len(ENV_PREFIX):], strict=strict)
            if not path:
                continue
            yield path, self._coerce_type(os.environ[key])

    def _set_nested(self, root: Dict[str, Any], path: List[str], value: Any) -> None:
        cur: Union[Dict[str, Any], Any] = root
        for part in path[:-1]:
            nxt = cur.get(part)
            if not isinstance(nxt, dict):
                nxt = {}
                cur[part] = nxt
            cur = nxt
        cur[path[-1]] = value

    def apply_env_overrides(self, cfg: Dict[str, Any], *, strict: bool) -> None:
        for path, typed_value in self.iter_env_overrides(strict=strict):
            logger.debug("Applying environment override %s", ".".join(path))
            self._set_nested(cfg, path, typed_value)

    # ---------- loading ----------

    def validate_schema(self, config: Dict[str, Any], schema_name: str = "config.schema.yaml") -> None:
        """Validate ``config`` against a bundled JSON schema (YAML encoded)."""
        schema = read_yaml(self.schemas_dir / schema_name, raise_on_error=True)
        try:
            jsonschema.validate(instance=config, schema=schema)
        except jsonschema.ValidationError as exc:
            location = ".".join(str(p) for p in exc.absolute_path) or "<root>"
            raise SchemaValidationError(
                f"Configuration invalid at '{location}': {exc.message}",
                context={"path": location, "schema": schema_name},
            ) from exc

    def load_config_uncached(self, validate: bool = True) -> Dict[str, Any]:
        """Load and merge configuration from all layers (UNCACHED)."""
        cfg: Dict[str, Any] = {}
        cfg = merge_yaml_directory(cfg, self.core_config_dir)
        cfg = merge_yaml_directory(cfg, self.project_config_dir)
        self.apply_env_overrides(cfg, strict=validate)
        if validate:
            self.validate_schema(cfg)
        return cfg

    def load_config(self, validate: bool = True) -> Dict[str, Any]:
        """Load configuration through the central cache.

        Returned dict should be treated as immutable.
        """
        from .cache import get_cached_config

        return get_cached_config(repo_root=self.repo_root, validate=validate)

    # ---------- accessors ----------

    def get_all(self) -> Dict[str, Any]:
        """Get full merged configuration."""
        return self.load_config()

    def get(self, key: str, default: Any = None) -> Any:
        """Get a config value by dot-notation key.

        Example:
            >>> manager.get('commandline.bare_value_key')
            'parameter'
            >>> manager.get('nonexistent.key', 'fallback')
            'fallback'
        """
        current: Any = self.load_config()
        for part in key.split("."):
            if isinstance(current, dict) and part in current:
                current = current[part]
            else:
                return default
        return current

    def section(self, name: str) -> Dict[str, Any]:
        """Return a top-level section, or an empty mapping when absent."""
        value = self.load_config().get(name)
        return dict(value) if isinstance(value, dict) else {}


__all__ = [
    "ConfigManager",
    "merge_yaml_directory",
    "resolve_project_root",
    "ENV_PREFIX",
    "PROJECT_ROOT_ENV",
    "PROJECT_CONFIG_DIRNAME",
]

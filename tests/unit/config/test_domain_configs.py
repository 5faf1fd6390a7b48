from __future__ import annotations

import logging
from pathlib import Path

import pytest

from inspire_core.core.config import BaseDomainConfig
from inspire_core.core.config.domains import CommandLineConfig, LocaleConfig, LoggingConfig, TimeConfig
from helpers.io_utils import write_project_config


def test_defaults(isolated_project_env: Path) -> None:
    assert CommandLineConfig().operator_prefixes == "-/"
    assert CommandLineConfig().bare_value_key == "parameter"
    assert LocaleConfig().default == "en-US"

    time_cfg = TimeConfig()
    assert time_cfg.timespec == "seconds"
    assert time_cfg.use_z_suffix is True
    assert time_cfg.strip_microseconds is True

    log_cfg = LoggingConfig()
    assert log_cfg.level == logging.INFO
    assert "%(category)s" in log_cfg.format
    assert log_cfg.file is None


def test_explicit_repo_root(tmp_path: Path) -> None:
    other = tmp_path / "other"
    write_project_config(other, "commandline", {"commandline": {"operator_prefixes": "/"}})

    assert CommandLineConfig(repo_root=other).operator_prefixes == "/"
    assert CommandLineConfig(repo_root=other).repo_root == other.resolve()
    assert CommandLineConfig().operator_prefixes == "-/"


def test_logging_file_resolves_against_project_root(isolated_project_env: Path) -> None:
    write_project_config(
        isolated_project_env,
        "logging",
        {"logging": {"level": "DEBUG", "file": "logs/inspire.log"}},
    )
    cfg = LoggingConfig()
    assert cfg.level == logging.DEBUG
    assert cfg.level_name == "DEBUG"
    assert cfg.file == isolated_project_env.resolve() / "logs" / "inspire.log"


def test_timespec_null_means_default_rendering(isolated_project_env: Path) -> None:
    write_project_config(
        isolated_project_env,
        "time",
        {"time": {"iso8601": {"timespec": None, "use_z_suffix": True, "strip_microseconds": True}}},
    )
    assert TimeConfig().timespec is None


def test_base_domain_config_requires_section() -> None:
    with pytest.raises(TypeError):
        BaseDomainConfig()  # type: ignore[abstract]


def test_custom_domain_config_reads_its_section(isolated_project_env: Path) -> None:
    class FilenamesConfig(BaseDomainConfig):
        def _config_section(self) -> str:
            return "filenames"

    assert FilenamesConfig().section == {"default_extension": ".xml"}

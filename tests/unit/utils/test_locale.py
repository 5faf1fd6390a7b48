from __future__ import annotations

from pathlib import Path

import pytest

from inspire_core.core.utils.locale import (
    LocaleInfo,
    parse_locale_code,
    to_local_culture_code,
    to_locale_info,
    to_neutral_culture_code,
)
from helpers.io_utils import write_project_config


@pytest.mark.parametrize(
    "code, expected",
    [
        ("en-US", "en"),
        ("xxx", "en"),
        ("de", "de"),
        ("de_AT", "de"),
        ("english", "en"),
        ("Chinese", "en"),
        (None, "en"),
    ],
)
def test_to_neutral_culture_code(code: str, expected: str) -> None:
    assert to_neutral_culture_code(code) == expected


@pytest.mark.parametrize(
    "code, expected",
    [
        ("en", "en-US"),
        ("xxx", "en-US"),
        ("en-US", "en-US"),
        ("de", "de-DE"),
        ("de-", "de-DE"),
        ("de-DE", "de-DE"),
        ("de_at", "de-AT"),
    ],
)
def test_to_local_culture_code(code: str, expected: str) -> None:
    assert to_local_culture_code(code) == expected


def test_to_locale_info() -> None:
    info = to_locale_info("en")
    assert info is not None
    assert info.language == "en"
    assert info.posix_name == "en_US"
    assert to_locale_info("xxx") is None
    assert to_locale_info("zz") is None


def test_to_locale_info_blank_gives_default() -> None:
    assert to_locale_info("") == LocaleInfo("en", "US")
    assert to_locale_info(None) == LocaleInfo("en", "US")


def test_parse_locale_code_is_strict() -> None:
    assert parse_locale_code("fr-CA") == LocaleInfo("fr", "CA")
    assert parse_locale_code("fr-CAN") is None
    assert parse_locale_code("") is None


def test_configured_default_locale(isolated_project_env: Path) -> None:
    write_project_config(isolated_project_env, "locale", {"locale": {"default": "de-DE"}})

    assert to_neutral_culture_code("xxx") == "de"
    assert to_local_culture_code(None) == "de-DE"
    assert str(to_locale_info("")) == "de-DE"

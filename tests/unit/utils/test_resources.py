from __future__ import annotations

from pathlib import Path

import pytest

from inspire_core.core.exceptions import ResourceNotFoundError
from inspire_core.core.utils.resources import (
    build_resource_path,
    get_embedded_resource_bytes,
    get_embedded_resource_stream,
    get_embedded_resource_string,
    get_resource_string,
)
from helpers.io_utils import write_project_config


def test_build_resource_path_points_into_data_package() -> None:
    path = build_resource_path("strings.yaml")
    assert path.name == "strings.yaml"
    assert path.is_file()
    assert build_resource_path("defaults.yaml", folder="config").is_file()


def test_embedded_resource_stream() -> None:
    stream = get_embedded_resource_stream("mime_types.yaml")
    assert stream is not None
    with stream:
        assert b"image/png" in stream.read()
    assert get_embedded_resource_stream("missing.bin") is None


def test_embedded_resource_string_and_bytes() -> None:
    assert "SortAscendingText" in get_embedded_resource_string("strings.yaml")
    assert get_embedded_resource_bytes("strings.yaml").startswith(b"ArgumentMustBeGreaterThanZeroErrorFormat")


def test_missing_embedded_resource_raises() -> None:
    with pytest.raises(ResourceNotFoundError) as exc_info:
        get_embedded_resource_bytes("missing.bin")
    assert exc_info.value.context["key"] == "missing.bin"
    assert isinstance(exc_info.value, FileNotFoundError)
    with pytest.raises(ResourceNotFoundError):
        get_embedded_resource_string("missing.txt", folder="schemas")


@pytest.mark.parametrize(
    "locale, expected",
    [
        (None, "Warning"),
        ("en-US", "Warning"),
        ("de", "Warnung"),
        ("de-AT", "Warnung"),
        ("fr-FR", "Warning"),
        ("not-a-locale", "Warning"),
    ],
)
def test_get_resource_string_fallback_chain(locale: str, expected: str) -> None:
    assert get_resource_string("LabelWarningText", locale) == expected


def test_language_table_falls_back_to_invariant_for_missing_keys() -> None:
    assert get_resource_string("LockedForReviewByText", "de") == "Locked for review by {0}"


def test_unknown_key_resolves_to_itself() -> None:
    assert get_resource_string("NoSuchKeyText", "de") == "NoSuchKeyText"


def test_default_locale_from_config(isolated_project_env: Path) -> None:
    write_project_config(isolated_project_env, "locale", {"locale": {"default": "de-DE"}})
    assert get_resource_string("LabelYesText") == "Ja"

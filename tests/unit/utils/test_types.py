from __future__ import annotations

import uuid
from datetime import datetime
from decimal import Decimal
from enum import Enum

import pytest

from inspire_core.core.utils.types import (
    DECIMAL_MAX,
    LocalizedDescription,
    SortDirection,
    convert_to_string,
    describe,
    recurse_messages,
    to_boolean,
    to_datetime,
    to_decimal,
    to_description,
    to_enum,
    to_guid,
    to_int,
    to_long,
    zero_to_none,
)


@describe(ALPHA="Value 1", BETA="Value 2")
class DescriptionTestEnumeration(Enum):
    ALPHA = 1
    BETA = 2
    GAMMA = 3


@pytest.mark.parametrize(
    "value, expected",
    [
        ("", "00000000-0000-0000-0000-000000000000"),
        ("123", "00000000-0000-0000-0000-000000000000"),
        ("506934FF-F8E4-4F0F-8FAC-C238DDD48910", "506934FF-F8E4-4F0F-8FAC-C238DDD48910"),
        (None, "00000000-0000-0000-0000-000000000000"),
    ],
)
def test_to_guid(value: str, expected: str) -> None:
    assert str(to_guid(value)).upper() == expected


@pytest.mark.parametrize(
    "value, expected",
    [
        ("", 0),
        ("NaN", 0),
        ("1.5", 0),
        ("2,147,483,647", 0),
        ("2147483647", 2147483647),
        ("-2147483648", -2147483648),
        ("9223372036854775807", 0),
    ],
)
def test_to_int(value: str, expected: int) -> None:
    assert to_int(value) == expected


def test_to_int_default() -> None:
    assert to_int("oops", default=7) == 7


@pytest.mark.parametrize(
    "value, expected",
    [
        ("", 0),
        ("NaN", 0),
        ("1.5", 0),
        ("9,223,372,036,854,775,807", 0),
        ("9223372036854775807", 9223372036854775807),
        ("-9223372036854775808", -9223372036854775808),
        ("79228162514264337593543950335M", 0),
    ],
)
def test_to_long(value: str, expected: int) -> None:
    assert to_long(value) == expected


@pytest.mark.parametrize(
    "value, default, expected",
    [
        ("", 0, Decimal(0)),
        ("NaN", Decimal("0.1"), Decimal("0.1")),
        ("1.5", 0, Decimal("1.5")),
        ("79,228,162,514,264,337,593,543,950,335", 0, DECIMAL_MAX),
        ("79228162514264337593543950335", 0, DECIMAL_MAX),
        ("-79228162514264337593543950335", 0, DECIMAL_MAX.copy_negate()),
        ("7922816251426433759354395033579228162514264337593543950335", 0, Decimal(0)),
    ],
)
def test_to_decimal(value: str, default, expected: Decimal) -> None:
    assert to_decimal(value, default) == expected


def test_convert_to_string() -> None:
    assert convert_to_string(None) == ""
    assert convert_to_string(None, "null") == "null"
    assert convert_to_string("some value") == "some value"
    assert convert_to_string("", "fallback") == "fallback"
    assert convert_to_string(12) == "12"


@pytest.mark.parametrize(
    "value, expected",
    [
        ("2019-01-01", datetime(2019, 1, 1)),
        ("01/01/2019 10:00 AM", datetime(2019, 1, 1, 10, 0)),
        ("2019/01/01", datetime(2019, 1, 1)),
        ("03/01/2009T10:00:00-5:00", None),
        ("", None),
    ],
)
def test_to_datetime(value: str, expected) -> None:
    assert to_datetime(value) == expected


@pytest.mark.parametrize(
    "value, ignore_case, default, expected",
    [
        ("ASC", True, SortDirection.DESC, SortDirection.ASC),
        ("asc", True, SortDirection.DESC, SortDirection.ASC),
        ("", True, SortDirection.DESC, SortDirection.DESC),
        (None, True, SortDirection.ASC, SortDirection.ASC),
    ],
)
def test_to_enum(value: str, ignore_case: bool, default: SortDirection, expected: SortDirection) -> None:
    assert to_enum(value, SortDirection, ignore_case=ignore_case, default=default) == expected


def test_to_enum_rejects_unknown_names() -> None:
    with pytest.raises(ValueError):
        to_enum("Descending", SortDirection, default=SortDirection.ASC)
    with pytest.raises(ValueError):
        to_enum("asc", SortDirection, ignore_case=False)


@pytest.mark.parametrize(
    "value, default, expected",
    [
        ("T", False, True),
        ("true", False, True),
        ("1", False, True),
        ("y", False, True),
        ("Yes", False, True),
        ("O", False, True),
        ("", False, False),
        (" ", False, False),
        ("", True, True),
        ("No", False, False),
        ("0", True, False),
    ],
)
def test_to_boolean(value: str, default: bool, expected: bool) -> None:
    assert to_boolean(value, default) is expected


def test_to_description_plain_strings() -> None:
    assert to_description(DescriptionTestEnumeration.ALPHA) == "Value 1"
    assert to_description(DescriptionTestEnumeration.BETA) == "Value 2"
    assert to_description(DescriptionTestEnumeration.GAMMA) == "GAMMA"


def test_to_description_localized() -> None:
    assert to_description(SortDirection.ASC) == "Ascending"
    assert to_description(SortDirection.DESC, "de-DE") == "Absteigend"
    assert LocalizedDescription("SortAscendingText").resolve("de") == "Aufsteigend"


def test_to_description_rejects_non_members() -> None:
    with pytest.raises(ValueError):
        to_description("ASC")  # type: ignore[arg-type]


def test_describe_rejects_unknown_members() -> None:
    with pytest.raises(ValueError):

        @describe(MISSING="nope")
        class _Broken(Enum):
            PRESENT = 1


def test_recurse_messages_walks_causes() -> None:
    try:
        try:
            try:
                raise KeyError("inner")
            except KeyError as inner:
                raise ValueError("middle") from inner
        except ValueError as middle:
            raise RuntimeError("outer") from middle
    except RuntimeError as outer:
        message = recurse_messages(outer)

    assert message == "outer\n->middle\n-->'inner'\n"
    assert recurse_messages(None) == ""


@pytest.mark.parametrize("value, expected", [(9223372036854775807, 9223372036854775807), (1, 1), (0, None), (None, None)])
def test_zero_to_none(value, expected) -> None:
    assert zero_to_none(value) == expected


def test_to_guid_returns_uuid() -> None:
    assert isinstance(to_guid("506934FF-F8E4-4F0F-8FAC-C238DDD48910"), uuid.UUID)

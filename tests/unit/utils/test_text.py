from __future__ import annotations

import io
import re

import pytest

from inspire_core.core.utils import text


@pytest.mark.parametrize(
    "value, size, expected_count",
    [
        ("abcabcabcabcabca", 1, 16),
        ("abcabcabcabcabca", 2, 8),
        ("abcabcabcabcabca", 3, 6),
        ("abcabcabcabcabca", 5, 4),
        ("abcabcabcabcabca", 7, 3),
        ("abcabcabcabcabca", 8, 2),
        ("abcabcabcabcabca", 9, 2),
        ("abcabcabcabcabca", 16, 1),
        ("abcabcabcabcabca", 17, 1),
        ("abcabcabcabcabca", 512, 1),
        (None, 512, 0),
        ("", 512, 0),
    ],
)
def test_chop_chunk_counts(value: str, size: int, expected_count: int) -> None:
    assert len(list(text.chop(value, size))) == expected_count


def test_chop_chunks_rejoin_to_source() -> None:
    assert "".join(text.chop("abcdefg", 3)) == "abcdefg"
    assert list(text.chop("abcdefg", 3))[-1] == "g"


@pytest.mark.parametrize("size", [0, -1])
def test_chop_rejects_non_positive_sizes(size: int) -> None:
    with pytest.raises(ValueError):
        text.chop("abc", size)


def test_bytes_conversions() -> None:
    assert text.to_bytes(None) == b""
    assert text.to_bytes("é") == "é".encode("utf-8")
    assert text.bytes_to_string(None) == ""
    assert text.bytes_to_string("ü".encode("utf-16-le"), "utf-16-le") == "ü"


def test_stream_helpers() -> None:
    stream = io.BytesIO()
    text.write_string(stream, "héllo")
    stream.seek(0)
    assert text.read_string(stream) == "héllo"

    with pytest.raises(ValueError):
        text.write_string(None, "x")  # type: ignore[arg-type]
    with pytest.raises(ValueError):
        text.read_string(None)  # type: ignore[arg-type]


def test_base64_helpers() -> None:
    encoded = text.base64_encode(b"inspire")
    assert text.is_base64_string(encoded)
    assert text.base64_decode(encoded) == b"inspire"
    assert not text.is_base64_string("not base64!")
    assert not text.is_base64_string(None)
    assert text.base64_decode("not base64!") == b"not base64!"


def test_strip_orphaned_inline_tags() -> None:
    source = 'Hello <ph TGID="12">big</ph TGID="12"> world<b TGID="x"/>!'
    assert text.strip_orphaned_inline_tags(source) == "Hello big world!"
    assert text.strip_orphaned_inline_tags(None) == ""
    assert text.strip_orphaned_inline_tags("<b>kept</b>") == "<b>kept</b>"


def test_matches_and_is_email() -> None:
    assert text.matches("topic_v2.xml", r"_v\d+")
    assert not text.matches("topic.xml", r"_v\d+")
    assert text.is_email("first.last@example.com")
    assert not text.is_email("first.last@")
    assert not text.is_email(None)


def test_ampersand_round_trip() -> None:
    encoded = text.encode_ampersands("R&D & QA")
    assert encoded == "R~VsntAmp~D ~VsntAmp~ QA"
    assert text.decode_ampersands(encoded) == "R&D & QA"
    with pytest.raises(ValueError):
        text.encode_ampersands(None)  # type: ignore[arg-type]
    with pytest.raises(ValueError):
        text.decode_ampersands(None)  # type: ignore[arg-type]


def test_replace_tokens_uppercases_keys_and_adds_dates() -> None:
    values = {"name": "Ada"}
    result = text.replace_tokens("Hi $NAME$ on $DATE$ at $TIME$", values)

    assert result is not None
    assert result.startswith("Hi Ada on ")
    assert re.fullmatch(r"Hi Ada on \d{2}/\d{2}/\d{4} at \d{2}:\d{2}", result)
    assert values == {"name": "Ada"}


def test_replace_tokens_caller_values_win() -> None:
    assert text.replace_tokens("$DATE$", {"DATE": "today"}) == "today"
    assert text.replace_tokens(None, {"a": "b"}) is None
    assert text.replace_tokens("$A$", None) == "$A$"


def test_before_and_after() -> None:
    assert text.before("key=value", "=") == "key"
    assert text.before("novalue", "=") == "novalue"
    assert text.after("key=value", "=") == "value"
    assert text.after("novalue", "=") == "novalue"
    assert text.after("trailing=", "=") == "trailing="
    with pytest.raises(ValueError):
        text.before(None, "=")  # type: ignore[arg-type]
    with pytest.raises(ValueError):
        text.after(None, "=")  # type: ignore[arg-type]


def test_empty_to_none() -> None:
    assert text.empty_to_none("") is None
    assert text.empty_to_none("  ") is None
    assert text.empty_to_none(None) is None
    assert text.empty_to_none("x") == "x"

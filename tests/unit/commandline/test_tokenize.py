from __future__ import annotations

import logging

import pytest

from inspire_core.core.commandline import (
    ParseWarning,
    normalize_command_line,
    tokenize_command_line,
)


def test_normalize_turns_line_breaks_and_tabs_into_single_spaces() -> None:
    assert normalize_command_line("prog\r\n-a\t1\n\n-b\r2") == "prog -a 1 -b 2"


def test_normalize_empty_text() -> None:
    assert normalize_command_line("") == ""


@pytest.mark.parametrize(
    "text",
    [
        "prog.exe -name value -flag",
        "  prog.exe   -a 1    /b  ",
        "prog.exe\t-x\r\n2",
        "single",
    ],
)
def test_unquoted_token_count_matches_split(text: str) -> None:
    normalized = normalize_command_line(text)
    expected = [piece for piece in normalized.split(" ") if piece]
    assert tokenize_command_line(text) == expected


def test_quoted_argument_is_one_token() -> None:
    tokens = tokenize_command_line('app.exe -out "C:\\My Docs\\out.xml" -verbose')
    assert tokens == ["app.exe", "-out", "C:\\My Docs\\out.xml", "-verbose"]


def test_empty_quotes_yield_empty_token() -> None:
    assert tokenize_command_line('prog -name ""') == ["prog", "-name", ""]


def test_quote_inside_unquoted_token_flushes_quoted_part_first() -> None:
    tokens = tokenize_command_line('prog -path=C:\\"Program Files"\\app')
    assert tokens == ["prog", "Program Files", "-path=C:\\\\app"]


def test_unterminated_quote_flushes_content_and_warns(caplog: pytest.LogCaptureFixture) -> None:
    warnings: list[ParseWarning] = []
    with caplog.at_level(logging.WARNING, logger="inspire_core.core.commandline"):
        tokens = tokenize_command_line('prog -name "half open', warnings=warnings)

    assert tokens == ["prog", "-name", "half open"]
    assert len(warnings) == 1
    assert warnings[0].kind == "unterminated-quote"
    assert warnings[0].position == 11
    assert "Unterminated quote" in caplog.text


def test_malformed_quoting_never_raises() -> None:
    for text in ['"', '""""', 'a"b"c"', '" " "']:
        assert isinstance(tokenize_command_line(text), list)

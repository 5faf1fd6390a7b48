from __future__ import annotations

import pytest

from inspire_core.core.commandline import (
    CommandLine,
    join_arguments,
    parse_command_line,
    parse_parameters,
    quote_argument,
)
from inspire_core.core.exceptions import DuplicateParameterError, InspireError


def test_named_parameters_and_trailing_flag() -> None:
    result = parse_command_line("prog.exe -name value -flag")
    assert result.ok
    assert result.parameters == {"name": "value", "flag": ""}


def test_bare_value_maps_to_parameter_key() -> None:
    assert parse_command_line("prog.exe bareValue").parameters == {"parameter": "bareValue"}


def test_last_bare_value_wins() -> None:
    assert parse_command_line("prog first second").parameters == {"parameter": "second"}


def test_slash_prefix_is_an_operator() -> None:
    result = parse_command_line("prog /in a.xml -out b.xml")
    assert result.parameters == {"in": "a.xml", "out": "b.xml"}


def test_pending_name_commits_empty_before_next_operator() -> None:
    result = parse_command_line("prog -a -b 2")
    assert result.parameters == {"a": "", "b": "2"}


def test_executable_is_never_a_parameter() -> None:
    assert parse_parameters(["-looks-like-operator"]).parameters == {}


def test_bare_operator_prefix_is_ignored() -> None:
    result = parse_parameters(["prog", "-", "value"])
    assert result.parameters == {"parameter": "value"}


def test_empty_tokens_are_skipped() -> None:
    result = parse_parameters(["prog", "-name", "", "value"])
    assert result.parameters == {"name": "value"}


def test_quoted_value_with_spaces() -> None:
    result = parse_command_line('app.exe -out "C:\\My Docs\\out.xml" -verbose')
    assert result.parameters == {"out": "C:\\My Docs\\out.xml", "verbose": ""}


def test_duplicate_parameter_is_reported_not_overwritten() -> None:
    result = parse_command_line("prog -x 1 -x 2")

    assert not result.ok
    assert result.parameters == {"x": "1"}
    assert result.errors == (DuplicateParameterError("x"),)
    assert result.errors[0].context["value"] == "2"


def test_unwrap_raises_first_duplicate() -> None:
    result = parse_command_line("prog -x 1 -x 2 -y -y")
    with pytest.raises(DuplicateParameterError) as exc_info:
        result.unwrap()
    assert exc_info.value.name == "x"
    assert isinstance(exc_info.value, KeyError)
    assert isinstance(exc_info.value, InspireError)


def test_custom_prefixes_and_bare_key() -> None:
    result = parse_command_line("prog +mode fast input.xml", operator_prefixes="+", bare_value_key="file")
    assert result.parameters == {"mode": "fast", "file": "input.xml"}


def test_parse_command_line_carries_warnings() -> None:
    result = parse_command_line('prog -a "open')
    assert [w.kind for w in result.warnings] == ["unterminated-quote"]
    assert result.parameters == {"a": "open"}


def test_quote_argument() -> None:
    assert quote_argument("plain") == "plain"
    assert quote_argument("with space") == '"with space"'
    assert quote_argument("") == '""'


def test_join_arguments_round_trips_through_tokenizer() -> None:
    argv = ["C:\\Program Files\\app.exe", "-out", "my file.xml", "-v"]
    cmd = CommandLine(join_arguments(argv))
    assert list(cmd.tokens) == argv

## optscan — Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

import json

from optscan.types import OptArg, ParseResult
from optscan.errors import OptionError, DuplicateOption, UnknownOption
from optscan.formatting import format_optarg, format_result, format_json, format_error, write_without_ansi


def _plain(text: str) -> str:
    out = []
    write_without_ansi(out.append)(text)
    return ''.join(out)


def test_format_optarg():
    assert format_optarg(OptArg("-h")) == "-h"
    assert format_optarg(OptArg("-x", "asdf")) == "-x asdf"
    assert format_optarg(OptArg("--flag", "arg")) == "--flag=arg"


def test_format_result_lists_options_then_leftovers():
    text = _plain(format_result(ParseResult(("file",), (OptArg("-h"), OptArg("-x", "1")))))
    lines = [line.strip() for line in text.splitlines()]
    assert lines == ["OPTIONS.", "-h", "-x 1", "LEFTOVERS.", "'file'"]


def test_format_result_empty():
    text = _plain(format_result(ParseResult((), ())))
    assert text.count("∅") == 2


def test_format_json():
    data = json.loads(format_json(ParseResult(("a",), (OptArg("--flag", "x"),))))
    assert data == {"leftovers": ["a"], "options": [["--flag", "x"]]}


def test_format_error_badges():
    spec = _plain(format_error(DuplicateOption("Option h entered more than once in shorts", option="-h")))
    assert spec.startswith(" SPEC ERROR. ")
    assert "DuplicateOption" in spec

    user = _plain(format_error(UnknownOption("couldn't find '-z'", option="-z")))
    assert user.startswith(" USAGE ERROR. ")
    assert "couldn't find '-z'" in user and "UnknownOption" in user


def test_format_optarg_keeps_empty_argument_visible():
    assert format_optarg(OptArg("-x", ""), hasarg=True) == "-x ''"
    assert format_optarg(OptArg("--flag", ""), hasarg=True) == "--flag=''"
    assert format_optarg(OptArg("-h", ""), hasarg=False) == "-h"


def test_format_result_uses_table_for_empty_arguments():
    result = ParseResult((), (OptArg("-h"), OptArg("-x", "")))
    lines = [line.strip() for line in _plain(format_result(result, {'-h': False, '-x': True})).splitlines()]
    assert lines[1:3] == ["-h", "-x ''"]


def test_format_error_without_kind():
    assert "OptionError" in _plain(format_error(OptionError("generic")))

## optscan — Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

import pytest

from optscan.compiler import compile_short, compile_long
from optscan.errors import DuplicateOption, MalformedSpec
from optscan.types import ErrorKind


@pytest.mark.parametrize("spec, expected", [
    ("", {}),
    ("h", {'-h': False}),
    ("hx:r", {'-h': False, '-x': True, '-r': False}),
    ("a:b:", {'-a': True, '-b': True}),
    ("1Z", {'-1': False, '-Z': False}),
])
def test_short_table_matches_declarations(spec, expected):
    assert compile_short(spec) == expected


def test_short_stray_colons_are_skipped():
    assert compile_short(":x") == {'-x': False}
    assert compile_short("x::y") == {'-x': True, '-y': False}
    assert compile_short(":::") == {}


def test_short_accepts_unusual_characters():
    # Any character but the colon declares a flag, including punctuation and non-ASCII.
    assert compile_short("?é:") == {'-?': False, '-é': True}


def test_short_duplicate_is_reported():
    with pytest.raises(DuplicateOption) as info:
        compile_short("hxh")
    assert info.value.option == '-h'
    assert info.value.source == 'shorts'
    assert info.value.kind is ErrorKind.DUPLICATE_OPTION


def test_short_duplicate_regardless_of_argument():
    with pytest.raises(DuplicateOption, match="entered more than once in shorts"):
        compile_short("x:x")


def test_short_spec_must_be_string():
    with pytest.raises(MalformedSpec):
        compile_short(["h"])


@pytest.mark.parametrize("spec, expected", [
    (None, {}),
    ([], {}),
    (["help"], {'--help': False}),
    (["help", "flag="], {'--help': False, '--flag': True}),
    (("block-size=", "all"), {'--block-size': True, '--all': False}),
])
def test_long_table_matches_declarations(spec, expected):
    assert compile_long(spec) == expected


def test_long_strips_only_one_equals():
    assert compile_long(["odd=="]) == {'--odd=': True}


def test_long_duplicate_is_reported():
    with pytest.raises(DuplicateOption) as info:
        compile_long(["flag", "other", "flag="])
    assert info.value.option == '--flag'
    assert info.value.source == 'longs'
    assert info.value.is_spec_defect


@pytest.mark.parametrize("spec", [[""], ["="], ["ok", 3], "help", 5, 3.5, True])
def test_long_malformed_entries(spec):
    with pytest.raises(MalformedSpec) as info:
        compile_long(spec)
    assert info.value.kind is ErrorKind.MALFORMED_SPEC
    assert info.value.is_spec_defect


def test_tables_are_built_fresh():
    first, second = compile_short("ab"), compile_short("ab")
    assert first == second and first is not second
    first['-z'] = True
    assert '-z' not in compile_short("ab")

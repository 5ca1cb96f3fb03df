## optscan — Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘
#
# Turns the short-option string and the long-option list into lookup tables for the scanner.
#

from typing import Iterable

import lark

from .types import OptionTable
from .errors import DuplicateOption, MalformedSpec


# Every string is accepted: a FLAG is any character except a colon, optionally
# followed by one; any other colon is STRAY and gets skipped.
SHORT_GRAMMAR = r"""start: (FLAG | STRAY)*
FLAG: /[^:]:?/
STRAY: ":"
"""

_SHORT_PARSER = lark.Lark(SHORT_GRAMMAR, start='start', parser="lalr", lexer="contextual")


def compile_short(spec: str) -> OptionTable:
    if not isinstance(spec, str):
        raise MalformedSpec(f"Short options must be a string, got {type(spec).__name__}.", entry=spec)

    shorts: OptionTable = {}
    for token in _SHORT_PARSER.parse(spec).children:
        if token.type == 'STRAY': continue
        opt, hasarg = '-' + token.value[0], token.value.endswith(':')
        if opt in shorts:
            raise DuplicateOption(f"Option {token.value[0]} entered more than once in shorts",
                                  option=opt, source='shorts')
        shorts[opt] = hasarg
    return shorts


def compile_long(spec: Iterable[str] | None) -> OptionTable:
    longs: OptionTable = {}
    if spec is None: return longs
    if isinstance(spec, str):
        raise MalformedSpec("Long options must be a sequence of strings, not a single string.", entry=spec)
    try:
        entries = iter(spec)
    except TypeError:
        raise MalformedSpec(f"Long options must be a sequence of strings, got {type(spec).__name__}.", entry=spec) from None

    for entry in entries:
        if not isinstance(entry, str):
            raise MalformedSpec(f"Long option {entry!r} is not a string.", entry=entry)
        name, hasarg = (entry[:-1], True) if entry.endswith('=') else (entry, False)
        if not name:
            raise MalformedSpec(f"Long option {entry!r} has no name.", entry=entry)
        opt = '--' + name
        if opt in longs:
            raise DuplicateOption(f"Option {opt} entered more than once in longs", option=opt, source='longs')
        longs[opt] = hasarg
    return longs

## Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘
#
# optscan — getopt-style parsing of short `-x` and long `--flag` command-line options.
#

import logging
from typing import Iterable, Sequence

from .types import ErrorKind, OptArg, ParseResult
from .errors import *
from .compiler import compile_short, compile_long
from .scanner import scan

logger = logging.getLogger(__name__)


def parse(args: Sequence[str], shortopts: str = "", longopts: Iterable[str] | None = None) -> ParseResult:
    """Parse `args` according to `shortopts` and `longopts`, returning the leftovers and the options.

    In `shortopts` every character declares an option `-c`, and a trailing colon as in "x:" means
    the option takes the next argument.  Each entry of `longopts` declares `--name`, and a trailing
    "=" as in "name=" means it takes an argument, either inline `--name=value` or as the next one.

    Raises an `OptionError` for any problem; check `exc.kind` or `exc.is_spec_defect` to tell the
    mistakes in the descriptors apart from bad input by the user.
    """
    shorts = compile_short(shortopts)
    longs = compile_long(longopts)
    logger.debug("Compiled %d short and %d long options.", len(shorts), len(longs))

    result = scan(args, shorts, longs)
    logger.debug("Parsed %d option(s), %d leftover(s).", len(result.options), len(result.leftovers))
    return result

getopt = parse


def try_parse(args: Sequence[str], shortopts: str = "", longopts: Iterable[str] | None = None) -> ParseResult | OptionError:
    try:
        return parse(args, shortopts, longopts)
    except OptionError as exc:
        logger.debug("Parsing failed with %s: %s", exc.kind.value, exc)
        return exc


def parse_trusted(args: Sequence[str], shortopts: str = "", longopts: Iterable[str] | None = None) -> ParseResult | OptionInputError:
    """For programs with hard-coded descriptors: defects in them raise, while user errors are returned."""
    result = try_parse(args, shortopts, longopts)
    if isinstance(result, OptionError) and result.kind.is_spec_defect:
        raise result
    return result

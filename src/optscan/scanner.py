## optscan — Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

from typing import Sequence

from .types import OptArg, OptionTable, ParseResult
from .errors import UnknownOption, MissingArgument, UnexpectedArgument, InvalidArgs


def _missing(opt: str, found: str | None) -> MissingArgument:
    got = "end of args" if found is None else found
    return MissingArgument(f"expected an argument for \"{opt}\" got {got}", option=opt, found=found)


def _split_long(arg: str) -> tuple[str, str]:
    opt, _, value = arg.partition('=')
    return opt, value


def _checked_args(args) -> list[str]:
    if isinstance(args, str):
        raise InvalidArgs("Arguments must be a sequence of strings, not a single string.")
    try:
        checked = list(args)
    except TypeError:
        raise InvalidArgs(f"Arguments must be a sequence of strings, got {type(args).__name__}.") from None
    for i, arg in enumerate(checked):
        if not isinstance(arg, str):
            raise InvalidArgs(f"Argument {arg!r} at position {i} is not a string.", position=i)
    return checked


def scan(args: Sequence[str], shorts: OptionTable, longs: OptionTable) -> ParseResult:
    """Walk the arguments once from left to right, returning recognized options and the leftovers.

    Scanning stops at `--` or at the first token that is neither an option nor an option's argument.
    An option that requires an argument leaves the scanner `pending`, so the next token must supply it.
    """
    options: list[OptArg] = []
    leftovers: tuple[str, ...] = ()
    pending: str | None = None

    args = _checked_args(args)
    for i, arg in enumerate(args):
        if arg == '--':
            if pending is not None: raise _missing(pending, arg)
            leftovers = tuple(args[i+1:])
            break

        if pending is not None:
            if arg.startswith('-'): raise _missing(pending, arg)
            options.append(OptArg(pending, arg))
            pending = None
            continue

        # Short cluster: `-abc`, only the last character may take the next token as its argument.
        if len(arg) >= 2 and arg[0] == '-' and arg[1] != '-':
            cluster = arg[1:]
            for j, ch in enumerate(cluster):
                opt = '-' + ch
                if (hasarg := shorts.get(opt)) is None:
                    raise UnknownOption(f"couldn't find '{opt}'", option=opt)
                if not hasarg:
                    options.append(OptArg(opt))
                elif j == len(cluster) - 1:
                    pending = opt
                else:
                    raise MissingArgument(f"'{opt}' requires an arg", option=opt, found=cluster[j+1:])
            continue

        opt, value = _split_long(arg)
        if (hasarg := longs.get(opt)) is not None:
            if not hasarg and value:
                raise UnexpectedArgument(f"Option {opt} received an arg, {value}, and did not expect one",
                                         option=opt, argument=value)
            if value: options.append(OptArg(opt, value))
            elif hasarg: pending = opt
            else: options.append(OptArg(opt))
            continue

        if arg.startswith('-'):
            raise UnknownOption(f"couldn't find '{arg}'", option=opt)
        leftovers = tuple(args[i:])
        break

    if pending is not None:
        raise _missing(pending, None)
    return ParseResult(leftovers, tuple(options))

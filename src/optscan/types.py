## optscan — Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

from enum import Enum
from typing import NamedTuple


class ErrorKind(Enum):
    DUPLICATE_OPTION = "DuplicateOption"
    MALFORMED_SPEC = "MalformedSpec"
    UNKNOWN_OPTION = "UnknownOption"
    MISSING_ARGUMENT = "MissingArgument"
    UNEXPECTED_ARGUMENT = "UnexpectedArgument"
    INVALID_ARGS = "InvalidArgs"

    @property
    def is_spec_defect(self) -> bool:
        """Caused by the program's own option declarations, rather than by the end-user's input."""
        return self in (ErrorKind.DUPLICATE_OPTION, ErrorKind.MALFORMED_SPEC)


class OptArg(NamedTuple):
    option: str
    argument: str = ""

    # Accessors for callers written against the older getopt wrappers.
    def opt(self) -> str: return self.option
    def arg(self) -> str: return self.argument

    def __repr__(self):
        return f"OptArg({self.option!r}, {self.argument!r})"


class ParseResult(NamedTuple):
    """Leftover positional arguments first, then options in order of encounter."""
    leftovers: tuple[str, ...]
    options: tuple[OptArg, ...]

    def has(self, option: str) -> bool:
        return any(o.option == option for o in self.options)

    def values(self, option: str) -> list[str]:
        return [o.argument for o in self.options if o.option == option]


# Compiled descriptor: canonical flag token (`-x`, `--flag`) to whether it requires an argument.
OptionTable = dict[str, bool]

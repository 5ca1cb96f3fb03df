## optscan — Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

from .types import ErrorKind


class OptionError(Exception):
    kind: ErrorKind | None = None   # Set by every concrete subclass.

    def __init__(self, message: str = "", *, option: str | None = None):
        """Base class for all errors raised while compiling descriptors or scanning arguments."""
        super().__init__(message)
        self.option: str | None = option

    @property
    def is_spec_defect(self) -> bool:
        return self.kind is not None and self.kind.is_spec_defect


class OptionSpecError(OptionError, ValueError):
    """Defects in the option descriptors written by the programmer."""
    kind = ErrorKind.MALFORMED_SPEC

class DuplicateOption(OptionSpecError):
    kind = ErrorKind.DUPLICATE_OPTION

    def __init__(self, message, *, option=None, source=None):
        super().__init__(message, option=option)
        self.source: str | None = source   # "shorts" or "longs"

class MalformedSpec(OptionSpecError):
    kind = ErrorKind.MALFORMED_SPEC

    def __init__(self, message, *, option=None, entry=None):
        super().__init__(message, option=option)
        self.entry = entry


class OptionInputError(OptionError):
    """Problems with the arguments supplied by the end-user."""
    kind = ErrorKind.INVALID_ARGS

class InvalidArgs(OptionInputError):
    kind = ErrorKind.INVALID_ARGS

    def __init__(self, message, *, option=None, position=None):
        super().__init__(message, option=option)
        self.position: int | None = position   # Index of the offending element, if any.

class UnknownOption(OptionInputError):
    kind = ErrorKind.UNKNOWN_OPTION

class MissingArgument(OptionInputError):
    kind = ErrorKind.MISSING_ARGUMENT

    def __init__(self, message, *, option=None, found=None):
        super().__init__(message, option=option)
        self.found: str | None = found     # Offending token, `--`, or None at end of args.

class UnexpectedArgument(OptionInputError):
    kind = ErrorKind.UNEXPECTED_ARGUMENT

    def __init__(self, message, *, option=None, argument=None):
        super().__init__(message, option=option)
        self.argument: str | None = argument

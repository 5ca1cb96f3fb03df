## optscan — Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

import re
import json

from .types import OptArg, OptionTable, ParseResult
from .errors import OptionError


def write_without_ansi(write_fn):
    """Wrapper function that strips ANSI codes before calling the original writer."""
    ansi_re = re.compile(r'\033\[[0-9;]*m')
    return lambda text: write_fn(ansi_re.sub('', text))


def format_optarg(it: OptArg, hasarg: bool | None = None) -> str:
    """Render as typed on a command line; `hasarg` tells an empty argument apart from a plain flag."""
    if hasarg is None: hasarg = bool(it.argument)
    if not hasarg: return it.option
    value = it.argument or "''"
    return f"{it.option}={value}" if it.option.startswith('--') else f"{it.option} {value}"

def format_result(result: ParseResult, table: OptionTable | None = None) -> str:
    table = table or {}
    lines = [f"\033[97m\033[48;5;30m OPTIONS. \033[0m"]
    lines += [f"  \033[1;97m{format_optarg(o, table.get(o.option))}\033[0m" for o in result.options] or ["  \033[90m∅\033[0m"]
    lines.append(f"\033[97m\033[48;5;30m LEFTOVERS. \033[0m")
    lines += [f"  {arg!r}" for arg in result.leftovers] or ["  \033[90m∅\033[0m"]
    return '\n'.join(lines)

def format_json(result: ParseResult) -> str:
    return json.dumps({'leftovers': list(result.leftovers),
                       'options': [[o.option, o.argument] for o in result.options]})


def format_error(exc: OptionError) -> str:
    badge = "SPEC ERROR." if exc.is_spec_defect else "USAGE ERROR."
    return f"\033[30;43m {badge} \033[0m {exc} (Kind: \033[33m{exc.kind.value if exc.kind else type(exc).__name__}\033[0m)"

## Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘
#
# optscan — getopt-style parsing of short `-x` and long `--flag` command-line options.
#

import sys
import logging
from dataclasses import dataclass

import click

from .types import OptionTable, ParseResult
from .errors import OptionError
from .compiler import compile_short, compile_long
from .formatting import write_without_ansi, format_result, format_json, format_error

from . import api


@dataclass(frozen=True)
class CliConfig:
    verbose: int
    plain: bool


# Every option accepted by GNU coreutils ls(1); only parsed, never acted upon.
LS_SHORTOPTS = "aAbBcCdDfF:gGhHI:klLmnNopqQrRsStT:uUvw:xXZ1"
LS_LONGOPTS = [
    "all", "almost-all", "author", "escape", "block-size=", "ignore-backups",
    "color=", "directory", "dired", "classify=", "file-type", "format=", "full-time",
    "group-directories-first", "no-group", "human-readable", "si",
    "dereference-command-line", "dereference-command-line-symlink-to-dir",
    "hide=", "hyperlink=", "indicator-style=", "inode", "ignore=", "kibibytes",
    "dereference", "numeric-uid-gid", "literal", "hide-control-chars", "show-control-chars",
    "quote-name", "quoting-style=", "reverse", "recursive", "size", "sort=", "time=",
    "time-style=", "tabsize=", "width=", "context", "zero", "help", "version",
]


class OptionRunner:
    def __init__(self, config: CliConfig):
        self.plain = config.plain
        if config.verbose > 0:
            logging.basicConfig(level=logging.INFO if config.verbose == 1 else logging.DEBUG, stream=sys.stderr,
                                format="%(levelname)s %(name)s: %(message)s", force=True)

    def _write(self, text: str, file) -> None:
        write = write_without_ansi(file.write) if self.plain else file.write
        write(text + '\n')

    def report(self, result: ParseResult, table: OptionTable | None = None, as_json: bool = False) -> int:
        self._write(format_json(result) if as_json else format_result(result, table), sys.stdout)
        return 0

    def fail(self, exc: OptionError, usage: str) -> int:
        self._write(format_error(exc), sys.stderr)
        if exc.is_spec_defect: return 2
        self._write(f"\033[90mUsage: {usage}\033[0m", sys.stderr)
        return 1

    def run(self, args: tuple[str, ...], shortopts: str, longopts, usage: str, as_json: bool = False) -> int:
        outcome = api.try_parse(list(args), shortopts, longopts)
        if isinstance(outcome, OptionError):
            return self.fail(outcome, usage)
        # Descriptors compiled cleanly above, so this cannot fail.
        table = {**compile_short(shortopts), **compile_long(longopts)}
        return self.report(outcome, table, as_json=as_json)


@click.group(context_settings={'help_option_names': ['--help']})
@click.option('--verbose', '-v', default=0, count=True, help='Log what the parser does to stderr.')
@click.option('--plain', '-p', is_flag=True, help='Strip ANSI color codes from the output.')
@click.pass_context
def cli(ctx: click.Context, verbose: int, plain: bool) -> None:
    ctx.ensure_object(dict)
    ctx.obj['config'] = CliConfig(verbose=verbose, plain=plain)


@cli.command('parse', context_settings={'ignore_unknown_options': True, 'allow_interspersed_args': False})
@click.option('--short', '-s', 'shortopts', default='', help='Short options, e.g. "hvx:r".')
@click.option('--long', '-l', 'longopts', multiple=True, help='Long option, e.g. "flag=", may be repeated.')
@click.option('--json', 'as_json', is_flag=True, help='Print the result as JSON.')
@click.argument('args', nargs=-1, type=click.UNPROCESSED)
@click.pass_context
def parse_command(ctx: click.Context, shortopts: str, longopts: tuple[str, ...], as_json: bool, args: tuple[str, ...]) -> None:
    """Parse ARGS, given after `--`, with the declared options and show how they were understood."""
    runner = OptionRunner(ctx.obj['config'])
    ctx.exit(runner.run(args, shortopts, list(longopts), usage="optscan parse -s SHORT -l LONG -- ARGS...", as_json=as_json))


@cli.command('ls', context_settings={'ignore_unknown_options': True, 'allow_interspersed_args': False})
@click.option('--json', 'as_json', is_flag=True, help='Print the result as JSON.')
@click.argument('args', nargs=-1, type=click.UNPROCESSED)
@click.pass_context
def ls_command(ctx: click.Context, as_json: bool, args: tuple[str, ...]) -> None:
    """Parse ARGS, given after `--`, as GNU ls(1) would accept them."""
    runner = OptionRunner(ctx.obj['config'])
    ctx.exit(runner.run(args, LS_SHORTOPTS, LS_LONGOPTS, usage=f"ls [-{LS_SHORTOPTS.replace(':', '')}] [FILE]...", as_json=as_json))


def main(argv: list[str] | None = None) -> None:
    cli.main(args=list(sys.argv[1:] if argv is None else argv), prog_name='optscan')


if __name__ == "__main__":
    main()

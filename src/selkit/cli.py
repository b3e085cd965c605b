"""
cli.py
======
Command-line front end: assemble a selector from tokens and print it.

Example:
    $ selkit element=div id=main class=container '+' element=table id=data
    div#main.container + table#data
"""

import argparse
import sys

import logfire
from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.text import Text
from rich.theme import Theme

from selkit.assembly import assemble
from selkit.builder import SelectorBuilder
from selkit.config import Settings
from selkit.exceptions import AssemblyError, ValidationError
from selkit.utils.logging import setup_local_logging

THEME = Theme(
    {
        'info': 'dim cyan',
        'warning': 'magenta',
        'danger': 'bold red',
        'success': 'bold green',
    }
)


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the selkit command."""
    parser = argparse.ArgumentParser(
        prog='selkit',
        description='Build a CSS selector from kind=value tokens and combinators',
    )
    parser.add_argument(
        'tokens',
        nargs='+',
        metavar='TOKEN',
        help="Fragments such as element=div, id=main, class=x, attr=href, pseudo-class=focus, or a combinator ('>')",
    )
    parser.add_argument('--fragments', action='store_true', help='Show a table of the assembled fragments')
    parser.add_argument('--json', action='store_true', help='Print the fragment sequence as JSON')
    parser.add_argument('--log-level', type=str, help='Override SELKIT_LOG_LEVEL for this run')
    return parser


def fragment_table(builder: SelectorBuilder) -> Table:
    """Render the fragments of a builder as a rich table."""
    table = Table(title='Fragments')
    table.add_column('#', justify='right', style='dim')
    table.add_column('Kind', style='cyan')
    table.add_column('Value')
    table.add_column('Rank', justify='right')
    table.add_column('Rendered', style='green')

    for index, fragment in enumerate(builder.fragments, start=1):
        rank = '-' if fragment.order is None else str(fragment.order)
        table.add_row(str(index), fragment.kind.value, Text(fragment.value), rank, Text(repr(fragment.render())))

    return table


def main(argv: list[str] | None = None, console: Console | None = None) -> int:
    """Main entry point.

    Returns:
        Process exit status: 0 on success, 1 on invalid input.
    """
    console = console or Console(theme=THEME)
    args = build_parser().parse_args(argv)

    try:
        settings = Settings.from_env()
        if args.log_level:
            settings = Settings(
                log_level=args.log_level,
                log_to_file=settings.log_to_file,
                logfire_token=settings.logfire_token,
            )
    except ValueError as e:
        console.print(f'[danger]{escape(str(e))}[/danger]')
        return 1

    if settings.logfire_token:
        logfire.configure(token=settings.logfire_token)

    if settings.log_to_file:
        log_file = setup_local_logging(settings.log_level)
        console.print(f'[info]Logging to {log_file}[/info]')

    try:
        builder = assemble(args.tokens)
    except (AssemblyError, ValidationError) as e:
        console.print(f'[danger]{type(e).__name__}: {escape(str(e))}[/danger]')
        return 1

    if args.json:
        console.print_json(builder.model_dump_json())
    else:
        console.print(builder.stringify(), markup=False, highlight=False)

    if args.fragments:
        console.print(fragment_table(builder))

    return 0


def run() -> None:
    """Console script entry point; exits with the status from main()."""
    sys.exit(main())


if __name__ == '__main__':
    run()

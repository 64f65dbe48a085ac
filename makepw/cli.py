#!/usr/bin/env python3
"""Generates pronounceable or fully random passwords using the operating system's secure random source."""

from argparse import ArgumentParser, Namespace, RawDescriptionHelpFormatter
import logging
import shutil
import sys
from typing import List, Optional, TextIO

from makepw.errors import ConfigurationError, EntropyUnavailable
from makepw.generate import generate_passwords
from makepw.options import DEFAULT_LENGTH, DEFAULT_ROWS, Options
from makepw.utils import LOGGER, Timed, ceildiv, loglevel


EPILOG = """
By default passwords are pronounceable (alternating consonants and vowels), contain at least one
capital letter and one digit, and are printed in columns when writing to a terminal.
"""

def make_parser() -> ArgumentParser:
    p = ArgumentParser(prog = 'makepw', description = __doc__, epilog = EPILOG, formatter_class = RawDescriptionHelpFormatter)
    p.add_argument('length', nargs = '?', type = int, default = DEFAULT_LENGTH, help = f'length of each password (default {DEFAULT_LENGTH})')
    p.add_argument('count', nargs = '?', type = int, help = 'number of passwords (default: a screenful in columns, otherwise 1)')
    p.add_argument('-c', '--capitalize', action = 'store_true', help = 'include at least one capital letter (the default)')
    p.add_argument('-A', '--no-capitalize', action = 'store_true', help = "don't include capital letters")
    p.add_argument('-n', '--numerals', action = 'store_true', help = 'include at least one number (the default)')
    p.add_argument('-0', '--no-numerals', action = 'store_true', help = "don't include numbers")
    p.add_argument('-y', '--symbols', action = 'store_true', help = 'allow special symbols in the password')
    p.add_argument('-Y', '--require-symbol', action = 'store_true', help = 'include at least one special symbol')
    p.add_argument('-r', '--remove-chars', default = '', metavar = 'CHARS', help = 'remove characters from the set used to generate passwords')
    p.add_argument('-s', '--secure', action = 'store_true', help = 'generate completely random passwords')
    p.add_argument('-B', '--ambiguous', action = 'store_true', help = "don't include ambiguous characters")
    p.add_argument('-v', '--no-vowels', action = 'store_true', help = 'do not use any vowels, to avoid accidental nasty words')
    p.add_argument('-C', dest = 'columns', action = 'store_const', const = True, help = 'print the passwords in columns')
    p.add_argument('-1', dest = 'columns', action = 'store_const', const = False, help = "don't print the passwords in columns")
    p.add_argument('--verbose', action = 'store_true', help = 'log details about the generation')
    return p

def resolve_options(args: Namespace, isatty: bool, terminal_width: int) -> Options:
    """Turns parsed arguments into a fully resolved Options. The negative flags win over their positive counterparts."""
    columns = isatty if (args.columns is None) else args.columns
    column_count = max(1, terminal_width // (args.length + 1)) if (columns and (args.length > 0)) else 1
    if (args.count is not None):
        count = args.count
    else:
        count = (column_count * DEFAULT_ROWS) if columns else 1
    return Options(
        length = args.length,
        count = count,
        use_digits = not args.no_numerals,
        use_uppercase = not args.no_capitalize,
        use_symbols = args.symbols,
        require_symbol = args.require_symbol,
        avoid_vowels = args.no_vowels,
        avoid_ambiguous = args.ambiguous,
        secure_mode = args.secure,
        column_count = column_count,
        remove_chars = args.remove_chars
    )

def format_columns(passwords: List[str], column_count: int) -> List[str]:
    """Lays out passwords column-major in the given number of columns, returning the output lines."""
    if (column_count <= 1) or (len(passwords) <= 1):
        return list(passwords)
    rows = ceildiv(len(passwords), column_count)
    return [' '.join(passwords[r::rows]) for r in range(rows)]

def print_passwords(passwords: List[str], column_count: int, file: Optional[TextIO] = None) -> None:
    for line in format_columns(passwords, column_count):
        print(line, file = file)

def main(argv: Optional[List[str]] = None) -> None:
    logging.basicConfig(level = logging.WARNING, format = '%(message)s')
    p = make_parser()
    args = p.parse_args(argv)
    level = logging.DEBUG if args.verbose else LOGGER.level
    with loglevel(LOGGER, level):
        try:
            options = resolve_options(args, sys.stdout.isatty(), shutil.get_terminal_size().columns)
            with Timed(f'Generated {options.count} password(s)'):
                passwords = generate_passwords(options)
        except ConfigurationError as e:
            p.error(str(e))
        except EntropyUnavailable as e:
            LOGGER.error(f'{p.prog}: {e}')
            sys.exit(1)
        print_passwords(passwords, options.column_count)


if __name__ == '__main__':

    main()

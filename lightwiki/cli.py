"""
# Light Wiki: cli.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Command-line interface.
"""

import argparse
import os
import re
import sys
import warnings

from lightwiki._version import __version__
from lightwiki.configuration import WikiConfiguration
from lightwiki.constants import (
    COMMAND_LINE_ERROR_EXIT_CODE,
    DEFAULT_HOME_ENTRY,
    DEFAULT_SITE_NAME,
    ENTRY_FILE_EXTENSION,
    GENERIC_ERROR_EXIT_CODE,
    HTML_FILE_EXTENSION,
    INDEX_FILE_NAME,
)
from lightwiki.core import Converter, build_standard_converter, entry_to_html
from lightwiki.exceptions import ConversionException
from lightwiki.utilities import is_acceptable_entry_name

DESCRIPTION = '''
    Convert Light Wiki entries (Markdown with math and wiki links) to HTML pages.
'''
ENTRY_ARGUMENT_HELP = '''
    name of entry to be converted
    (can be given as `entry`, `entry.`, or `entry.md`)
'''
ALL_MODE_HELP = '''
    convert all entries in the working directory
'''
SITE_NAME_HELP = '''
    site name of the wiki, used in the title of every page
'''
HOME_HELP = '''
    entry corresponding to the home page (also written to `index.html`)
'''
STRICT_MODE_HELP = '''
    run in strict mode (fail on placeholder tokens left over in a page)
'''
VERBOSE_MODE_HELP = '''
    run in verbose mode (prints the source before and after each rule)
'''


def is_entry_file(file_name: str) -> bool:
    return file_name.endswith(ENTRY_FILE_EXTENSION)


def extract_entry_name(entry_argument: str) -> str:
    """
    Extract the entry name from an entry argument.

    Here, entry argument may be of the form `«entry_name».md`, `«entry_name».`, or `«entry_name»`.
    The path is normalised by resolving `./` and `../`.
    """
    entry_argument = os.path.normpath(entry_argument)
    entry_name = re.sub(pattern=r'[.](md)? \Z', repl='', string=entry_argument, flags=re.VERBOSE)

    return entry_name


def parse_command_line_arguments() -> argparse.Namespace:
    argument_parser = argparse.ArgumentParser(description=DESCRIPTION)
    argument_parser.add_argument(
        '-v', '--version',
        action='version',
        version=f'{argument_parser.prog} version {__version__}',
    )
    argument_parser.add_argument(
        '-a', '--all',
        dest='all_mode_enabled',
        action='store_true',
        help=ALL_MODE_HELP,
    )
    argument_parser.add_argument(
        '-w', '--wiki-name',
        dest='site_name',
        default=DEFAULT_SITE_NAME,
        help=SITE_NAME_HELP,
    )
    argument_parser.add_argument(
        '--home',
        dest='home_entry',
        default=DEFAULT_HOME_ENTRY,
        help=HOME_HELP,
    )
    argument_parser.add_argument(
        '-s', '--strict',
        dest='strict_mode_enabled',
        action='store_true',
        help=STRICT_MODE_HELP,
    )
    argument_parser.add_argument(
        '-x', '--verbose',
        dest='verbose_mode_enabled',
        action='store_true',
        help=VERBOSE_MODE_HELP,
    )
    argument_parser.add_argument(
        'entry_arguments',
        default=[],
        help=ENTRY_ARGUMENT_HELP,
        metavar='entry.md',
        nargs='*',
    )

    return argument_parser.parse_args()


def build_configuration(parsed_arguments: argparse.Namespace) -> WikiConfiguration:
    return WikiConfiguration(
        site_name=parsed_arguments.site_name,
        home_entry=parsed_arguments.home_entry,
        strict_mode_enabled=parsed_arguments.strict_mode_enabled,
        verbose_mode_enabled=parsed_arguments.verbose_mode_enabled,
    )


def generate_html_file(
    entry_argument: str,
    converter: Converter,
    configuration: WikiConfiguration,
    uses_command_line_argument: bool,
    directory: str = os.curdir,
):
    entry_name = extract_entry_name(entry_argument)
    if not is_acceptable_entry_name(entry_name):
        if uses_command_line_argument:
            print(f'error: argument `{entry_argument}`: entry name `{entry_name}` not acceptable', file=sys.stderr)
            sys.exit(COMMAND_LINE_ERROR_EXIT_CODE)
        else:
            warnings.warn(f'warning: entry name `{entry_name}` not acceptable; skipping `{entry_argument}`')
            return

    entry_file_name = os.path.join(directory, f'{entry_name}{ENTRY_FILE_EXTENSION}')
    try:
        with open(entry_file_name, 'r', encoding='utf-8') as entry_file:
            source = entry_file.read()
    except FileNotFoundError as file_not_found_error:
        if uses_command_line_argument:
            print(f'error: argument `{entry_argument}`: file `{entry_file_name}` not found', file=sys.stderr)
            sys.exit(COMMAND_LINE_ERROR_EXIT_CODE)
        else:
            error_message = f'file `{entry_file_name}` not found for entry `{entry_name}`'
            raise FileNotFoundError(error_message) from file_not_found_error

    try:
        html = entry_to_html(converter, source, entry_name, configuration)
    except ConversionException as conversion_exception:
        print(f'{conversion_exception} (in `{entry_file_name}`)', file=sys.stderr)
        sys.exit(GENERIC_ERROR_EXIT_CODE)

    html_file_names = [os.path.join(directory, f'{entry_name}{HTML_FILE_EXTENSION}')]
    if entry_name == configuration.home_entry:
        html_file_names.append(os.path.join(directory, INDEX_FILE_NAME))

    for html_file_name in html_file_names:
        try:
            with open(html_file_name, 'w', encoding='utf-8') as html_file:
                html_file.write(html)
            print(f'success: wrote to `{html_file_name}`')
        except IOError:
            print(f'error: cannot write to `{html_file_name}`', file=sys.stderr)
            sys.exit(GENERIC_ERROR_EXIT_CODE)


def main():
    parsed_arguments = parse_command_line_arguments()
    entry_arguments = parsed_arguments.entry_arguments
    all_mode_enabled = parsed_arguments.all_mode_enabled

    configuration = build_configuration(parsed_arguments)
    converter = build_standard_converter(configuration)

    if all_mode_enabled:
        if len(entry_arguments) > 0:
            print('error: option -a (or --all) cannot be used with positional argument', file=sys.stderr)
            sys.exit(COMMAND_LINE_ERROR_EXIT_CODE)

        entry_file_names = [
            file_name
            for file_name in os.listdir(os.curdir)
            if is_entry_file(file_name) and os.path.isfile(file_name)
        ]
        for entry_file_name in sorted(entry_file_names):
            generate_html_file(entry_file_name, converter, configuration, uses_command_line_argument=False)

    else:
        for entry_argument in entry_arguments:
            generate_html_file(entry_argument, converter, configuration, uses_command_line_argument=True)


if __name__ == '__main__':
    main()

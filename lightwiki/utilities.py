"""
# Light Wiki: utilities.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Common utility functions.
"""

import re

from lightwiki.constants import ENTRY_NAME_MAX_LENGTH, WINDOWS_RESERVED_NAMES


def escape_html(string: str) -> str:
    """
    Escape ampersands, angle brackets, and double quotes.

    Single quotes are left alone, as with the structural parser's own escaping.
    """
    string = re.sub(pattern='&', repl='&amp;', string=string)
    string = re.sub(pattern='<', repl='&lt;', string=string)
    string = re.sub(pattern='>', repl='&gt;', string=string)
    string = re.sub(pattern='"', repl='&quot;', string=string)

    return string


def sanitise_entry_name(entry_name: str) -> str:
    """
    Sanitise an entry name so that it is safe as a file name in the working directory.

    Removes path separators, characters reserved on common file systems, and control characters;
    strips trailing dots and spaces; blanks out names reserved on Windows;
    and truncates to a length safe for common file systems.
    """
    entry_name = re.sub(
        pattern=r'''
            [/?<>\\:*|"]
                |
            [\x00-\x1f\x80-\x9f]
        ''',
        repl='',
        string=entry_name,
        flags=re.VERBOSE,
    )
    if re.fullmatch(pattern=r'[.]+', string=entry_name):
        entry_name = ''

    stem = entry_name.split('.', 1)[0]
    if stem.upper() in WINDOWS_RESERVED_NAMES:
        entry_name = ''

    entry_name = entry_name.rstrip('. ')

    return entry_name.encode()[:ENTRY_NAME_MAX_LENGTH].decode(errors='ignore')


def is_acceptable_entry_name(entry_name: str) -> bool:
    return entry_name != '' and entry_name == sanitise_entry_name(entry_name)

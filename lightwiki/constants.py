"""
# Light Wiki: constants.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Constants.
"""

GENERIC_ERROR_EXIT_CODE = 1
COMMAND_LINE_ERROR_EXIT_CODE = 2
VERBOSE_MODE_DIVIDER_SYMBOL_COUNT = 48

NONCE_BYTE_COUNT = 8
LITERAL_ELEMENT_KINDS = frozenset({
    'code_block',
    'code_inline',
    'fence',
})

DEFAULT_SITE_NAME = 'Light Wiki'
DEFAULT_HOME_ENTRY = 'README'
DEFAULT_THEME_FILE = 'theme.css'
DEFAULT_LANGUAGE = 'ja'
ENTRY_FILE_EXTENSION = '.md'
HTML_FILE_EXTENSION = '.html'
INDEX_FILE_NAME = 'index.html'

KATEX_STYLESHEET_LINK = (
    '<link rel="stylesheet" href="https://cdn.jsdelivr.net/npm/katex@0.15.2/dist/katex.min.css" '
    'integrity="sha384-MlJdn/WNKDGXveldHDdyRP1R4CTHr3FeuDNfhsLPYrq2t0UBkUdK2jyTnXPEK1NQ" '
    'crossorigin="anonymous" />'
)
PAGE_TEMPLATE = '''\
<!DOCTYPE html>
<html lang="{language}">
    <head>
        <meta charset="utf-8">
        <title>{site_name} | {entry_name}</title>
        <meta name="viewport" content="width=device-width, initial-scale=1" />
        <meta name="description" content="A wiki site developed for personal use." />

        {katex_stylesheet_link}
        <link rel="stylesheet" href="/{theme_file}" />

    </head>
    <body>

<main class="container">
{body}</main>

    </body>
</html>'''

WINDOWS_RESERVED_NAMES = frozenset({
    'CON', 'PRN', 'AUX', 'NUL',
    'COM1', 'COM2', 'COM3', 'COM4', 'COM5', 'COM6', 'COM7', 'COM8', 'COM9',
    'LPT1', 'LPT2', 'LPT3', 'LPT4', 'LPT5', 'LPT6', 'LPT7', 'LPT8', 'LPT9',
})
ENTRY_NAME_MAX_LENGTH = 255

MATHML_NAMESPACE = 'http://www.w3.org/1998/Math/MathML'

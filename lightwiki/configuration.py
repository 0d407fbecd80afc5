"""
# Light Wiki: configuration.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Process-wide configuration, built once at start-up and passed to whatever needs it.
"""

from typing import NamedTuple

from lightwiki.constants import DEFAULT_HOME_ENTRY, DEFAULT_LANGUAGE, DEFAULT_SITE_NAME, DEFAULT_THEME_FILE


class ParserOptions(NamedTuple):
    """
    Feature toggles for the structural parser.

    - `tables`: GitHub-style pipe tables
    - `strikethrough`: `~~struck~~` text
    - `html`: recognise raw HTML (otherwise it is treated as text)
    - `typographer`: smart quotes and typographic replacements
    - `breaks`: treat single newlines in paragraphs as hard breaks
    """
    tables: bool = True
    strikethrough: bool = True
    html: bool = False
    typographer: bool = False
    breaks: bool = False


class WikiConfiguration(NamedTuple):
    site_name: str = DEFAULT_SITE_NAME
    home_entry: str = DEFAULT_HOME_ENTRY
    theme_file: str = DEFAULT_THEME_FILE
    language: str = DEFAULT_LANGUAGE
    parser_options: ParserOptions = ParserOptions()
    strict_mode_enabled: bool = False
    verbose_mode_enabled: bool = False

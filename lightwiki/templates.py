"""
# Light Wiki: templates.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Page templates.

A page template is a pure function from the rendered body and page metadata to the final page.
"""

from typing import Callable, NamedTuple

from lightwiki.constants import DEFAULT_LANGUAGE, DEFAULT_THEME_FILE, KATEX_STYLESHEET_LINK, PAGE_TEMPLATE
from lightwiki.utilities import escape_html


class PageMetadata(NamedTuple):
    entry_name: str
    site_name: str


PageTemplate = Callable[[str, PageMetadata], str]


def render_page(
    body: str,
    metadata: PageMetadata,
    language: str = DEFAULT_LANGUAGE,
    theme_file: str = DEFAULT_THEME_FILE,
) -> str:
    return PAGE_TEMPLATE.format(
        language=escape_html(language),
        site_name=escape_html(metadata.site_name),
        entry_name=escape_html(metadata.entry_name),
        katex_stylesheet_link=KATEX_STYLESHEET_LINK,
        theme_file=escape_html(theme_file),
        body=body,
    )


def build_page_template(language: str, theme_file: str) -> PageTemplate:
    def page_template(body: str, metadata: PageMetadata) -> str:
        return render_page(body, metadata, language, theme_file)

    return page_template

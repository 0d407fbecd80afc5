"""
# Light Wiki: core.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Core conversion logic.

A document is converted in four steps:
1. spans matching the rules are sheltered behind placeholder tokens;
2. the placeholder-bearing source is parsed and rendered by the structural parser,
   each rendered piece being tagged LITERAL or RENDERED;
3. tokens are restored, to escaped source text in LITERAL pieces
   and to transform output in RENDERED pieces;
4. the body is handed to the page template.
Conversion is all-or-nothing: any failure raises a ConversionException.
"""

from typing import Iterable, Optional

from lightwiki.configuration import ParserOptions, WikiConfiguration
from lightwiki.parsing import StructuralParserAdapter
from lightwiki.placeholders import Shelter
from lightwiki.rules import Rule, build_standard_rules
from lightwiki.templates import PageMetadata, PageTemplate, build_page_template


class Converter:
    """
    Wiki document to HTML page converter.

    Read-only after construction; every call to `convert` keeps its state to itself,
    so a single converter may be shared between threads.
    """
    _template: PageTemplate
    _rules: tuple[Rule, ...]
    _parser_options: ParserOptions
    _adapter: StructuralParserAdapter
    _strict_mode_enabled: bool
    _verbose_mode_enabled: bool

    def __init__(
        self,
        template: PageTemplate,
        rules: Iterable[Rule] = (),
        parser_options: Optional[ParserOptions] = None,
        strict_mode_enabled: bool = False,
        verbose_mode_enabled: bool = False,
    ):
        if parser_options is None:
            parser_options = ParserOptions()

        self._template = template
        self._rules = tuple(rules)
        self._parser_options = parser_options
        self._adapter = StructuralParserAdapter(parser_options)
        self._strict_mode_enabled = strict_mode_enabled
        self._verbose_mode_enabled = verbose_mode_enabled

    @property
    def rules(self) -> tuple[Rule, ...]:
        return self._rules

    @property
    def parser_options(self) -> ParserOptions:
        return self._parser_options

    def convert_body(self, source: str) -> str:
        """
        Convert a document to its HTML body, without the page template.
        """
        shelter = Shelter(self._verbose_mode_enabled)
        placeholder_source = shelter.extract(source, self._rules)
        fragment = self._adapter.adapt(placeholder_source)
        body = shelter.restore(fragment)
        shelter.ensure_no_leaks(body, self._strict_mode_enabled)

        return body

    def convert(self, source: str, metadata: PageMetadata) -> str:
        """
        Convert a document to an HTML page.
        """
        return self._template(self.convert_body(source), metadata)


def build_standard_converter(configuration: WikiConfiguration) -> Converter:
    return Converter(
        template=build_page_template(configuration.language, configuration.theme_file),
        rules=build_standard_rules(),
        parser_options=configuration.parser_options,
        strict_mode_enabled=configuration.strict_mode_enabled,
        verbose_mode_enabled=configuration.verbose_mode_enabled,
    )


def entry_to_html(converter: Converter, source: str, entry_name: str, configuration: WikiConfiguration) -> str:
    metadata = PageMetadata(entry_name=entry_name, site_name=configuration.site_name)
    return converter.convert(source, metadata)

"""
# Light Wiki: parsing.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Structural parsing.

The source (with sheltered spans already replaced by placeholder tokens)
is parsed by markdown-it, and its token stream is rendered piece by piece.
Each piece is tagged with the context in which its placeholders are to be restored:
- LITERAL for code (inline code, indented and fenced code blocks)
  and for structural markup (tags, attributes, image alt text);
- RENDERED for ordinary text, and for raw HTML when it is recognised at all.
"""

import re
from typing import Iterator, Optional, Sequence

import mdurl
from markdown_it import MarkdownIt
from markdown_it.token import Token

from lightwiki.configuration import ParserOptions
from lightwiki.constants import LITERAL_ELEMENT_KINDS
from lightwiki.contexts import ContextTracker, FragmentPiece, PieceContext
from lightwiki.placeholders import PLACEHOLDER_PATTERN_COMPILED

RAW_HTML_TOKEN_TYPES = frozenset({
    'html_block',
    'html_inline',
})


class PlaceholderAwareMarkdownIt(MarkdownIt):
    """
    MarkdownIt whose link normalisation leaves placeholder tokens intact.

    Ordinarily the code points of a token would be percent-encoded in link destinations,
    and the token would be lost.
    """
    def normalizeLink(self, url: str) -> str:
        if PLACEHOLDER_PATTERN_COMPILED.search(url) is None:
            return super().normalizeLink(url)

        parts = []
        position = 0
        for placeholder_match in PLACEHOLDER_PATTERN_COMPILED.finditer(url):
            parts.append(mdurl.encode(url[position:placeholder_match.start()]))
            parts.append(placeholder_match.group())
            position = placeholder_match.end()
        parts.append(mdurl.encode(url[position:]))

        return ''.join(parts)


def build_markdown_it(parser_options: ParserOptions) -> MarkdownIt:
    markdown_it = PlaceholderAwareMarkdownIt(
        'commonmark',
        {
            'html': parser_options.html,
            'typographer': parser_options.typographer,
            'breaks': parser_options.breaks,
        },
    )
    if parser_options.tables:
        markdown_it.enable('table')
    if parser_options.strikethrough:
        markdown_it.enable('strikethrough')
    if parser_options.typographer:
        markdown_it.enable(['replacements', 'smartquotes'])

    return markdown_it


def iterate_events(tokens: Sequence[Token]) -> Iterator[tuple[Sequence[Token], int]]:
    """
    Iterate over structural events as (sibling tokens, index) pairs.

    The children of inline tokens are flattened in place of their parent.
    """
    for index, token in enumerate(tokens):
        if token.type == 'inline':
            if token.children:
                yield from iterate_events(token.children)
        else:
            yield tokens, index


def compute_element_kind(token: Token) -> str:
    return re.sub(pattern=r'_(?:open|close) \Z', repl='', string=token.type, flags=re.VERBOSE)


class StructuralParserAdapter:
    """
    Adapter driving markdown-it and classifying the pieces it renders.

    Holds only the configured parser, which is not mutated by parsing or rendering,
    so one adapter may serve concurrent conversions.
    """
    _markdown_it: MarkdownIt

    def __init__(self, parser_options: Optional[ParserOptions] = None):
        if parser_options is None:
            parser_options = ParserOptions()

        self._markdown_it = build_markdown_it(parser_options)

    @property
    def markdown_it(self) -> MarkdownIt:
        return self._markdown_it

    def adapt(self, source: str) -> list[FragmentPiece]:
        env: dict = {}
        tokens = self._markdown_it.parse(source, env)

        context_tracker = ContextTracker()
        fragment = list(self.generate_pieces(tokens, env, context_tracker))
        context_tracker.ensure_balanced()

        return fragment

    def generate_pieces(
        self,
        tokens: Sequence[Token],
        env: dict,
        context_tracker: ContextTracker,
    ) -> Iterator[FragmentPiece]:
        for sibling_tokens, index in iterate_events(tokens):
            token = sibling_tokens[index]
            html = self._render_token(sibling_tokens, index, env)

            if token.nesting == 1:
                context_tracker.push(compute_element_kind(token))
                yield FragmentPiece(html, PieceContext.LITERAL)

            elif token.nesting == -1:
                context_tracker.pop(compute_element_kind(token))
                yield FragmentPiece(html, PieceContext.LITERAL)

            elif token.type in LITERAL_ELEMENT_KINDS:
                context_tracker.push(token.type)
                yield FragmentPiece(html, context_tracker.context())
                context_tracker.pop(token.type)

            elif token.type == 'text':
                yield FragmentPiece(html, context_tracker.context())

            elif token.type in RAW_HTML_TOKEN_TYPES:
                yield FragmentPiece(html, PieceContext.RENDERED)

            else:
                yield FragmentPiece(html, PieceContext.LITERAL)

    def _render_token(self, sibling_tokens: Sequence[Token], index: int, env: dict) -> str:
        renderer = self._markdown_it.renderer
        options = self._markdown_it.options
        token_type = sibling_tokens[index].type

        if token_type in renderer.rules:
            return renderer.rules[token_type](sibling_tokens, index, options, env)

        return renderer.renderToken(sibling_tokens, index, options, env)


def adapt(placeholder_source: str, parser_options: Optional[ParserOptions] = None) -> list[FragmentPiece]:
    return StructuralParserAdapter(parser_options).adapt(placeholder_source)

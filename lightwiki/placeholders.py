"""
# Light Wiki: placeholders.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Placeholder sheltering.
"""

import re
import secrets
import warnings
from typing import Iterable, NamedTuple, Optional

from lightwiki.constants import NONCE_BYTE_COUNT, VERBOSE_MODE_DIVIDER_SYMBOL_COUNT
from lightwiki.exceptions import LeakedPlaceholderWarning, TokenCollisionException, TransformFailureException
from lightwiki.contexts import FragmentPiece, PieceContext
from lightwiki.rules import Rule
from lightwiki.utilities import escape_html

MARKER = '\uF8FF'
_RUN_CHARACTER_MIN = '\uE000'
_RUN_CHARACTER_MAX = '\uE0FF'
_RUN_CODE_POINT_MIN = ord(_RUN_CHARACTER_MIN)

PLACEHOLDER_PATTERN_COMPILED = re.compile(
    pattern=f'{MARKER} [{_RUN_CHARACTER_MIN}-{_RUN_CHARACTER_MAX}]* {MARKER}',
    flags=re.VERBOSE,
)


def encode_run_characters(string_bytes: bytes) -> str:
    return ''.join(
        chr(byte + _RUN_CODE_POINT_MIN)
        for byte in string_bytes
    )


class ShelterEntry(NamedTuple):
    token: str
    literal_text: str
    rendered_text: str


class Shelter:
    """
    Per-conversion store of sheltered spans.

    A span matched by a rule is replaced by a placeholder token before structural parsing,
    lest the parser reinterpret it. Tokens are of the form `«marker»«nonce»«index»«marker»`,
    where «marker» is `U+F8FF`, and «nonce» and «index» are runs of code points
    between `U+E000` and `U+E0FF` each representing a byte.
    «nonce» is drawn afresh for every Shelter, so tokens from one conversion
    cannot be predicted by the document being converted.
    None of these code points are altered by HTML escaping,
    nor are they punctuation or whitespace as far as the parser is concerned.

    After parsing, each token is restored according to the context of the piece it landed in:
    to the escaped source text in a literal piece, or to the transform output in a rendered piece.
    """
    _nonce_prefix: str
    _token_pattern: re.Pattern
    _entry_from_token: dict[str, 'ShelterEntry']
    _verbose_mode_enabled: bool

    def __init__(self, verbose_mode_enabled: bool = False, nonce: Optional[bytes] = None):
        if nonce is None:
            nonce = secrets.token_bytes(NONCE_BYTE_COUNT)

        self._nonce_prefix = MARKER + encode_run_characters(nonce)
        self._token_pattern = re.compile(
            pattern=f'{re.escape(self._nonce_prefix)} [{_RUN_CHARACTER_MIN}-{_RUN_CHARACTER_MAX}]* {MARKER}',
            flags=re.VERBOSE,
        )
        self._entry_from_token = {}
        self._verbose_mode_enabled = verbose_mode_enabled

    @property
    def entries(self) -> list['ShelterEntry']:
        return list(self._entry_from_token.values())

    def extract(self, source: str, rules: Iterable[Rule]) -> str:
        """
        Replace every rule match with a placeholder token, rule by rule.

        Each rule scans the output of the rules before it.
        A match overlapping a token already allocated is left as is,
        and scanning resumes one character after its start.
        """
        if self._nonce_prefix in source:
            raise TokenCollisionException(self._nonce_prefix)

        string = source
        for rule in rules:
            string_before = string
            string = self._extract_rule(string, rule)

            if self._verbose_mode_enabled:
                self._print_verbose(rule.name, string_before, string)

        return string

    def _extract_rule(self, string: str, rule: Rule) -> str:
        token_spans = [
            token_match.span()
            for token_match in self._token_pattern.finditer(string)
        ]

        output_strings = []
        copied_index = 0
        search_index = 0

        while search_index <= len(string):
            match = rule.pattern.search(string, search_index)
            if match is None:
                break

            start, end = match.span()
            if any(start < token_end and token_start < end for token_start, token_end in token_spans):
                # a later match may still start inside the rejected one
                search_index = start + 1
                continue

            try:
                rendered_text = rule.transform(match)
            except Exception as exception:
                raise TransformFailureException(rule.name, match.group()) from exception

            if self._nonce_prefix in rendered_text:
                raise TokenCollisionException(self._nonce_prefix)

            output_strings.append(string[copied_index:start])
            output_strings.append(self._allocate(match.group(), rendered_text))
            copied_index = end
            search_index = end if end > start else end + 1

        output_strings.append(string[copied_index:])

        return ''.join(output_strings)

    def _allocate(self, literal_text: str, rendered_text: str) -> str:
        index = len(self._entry_from_token)
        token = f'{self._nonce_prefix}{encode_run_characters(str(index).encode())}{MARKER}'
        if token in self._entry_from_token:
            raise TokenCollisionException(token)

        self._entry_from_token[token] = ShelterEntry(token, literal_text, rendered_text)

        return token

    def restore(self, fragment: Iterable[FragmentPiece]) -> str:
        """
        Restore tokens piece by piece according to each piece's context.
        """
        return ''.join(
            self.restore_piece(piece)
            for piece in fragment
        )

    def restore_piece(self, piece: FragmentPiece) -> str:
        if piece.context is PieceContext.LITERAL:
            def substitute(token_match: re.Match) -> str:
                return escape_html(self._look_up(token_match.group()).literal_text)
        else:
            def substitute(token_match: re.Match) -> str:
                return self._look_up(token_match.group()).rendered_text

        return self._token_pattern.sub(substitute, piece.html)

    def _look_up(self, token: str) -> 'ShelterEntry':
        try:
            return self._entry_from_token[token]
        except KeyError:
            raise TokenCollisionException(token)

    def ensure_no_leaks(self, body: str, strict_mode_enabled: bool):
        if self._nonce_prefix not in body:
            return

        if strict_mode_enabled:
            raise TokenCollisionException(self._nonce_prefix)

        warnings.warn(
            'warning: placeholder token left over after restoration',
            LeakedPlaceholderWarning,
        )

    @staticmethod
    def _print_verbose(rule_name: str, string_before: str, string_after: str):
        if string_before == string_after:
            no_change_indicator = ' (no change)'
        else:
            no_change_indicator = ''

        try:
            print('<' * VERBOSE_MODE_DIVIDER_SYMBOL_COUNT + f' BEFORE #{rule_name}')
            print(string_before)
            print('=' * VERBOSE_MODE_DIVIDER_SYMBOL_COUNT + no_change_indicator)
            print(string_after)
            print('>' * VERBOSE_MODE_DIVIDER_SYMBOL_COUNT + f' AFTER #{rule_name}')
            print('\n\n\n\n')
        except UnicodeEncodeError:
            # caused by Private Use Area code points used for placeholders
            warnings.warn(
                'warning: bad print due to non-Unicode terminal encoding. '
                'Try setting the `PYTHONIOENCODING` environment variable to `utf-8`.'
            )

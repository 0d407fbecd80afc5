"""
# Light Wiki: contexts.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Structural context tracking.
"""

import enum
from typing import NamedTuple

from lightwiki.constants import LITERAL_ELEMENT_KINDS
from lightwiki.exceptions import UnbalancedStructureException


class PieceContext(enum.Enum):
    LITERAL = 'literal'
    RENDERED = 'rendered'


class FragmentPiece(NamedTuple):
    """
    A piece of rendered HTML, tagged with the context its placeholders are to be restored in.
    """
    html: str
    context: PieceContext


class ContextTracker:
    """
    Stack of currently open structural elements.

    Element kinds are pushed on every opening event and popped on the matching closing event.
    An unmatched closing event, or an element left open at the end of the document,
    is a violation of the parser's own nesting and is never the fault of the document.
    """
    _element_kinds: list[str]

    def __init__(self):
        self._element_kinds = []

    @property
    def depth(self) -> int:
        return len(self._element_kinds)

    def push(self, element_kind: str):
        self._element_kinds.append(element_kind)

    def pop(self, element_kind: str):
        if not self._element_kinds:
            raise UnbalancedStructureException(element_kind)

        open_element_kind = self._element_kinds.pop()
        if open_element_kind != element_kind:
            raise UnbalancedStructureException(element_kind)

    def in_literal(self) -> bool:
        return bool(self._element_kinds) and self._element_kinds[-1] in LITERAL_ELEMENT_KINDS

    def context(self) -> PieceContext:
        if self.in_literal():
            return PieceContext.LITERAL

        return PieceContext.RENDERED

    def ensure_balanced(self):
        if self._element_kinds:
            raise UnbalancedStructureException(self._element_kinds[-1])

"""
# Light Wiki: rules.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Sheltering rules.

A rule pairs a pattern with a transform producing the replacement for a match.
Matches are sheltered from the structural parser (see `placeholders.py`),
and the transform output is put back in place afterwards.
"""

import abc
import re
from typing import Callable, Union
from urllib.parse import quote

from latex2mathml.converter import convert as latex_to_mathml

from lightwiki.constants import MATHML_NAMESPACE
from lightwiki.utilities import escape_html


class Rule(abc.ABC):
    """
    Base class for a sheltering rule.

    Rules are immutable once constructed.
    A transform is a pure function of its match.
    """
    _name: str
    _pattern: re.Pattern

    def __init__(self, name: str, pattern: Union[str, re.Pattern], flags: int = 0):
        self._name = name
        if isinstance(pattern, re.Pattern):
            self._pattern = pattern
        else:
            self._pattern = re.compile(pattern, flags=flags)

    @property
    def name(self) -> str:
        return self._name

    @property
    def pattern(self) -> re.Pattern:
        return self._pattern

    @abc.abstractmethod
    def transform(self, match: re.Match) -> str:
        """
        Produce the rendered replacement for a match.
        """
        raise NotImplementedError

    def __repr__(self) -> str:
        return f'{type(self).__name__}({self._name!r}, {self._pattern.pattern!r})'


class RegexRule(Rule):
    """
    A rule whose transform is an arbitrary callable taking the match.
    """
    _transform_function: Callable[[re.Match], str]

    def __init__(
        self,
        name: str,
        pattern: Union[str, re.Pattern],
        transform_function: Callable[[re.Match], str],
        flags: int = 0,
    ):
        super().__init__(name, pattern, flags)
        self._transform_function = transform_function

    def transform(self, match: re.Match) -> str:
        return self._transform_function(match)


class MathRule(Rule):
    """
    A rule for typesetting TeX math as MathML.

    The pattern must capture the TeX source in the group `content`.
    """
    _display_mode_enabled: bool

    def __init__(self, name: str, pattern: Union[str, re.Pattern], display_mode_enabled: bool):
        super().__init__(name, pattern, flags=re.VERBOSE)
        self._display_mode_enabled = display_mode_enabled

    @property
    def display_mode_enabled(self) -> bool:
        return self._display_mode_enabled

    def transform(self, match: re.Match) -> str:
        display = 'block' if self._display_mode_enabled else 'inline'
        content = match.group('content')

        # nothing to typeset
        if content.strip() == '':
            return f'<math xmlns="{MATHML_NAMESPACE}" display="{display}"></math>'

        return latex_to_mathml(content, xmlns=MATHML_NAMESPACE, display=display)


class WikiLinkRule(Rule):
    """
    A rule for links to other entries of the wiki.

    `[[ «entry_name» ]]` becomes an anchor to `./«entry_name»` (percent-encoded),
    with whitespace around «entry_name» ignored.
    """
    def __init__(self, name: str = 'wiki-link'):
        super().__init__(name, r'\[\[ \s* (?P<entry_name> .*? ) \s* \]\]', flags=re.VERBOSE)

    def transform(self, match: re.Match) -> str:
        entry_name = match.group('entry_name')
        encoded_entry_name = quote(entry_name, safe='')

        return f'<a href="./{encoded_entry_name}" class="wiki-link">{escape_html(entry_name)}</a>'


def build_standard_rules() -> tuple[Rule, ...]:
    """
    Build the standard rules, in order of precedence.

    Math comes before links, so that `[[` inside math is never taken for a link.
    """
    return (
        MathRule('display-math-dollars', r'\$\$ (?P<content> [\s\S]*? ) \$\$', display_mode_enabled=True),
        MathRule('display-math-brackets', r'\\\[ (?P<content> [\s\S]*? ) \\\]', display_mode_enabled=True),
        MathRule('inline-math-parentheses', r'\\\( (?P<content> [\s\S]*? ) \\\)', display_mode_enabled=False),
        WikiLinkRule(),
    )

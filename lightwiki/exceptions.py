"""
# Light Wiki: exceptions.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Exception classes.
"""


class ConversionException(Exception):
    pass


class TransformFailureException(ConversionException):
    _rule_name: str
    _matched_text: str

    def __init__(self, rule_name: str, matched_text: str):
        super().__init__(f'error: rule `{rule_name}` failed to transform `{matched_text}`')
        self._rule_name = rule_name
        self._matched_text = matched_text

    @property
    def rule_name(self) -> str:
        return self._rule_name

    @property
    def matched_text(self) -> str:
        return self._matched_text


class TokenCollisionException(ConversionException):
    _token: str

    def __init__(self, token: str):
        super().__init__('error: placeholder token collides with document content')
        self._token = token

    @property
    def token(self) -> str:
        return self._token


class UnbalancedStructureException(ConversionException):
    _element_kind: str

    def __init__(self, element_kind: str):
        super().__init__(f'error: unbalanced structural element `{element_kind}`')
        self._element_kind = element_kind

    @property
    def element_kind(self) -> str:
        return self._element_kind


class LeakedPlaceholderWarning(UserWarning):
    pass

"""
# Light Wiki: test_placeholders.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Perform unit testing for `placeholders.py`.
"""

import re
import unittest

from lightwiki.contexts import FragmentPiece, PieceContext
from lightwiki.exceptions import LeakedPlaceholderWarning, TokenCollisionException, TransformFailureException
from lightwiki.placeholders import PLACEHOLDER_PATTERN_COMPILED, Shelter, ShelterEntry, encode_run_characters
from lightwiki.rules import RegexRule

TOKEN_0 = '\uF8FF\uE000\uE030\uF8FF'
TOKEN_1 = '\uF8FF\uE000\uE031\uF8FF'


class TestPlaceholders(unittest.TestCase):
    def test_encode_run_characters(self):
        self.assertEqual(encode_run_characters(b''), '')
        self.assertEqual(encode_run_characters(b'$'), '\uE024')
        self.assertEqual(encode_run_characters(b'\x00\xff'), '\uE000\uE0FF')
        self.assertEqual(encode_run_characters('\u00A3'.encode()), '\uE0C2\uE0A3')

    def test_placeholder_pattern(self):
        self.assertIsNotNone(PLACEHOLDER_PATTERN_COMPILED.fullmatch(TOKEN_0))
        self.assertIsNotNone(PLACEHOLDER_PATTERN_COMPILED.fullmatch('\uF8FF\uF8FF'))
        self.assertIsNone(PLACEHOLDER_PATTERN_COMPILED.fullmatch('abc'))

    def test_shelter_extract(self):
        shelter = Shelter(nonce=b'\x00')
        rule = RegexRule('dollar', r'\$', lambda match: '<b>D</b>')

        self.assertEqual(shelter.extract('a$b$', [rule]), f'a{TOKEN_0}b{TOKEN_1}')
        self.assertEqual(
            shelter.entries,
            [
                ShelterEntry(TOKEN_0, '$', '<b>D</b>'),
                ShelterEntry(TOKEN_1, '$', '<b>D</b>'),
            ],
        )

    def test_shelter_extract_no_rules(self):
        shelter = Shelter(nonce=b'\x00')

        self.assertEqual(shelter.extract('[[x]] $$y$$', []), '[[x]] $$y$$')
        self.assertEqual(shelter.entries, [])

    def test_shelter_extract_rule_order(self):
        rule_a = RegexRule('a', 'ab', lambda match: 'A')
        rule_b = RegexRule('b', 'bc', lambda match: 'B')

        shelter = Shelter(nonce=b'\x00')
        self.assertEqual(shelter.extract('abc', [rule_a, rule_b]), f'{TOKEN_0}c')

        shelter = Shelter(nonce=b'\x00')
        self.assertEqual(shelter.extract('abc', [rule_b, rule_a]), f'a{TOKEN_0}')

    def test_shelter_extract_leaves_tokens_alone(self):
        math_rule = RegexRule('math', r'\$\$ [\s\S]*? \$\$', lambda match: 'M', flags=re.VERBOSE)
        link_rule = RegexRule('link', r'\[\[ .*? \]\]', lambda match: 'L', flags=re.VERBOSE)

        shelter = Shelter(nonce=b'\x00')
        self.assertEqual(
            shelter.extract('[[a $$x$$ b]]', [math_rule, link_rule]),
            f'[[a {TOKEN_0} b]]',
        )
        self.assertEqual(len(shelter.entries), 1)

    def test_shelter_extract_rescans_after_overlap(self):
        math_rule = RegexRule('math', r'\$\$ [\s\S]*? \$\$', lambda match: 'M', flags=re.VERBOSE)
        link_rule = RegexRule('link', r'\[\[ .*? \]\]', lambda match: 'L', flags=re.VERBOSE)
        parentheses_rule = RegexRule('parentheses', r'\( [^\n]*? \)', lambda match: 'P', flags=re.VERBOSE)

        shelter = Shelter(nonce=b'\x00')
        self.assertEqual(
            shelter.extract('[[Broken $$x$$ and then [[Other]]', [math_rule, link_rule]),
            f'[[Broken {TOKEN_0} and then {TOKEN_1}',
        )
        self.assertEqual(shelter.entries[1], ShelterEntry(TOKEN_1, '[[Other]]', 'L'))

        shelter = Shelter(nonce=b'\x00')
        self.assertEqual(
            shelter.extract('(a $$x$$ (b)', [math_rule, parentheses_rule]),
            f'(a {TOKEN_0} {TOKEN_1}',
        )
        self.assertEqual(shelter.entries[1], ShelterEntry(TOKEN_1, '(b)', 'P'))

    def test_shelter_extract_empty_matches(self):
        shelter = Shelter(nonce=b'\x00')
        rule = RegexRule('boundary', r'\b', lambda match: '|')

        self.assertEqual(shelter.extract('ab', [rule]), f'{TOKEN_0}ab{TOKEN_1}')

    def test_shelter_extract_transform_failure(self):
        rule = RegexRule('broken', '!!', lambda match: str(1 / 0))
        shelter = Shelter()

        with self.assertRaises(TransformFailureException) as context_manager:
            shelter.extract('fine!!', [rule])

        self.assertEqual(context_manager.exception.rule_name, 'broken')
        self.assertEqual(context_manager.exception.matched_text, '!!')
        self.assertIsInstance(context_manager.exception.__cause__, ZeroDivisionError)

    def test_shelter_extract_token_collision(self):
        shelter = Shelter(nonce=b'\x00')
        self.assertRaises(TokenCollisionException, shelter.extract, f'forged {TOKEN_0}', [])

        rule = RegexRule('forger', 'x', lambda match: TOKEN_1)
        shelter = Shelter(nonce=b'\x00')
        self.assertRaises(TokenCollisionException, shelter.extract, 'x', [rule])

    def test_shelter_nonces_differ(self):
        rule = RegexRule('x', 'x', lambda match: 'X')
        self.assertNotEqual(Shelter().extract('x', [rule]), Shelter().extract('x', [rule]))

    def test_shelter_restore(self):
        shelter = Shelter(nonce=b'\x00')
        rule = RegexRule('angled', r'<\$>', lambda match: '<b>D</b>')
        shelter.extract('<$><$>', [rule])

        self.assertEqual(
            shelter.restore([
                FragmentPiece('<code>', PieceContext.LITERAL),
                FragmentPiece(TOKEN_0, PieceContext.LITERAL),
                FragmentPiece('</code> and ', PieceContext.LITERAL),
                FragmentPiece(f'{TOKEN_1} or {TOKEN_0}', PieceContext.RENDERED),
            ]),
            '<code>&lt;$&gt;</code> and <b>D</b> or <b>D</b>',
        )

    def test_shelter_restore_unknown_token(self):
        shelter = Shelter(nonce=b'\x00')
        piece = FragmentPiece('\uF8FF\uE000\uE039\uF8FF', PieceContext.RENDERED)

        self.assertRaises(TokenCollisionException, shelter.restore, [piece])

    def test_shelter_restore_foreign_token(self):
        shelter = Shelter(nonce=b'\x00')
        piece = FragmentPiece('\uF8FF\uE001\uE030\uF8FF', PieceContext.RENDERED)

        self.assertEqual(shelter.restore([piece]), '\uF8FF\uE001\uE030\uF8FF')

    def test_shelter_ensure_no_leaks(self):
        shelter = Shelter(nonce=b'\x00')

        shelter.ensure_no_leaks('<p>clean</p>', strict_mode_enabled=True)
        self.assertRaises(TokenCollisionException, shelter.ensure_no_leaks, f'<p>{TOKEN_0}</p>', True)
        with self.assertWarns(LeakedPlaceholderWarning):
            shelter.ensure_no_leaks(f'<p>{TOKEN_0}</p>', strict_mode_enabled=False)


if __name__ == '__main__':
    unittest.main()

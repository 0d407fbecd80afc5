"""
# Light Wiki: test_utilities.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Perform unit testing for `utilities.py`.
"""

import unittest

from markdown_it.common.utils import escapeHtml

from lightwiki.utilities import escape_html, is_acceptable_entry_name, sanitise_entry_name


class TestUtilities(unittest.TestCase):
    def test_escape_html(self):
        self.assertEqual(escape_html(''), '')
        self.assertEqual(escape_html('plain'), 'plain')
        self.assertEqual(escape_html('<a href="x">&amp;</a>'), '&lt;a href=&quot;x&quot;&gt;&amp;amp;&lt;/a&gt;')
        self.assertEqual(escape_html("it's"), "it's")

        for string in ['a < b', '"&"', "'quoted'"]:
            self.assertEqual(escape_html(string), escapeHtml(string))

    def test_sanitise_entry_name(self):
        self.assertEqual(sanitise_entry_name('README'), 'README')
        self.assertEqual(sanitise_entry_name('Page Name'), 'Page Name')
        self.assertEqual(sanitise_entry_name('日本語'), '日本語')
        self.assertEqual(sanitise_entry_name('../etc/passwd'), '..etcpasswd')
        self.assertEqual(sanitise_entry_name('a\\b:c*d?e"f<g>h|i'), 'abcdefghi')
        self.assertEqual(sanitise_entry_name('tab\there'), 'tabhere')
        self.assertEqual(sanitise_entry_name('..'), '')
        self.assertEqual(sanitise_entry_name('trailing. '), 'trailing')
        self.assertEqual(sanitise_entry_name('CON'), '')
        self.assertEqual(sanitise_entry_name('com1.txt'), '')
        self.assertEqual(sanitise_entry_name('CONSOLE'), 'CONSOLE')
        self.assertEqual(len(sanitise_entry_name('x' * 300)), 255)

    def test_is_acceptable_entry_name(self):
        self.assertTrue(is_acceptable_entry_name('README'))
        self.assertTrue(is_acceptable_entry_name('Page Name'))
        self.assertFalse(is_acceptable_entry_name(''))
        self.assertFalse(is_acceptable_entry_name('../secret'))
        self.assertFalse(is_acceptable_entry_name('dir/page'))
        self.assertFalse(is_acceptable_entry_name('nul'))


if __name__ == '__main__':
    unittest.main()

"""
Tests for `ordtable.version`.
"""

import unittest

from ordtable.version import VERSION, VERSION_STRING, _version_tuple


class TestVersion(unittest.TestCase):
    """
    Tests for the `ordtable.version` module.
    """

    def test_version_tuple(self):
        """
        Test that the version tuple is derived from the version string.
        """
        self.assertEqual(_version_tuple(VERSION_STRING), VERSION)
        self.assertEqual((1, 2, 3), _version_tuple("1.2.3"))
        self.assertEqual((1, 1, "rc1"), _version_tuple("1.1rc1"))
        with self.assertRaises(ValueError):
            _version_tuple("1.x")

"""
Tests for `ordtable.iteration`.
"""

import unittest

from ordtable import (
    InvalidArgument,
    KeysSnapshot,
    OrderedMap,
    StaleCursorError,
    iterkeys,
    keys,
    pairs,
    reviterkeys,
    revpairs,
)


def _sample_map():
    m = OrderedMap()
    for key, value in (("b", 2), ("c", 3), ("a", 1), ("d", 4)):
        m[key] = value
    return m


class TestTraversals(unittest.TestCase):
    """
    Tests for the traversal functions.
    """

    def test_forward(self):
        """
        Test that forward traversals follow insertion order.
        """
        m = _sample_map()
        self.assertEqual(["b", "c", "a", "d"], list(iterkeys(m)))
        self.assertEqual(
            [("b", 2), ("c", 3), ("a", 1), ("d", 4)], list(pairs(m))
        )

    def test_reverse_symmetry(self):
        """
        Test that backward traversals yield the exact reverse of the forward
        ones.
        """
        m = _sample_map()
        self.assertEqual(list(reversed(list(pairs(m)))), list(revpairs(m)))
        self.assertEqual(
            list(reversed(list(iterkeys(m)))), list(reviterkeys(m))
        )
        self.assertEqual(list(revpairs(m)), list(reversed(pairs(m))))
        self.assertEqual(list(iterkeys(m)), list(reversed(reviterkeys(m))))

    def test_direction_and_mode(self):
        """
        Test that each entry point creates a traversal with the right
        direction and value mode, and that reversing a traversal only flips
        the direction.
        """
        m = OrderedMap(a=1)
        for function, reverse, with_values, name in (
            (pairs, False, True, "pairs"),
            (iterkeys, False, False, "iterkeys"),
            (revpairs, True, True, "revpairs"),
            (reviterkeys, True, False, "reviterkeys"),
        ):
            with self.subTest(function=name):
                traversal = function(m)
                self.assertIs(reverse, traversal.reverse)
                self.assertIs(with_values, traversal.with_values)
                self.assertEqual(
                    "<%s of OrderedMap([('a', 1)])>" % name, repr(traversal)
                )
        m["b"] = 2
        self.assertEqual([("b", 2), ("a", 1)], list(reversed(pairs(m))))
        self.assertEqual(["a", "b"], list(reversed(reviterkeys(m))))

    def test_empty(self):
        """
        Test traversing an empty map.
        """
        m = OrderedMap()
        for traversal in (pairs(m), iterkeys(m), revpairs(m), reviterkeys(m)):
            self.assertEqual([], list(traversal))
            self.assertEqual(0, len(traversal))
        self.assertEqual(KeysSnapshot([], 0), keys(m))

    def test_keys_snapshot(self):
        """
        Test that ``keys`` is eager and not affected by later changes.
        """
        m = _sample_map()
        snapshot = keys(m)
        m["e"] = 5
        m["b"] = None
        self.assertEqual(["b", "c", "a", "d"], snapshot.ordered_sequence)
        self.assertEqual(4, snapshot.length)
        self.assertEqual(["c", "a", "d", "e"], keys(m).ordered_sequence)

    def test_restartable(self):
        """
        Test that a traversal can be iterated more than once and reflects
        the current content of the map.
        """
        m = _sample_map()
        traversal = iterkeys(m)
        self.assertEqual(["b", "c", "a", "d"], list(traversal))
        self.assertEqual(["b", "c", "a", "d"], list(traversal))
        m["a"] = None
        self.assertEqual(["b", "c", "d"], list(traversal))
        self.assertEqual(3, len(traversal))

    def test_independent_walks(self):
        """
        Test that two walks over the same map do not interfere.
        """
        m = _sample_map()
        first = iter(pairs(m))
        second = iter(revpairs(m))
        self.assertEqual(("b", 2), next(first))
        self.assertEqual(("d", 4), next(second))
        self.assertEqual(("c", 3), next(first))
        self.assertEqual(("a", 1), next(second))
        third = iter(pairs(m))
        self.assertEqual(("b", 2), next(third))
        self.assertEqual([("a", 1), ("d", 4)], list(first))

    def test_values_are_current(self):
        """
        Test that pair traversals read values at the time of the step.
        """
        m = _sample_map()
        walk = iter(pairs(m))
        next(walk)
        m["c"] = 30
        self.assertEqual(("c", 30), next(walk))

    def test_delete_current_key(self):
        """
        Test that removing the key a walk is positioned on stops that walk
        with a `StaleCursorError`.
        """
        m = _sample_map()
        walk = iter(iterkeys(m))
        self.assertEqual("b", next(walk))
        self.assertEqual("c", next(walk))
        del m["c"]
        with self.assertRaises(StaleCursorError) as cm:
            next(walk)
        self.assertEqual("c", cm.exception.key)
        self.assertIsInstance(cm.exception, InvalidArgument)
        # A new walk is not affected.
        self.assertEqual(["b", "a", "d"], list(iterkeys(m)))

    def test_delete_current_key_reverse(self):
        """
        Test the `StaleCursorError` for a backward walk.
        """
        m = _sample_map()
        walk = iter(revpairs(m))
        self.assertEqual(("d", 4), next(walk))
        m["d"] = None
        with self.assertRaises(StaleCursorError):
            next(walk)

    def test_delete_other_key(self):
        """
        Test that removing a key other than the current one does not disturb
        a walk.
        """
        m = _sample_map()
        walk = iter(iterkeys(m))
        self.assertEqual("b", next(walk))
        del m["a"]
        self.assertEqual(["c", "d"], list(walk))

    def test_insert_during_walk(self):
        """
        Test that inserting keys during a walk does not raise.

        Whether a forward walk yields keys inserted after it started is
        undefined. This test only checks that the keys that were present all
        along are yielded in order.
        """
        m = _sample_map()
        seen = []
        for key in iterkeys(m):
            seen.append(key)
            if key == "b":
                m["e"] = 5
        self.assertEqual(["b", "c", "a", "d"], seen[:4])

    def test_invalid_argument(self):
        """
        Test that every entry point rejects objects that are not maps.
        """
        for function in (keys, pairs, iterkeys, revpairs, reviterkeys):
            for obj in ({}, [], None):
                with self.subTest(function=function.__name__, obj=obj):
                    with self.assertRaises(InvalidArgument):
                        function(obj)

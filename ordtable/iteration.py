"""
Traversals over an `~ordtable.table.OrderedMap`.

There are five entry points:

``pairs(m)``
    ``(key, value)`` tuples from front to back.
``iterkeys(m)``
    keys from front to back.
``revpairs(m)``
    ``(key, value)`` tuples from back to front.
``reviterkeys(m)``
    keys from back to front.
``keys(m)``
    an eager `KeysSnapshot` holding the keys in order and their number.

The first four return a `Traversal`. A traversal is bound to the map itself,
not to a copy of its content, and every call to ``iter()`` starts a new walk.
A walk does not keep a reference to a node between steps. Instead, each step
looks up the node of the key yielded last and follows its link. This way,
any number of walks over the same map can be in progress at the same time.

The price for this is that a walk cannot continue once the key it is
positioned on has been removed. In this case, the next step raises a
`~ordtable.errors.StaleCursorError`. Inserting keys while a walk is in
progress does not raise, but whether a forward walk yields the new keys is
undefined and must not be relied upon.

If only the keys are needed, ``iterkeys``, ``reviterkeys`` and ``keys`` should
be preferred: they never look up values, while the pair traversals do one
value lookup per step.
"""

import logging
import typing

from ordtable.errors import InvalidArgument, StaleCursorError
from ordtable.order_track import Node, OrderTrack

# Logger used by this module.
logger = logging.getLogger(__name__)

# Marker for a walk that has not yielded anything yet.
_BEFORE_START = object()


class KeysSnapshot(typing.NamedTuple):
    """
    Keys of a map in insertion order, as returned by `keys`.
    """

    ordered_sequence: typing.List[typing.Any]
    """
    Keys in insertion order at the time the snapshot was taken.
    """

    length: int
    """
    Number of keys in ``ordered_sequence``.
    """


class Traversal:
    """
    Lazy, restartable walk over the keys (and optionally values) of a map.

    Instances are created by `pairs`, `iterkeys`, `revpairs`, and
    `reviterkeys`.
    """

    def __init__(self, table, reverse: bool, with_values: bool):
        self._track = _order_track_of(table)
        self._table = table
        self._reverse = reverse
        self._with_values = with_values

    @property
    def reverse(self) -> bool:
        """
        ``True`` if this traversal walks from back to front.
        """
        return self._reverse

    @property
    def with_values(self) -> bool:
        """
        ``True`` if this traversal yields ``(key, value)`` pairs instead of
        keys.
        """
        return self._with_values

    def __iter__(self):
        values = self._table._values
        key = _BEFORE_START
        while True:
            node = _step(self._track, key, self._reverse)
            if node is None:
                return
            key = node.key
            if self._with_values:
                yield key, values.get(key)
            else:
                yield key

    def __len__(self) -> int:
        return self._track.length

    def __reversed__(self):
        return iter(
            Traversal(self._table, not self._reverse, self._with_values)
        )

    def __repr__(self):
        if self._reverse:
            name = "revpairs" if self._with_values else "reviterkeys"
        else:
            name = "pairs" if self._with_values else "iterkeys"
        return "<%s of %r>" % (name, self._table)


def iterkeys(table) -> Traversal:
    """
    Return a traversal yielding the keys of ``table`` from front to back.

    :param table:
        `~ordtable.table.OrderedMap` to be traversed.
    :return:
        lazy, restartable iterable over the keys.
    """
    return Traversal(table, reverse=False, with_values=False)


def keys(table) -> KeysSnapshot:
    """
    Return the keys of ``table`` in insertion order.

    Unlike the other traversals, the keys are collected immediately, so the
    result is not affected by later changes to the map.

    :param table:
        `~ordtable.table.OrderedMap` from which the keys are collected.
    :return:
        snapshot of the keys and their number.
    """
    track = _order_track_of(table)
    ordered_sequence = []
    node = track.front
    while node is not None:
        ordered_sequence.append(node.key)
        node = node.next
    return KeysSnapshot(ordered_sequence, len(ordered_sequence))


def pairs(table) -> Traversal:
    """
    Return a traversal yielding ``(key, value)`` pairs of ``table`` from front
    to back.
    """
    return Traversal(table, reverse=False, with_values=True)


def reviterkeys(table) -> Traversal:
    """
    Return a traversal yielding the keys of ``table`` from back to front.
    """
    return Traversal(table, reverse=True, with_values=False)


def revpairs(table) -> Traversal:
    """
    Return a traversal yielding ``(key, value)`` pairs of ``table`` from back
    to front.
    """
    return Traversal(table, reverse=True, with_values=True)


def _order_track_of(table) -> OrderTrack:
    """
    Return the order track of ``table``, raising an `InvalidArgument` if
    ``table`` does not have one.
    """
    track = getattr(table, "_track", None)
    if not isinstance(track, OrderTrack):
        raise InvalidArgument(
            "Expected an object of type OrderedMap, but got an object of type "
            "'%s'." % type(table).__name__
        )
    return track


def _step(track: OrderTrack, key, reverse: bool) -> typing.Optional[Node]:
    """
    Return the node following (or preceding, if ``reverse`` is set) the node
    for ``key``.

    If ``key`` is `_BEFORE_START`, the front (or back) node is returned.
    ``None`` is returned when the end of the track has been reached.
    """
    if key is _BEFORE_START:
        return track.back if reverse else track.front
    node = track.node_for(key)
    if node is None:
        logger.debug(
            "Traversal cannot continue because key %r has been removed.", key
        )
        raise StaleCursorError(
            "Key %r has been removed from the map while it was being "
            "traversed." % (key,),
            key=key,
        )
    return node.prev if reverse else node.next

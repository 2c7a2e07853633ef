"""
Provides an insertion-order preserving map.

`OrderedMap` combines a `~ordtable.value_store.ValueStore` for looking up
values with an `~ordtable.order_track.OrderTrack` remembering the order in
which keys were inserted. Every modification goes through `OrderedMap.set`
(or `OrderedMap.delete`), which keeps both structures consistent.

Example::

    m = OrderedMap()
    m["One"] = True
    m["Two"] = True
    m["Three"] = True
    m["Two"] = True
    for key, value in pairs(m):
        print(key, value)

This prints the keys in the order ``One``, ``Two``, ``Three``: setting a key
that is already present replaces its value but does not move it.

Which values remove a key when passed to ``set`` is decided by the
`~ordtable.config.DeletionSignal` of the map. By default, only ``None``
removes a key, so ``m["Two"] = None`` is the same as ``m.delete("Two")``.
"""

import collections.abc
import typing

from ordtable.config import DeletionSignal, table_options
from ordtable.errors import InvalidArgument
from ordtable.iteration import iterkeys, reviterkeys
from ordtable.order_track import OrderTrack
from ordtable.value_store import ValueStore

KeyT = typing.TypeVar("KeyT")
ValueT = typing.TypeVar("ValueT")


class OrderedMap(
    collections.abc.MutableMapping, typing.Generic[KeyT, ValueT]
):  # pylint: disable=E1136
    """
    Mapping that iterates over its keys in the order they were first
    inserted.

    Apart from the methods specific to this class, it supports everything a
    ``MutableMapping`` supports. All of these operations are routed through
    `set`, so the deletion signal of the map applies to them as well (for
    example when calling ``update``).

    Reading a key that is not present through ``m[key]`` raises a
    ``KeyError``, like it does for a ``dict``. Use `get` in order to receive
    ``None`` (or a default value) instead.

    Comparing two maps with ``==`` compares their content like ``dict`` does,
    ignoring the order of keys.

    This class is not thread-safe.
    """

    def __init__(
        self,
        items: typing.Union[
            typing.Mapping[KeyT, ValueT],
            typing.Iterable[typing.Tuple[KeyT, ValueT]],
            None,
        ] = None,
        /,
        *,
        deletion_signal: DeletionSignal = DeletionSignal.NONE,
        **kwargs: ValueT
    ):
        """
        Create a map.

        :param items:
            mapping or iterable of ``(key, value)`` pairs that is inserted into
            the new map, in iteration order.
        :param deletion_signal:
            policy deciding which values passed to `set` remove a key. The
            default is `DeletionSignal.NONE`.
        :param kwargs:
            further items inserted after ``items``.
        """
        if not isinstance(deletion_signal, DeletionSignal):
            raise TypeError(
                "deletion_signal must be a DeletionSignal, but got an object "
                "of type '%s'." % type(deletion_signal).__name__
            )
        self._deletion_signal = deletion_signal
        self._values: ValueStore[KeyT, ValueT] = ValueStore()
        self._track: OrderTrack[KeyT] = OrderTrack()
        if items is not None:
            self.update(items)
        if kwargs:
            self.update(kwargs)

    @classmethod
    def from_config(
        cls,
        config: typing.Mapping[str, typing.Any],
        items: typing.Union[
            typing.Mapping[KeyT, ValueT],
            typing.Iterable[typing.Tuple[KeyT, ValueT]],
            None,
        ] = None,
    ) -> "OrderedMap[KeyT, ValueT]":
        """
        Create a map using the options from a configuration mapping.

        :param config:
            configuration mapping, for example as returned by
            `~ordtable.config.read_config`. Please refer to the
            `documentation <ordtable.config>` for the supported options.
        :param items:
            initial items of the map.
        :return:
            new map.
        """
        options = table_options(config)
        return cls(items, deletion_signal=options.deletion_signal)

    @property
    def deletion_signal(self) -> DeletionSignal:
        """
        Policy deciding which values passed to `set` remove a key.
        """
        _check_table(self)
        return self._deletion_signal

    def clear(self) -> None:
        """
        Remove all keys.
        """
        _check_table(self)
        self._track.clear()
        self._values.clear()

    def copy(self) -> "OrderedMap[KeyT, ValueT]":
        """
        Return a shallow copy of this map, preserving the order of keys and the
        deletion signal.
        """
        _check_table(self)
        new_map = type(self)(deletion_signal=self._deletion_signal)
        node = self._track.front
        while node is not None:
            new_map._track.append(node.key)
            new_map._values.put(node.key, self._values[node.key])
            node = node.next
        return new_map

    def delete(self, key: KeyT) -> bool:
        """
        Remove ``key`` regardless of the deletion signal.

        :param key:
            key to be removed.
        :return:
            ``True`` if the key was present and has been removed, ``False`` if
            the key was not present (in which case nothing happens).
        """
        _check_table(self)
        node = self._track.node_for(key)
        if node is None:
            return False
        self._track.unlink(node)
        self._values.discard(key)
        return True

    def get(
        self, key: KeyT, default: typing.Optional[ValueT] = None
    ) -> typing.Optional[ValueT]:
        """
        Return the value for ``key`` or ``default`` if the key is not present.
        """
        _check_table(self)
        return self._values.get(key, default)

    def pop(self, key: KeyT, *args: ValueT) -> ValueT:
        """
        Remove ``key`` and return its value.

        If ``key`` is not present, the default value is returned if one is
        given, otherwise a ``KeyError`` is raised.
        """
        _check_table(self)
        return super().pop(key, *args)

    def popitem(self, last: bool = True) -> typing.Tuple[KeyT, ValueT]:
        """
        Remove and return a ``(key, value)`` pair.

        :param last:
            if ``True`` (the default) the pair that was inserted last is
            removed, otherwise the pair that was inserted first.
        :return:
            the removed pair.
        """
        _check_table(self)
        node = self._track.back if last else self._track.front
        if node is None:
            raise KeyError("popitem(): map is empty")
        key = node.key
        value = self._values[key]
        self.delete(key)
        return key, value

    def set(self, key: KeyT, value: ValueT) -> None:
        """
        Set the value for ``key``.

        If ``value`` is the deletion signal of this map, the key is removed
        (or nothing happens if it is not present). Otherwise, a key that is
        not present yet is appended at the end of the order and a key that is
        already present keeps its position, only its value is replaced.

        :param key:
            key to be set.
        :param value:
            new value for the key.
        """
        _check_table(self)
        if self._deletion_signal.signals_deletion(value):
            self.delete(key)
            return
        if key not in self._track:
            self._track.append(key)
        self._values.put(key, value)

    def setdefault(
        self, key: KeyT, default: typing.Optional[ValueT] = None
    ) -> typing.Optional[ValueT]:
        """
        Return the value for ``key``, setting it to ``default`` first if the
        key is not present.

        Setting the value goes through `set`, so nothing is inserted when
        ``default`` is the deletion signal of this map.
        """
        _check_table(self)
        return super().setdefault(key, default)

    def update(self, other=(), /, **kwargs: ValueT) -> None:
        """
        Set the values from a mapping or an iterable of ``(key, value)`` pairs
        and from ``kwargs``, in that order.

        Every value goes through `set`, so the deletion signal applies.
        """
        _check_table(self)
        super().update(other, **kwargs)

    def __contains__(self, key: object) -> bool:
        _check_table(self)
        return key in self._track

    def __delitem__(self, key: KeyT) -> None:
        _check_table(self)
        if not self.delete(key):
            raise KeyError(key)

    def __getitem__(self, key: KeyT) -> ValueT:
        _check_table(self)
        return self._values[key]

    def __iter__(self) -> typing.Iterator[KeyT]:
        return iter(iterkeys(self))

    def __len__(self) -> int:
        _check_table(self)
        return self._track.length

    def __repr__(self):
        _check_table(self)
        items = []
        node = self._track.front
        while node is not None:
            items.append((node.key, self._values[node.key]))
            node = node.next
        return "%s(%r)" % (type(self).__name__, items)

    def __reversed__(self) -> typing.Iterator[KeyT]:
        return iter(reviterkeys(self))

    def __setitem__(self, key: KeyT, value: ValueT) -> None:
        _check_table(self)
        self.set(key, value)


def new(
    deletion_signal: DeletionSignal = DeletionSignal.NONE,
) -> OrderedMap:
    """
    Return an empty `OrderedMap`.

    :param deletion_signal:
        policy deciding which values passed to `OrderedMap.set` remove a key.
    """
    return OrderedMap(deletion_signal=deletion_signal)


def _check_table(table) -> None:
    """
    Raise an `InvalidArgument` if ``table`` is not a properly constructed
    `OrderedMap`.
    """
    if not isinstance(table, OrderedMap) or not isinstance(
        getattr(table, "_track", None), OrderTrack
    ):
        raise InvalidArgument(
            "Expected an object of type OrderedMap, but got an object of type "
            "'%s'." % type(table).__name__
        )

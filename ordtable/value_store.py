"""
Key to value storage used by `~ordtable.table.OrderedMap`.

The store has no notion of order. It only wraps a ``dict`` so that the map can
keep its lookup table and its order tracking apart.
"""

import typing

KeyT = typing.TypeVar("KeyT")
ValueT = typing.TypeVar("ValueT")


class ValueStore(typing.Generic[KeyT, ValueT]):  # pylint: disable=E1136
    """
    Order-agnostic mapping from keys to values.
    """

    __slots__ = ("_data",)

    def __init__(self):
        self._data: typing.Dict[KeyT, ValueT] = {}

    def clear(self) -> None:
        self._data.clear()

    def discard(self, key: KeyT) -> None:
        """
        Remove the value for ``key``. Does nothing if there is no such value.
        """
        self._data.pop(key, None)

    def get(
        self, key: KeyT, default: typing.Optional[ValueT] = None
    ) -> typing.Optional[ValueT]:
        return self._data.get(key, default)

    def put(self, key: KeyT, value: ValueT) -> None:
        self._data[key] = value

    def __contains__(self, key: KeyT) -> bool:
        return key in self._data

    def __getitem__(self, key: KeyT) -> ValueT:
        return self._data[key]

    def __len__(self) -> int:
        return len(self._data)

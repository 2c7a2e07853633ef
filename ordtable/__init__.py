"""
Insertion-order preserving map.

The most commonly used names are available directly from this package:

* `OrderedMap` and `new` for creating maps,
* `keys`, `pairs`, `iterkeys`, `revpairs`, and `reviterkeys` for traversing
  them (see `ordtable.iteration`),
* `DeletionSignal` for choosing which values remove keys (see
  `ordtable.config`),
* `InvalidArgument` and `StaleCursorError` (see `ordtable.errors`).
"""

from ordtable.config import DeletionSignal
from ordtable.errors import InvalidArgument, StaleCursorError
from ordtable.iteration import (
    KeysSnapshot,
    Traversal,
    iterkeys,
    keys,
    pairs,
    reviterkeys,
    revpairs,
)
from ordtable.table import OrderedMap, new

__all__ = [
    "DeletionSignal",
    "InvalidArgument",
    "KeysSnapshot",
    "OrderedMap",
    "StaleCursorError",
    "Traversal",
    "iterkeys",
    "keys",
    "new",
    "pairs",
    "reviterkeys",
    "revpairs",
]

"""
Doubly linked list recording the order in which keys were inserted.

`OrderTrack` keeps one `Node` per key. Next to the list itself it maintains an
index from each key to its node, so that a node can be unlinked in constant
time without walking the list.

The list is an implementation detail of `~ordtable.table.OrderedMap` and of
the traversals in `ordtable.iteration`. Code outside this package should not
modify it directly.
"""

import typing

KeyT = typing.TypeVar("KeyT")


class Node(typing.Generic[KeyT]):  # pylint: disable=E1136
    """
    Position of a single key in insertion order.
    """

    __slots__ = ("_key", "prev", "next")

    def __init__(self, key: KeyT):
        self._key = key
        self.prev: typing.Optional["Node[KeyT]"] = None
        """
        Preceding node or ``None`` if this node is the front.
        """
        self.next: typing.Optional["Node[KeyT]"] = None
        """
        Following node or ``None`` if this node is the back.
        """

    @property
    def key(self) -> KeyT:
        """
        Key represented by this node. It never changes.
        """
        return self._key

    def __repr__(self):
        return "Node(%r)" % (self._key,)


class OrderTrack(typing.Generic[KeyT]):  # pylint: disable=E1136
    """
    Doubly linked list of keys with an index for constant-time unlinking.

    Appending, unlinking and looking up the node for a key are all O(1). The
    track does not check whether a key is already present when appending;
    the caller is responsible for only appending keys that do not have a node
    yet.
    """

    __slots__ = ("_back", "_front", "_length", "_nodes")

    def __init__(self):
        self._front: typing.Optional[Node[KeyT]] = None
        self._back: typing.Optional[Node[KeyT]] = None
        self._length = 0
        # Node index: key -> node. This is the only place holding on to nodes
        # apart from the neighbour links of the list itself.
        self._nodes: typing.Dict[KeyT, Node[KeyT]] = {}

    @property
    def back(self) -> typing.Optional[Node[KeyT]]:
        """
        Last node in insertion order or ``None`` if the track is empty.
        """
        return self._back

    @property
    def front(self) -> typing.Optional[Node[KeyT]]:
        """
        First node in insertion order or ``None`` if the track is empty.
        """
        return self._front

    @property
    def length(self) -> int:
        """
        Number of nodes in the track.
        """
        return self._length

    def append(self, key: KeyT) -> Node[KeyT]:
        """
        Create a node for ``key`` and link it in at the back.

        :param key:
            key for which the node is created. There must not be a node for
            this key yet.
        :return:
            the new node.
        """
        node = Node(key)
        node.prev = self._back
        if self._back is not None:
            self._back.next = node
        else:
            self._front = node
        self._back = node
        self._nodes[key] = node
        self._length += 1
        return node

    def clear(self) -> None:
        """
        Remove all nodes.
        """
        # Break the links so that outstanding node references do not keep the
        # rest of the list alive.
        for node in self._nodes.values():
            node.prev = None
            node.next = None
        self._nodes.clear()
        self._front = None
        self._back = None
        self._length = 0

    def node_for(self, key: KeyT) -> typing.Optional[Node[KeyT]]:
        """
        Return the node for ``key`` or ``None`` if there is no such node.
        """
        return self._nodes.get(key)

    def unlink(self, node: Node[KeyT]) -> None:
        """
        Remove ``node`` from the track.

        The node may be at the front, at the back, or anywhere in between. Its
        neighbours are linked to each other and the node's own links are
        cleared.

        :param node:
            node that is currently part of this track.
        """
        if node.prev is not None:
            node.prev.next = node.next
        else:
            self._front = node.next
        if node.next is not None:
            node.next.prev = node.prev
        else:
            self._back = node.prev
        node.prev = None
        node.next = None
        del self._nodes[node.key]
        self._length -= 1

    def __contains__(self, key: KeyT) -> bool:
        return key in self._nodes

"""
Exceptions raised by the ordered map and its traversals.
"""

import typing


class InvalidArgument(ValueError):
    """
    Exception indicating that an operation received an object that is not a
    properly constructed `~ordtable.table.OrderedMap`.

    This is a programming error at the call site. It is never recovered from
    internally.
    """


class StaleCursorError(InvalidArgument):
    """
    Exception raised by a traversal when the key it is positioned on has been
    removed from the map since the previous step.
    """

    def __init__(self, *args, key: typing.Any, **kwargs):
        super().__init__(*args, **kwargs)
        self.key = key
        """
        Key that the traversal was positioned on.
        """

"""
Provides the version of the ordtable distribution.

``setup.py`` reads `VERSION_STRING` from this file without importing the
package, so it has to stay a plain string literal.
"""

import re

#: Version (as a string)
VERSION_STRING = "1.0.0"


def _version_tuple(version_string):
    """
    Split a version string into its components.

    Numeric components become ``int`` objects. A pre-release suffix (for
    example the ``rc1`` in "1.1rc1") becomes a separate ``str`` component at
    the end.
    """
    components = []
    for part in version_string.split("."):
        match = re.fullmatch(r"(\d+)(\D\w*)?", part)
        if match is None:
            raise ValueError("Invalid version string: %s" % version_string)
        components.append(int(match.group(1)))
        if match.group(2):
            components.append(match.group(2))
    return tuple(components)


#: Version (as a tuple).
VERSION = _version_tuple(VERSION_STRING)

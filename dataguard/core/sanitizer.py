"""
String sanitization for embedding user input in SQL literals and HTML.

The steps run in a fixed order. The escapes produced in the first step use
only backslashes and letters, so the later passes over ``<>&/`` never touch
them.
"""

import re

from dataguard.core.whitespace import WHITESPACE

_ESCAPES = {
    "\0": "\\0",
    "\x08": "\\b",
    "\x09": "\\t",
    "\x1a": "\\z",
    "\n": "\\n",
    "\r": "\\r",
    "\"": "\\\"",
    "'": "\\'",
    "\\": "\\\\",
    "%": "\\%",
}

_ESCAPE_PATTERN = re.compile("[" + re.escape("".join(_ESCAPES)) + "]")
_ANGLE_BRACKETS = str.maketrans("", "", "<>")


def sanitize(value: str) -> str:
    """
    Escape control and quote characters, strip angle brackets and
    entity-encode ``&`` and ``/``.

    Args:
        value: Untrusted input

    Returns:
        The sanitized string, trimmed of surrounding whitespace

    Examples:
        >>> sanitize("It's 100%")
        "It\\\\'s 100\\\\%"
        >>> sanitize(" <b>a/b & c</b> ")
        'ba&#x2F;b &amp; c&#x2F;b'
    """
    escaped = _ESCAPE_PATTERN.sub(lambda match: _ESCAPES[match.group(0)], value)
    return (
        escaped
        .translate(_ANGLE_BRACKETS)
        .replace("&", "&amp;")
        .replace("/", "&#x2F;")
        .strip(WHITESPACE)
    )

"""
The whitespace set shared by trimming and the phone pattern.

Python's ``str.isspace`` (and so ``str.strip()`` and the ``\\s`` class of
``re``) also covers the information separators U+001C..U+001F and NEL
(U+0085), and leaves out the byte order mark. Those are not whitespace here.
"""

WHITESPACE = (
    "\t\n\v\f\r   "
    "           "
    "    　﻿"
)

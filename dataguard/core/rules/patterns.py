"""
Regular expressions used by the rule catalog, compiled once at import.

Every pattern is anchored with ``\\Z`` rather than ``$`` so a trailing newline
never slips through. None of them nests unbounded quantifiers, so matching
stays linear on hostile input.

Word boundaries and case folding are ASCII-only, so a keyword next to a
non-ASCII letter still counts as a whole word.
"""

import re

from dataguard.core.whitespace import WHITESPACE

_LOCAL_CHARS = r"[-!#$%&'*+/0-9=?A-Z^_`a-z{|}~]"
_LABEL = r"[A-Za-z0-9](?:[A-Za-z0-9-]{0,61}[A-Za-z0-9])?"

EMAIL_PATTERN = re.compile(
    r"^(?=.{1,254}\Z)(?=.{1,64}@)"
    rf"{_LOCAL_CHARS}+(?:\.{_LOCAL_CHARS}+)*"
    rf"@{_LABEL}(?:\.{_LABEL})*\Z"
)

# Digits, whitespace, hyphens and parentheses
_SPACE = "".join(f"\\u{ord(char):04x}" for char in WHITESPACE)
PHONE_PATTERN = re.compile(rf"^\+?[0-9{_SPACE}\-()]{{8,}}\Z")

HTML_TAG_PATTERN = re.compile(r"<[^>]*>")

SQL_INJECTION_PATTERNS = (
    re.compile(
        r"(\b(select|insert|update|delete|drop|union|exec|declare|cast)\b)|[;'\"`\\]",
        re.IGNORECASE | re.ASCII,
    ),
    re.compile(r"--"),
    re.compile(r"/\*"),
    re.compile(r"\*/"),
)

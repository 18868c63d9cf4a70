"""Text normalization shared by the matcher and the keyword gap analyzer.

Token boundaries and lengths follow browser JavaScript semantics so the
scores agree with the web client:

- whitespace is the ECMAScript ``\\s`` set, which includes U+FEFF but not
  the ASCII separators U+001C..U+001F or U+0085 that ``str.split()`` uses
- lengths are UTF-16 code units, so an emoji counts as two characters
"""

import re

# ECMAScript WhiteSpace + LineTerminator
_WHITESPACE_RE = re.compile(
    "[\t\n\v\f\r \u00a0\u1680\u2000-\u200a\u2028\u2029\u202f\u205f\u3000\ufeff]+"
)


def normalize(text: str) -> str:
    """Lower-case the full text.

    ``str.lower()`` rather than ``casefold()``: casefolding can change the
    length of a word ("straße" -> "strasse") and move it across the
    keyword length threshold.
    """
    return text.lower()


def tokenize(text: str) -> list[str]:
    """Split on runs of whitespace. Punctuation stays attached to its word."""
    return [token for token in _WHITESPACE_RE.split(text) if token]


def text_length(text: str) -> int:
    """Length in UTF-16 code units."""
    return len(text.encode("utf-16-le")) // 2

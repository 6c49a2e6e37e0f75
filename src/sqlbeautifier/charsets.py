"""Character sets for O(1) classification.

All sets are frozensets for:
- O(1) membership testing (vs O(n) for strings)
- Immutability (thread-safe)
- Module-level caching (no per-call allocation)

Usage:
    from sqlbeautifier.charsets import DIGITS

    if char in DIGITS:  # O(1) lookup
        ...
"""

import string

DIGITS: frozenset[str] = frozenset(string.digits)

# Digit runs swallow dots greedily ("1.2.3" is one number)
NUMBER_CHARS: frozenset[str] = DIGITS | frozenset(".")

WORD_START: frozenset[str] = frozenset(string.ascii_letters + "_")

WORD_CHARS: frozenset[str] = WORD_START | DIGITS

# Blanks the formatter may trim from the end of a line
LINE_BLANKS = " \t"

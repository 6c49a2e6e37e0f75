"""StringBuilder for O(n) string accumulation.

Appends to a list, joins once at the end: O(n) total vs O(n²) for
repeated string concatenation. The formatter also needs to look at the
last emitted character and to drop trailing blanks before a line break,
both of which are answered from the last part without joining.

Thread Safety:
StringBuilder instances are local to each render() call.
No shared mutable state.

"""

from __future__ import annotations


class StringBuilder:
    """Efficient string accumulator.

    Usage:
            >>> sb = StringBuilder()
            >>> _ = sb.append("SELECT").append("  ")
            >>> _ = sb.rstrip(" ")
            >>> sb.build()
            'SELECT'

    """

    __slots__ = ("_parts",)

    def __init__(self) -> None:
        """Initialize empty StringBuilder."""
        self._parts: list[str] = []

    def append(self, s: str) -> StringBuilder:
        """Append a string to the builder.

        Args:
            s: String to append (empty strings are skipped)

        Returns:
            self for method chaining
        """
        if s:
            self._parts.append(s)
        return self

    def last_char(self) -> str:
        """Return the last character appended, or "" when empty."""
        if not self._parts:
            return ""
        return self._parts[-1][-1]

    def rstrip(self, chars: str) -> StringBuilder:
        """Remove trailing characters in ``chars`` from the accumulated text.

        Returns:
            self for method chaining
        """
        parts = self._parts
        while parts:
            stripped = parts[-1].rstrip(chars)
            if stripped:
                parts[-1] = stripped
                break
            parts.pop()
        return self

    def build(self) -> str:
        """Join all parts into final string."""
        return "".join(self._parts)

    def __len__(self) -> int:
        """Return number of parts (not total length)."""
        return len(self._parts)

    def __bool__(self) -> bool:
        """Return True if any parts have been appended."""
        return bool(self._parts)

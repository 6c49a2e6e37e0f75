"""TokenRenderer protocol: stable interface for token renderers.

Any renderer that implements ``render(tokens) -> str`` conforms to this
protocol. SqlFormatter and Minifier are the built-in implementations.

Example:
    from sqlbeautifier.renderers.protocol import TokenRenderer

    def render_text(renderer: TokenRenderer, text: str) -> str:
        return renderer.render(scan(text))

"""

from collections.abc import Sequence
from typing import Protocol

from sqlbeautifier.tokens import Token


class TokenRenderer(Protocol):
    """Protocol for token renderers."""

    def render(self, tokens: Sequence[Token]) -> str:
        """Render a token sequence to a string.

        Contract:
            - MUST NOT raise for any token sequence
            - MUST be deterministic given the tokens and options
        """
        ...

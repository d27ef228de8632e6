"""Literal value expressions."""

from dataclasses import dataclass

from typed_filter.expressions.base import Expression


@dataclass(frozen=True)
class LiteralExpr[T](Expression[T]):
    """
    A raw value already rendered to query text.

    Capabilities produce these when converting bare Python values; the
    ``integer`` and ``string`` helpers build them explicitly.
    """

    semantic_type: type
    text: str

    def render(self) -> str:
        return self.text


def integer(value: int) -> LiteralExpr[int]:
    """Wrap an int as an integer expression.

    Args:
        value: Integer to wrap (bool is rejected)

    Returns:
        Expression rendering the decimal form of value
    """
    from typed_filter.capabilities import IntExpressable

    return IntExpressable().as_expression(value)


def string(value: str) -> LiteralExpr[str]:
    """Wrap a str as a text expression rendered in single quotes, unescaped."""
    from typed_filter.capabilities import TextExpressable

    return TextExpressable().as_expression(value)

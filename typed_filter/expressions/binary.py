"""Binary operator expressions."""

from dataclasses import dataclass
from typing import Any

from typed_filter.expressions.base import Expression


@dataclass(frozen=True)
class BinaryOpExpr[T](Expression[T]):
    """
    Two expressions joined by an operator symbol.

    The operands' own semantic types are erased here; only their ability to
    render is used. Type agreement between operands is checked by the
    operator functions that build these nodes.

    Example:
        BinaryOpExpr(Integer("id"), "=", integer(1)).render()  # "(id = 1)"
    """

    left: Expression[Any]
    op: str
    right: Expression[Any]
    semantic_type: type = bool

    def render(self) -> str:
        return f"({self.left.render()} {self.op} {self.right.render()})"

"""Base expression class for the filter algebra."""

from abc import ABC, abstractmethod
from typing import Any


class Expression[T](ABC):
    """
    Base class for all filter expressions.

    ``T`` is the semantic type the node stands for (int, str, bool, ...).
    It is a phantom parameter for static checkers; ``semantic_type`` carries
    the same information at runtime so operators can reject mismatched
    operands while the expression is being built.
    """

    semantic_type: type

    @abstractmethod
    def render(self) -> str:
        """
        Render this expression to its textual query form.

        Must be pure: repeated calls return the same string.

        Returns:
            Fully parenthesized query text
        """
        ...

    def __str__(self) -> str:
        return self.render()

    def __and__(self, other: Any) -> "Expression[bool]":
        """Join two filters: ``left & right``."""
        from typed_filter.operators import and_

        return and_(self, other)

    def __rand__(self, other: Any) -> "Expression[bool]":
        """Reflected join, only reached when the left operand is not an expression."""
        from typed_filter.operators import and_

        return and_(other, self)


# A filter is any expression whose semantic type is boolean
type Filter = Expression[bool]

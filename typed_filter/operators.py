"""Core operators that combine already-built expressions.

These need no conversion capability: both operands must already be
expression nodes. Scopes convert raw values first and then call into here.
"""

from typing import Any

from typed_filter.exceptions import UnsupportedConversionError
from typed_filter.expressions.base import Expression, Filter
from typed_filter.expressions.binary import BinaryOpExpr

EQ = "="
AND = "and"


def _type_name(value: Any) -> str:
    if isinstance(value, Expression):
        return f"Expression[{value.semantic_type.__name__}]"
    return type(value).__name__


def eq[T](left: Expression[T], right: Expression[T]) -> Filter:
    """Compare two expressions of the same semantic type.

    Args:
        left: Left operand
        right: Right operand

    Returns:
        Filter rendering as ``(left = right)``

    Raises:
        UnsupportedConversionError: If either operand is not an expression or
            the semantic types differ
    """
    for operand in (left, right):
        if not isinstance(operand, Expression):
            raise UnsupportedConversionError(
                f"Cannot compare {_type_name(operand)}: operand is not an expression",
                value=operand,
            )
    if left.semantic_type is not right.semantic_type:
        raise UnsupportedConversionError(
            f"Cannot compare {_type_name(left)} with {_type_name(right)}",
            value=right,
            target_type=left.semantic_type,
        )
    return BinaryOpExpr(left, EQ, right)


def and_(left: Filter, right: Filter) -> Filter:
    """Join two filters with ``and``.

    Raises:
        UnsupportedConversionError: If either operand is not a boolean expression
    """
    for operand in (left, right):
        if not isinstance(operand, Expression) or operand.semantic_type is not bool:
            raise UnsupportedConversionError(
                f"Cannot use {_type_name(operand)} as a filter",
                value=operand,
                target_type=bool,
            )
    return BinaryOpExpr(left, AND, right)


def ensure_filter(value: Any) -> Filter:
    """Check that a built value is a filter and return it unchanged."""
    if not isinstance(value, Expression) or value.semantic_type is not bool:
        raise UnsupportedConversionError(
            f"Filter builder returned {_type_name(value)}, expected a filter",
            value=value,
            target_type=bool,
        )
    return value

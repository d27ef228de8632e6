"""Scoped filter construction with per-type conversion capabilities.

``filter_`` hands the caller an ExpressionScope holding an explicit bundle of
Expressable capabilities. Inside the build function, ``scope.eq`` accepts raw
values or expressions on either side and converts raw values through the
capability for the other operand's semantic type. Values of a type with no
capability in the bundle are rejected while the expression is being built.

Example:
    f = filter_(Users, lambda s, u: s.eq(1, u.id) & s.eq(u.name, "test"))
    f.render()  # "((id = 1) and (name = 'test'))"
"""

import logging
from collections.abc import Callable, Iterable
from typing import Any, overload

from typed_filter import operators
from typed_filter.capabilities import Expressable, default_expressables
from typed_filter.config import FilterConfig
from typed_filter.exceptions import UnsupportedConversionError
from typed_filter.expressions.base import Expression, Filter

logger = logging.getLogger(__name__)


class ExpressionScope:
    """The set of conversion capabilities active while a filter is built."""

    def __init__(self, expressables: Iterable[Expressable[Any]]):
        self.expressables = tuple(expressables)
        self._by_type: dict[type, Expressable[Any]] = {}
        for expressable in self.expressables:
            # First capability registered for a type wins
            self._by_type.setdefault(expressable.semantic_type, expressable)

    def capability_for(self, semantic_type: type) -> Expressable[Any]:
        """Get the capability converting raw values to semantic_type.

        Raises:
            UnsupportedConversionError: If no such capability is active
        """
        try:
            return self._by_type[semantic_type]
        except KeyError:
            raise UnsupportedConversionError(
                f"No capability for {semantic_type.__name__} is active in this scope",
                target_type=semantic_type,
            ) from None

    def lift(self, value: Any, semantic_type: type | None = None) -> Expression[Any]:
        """Turn value into an expression.

        Expressions are returned unchanged. Raw values are converted by the
        capability for semantic_type, or by the first capability accepting
        them when no type is given.

        Args:
            value: Raw value or expression
            semantic_type: Required semantic type, if known

        Returns:
            Expression for value

        Raises:
            UnsupportedConversionError: If value cannot become an expression
                of the required type
        """
        if isinstance(value, Expression):
            if semantic_type is not None and value.semantic_type is not semantic_type:
                raise UnsupportedConversionError(
                    f"Expression of type {value.semantic_type.__name__} "
                    f"used where {semantic_type.__name__} is required",
                    value=value,
                    target_type=semantic_type,
                )
            return value

        if semantic_type is not None:
            return self.capability_for(semantic_type).as_expression(value)

        for expressable in self.expressables:
            if expressable.accepts(value):
                return expressable.as_expression(value)
        raise UnsupportedConversionError(
            f"No active capability converts {type(value).__name__}",
            value=value,
        )

    @overload
    def eq[T](self, left: Expression[T], right: Expression[T] | T) -> Filter: ...

    @overload
    def eq[T](self, left: T, right: Expression[T] | T) -> Filter: ...

    def eq(self, left: Any, right: Any) -> Filter:
        """Equality between expressions or raw values of one semantic type.

        A raw value facing an expression is converted to the expression's
        type and rendered on the right: ``eq(1, id)`` gives ``(id = 1)``.
        """
        left_is_expr = isinstance(left, Expression)
        right_is_expr = isinstance(right, Expression)

        if left_is_expr and right_is_expr:
            return operators.eq(left, right)
        if left_is_expr:
            return operators.eq(left, self.lift(right, left.semantic_type))
        if right_is_expr:
            return operators.eq(right, self.lift(left, right.semantic_type))

        left_expr = self.lift(left)
        return operators.eq(left_expr, self.lift(right, left_expr.semantic_type))

    def and_(self, left: Filter, right: Filter) -> Filter:
        """Join two filters with ``and``. Needs no capability."""
        return operators.and_(left, right)

    def __repr__(self) -> str:
        return f"ExpressionScope({list(self.expressables)!r})"


def filter_[R](
    receiver: R,
    build: Callable[[ExpressionScope, R], Filter],
    *,
    expressables: Iterable[Expressable[Any]] | None = None,
    config: FilterConfig | None = None,
) -> Filter:
    """Build a filter with integer and text conversions available.

    Args:
        receiver: Object handed to build alongside the scope, usually a
            PropertySet class holding the properties
        build: Function ``(scope, receiver) -> Filter``
        expressables: Capabilities to activate instead of the defaults
        config: Rendering options for the default text capability

    Returns:
        The filter returned by build

    Raises:
        UnsupportedConversionError: If build uses an unsupported operand or
            does not return a filter
    """
    if expressables is None:
        expressables = default_expressables(config)
    scope = ExpressionScope(expressables)
    logger.debug(f"Building filter with {len(scope.expressables)} capabilities active")

    return operators.ensure_filter(build(scope, receiver))

"""Unified capabilities: one conversion path for raw values and expressions.

Here every operand, raw or already built, goes through an ExpressableAs
capability. ``eq2`` and ``and2`` therefore need no per-shape overloads; the
price is that a scope must carry, for each semantic type, one capability for
raw values and one identity capability for expressions, plus the identity
capability for booleans so filters can be joined.

Example:
    f = filter2(Users, lambda s, u: s.and2(s.eq2(1, u.id), s.eq2(u.name, "test")))
    f.render()  # "((id = 1) and (name = 'test'))"
"""

import logging
from abc import ABC, abstractmethod
from collections.abc import Callable, Iterable
from typing import Any

from typed_filter import operators
from typed_filter.capabilities import Expressable, default_expressables
from typed_filter.config import FilterConfig
from typed_filter.exceptions import UnsupportedConversionError
from typed_filter.expressions.base import Expression, Filter
from typed_filter.expressions.binary import BinaryOpExpr

logger = logging.getLogger(__name__)


class ExpressableAs[S, T](ABC):
    """Capability converting a value of source shape ``S`` to ``Expression[T]``."""

    target_type: type

    @abstractmethod
    def accepts(self, value: Any) -> bool:
        """Check whether value has this capability's source shape."""
        ...

    @abstractmethod
    def to_expression(self, value: S) -> Expression[T]:
        """Convert an accepted value."""
        ...


class ValueExpressableAs[T](ExpressableAs[T, T]):
    """Raw ``T`` to ``Expression[T]``, delegating to an Expressable."""

    def __init__(self, expressable: Expressable[T]):
        self.expressable = expressable
        self.target_type = expressable.semantic_type

    def accepts(self, value: Any) -> bool:
        return not isinstance(value, Expression) and self.expressable.accepts(value)

    def to_expression(self, value: T) -> Expression[T]:
        return self.expressable.as_expression(value)

    def __repr__(self) -> str:
        return f"ValueExpressableAs({self.expressable!r})"


class NodeExpressableAs[T](ExpressableAs[Expression[T], T]):
    """``Expression[T]`` to itself."""

    def __init__(self, semantic_type: type):
        self.target_type = semantic_type

    def accepts(self, value: Any) -> bool:
        return isinstance(value, Expression) and value.semantic_type is self.target_type

    def to_expression(self, value: Expression[T]) -> Expression[T]:
        return value

    def __repr__(self) -> str:
        return f"NodeExpressableAs({self.target_type.__name__})"


def unified_capabilities(
    expressables: Iterable[Expressable[Any]],
) -> tuple[ExpressableAs[Any, Any], ...]:
    """Expand per-type capabilities into the unified set.

    For each expressable this yields its raw-value capability and the
    identity capability for expressions of the same type, followed by the
    boolean identity capability.
    """
    capabilities: list[ExpressableAs[Any, Any]] = []
    for expressable in expressables:
        capabilities.append(expressable.to_expressable_as())
        capabilities.append(NodeExpressableAs(expressable.semantic_type))
    capabilities.append(NodeExpressableAs(bool))
    return tuple(capabilities)


class UnifiedScope:
    """The unified capabilities active while a filter is built."""

    def __init__(self, capabilities: Iterable[ExpressableAs[Any, Any]]):
        self.capabilities = tuple(capabilities)

    def target_types(self) -> list[type]:
        """Semantic types reachable through this scope, in registration order."""
        types: list[type] = []
        for capability in self.capabilities:
            if capability.target_type not in types:
                types.append(capability.target_type)
        return types

    def resolve(self, value: Any, target_type: type) -> ExpressableAs[Any, Any] | None:
        """Find the capability converting value to target_type, if any."""
        for capability in self.capabilities:
            if capability.target_type is target_type and capability.accepts(value):
                return capability
        return None

    def _combine(self, left: Any, op: str, right: Any, target_type: type) -> Filter | None:
        left_cap = self.resolve(left, target_type)
        right_cap = self.resolve(right, target_type)
        if left_cap is None or right_cap is None:
            return None
        return BinaryOpExpr(left_cap.to_expression(left), op, right_cap.to_expression(right))

    def eq2(self, left: Any, right: Any) -> Filter:
        """Equality between two operands convertible to one common type.

        Raises:
            UnsupportedConversionError: If no active type accepts both operands
        """
        if not isinstance(left, Expression) and isinstance(right, Expression):
            left, right = right, left

        for target_type in self.target_types():
            result = self._combine(left, operators.EQ, right, target_type)
            if result is not None:
                return result

        logger.debug(f"eq2 found no common type for {left!r} and {right!r}")
        raise UnsupportedConversionError(
            f"No active capabilities convert {type(left).__name__} and "
            f"{type(right).__name__} to a common type",
            value=right,
        )

    def and2(self, left: Any, right: Any) -> Filter:
        """Join two operands convertible to filters.

        Raises:
            UnsupportedConversionError: If either operand is not convertible
                to a boolean expression
        """
        result = self._combine(left, operators.AND, right, bool)
        if result is None:
            bad = right if self.resolve(left, bool) is not None else left
            raise UnsupportedConversionError(
                f"No active capability converts {type(bad).__name__} to a filter",
                value=bad,
                target_type=bool,
            )
        return result

    def __repr__(self) -> str:
        return f"UnifiedScope({list(self.capabilities)!r})"


def filter2[R](
    receiver: R,
    build: Callable[[UnifiedScope, R], Filter],
    *,
    expressables: Iterable[Expressable[Any]] | None = None,
    config: FilterConfig | None = None,
) -> Filter:
    """Build a filter through the unified capabilities.

    With the default integer and text capabilities five unified capabilities
    are active: raw and identity for int, raw and identity for str, and
    identity for bool.

    Args:
        receiver: Object handed to build alongside the scope
        build: Function ``(scope, receiver) -> Filter``
        expressables: Per-type capabilities to expand instead of the defaults
        config: Rendering options for the default text capability

    Returns:
        The filter returned by build
    """
    if expressables is None:
        expressables = default_expressables(config)
    scope = UnifiedScope(unified_capabilities(expressables))
    logger.debug(f"Building filter with {len(scope.capabilities)} unified capabilities active")

    return operators.ensure_filter(build(scope, receiver))

"""Conversion capabilities for raw Python values.

An Expressable knows how to turn a bare value of one Python type into an
expression node of the matching semantic type. Which raw values a capability
accepts is described by a strict pydantic-core schema, so no lax coercion
takes place: ``True`` is not an integer and ``"1"`` is not converted to ``1``.
"""

import logging
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, ClassVar

from pydantic_core import SchemaValidator, ValidationError, core_schema

from typed_filter.config import DEFAULT_CONFIG, FilterConfig
from typed_filter.exceptions import UnsupportedConversionError
from typed_filter.expressions.literal import LiteralExpr

if TYPE_CHECKING:
    from typed_filter.unified import ValueExpressableAs

logger = logging.getLogger(__name__)


class Expressable[T](ABC):
    """Capability converting a bare ``T`` into an ``Expression[T]``.

    Subclasses set ``semantic_type`` and ``source_schema`` and implement
    ``format``.

    Example:
        class DecimalExpressable(Expressable[Decimal]):
            semantic_type = Decimal
            source_schema = core_schema.decimal_schema(strict=True)

            def format(self, value: Decimal) -> str:
                return str(value)
    """

    semantic_type: ClassVar[type]
    source_schema: ClassVar[core_schema.CoreSchema]
    _validator: ClassVar[SchemaValidator]

    def __init_subclass__(cls, **kwargs):
        """Compile the source schema once per capability class."""
        super().__init_subclass__(**kwargs)

        schema = cls.__dict__.get("source_schema")
        if schema is not None:
            cls._validator = SchemaValidator(schema)

    @abstractmethod
    def format(self, value: T) -> str:
        """Render an accepted value as query text."""
        ...

    def _validate(self, value: Any) -> T:
        return self._validator.validate_python(value)

    def accepts(self, value: Any) -> bool:
        """Check whether this capability can convert value."""
        try:
            self._validate(value)
        except ValidationError:
            return False
        return True

    def as_expression(self, value: T) -> LiteralExpr[T]:
        """Convert a raw value into a literal expression.

        Args:
            value: Raw Python value

        Returns:
            Literal expression of this capability's semantic type

        Raises:
            UnsupportedConversionError: If the value is not accepted
        """
        try:
            validated = self._validate(value)
        except ValidationError as exc:
            logger.debug(
                f"{type(self).__name__} rejected {value!r} ({exc.error_count()} error(s))"
            )
            raise UnsupportedConversionError(
                f"No conversion from {type(value).__name__} to {self.semantic_type.__name__}",
                value=value,
                target_type=self.semantic_type,
            ) from exc
        return LiteralExpr(self.semantic_type, self.format(validated))

    def to_expressable_as(self) -> "ValueExpressableAs[T]":
        """Adapt this capability to the unified raw-or-node form."""
        from typed_filter.unified import ValueExpressableAs

        return ValueExpressableAs(self)

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class IntExpressable(Expressable[int]):
    """Integers, rendered in decimal."""

    semantic_type: ClassVar[type] = int
    source_schema: ClassVar[core_schema.CoreSchema] = core_schema.int_schema(strict=True)

    def format(self, value: int) -> str:
        return str(value)


class TextExpressable(Expressable[str]):
    """Strings, rendered between quotes.

    Args:
        config: Quoting options; the default uses single quotes, no escaping
    """

    semantic_type: ClassVar[type] = str
    source_schema: ClassVar[core_schema.CoreSchema] = core_schema.str_schema(strict=True)

    def __init__(self, config: FilterConfig | None = None) -> None:
        self.config = config or DEFAULT_CONFIG

    def format(self, value: str) -> str:
        return self.config.quote(value)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(config={self.config!r})"


class DoubleExpressable(Expressable[float]):
    """Floats, rendered with repr. Not part of the default bundle."""

    semantic_type: ClassVar[type] = float
    # float_schema alone also takes ints even in strict mode
    source_schema: ClassVar[core_schema.CoreSchema] = core_schema.chain_schema(
        [
            core_schema.is_instance_schema(float),
            core_schema.float_schema(strict=True, allow_inf_nan=False),
        ]
    )

    def format(self, value: float) -> str:
        return repr(float(value))


def default_expressables(config: FilterConfig | None = None) -> tuple[Expressable[Any], ...]:
    """The capabilities active in a scope unless others are given: int and str."""
    return (IntExpressable(), TextExpressable(config))

"""Exceptions for typed-filter.

This module provides the exception classes raised while building filter
expressions. All of them are raised at construction time; rendering a
successfully built expression never fails.
"""

from typing import Any


class FilterError(Exception):
    """Base class for errors raised by typed-filter."""

    pass


class UnsupportedConversionError(FilterError, TypeError):
    """Raised when an operand cannot be turned into the required expression type.

    This happens when no active capability converts the operand's type into
    the semantic type the operator needs, e.g. comparing an integer property
    with a string, or joining a non-boolean expression with ``and``.

    Example:
        try:
            scope.eq(Person.age, "thirty")
        except UnsupportedConversionError as exc:
            print(exc.value, exc.target_type)
    """

    def __init__(self, message: str, value: Any = None, target_type: type | None = None):
        super().__init__(message)
        self.value = value
        self.target_type = target_type


class SchemaDefinitionError(FilterError, ValueError):
    """Raised when a PropertySet declares conflicting properties.

    Example:
        class Broken(PropertySet):
            a = Integer("id")
            b = Text("id")  # raises SchemaDefinitionError
    """

    pass

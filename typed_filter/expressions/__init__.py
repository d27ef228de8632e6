"""
Typed expression nodes for typed-filter.

This module provides the node classes that make up a filter expression tree.
"""

from typed_filter.expressions.base import Expression, Filter
from typed_filter.expressions.binary import BinaryOpExpr
from typed_filter.expressions.literal import LiteralExpr, integer, string
from typed_filter.expressions.property import Boolean, Double, Integer, Property, Text

__all__ = [
    "Expression",
    "Filter",
    "BinaryOpExpr",
    "LiteralExpr",
    "Property",
    "Integer",
    "Text",
    "Double",
    "Boolean",
    "integer",
    "string",
]

"""typed-filter - typed, capability-gated filter expressions rendered to query text."""

from typed_filter.capabilities import (
    DoubleExpressable,
    Expressable,
    IntExpressable,
    TextExpressable,
    default_expressables,
)
from typed_filter.config import FilterConfig
from typed_filter.exceptions import FilterError, SchemaDefinitionError, UnsupportedConversionError
from typed_filter.expressions import (
    BinaryOpExpr,
    Boolean,
    Double,
    Expression,
    Filter,
    Integer,
    LiteralExpr,
    Property,
    Text,
    integer,
    string,
)
from typed_filter.operators import and_, eq
from typed_filter.schema import PropertySet
from typed_filter.scope import ExpressionScope, filter_
from typed_filter.unified import (
    ExpressableAs,
    NodeExpressableAs,
    UnifiedScope,
    ValueExpressableAs,
    filter2,
    unified_capabilities,
)

__version__ = "0.1.0"

__all__ = [
    # Expressions
    "Expression",
    "Filter",
    "BinaryOpExpr",
    "LiteralExpr",
    "integer",
    "string",
    # Properties
    "Property",
    "Integer",
    "Text",
    "Double",
    "Boolean",
    "PropertySet",
    # Operators
    "eq",
    "and_",
    # Per-type capabilities
    "Expressable",
    "IntExpressable",
    "TextExpressable",
    "DoubleExpressable",
    "default_expressables",
    "ExpressionScope",
    "filter_",
    # Unified capabilities
    "ExpressableAs",
    "ValueExpressableAs",
    "NodeExpressableAs",
    "unified_capabilities",
    "UnifiedScope",
    "filter2",
    # Configuration and errors
    "FilterConfig",
    "FilterError",
    "UnsupportedConversionError",
    "SchemaDefinitionError",
]

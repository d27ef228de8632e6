"""Property sets: the schema that filters are written against."""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, ClassVar

from typed_filter.exceptions import SchemaDefinitionError
from typed_filter.expressions.property import Property

if TYPE_CHECKING:
    from typed_filter.expressions.base import Filter
    from typed_filter.scope import ExpressionScope
    from typed_filter.unified import UnifiedScope

logger = logging.getLogger(__name__)


class PropertySet:
    """Base class for a group of properties.

    Properties are declared as class attributes and collected when the
    subclass is created, including those inherited from parent sets. The
    class itself is the receiver handed to filter build functions.

    Example:
        class Users(PropertySet):
            id = Integer("id")
            name = Text("name")

        Users.filter(lambda s, u: s.eq(u.id, 1)).render()  # "(id = 1)"
    """

    _properties: ClassVar[Mapping[str, Property[Any]]] = MappingProxyType({})

    def __init_subclass__(cls, **kwargs):
        """Collect Property attributes when a subclass is created."""
        super().__init_subclass__(**kwargs)

        properties: dict[str, Property[Any]] = {}
        # Walk the MRO base-first so subclasses override inherited attributes
        for klass in reversed(cls.__mro__):
            for attr_name, value in vars(klass).items():
                if isinstance(value, Property):
                    properties[attr_name] = value

        seen: dict[str, str] = {}
        for attr_name, prop in properties.items():
            if prop.name in seen:
                raise SchemaDefinitionError(
                    f"{cls.__name__}: attributes '{seen[prop.name]}' and '{attr_name}' "
                    f"both declare property '{prop.name}'"
                )
            seen[prop.name] = attr_name

        cls._properties = MappingProxyType(properties)
        logger.debug(f"Registered {len(properties)} properties on {cls.__name__}")

    @classmethod
    def get_properties(cls) -> Mapping[str, Property[Any]]:
        """Get the declared properties keyed by attribute name."""
        return cls._properties

    @classmethod
    def filter(
        cls, build: Callable[[ExpressionScope, type[PropertySet]], Filter], **kwargs: Any
    ) -> Filter:
        """Build a filter over this set with ``filter_``."""
        from typed_filter.scope import filter_

        return filter_(cls, build, **kwargs)

    @classmethod
    def filter2(
        cls, build: Callable[[UnifiedScope, type[PropertySet]], Filter], **kwargs: Any
    ) -> Filter:
        """Build a filter over this set with ``filter2``."""
        from typed_filter.unified import filter2

        return filter2(cls, build, **kwargs)

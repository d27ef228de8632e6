"""Named, typed properties used as filter operands."""

from dataclasses import dataclass
from typing import ClassVar

from typed_filter.expressions.base import Expression


@dataclass(frozen=True)
class Property[T](Expression[T]):
    """Base class for a named field of a given semantic type.

    Properties are declared once, usually as class attributes of a
    PropertySet, and never change afterwards.

    Example:
        class Users(PropertySet):
            id = Integer("id")
            name = Text("name")
    """

    semantic_type: ClassVar[type]

    name: str

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not self.name:
            raise ValueError(f"{type(self).__name__} name must be a non-empty string")

    def render(self) -> str:
        return self.name


@dataclass(frozen=True)
class Integer(Property[int]):
    """Integer-valued property."""

    semantic_type: ClassVar[type] = int


@dataclass(frozen=True)
class Text(Property[str]):
    """Text-valued property."""

    semantic_type: ClassVar[type] = str


@dataclass(frozen=True)
class Double(Property[float]):
    """Floating point property."""

    semantic_type: ClassVar[type] = float


@dataclass(frozen=True)
class Boolean(Property[bool]):
    """Boolean property. Usable directly as a filter."""

    semantic_type: ClassVar[type] = bool

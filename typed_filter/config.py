"""Configuration for value rendering."""

from typing import Literal

from pydantic import BaseModel, ConfigDict


class FilterConfig(BaseModel):
    """Options controlling how raw values are rendered by capabilities.

    The defaults render text as ``'value'`` with no escaping of embedded
    quotes.

    Args:
        quote_char: Delimiter placed around text values
        escape_quotes: Double any ``quote_char`` found inside text values

    Example:
        config = FilterConfig(escape_quotes=True)
        Person.filter(lambda s, p: s.eq(p.name, "O'Brien"), config=config)
        # (name = 'O''Brien')
    """

    model_config = ConfigDict(
        frozen=True,    # Shared between scopes, never mutated
        extra="forbid",
    )

    quote_char: Literal["'", '"'] = "'"
    escape_quotes: bool = False

    def quote(self, value: str) -> str:
        """Wrap a text value in quotes, escaping if enabled."""
        if self.escape_quotes:
            value = value.replace(self.quote_char, self.quote_char * 2)
        return f"{self.quote_char}{value}{self.quote_char}"


DEFAULT_CONFIG = FilterConfig()

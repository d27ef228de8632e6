"""Unit tests for FilterConfig."""

import pytest
from pydantic import ValidationError

from typed_filter import FilterConfig


def test_defaults():
    """Test default quoting."""
    config = FilterConfig()
    assert config.quote_char == "'"
    assert config.escape_quotes is False
    assert config.quote("it's") == "'it's'"


def test_escaping():
    """Test doubling of the quote character."""
    assert FilterConfig(escape_quotes=True).quote("it's") == "'it''s'"
    assert FilterConfig(quote_char='"').quote("it's") == '"it\'s"'


def test_invalid_quote_char():
    """Test that only single and double quotes are accepted."""
    with pytest.raises(ValidationError):
        FilterConfig(quote_char="`")  # type: ignore[arg-type]


def test_unknown_option_rejected():
    """Test that unknown options are rejected."""
    with pytest.raises(ValidationError):
        FilterConfig(escape=True)  # type: ignore[call-arg]


def test_frozen():
    """Test that a config cannot be modified."""
    config = FilterConfig()
    with pytest.raises(ValidationError):
        config.escape_quotes = True  # type: ignore[misc]

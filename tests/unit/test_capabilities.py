"""Unit tests for per-type conversion capabilities."""

import pytest

from typed_filter import (
    DoubleExpressable,
    FilterConfig,
    IntExpressable,
    LiteralExpr,
    TextExpressable,
    UnsupportedConversionError,
    ValueExpressableAs,
    default_expressables,
)


class TestIntExpressable:
    """Tests for the integer capability."""

    def test_converts_int(self):
        expr = IntExpressable().as_expression(10)
        assert isinstance(expr, LiteralExpr)
        assert expr.semantic_type is int
        assert expr.render() == "10"

    def test_accepts_only_ints(self):
        cap = IntExpressable()
        assert cap.accepts(0)
        assert not cap.accepts(True)
        assert not cap.accepts("1")
        assert not cap.accepts(1.0)
        assert not cap.accepts(None)

    def test_rejection_carries_details(self):
        with pytest.raises(UnsupportedConversionError) as exc_info:
            IntExpressable().as_expression("1")
        assert exc_info.value.value == "1"
        assert exc_info.value.target_type is int


class TestTextExpressable:
    """Tests for the text capability."""

    def test_default_quoting(self):
        assert TextExpressable().as_expression("test").render() == "'test'"

    def test_no_escaping_by_default(self):
        assert TextExpressable().as_expression("O'Brien").render() == "'O'Brien'"

    def test_escaping_enabled(self):
        cap = TextExpressable(FilterConfig(escape_quotes=True))
        assert cap.as_expression("O'Brien").render() == "'O''Brien'"

    def test_double_quote_char(self):
        cap = TextExpressable(FilterConfig(quote_char='"', escape_quotes=True))
        assert cap.as_expression('say "hi"').render() == '"say ""hi"""'

    def test_accepts_only_strings(self):
        cap = TextExpressable()
        assert cap.accepts("")
        assert not cap.accepts(1)
        assert not cap.accepts(b"bytes")


class TestDoubleExpressable:
    """Tests for the float capability."""

    def test_converts_float(self):
        expr = DoubleExpressable().as_expression(2.5)
        assert expr.semantic_type is float
        assert expr.render() == "2.5"

    def test_rejects_non_finite_and_text(self):
        cap = DoubleExpressable()
        assert not cap.accepts(float("nan"))
        assert not cap.accepts("2.5")

    def test_rejects_ints(self):
        cap = DoubleExpressable()
        assert not cap.accepts(1)
        assert not cap.accepts(True)
        with pytest.raises(UnsupportedConversionError):
            cap.as_expression(1)


def test_default_bundle_is_int_and_text():
    """Test the default capabilities."""
    bundle = default_expressables()
    assert [type(cap) for cap in bundle] == [IntExpressable, TextExpressable]


def test_default_bundle_passes_config():
    """Test that the text capability in the default bundle uses the config."""
    config = FilterConfig(escape_quotes=True)
    _, text_cap = default_expressables(config)
    assert text_cap.config is config


def test_to_expressable_as():
    """Test adapting a capability to the unified form."""
    unified = IntExpressable().to_expressable_as()
    assert isinstance(unified, ValueExpressableAs)
    assert unified.target_type is int
    assert unified.to_expression(3).render() == "3"

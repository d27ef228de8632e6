"""Unit tests for ExpressionScope and filter_."""

import pytest

from typed_filter import (
    Boolean,
    Double,
    DoubleExpressable,
    ExpressionScope,
    FilterConfig,
    IntExpressable,
    Integer,
    PropertySet,
    Text,
    TextExpressable,
    UnsupportedConversionError,
    default_expressables,
    filter_,
    integer,
)


class Users(PropertySet):
    id = Integer("id")
    name = Text("name")
    score = Double("score")
    active = Boolean("active")


def build_scope():
    return ExpressionScope(default_expressables())


class TestEqShapes:
    """Tests for each operand shape accepted by eq."""

    def test_expression_and_value(self):
        assert build_scope().eq(Users.id, 1).render() == "(id = 1)"

    def test_value_and_expression(self):
        assert build_scope().eq(1, Users.id).render() == "(id = 1)"
        assert build_scope().eq("test", Users.name).render() == "(name = 'test')"

    def test_value_and_value(self):
        assert build_scope().eq(1, 2).render() == "(1 = 2)"
        assert build_scope().eq("a", "b").render() == "('a' = 'b')"

    def test_expression_and_expression(self):
        assert build_scope().eq(Users.id, integer(1)).render() == "(id = 1)"


class TestEqRejections:
    """Tests for operands with no active capability."""

    def test_mismatched_raw_value(self):
        with pytest.raises(UnsupportedConversionError):
            build_scope().eq(Users.id, "1")
        with pytest.raises(UnsupportedConversionError):
            build_scope().eq("1", Users.id)

    def test_mismatched_raw_values(self):
        with pytest.raises(UnsupportedConversionError):
            build_scope().eq(1, "1")

    def test_bool_is_not_an_integer(self):
        with pytest.raises(UnsupportedConversionError):
            build_scope().eq(Users.id, True)

    def test_type_without_capability(self):
        with pytest.raises(UnsupportedConversionError) as exc_info:
            build_scope().eq(Users.score, 1.5)
        assert exc_info.value.target_type is float

    def test_raw_value_without_capability(self):
        with pytest.raises(UnsupportedConversionError):
            build_scope().eq(1.5, 2.5)

    def test_mismatched_expressions(self):
        with pytest.raises(UnsupportedConversionError):
            build_scope().eq(Users.id, Users.name)


class TestCapabilities:
    """Tests for capability lookup."""

    def test_capability_for(self):
        scope = build_scope()
        assert isinstance(scope.capability_for(int), IntExpressable)
        assert isinstance(scope.capability_for(str), TextExpressable)

    def test_capability_for_missing_type(self):
        with pytest.raises(UnsupportedConversionError):
            build_scope().capability_for(float)

    def test_first_capability_for_a_type_wins(self):
        first = TextExpressable()
        scope = ExpressionScope([first, TextExpressable(FilterConfig(quote_char='"'))])
        assert scope.capability_for(str) is first

    def test_lift_passes_expressions_through(self):
        assert build_scope().lift(Users.id) is Users.id
        assert build_scope().lift(Users.id, int) is Users.id

    def test_lift_rejects_expression_of_other_type(self):
        with pytest.raises(UnsupportedConversionError):
            build_scope().lift(Users.id, str)

    def test_extra_capability(self):
        scope = ExpressionScope([*default_expressables(), DoubleExpressable()])
        assert scope.eq(Users.score, 1.5).render() == "(score = 1.5)"

    def test_ints_rejected_without_integer_capability(self):
        scope = ExpressionScope([TextExpressable(), DoubleExpressable()])
        with pytest.raises(UnsupportedConversionError):
            scope.eq(1, 1)
        with pytest.raises(UnsupportedConversionError):
            scope.eq(Users.score, 1)
        assert scope.eq(Users.score, 1.0).render() == "(score = 1.0)"


class TestFilter:
    """Tests for the filter_ entry point."""

    def test_receiver_is_passed_to_build(self):
        received = []

        def build(scope, receiver):
            received.append((scope, receiver))
            return scope.eq(receiver.id, 1)

        filter_(Users, build)
        scope, receiver = received[0]
        assert isinstance(scope, ExpressionScope)
        assert receiver is Users

    def test_default_scope_has_two_capabilities(self):
        scopes = []

        def build(scope, receiver):
            scopes.append(scope)
            return scope.eq(receiver.id, 1)

        filter_(Users, build)
        assert [type(cap) for cap in scopes[0].expressables] == [IntExpressable, TextExpressable]

    def test_each_call_gets_its_own_scope(self):
        scopes = []

        def build(scope, receiver):
            scopes.append(scope)
            return scope.eq(receiver.id, 1)

        filter_(Users, build)
        filter_(Users, build)
        assert scopes[0] is not scopes[1]

    def test_custom_expressables(self):
        f = filter_(
            Users,
            lambda s, u: s.eq(u.score, 0.5) & s.eq(u.id, 2),
            expressables=[IntExpressable(), DoubleExpressable()],
        )
        assert f.render() == "((score = 0.5) and (id = 2))"

    def test_config_reaches_text_capability(self):
        f = filter_(
            Users, lambda s, u: s.eq(u.name, "O'Brien"), config=FilterConfig(escape_quotes=True)
        )
        assert f.render() == "(name = 'O''Brien')"

    def test_boolean_property_joins_with_and(self):
        f = filter_(Users, lambda s, u: s.and_(u.active, s.eq(u.id, 1)))
        assert f.render() == "(active and (id = 1))"

    def test_build_must_return_filter(self):
        with pytest.raises(UnsupportedConversionError):
            filter_(Users, lambda s, u: u.id)  # type: ignore[arg-type,return-value]

    def test_error_raised_during_build(self):
        with pytest.raises(UnsupportedConversionError):
            filter_(Users, lambda s, u: s.eq(u.id, 1) & s.eq(u.name, 2))

"""内置运算与扩展能力测试"""

import math

import pytest

from core import (
    Extension, Operators, Token, TokenType, numeric_token, boolean_token,
    string_token, null_token, make_operator,
)
from core.operators import BINARY_OPERATOR, BOOLEAN_OPERATOR, UNARY_PREFIX_OPERATOR, FUNCTION, CONSTANT


def _binary(symbol, left, right):
    return BINARY_OPERATOR.evaluate(Token(TokenType.BINARY_LEFT, symbol), [left, right])


NAN = numeric_token(float("nan"))
ONE = numeric_token(1)
TRUE = boolean_token(True)
FALSE = boolean_token(False)


class TestArithmetic:

    def test_basic(self):
        assert _binary("+", numeric_token(2), numeric_token(3)).text == "5"
        assert _binary("*", numeric_token(2), numeric_token(3)).text == "6"
        assert _binary("/", numeric_token(1), numeric_token(4)).text == "0.25"

    def test_division_by_zero(self):
        assert _binary("/", ONE, numeric_token(0)).text == "inf"
        assert math.isnan(_binary("/", numeric_token(0), numeric_token(0)).numeric)

    def test_nan_propagates(self):
        for symbol in "+-*/":
            result = _binary(symbol, NAN, ONE)
            assert result.type is TokenType.NUMERIC
            assert math.isnan(result.numeric)

    def test_non_numeric_operand_is_nan(self):
        assert math.isnan(_binary("+", string_token("abc"), ONE).numeric)


class TestComparison:

    def test_results_are_boolean(self):
        assert _binary("<", ONE, numeric_token(2)).text == "true"
        assert _binary(">=", ONE, numeric_token(2)).text == "false"

    def test_nan_semantics(self):
        assert _binary("<", NAN, ONE).text == "false"
        assert _binary("==", NAN, NAN).text == "false"
        assert _binary("!=", NAN, ONE).text == "true"

    def test_boolean_equality_overload(self):
        assert _binary("==", TRUE, TRUE).text == "true"
        assert _binary("!=", TRUE, FALSE).text == "true"
        assert _binary("==", FALSE, FALSE).text == "true"

    def test_mixed_operands_compare_numerically(self):
        assert _binary("==", TRUE, ONE).text == "false"


class TestBoolean:

    def test_logic(self):
        token = Token(TokenType.BOOLEAN, "&&")
        assert BOOLEAN_OPERATOR.evaluate(token, [TRUE, FALSE]).text == "false"
        token = Token(TokenType.BOOLEAN, "or")
        assert BOOLEAN_OPERATOR.evaluate(token, [TRUE, FALSE]).text == "true"

    def test_rejects_non_boolean(self):
        token = Token(TokenType.BOOLEAN, "||")
        assert BOOLEAN_OPERATOR.evaluate(token, [ONE, TRUE]).text == "Left operand is not a boolean value"
        assert BOOLEAN_OPERATOR.evaluate(token, [TRUE, ONE]).text == "Right operand is not a boolean value"


class TestUnaryAndFunctions:

    def test_unary_plus_is_identity(self):
        operand = string_token("x")
        assert UNARY_PREFIX_OPERATOR.evaluate(Token(TokenType.UNARY_PREFIX, "+"), [operand]) is operand

    def test_unary_minus(self):
        assert UNARY_PREFIX_OPERATOR.evaluate(Token(TokenType.UNARY_PREFIX, "-"), [ONE]).text == "-1"

    def test_round_half_to_even(self):
        token = Token(TokenType.FUNCTION, "round", arity=1)
        assert FUNCTION.evaluate(token, [numeric_token(2.5)]).text == "2"
        assert FUNCTION.evaluate(token, [numeric_token(3.5)]).text == "4"

    def test_atan2_argument_order(self):
        token = Token(TokenType.FUNCTION, "atan2", arity=2)
        result = FUNCTION.evaluate(token, [ONE, numeric_token(0)])
        assert result.numeric == pytest.approx(math.pi / 2)

    def test_sqrt_of_negative_is_nan(self):
        token = Token(TokenType.FUNCTION, "sqrt", arity=1)
        assert math.isnan(FUNCTION.evaluate(token, [numeric_token(-1)]).numeric)

    def test_unknown_names(self):
        assert FUNCTION.evaluate(Token(TokenType.FUNCTION, "foo"), [ONE]).text == 'Unknown function: "foo"'
        assert CONSTANT.evaluate(Token(TokenType.KEYWORD, "tau"), []).text == 'Unknown keyword: "tau"'
        assert _binary("%", ONE, ONE).text == 'Unknown operator: "%"'


class TestToToken:

    def test_conversions(self):
        assert Operators.to_token(True).type is TokenType.BOOL
        assert Operators.to_token(3).text == "3"
        assert Operators.to_token(None).type is TokenType.NULL
        assert Operators.to_token("x").type is TokenType.STRING
        token = null_token()
        assert Operators.to_token(token) is token

    def test_rejects_unknown_types(self):
        with pytest.raises(TypeError):
            Operators.to_token(object())


def test_extension_wraps_plain_results():
    token = make_operator(TokenType.BINARY_LEFT, "max", 40,
                          lambda op, args: max(args[0].numeric, args[1].numeric))
    assert isinstance(token.evaluator, Extension)
    assert token.arity == 2
    assert token.evaluator.evaluate(token, [ONE, numeric_token(5)]).text == "5"

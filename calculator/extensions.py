"""示例扩展 - 演示如何向计算器添加运算符、函数和常量"""
import numpy as np

from core import (
    TokenType, VARIADIC, error_token,
    make_constant, make_function, make_operator, numeric_function,
)


def _if(token, args):
    """if(cond, a, b)：cond 必须是布尔值"""
    condition, when_true, when_false = args
    if condition.type is not TokenType.BOOL:
        return error_token(f"{token.text}() condition is not a boolean value")
    return when_true if condition.boolean else when_false


def _reduce(func):
    """可变参数数值函数：至少需要一个参数"""
    numeric = numeric_function(func)

    def _evaluate(token, args):
        if not args:
            return error_token(f"{token.text}() requires at least one argument")
        return numeric(token, args)
    return _evaluate


def example_extensions():
    """返回示例扩展Token列表"""
    return [
        # 右结合幂运算：2^3^2 = 2^9
        make_operator(TokenType.BINARY_RIGHT, '^', 50, numeric_function(np.power)),
        # 后缀百分号：50% = 0.5
        make_operator(TokenType.UNARY_POSTFIX, '%', 60, numeric_function(lambda x: x / 100)),
        make_function('max', _reduce(lambda *xs: np.max(xs)), VARIADIC),
        make_function('min', _reduce(lambda *xs: np.min(xs)), VARIADIC),
        make_function('if', _if, 3),
        make_constant('e', np.e),
    ]


def register_example_extensions(calculator):
    for token in example_extensions():
        calculator.register_extension(token)
    return calculator

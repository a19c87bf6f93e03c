"""core/operators.py"""
from abc import ABC, abstractmethod
import logging

import numpy as np

from config.config import PRECEDENCE_CONFIG
from core.token_system import (
    Token, TokenType, numeric_token, boolean_token, string_token,
    null_token, error_token,
)

logger = logging.getLogger(__name__)


class Evaluable(ABC):
    """Token 的求值能力：(token, 参数列表) -> Token"""

    @abstractmethod
    def evaluate(self, token, args):
        raise NotImplementedError


class Operators:
    """所有内置操作的静态方法集合，参数均为 float"""

    @staticmethod
    def to_token(value):
        """把 Python 值包装成 Token"""
        if isinstance(value, Token):
            return value
        if isinstance(value, (bool, np.bool_)):
            return boolean_token(bool(value))
        if value is None:
            return null_token()
        if isinstance(value, str):
            return string_token(value)
        if isinstance(value, (int, float, np.number)):
            return numeric_token(value)
        raise TypeError(f"Cannot convert {type(value).__name__} to a token")

    # 算术====================
    # numpy 标量运算：除零得到 inf/nan 而不是异常

    @staticmethod
    def add(left, right):
        return np.add(left, right)

    @staticmethod
    def sub(left, right):
        return np.subtract(left, right)

    @staticmethod
    def mul(left, right):
        return np.multiply(left, right)

    @staticmethod
    def div(left, right):
        return np.divide(left, right)

    # 比较：NaN 与任何值比较均为 False，!= 除外====================

    @staticmethod
    def less(left, right):
        return left < right

    @staticmethod
    def greater(left, right):
        return left > right

    @staticmethod
    def less_equal(left, right):
        return left <= right

    @staticmethod
    def greater_equal(left, right):
        return left >= right

    @staticmethod
    def equal(left, right):
        return left == right

    @staticmethod
    def not_equal(left, right):
        return left != right

    # 布尔====================

    @staticmethod
    def logical_and(left, right):
        return left and right

    @staticmethod
    def logical_or(left, right):
        return left or right

    # 一元前缀====================

    @staticmethod
    def negate(operand):
        return np.negative(operand)

    # 函数====================

    @staticmethod
    def floor(x):
        return np.floor(x)

    @staticmethod
    def ceil(x):
        return np.ceil(x)

    @staticmethod
    def round(x):
        """四舍六入五成双"""
        return np.round(x)

    @staticmethod
    def sqrt(x):
        return np.sqrt(x)

    @staticmethod
    def abs(x):
        return np.abs(x)

    @staticmethod
    def pow(x, y):
        return np.power(x, y)

    @staticmethod
    def sin(x):
        return np.sin(x)

    @staticmethod
    def cos(x):
        return np.cos(x)

    @staticmethod
    def tan(x):
        return np.tan(x)

    @staticmethod
    def atan(x):
        return np.arctan(x)

    @staticmethod
    def atan2(y, x):
        return np.arctan2(y, x)


def _unknown(kind, token):
    logger.error(f"Unknown {kind}: {token.text}")
    return error_token(f'Unknown {kind}: "{token.text}"')


class BinaryOperator(Evaluable):
    """二元算术/比较运算"""

    SYMBOLS = {
        '+': 'add', '-': 'sub', '*': 'mul', '/': 'div',
        '<': 'less', '>': 'greater', '<=': 'less_equal', '>=': 'greater_equal',
        '==': 'equal', '!=': 'not_equal',
    }

    def evaluate(self, token, args):
        left, right = args
        name = self.SYMBOLS.get(token.text)
        if name is None:
            return _unknown("operator", token)
        op_method = getattr(Operators, name)

        # 两边都是布尔值时 ==/!= 直接比较真值
        if name in ('equal', 'not_equal') and left.type is TokenType.BOOL and right.type is TokenType.BOOL:
            return boolean_token(op_method(left.boolean, right.boolean))

        with np.errstate(all='ignore'):
            result = op_method(left.numeric, right.numeric)
        return Operators.to_token(result)


class BooleanOperator(Evaluable):
    """&& || and or，只接受布尔操作数"""

    SYMBOLS = {'&&': 'logical_and', 'and': 'logical_and', '||': 'logical_or', 'or': 'logical_or'}

    def evaluate(self, token, args):
        left, right = args
        if left.type is not TokenType.BOOL:
            return error_token("Left operand is not a boolean value")
        if right.type is not TokenType.BOOL:
            return error_token("Right operand is not a boolean value")
        name = self.SYMBOLS.get(token.text.lower())
        if name is None:
            return _unknown("operator", token)
        return boolean_token(getattr(Operators, name)(left.boolean, right.boolean))


class UnaryPrefixOperator(Evaluable):

    def evaluate(self, token, args):
        operand = args[0]
        if token.text == '+':
            return operand
        if token.text == '-':
            with np.errstate(all='ignore'):
                return Operators.to_token(Operators.negate(operand.numeric))
        return _unknown("operator", token)


class Function(Evaluable):
    """内置数学函数，按名字分派到 Operators"""

    NAMES = frozenset({
        'floor', 'ceil', 'round', 'sqrt', 'abs', 'pow',
        'sin', 'cos', 'tan', 'atan', 'atan2',
    })

    def evaluate(self, token, args):
        name = token.text.lower()
        if name not in self.NAMES:
            return _unknown("function", token)
        with np.errstate(all='ignore'):
            result = getattr(Operators, name)(*[arg.numeric for arg in args])
        return Operators.to_token(result)


class Constant(Evaluable):
    """无参关键字常量"""

    VALUES = {'pi': np.pi}

    def evaluate(self, token, args):
        value = self.VALUES.get(token.text.lower())
        if value is None:
            return _unknown("keyword", token)
        return numeric_token(value)


class Extension(Evaluable):
    """
    调用方提供的求值函数

    func(token, args) 可以返回 Token，也可以返回 bool/数值/str/None，
    后者会被自动包装。
    """

    def __init__(self, func):
        self.func = func

    def evaluate(self, token, args):
        return Operators.to_token(self.func(token, args))

    def __repr__(self):
        return f"Extension({getattr(self.func, '__name__', self.func)!r})"


# 内置求值器单例
BINARY_OPERATOR = BinaryOperator()
BOOLEAN_OPERATOR = BooleanOperator()
UNARY_PREFIX_OPERATOR = UnaryPrefixOperator()
FUNCTION = Function()
CONSTANT = Constant()


def numeric_function(func):
    """把 func(*floats) 适配为扩展求值函数"""
    def _evaluate(token, args):
        with np.errstate(all='ignore'):
            return func(*[arg.numeric for arg in args])
    _evaluate.__name__ = getattr(func, '__name__', 'numeric_function')
    return _evaluate


def make_constant(name, value):
    """创建关键字常量扩展，如 e"""
    return Token(TokenType.KEYWORD, name, PRECEDENCE_CONFIG["bracket"],
                 Extension(lambda token, args: value))


def make_function(name, func, arity=1):
    """创建函数扩展；arity 为负数表示可变参数"""
    return Token(TokenType.FUNCTION, name, PRECEDENCE_CONFIG["bracket"], Extension(func), arity)


def make_operator(token_type, symbol, precedence, func):
    """创建运算符扩展"""
    arity = 1 if token_type in (TokenType.UNARY_PREFIX, TokenType.UNARY_POSTFIX) else 2
    return Token(token_type, symbol, precedence, Extension(func), arity)

"""core/token_system.py"""
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from config.config import CALCULATOR_CONFIG
from utils.formatting import format_number, parse_number

TRUE_VALUE = CALCULATOR_CONFIG["true_value"]
FALSE_VALUE = CALCULATOR_CONFIG["false_value"]
NULL_VALUE = CALCULATOR_CONFIG["null_value"]
VARIADIC = CALCULATOR_CONFIG["variadic_arity"]


class TokenType(Enum):
    SIGN = "sign"  # +/-，由转换器决定一元或二元
    UNARY_PREFIX = "unary_prefix"
    UNARY_POSTFIX = "unary_postfix"
    BINARY_LEFT = "binary_left"  # 左结合二元
    BINARY_RIGHT = "binary_right"  # 右结合二元
    BOOLEAN = "boolean"
    TERNARY = "ternary"
    STRING_DELIMITER = "string_delimiter"
    FUNCTION = "function"
    ARGUMENT_SEPARATOR = "argument_separator"
    TERNARY_SEPARATOR = "ternary_separator"
    OPEN_BRACKET = "open_bracket"
    CLOSE_BRACKET = "close_bracket"
    NUMERIC = "numeric"
    STRING = "string"
    BOOL = "bool"
    NULL = "null"
    KEYWORD = "keyword"  # 无参常量，如 pi
    ERROR = "error"


# 直接进入后缀输出的字面量类
LITERAL_TYPES = frozenset({
    TokenType.NUMERIC, TokenType.BOOL, TokenType.STRING,
    TokenType.NULL, TokenType.KEYWORD, TokenType.UNARY_POSTFIX,
})


@dataclass(frozen=True)
class Token:
    """
    表达式中的每个符号、数值、函数都是一个Token

    Args:
        type: TokenType
        text: 表达式中的原始文本，如 "(", "45", "+"
        precedence: 优先级，越大越先计算
        evaluator: Evaluable，负责求值；字面量为 None
        arity: 期望参数个数，负数表示可变参数
    """
    type: TokenType
    text: str
    precedence: int = 0
    evaluator: Optional["Evaluable"] = None
    arity: int = 0

    @property
    def numeric(self):
        return parse_number(self.text)

    @property
    def boolean(self):
        return self.text == TRUE_VALUE

    @property
    def is_error(self):
        return self.type is TokenType.ERROR

    @property
    def is_variadic(self):
        return self.arity < 0

    def __str__(self):
        return f'{self.type.name}: "{self.text}"'


def numeric_token(value):
    return Token(TokenType.NUMERIC, format_number(value))


def boolean_token(value):
    return Token(TokenType.BOOL, TRUE_VALUE if value else FALSE_VALUE)


def string_token(text):
    return Token(TokenType.STRING, text)


def null_token():
    return Token(TokenType.NULL, NULL_VALUE)


def error_token(message):
    return Token(TokenType.ERROR, message)

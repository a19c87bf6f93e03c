"""core/registry.py - 内置Token表与扩展注册"""
import logging
from typing import List, Optional

from config.config import PRECEDENCE_CONFIG
from core.token_system import Token, TokenType, boolean_token, null_token
from core.operators import (
    BINARY_OPERATOR, BOOLEAN_OPERATOR, FUNCTION, CONSTANT,
)

logger = logging.getLogger(__name__)

_BRACKET = PRECEDENCE_CONFIG["bracket"]
_SEPARATOR = PRECEDENCE_CONFIG["separator"]
_BOOLEAN = PRECEDENCE_CONFIG["boolean"]
_COMPARISON = PRECEDENCE_CONFIG["comparison"]
_ADDITIVE = PRECEDENCE_CONFIG["additive"]
_MULTIPLICATIVE = PRECEDENCE_CONFIG["multiplicative"]


def _function(name, arity):
    return Token(TokenType.FUNCTION, name, _BRACKET, FUNCTION, arity)


# 内置Token定义（按顺序匹配）
# 有公共前缀时较长的符号必须在前：<= 在 < 前，atan2 在 atan 前
BUILTIN_TOKENS = (
    # 正负号：由转换器决定一元/二元
    Token(TokenType.SIGN, '+', _ADDITIVE),
    Token(TokenType.SIGN, '-', _ADDITIVE),

    # 二元操作符
    Token(TokenType.BINARY_LEFT, '*', _MULTIPLICATIVE, BINARY_OPERATOR),
    Token(TokenType.BINARY_LEFT, '/', _MULTIPLICATIVE, BINARY_OPERATOR),
    Token(TokenType.BINARY_LEFT, '<=', _COMPARISON, BINARY_OPERATOR),
    Token(TokenType.BINARY_LEFT, '>=', _COMPARISON, BINARY_OPERATOR),
    Token(TokenType.BINARY_LEFT, '==', _COMPARISON, BINARY_OPERATOR),
    Token(TokenType.BINARY_LEFT, '!=', _COMPARISON, BINARY_OPERATOR),
    Token(TokenType.BINARY_LEFT, '<', _COMPARISON, BINARY_OPERATOR),
    Token(TokenType.BINARY_LEFT, '>', _COMPARISON, BINARY_OPERATOR),

    # 布尔操作符
    Token(TokenType.BOOLEAN, '&&', _BOOLEAN, BOOLEAN_OPERATOR),
    Token(TokenType.BOOLEAN, '||', _BOOLEAN, BOOLEAN_OPERATOR),
    Token(TokenType.BOOLEAN, 'and', _BOOLEAN, BOOLEAN_OPERATOR),
    Token(TokenType.BOOLEAN, 'or', _BOOLEAN, BOOLEAN_OPERATOR),

    # 字面量
    boolean_token(True),
    boolean_token(False),
    null_token(),

    # 括号与分隔符
    Token(TokenType.OPEN_BRACKET, '(', _BRACKET),
    Token(TokenType.CLOSE_BRACKET, ')', _BRACKET),
    Token(TokenType.ARGUMENT_SEPARATOR, ',', _SEPARATOR),
    Token(TokenType.TERNARY, '?', _SEPARATOR),
    Token(TokenType.TERNARY_SEPARATOR, ':', _SEPARATOR),
    Token(TokenType.STRING_DELIMITER, '"', _BOOLEAN),

    # 函数
    _function('floor', 1),
    _function('ceil', 1),
    _function('round', 1),
    _function('sqrt', 1),
    _function('abs', 1),
    _function('pow', 2),
    _function('sin', 1),
    _function('cos', 1),
    _function('tan', 1),
    _function('atan2', 2),
    _function('atan', 1),

    # 关键字常量
    Token(TokenType.KEYWORD, 'pi', _BRACKET, CONSTANT),
)


def _matches(token, expression, position):
    symbol = token.text
    end = position + len(symbol)
    if not symbol or end > len(expression):
        return False
    return expression[position:end].lower() == symbol.lower()


class TokenRegistry:
    """
    符号查找表：先查调用方注册的扩展（按注册顺序），再查内置表

    注意：不保证最长匹配，先注册的短符号会遮蔽共享前缀的长符号
    （例如先注册 foo 再注册 foobar，则 foobar 永远匹配不到）。
    """

    def __init__(self, extensions=None):
        self.extensions: List[Token] = list(extensions or [])

    def register(self, token: Token):
        """追加扩展Token，可覆盖同名内置符号"""
        self.extensions.append(token)
        logger.debug(f"Registered extension {token}")

    def lookup(self, expression: str, position: int, allow_functions: bool = True) -> Optional[Token]:
        """返回在 position 处匹配的第一个Token（忽略大小写），没有则返回 None"""
        for table in (self.extensions, BUILTIN_TOKENS):
            for token in table:
                if not _matches(token, expression, position):
                    continue
                if token.type is TokenType.FUNCTION and not allow_functions:
                    continue
                return token
        return None

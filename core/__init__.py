"""核心模块 - Token系统、分词器、调度场转换器和RPN评估器"""
from .token_system import (
    TokenType, Token, VARIADIC, TRUE_VALUE, FALSE_VALUE,
    numeric_token, boolean_token, string_token, null_token, error_token,
)
from .operators import (
    Evaluable, Extension, Operators,
    make_constant, make_function, make_operator, numeric_function,
)
from .registry import BUILTIN_TOKENS, TokenRegistry
from .tokenizer import Tokenizer
from .shunting_yard import InfixConverter
from .rpn_evaluator import RPNEvaluator

__all__ = [
    'TokenType', 'Token', 'VARIADIC', 'TRUE_VALUE', 'FALSE_VALUE',
    'numeric_token', 'boolean_token', 'string_token', 'null_token', 'error_token',
    'Evaluable', 'Extension', 'Operators',
    'make_constant', 'make_function', 'make_operator', 'numeric_function',
    'BUILTIN_TOKENS', 'TokenRegistry',
    'Tokenizer', 'InfixConverter', 'RPNEvaluator',
]

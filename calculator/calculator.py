"""计算器 - 对外接口，串联分词、转换、求值三个阶段"""
import logging
from typing import List, Optional, Tuple

import numpy as np

from config.config import CALCULATOR_CONFIG
from core import Token, TokenType, TokenRegistry, Tokenizer, InfixConverter, RPNEvaluator
from utils.formatting import format_number_precision

logger = logging.getLogger(__name__)


class Calculator:
    """
    对文本形式的数学/布尔表达式求值

    每次调用都使用自己的局部缓冲区，同一个实例可以被多个线程同时使用；
    注册扩展时需要调用方自行同步。
    """

    def __init__(self, extensions=None, registry: Optional[TokenRegistry] = None):
        self.registry = registry if registry is not None else TokenRegistry()
        for token in extensions or []:
            self.registry.register(token)

    def register_extension(self, token: Token):
        """注册扩展Token，查找时优先于内置符号"""
        self.registry.register(token)

    # 公共接口====================

    def evaluate(self, expression: str) -> str:
        result = self.evaluate_token(expression)
        precision = CALCULATOR_CONFIG["display_precision"]
        if precision and result.type is TokenType.NUMERIC:
            return format_number_precision(result.numeric, precision)
        return result.text

    def try_evaluate(self, expression: str) -> Tuple[bool, str]:
        result = self.evaluate_token(expression)
        return not result.is_error, result.text

    def try_evaluate_numeric(self, expression: str) -> Tuple[bool, float]:
        result = self.evaluate_token(expression)
        if result.type is TokenType.NUMERIC:
            return True, result.numeric
        return False, np.nan

    def evaluate_token(self, expression: str) -> Token:
        """返回结果Token"""
        postfix = self.to_postfix(expression)
        result = RPNEvaluator.evaluate(postfix)
        if result.is_error:
            logger.debug(f"Error evaluating {expression!r}: {result.text}")
        return result

    # 调试辅助====================

    def to_postfix(self, expression: str) -> List[Token]:
        infix = Tokenizer.tokenize(expression, self.registry)
        return InfixConverter.to_postfix(infix)

    def explain(self, expression: str) -> str:
        """后缀表达式文本，函数参数起点显示为 ("""
        return ' '.join(token.text for token in self.to_postfix(expression))

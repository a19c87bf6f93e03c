"""表达式分词器 - 文本 -> 中缀Token序列"""
import logging
from typing import List

from core.token_system import Token, TokenType, null_token, string_token, error_token

logger = logging.getLogger(__name__)


def is_numeric_char(char):
    return '0' <= char <= '9' or char == '.'


class Tokenizer:
    """从左到右扫描表达式"""

    @staticmethod
    def tokenize(expression, registry) -> List[Token]:
        """
        Args:
            expression: 表达式字符串
            registry: TokenRegistry
        Returns:
            中缀Token列表；遇到无法识别的字符时只返回一个错误Token
        """
        infix = []
        length = len(expression)
        c = 0

        while c < length:
            char = expression[c]

            # 跳过空格
            if char == ' ':
                c += 1
                continue

            # 数值：贪婪读取所有数字和小数点
            if is_numeric_char(char):
                end = c + 1
                while end < length and is_numeric_char(expression[end]):
                    end += 1
                infix.append(Token(TokenType.NUMERIC, expression[c:end]))
                c = end
                continue

            op = registry.lookup(expression, c, True)
            if op is None:
                # 无法识别的字符：丢弃已有结果
                logger.debug(f"Unrecognized character {char!r} at index {c} in {expression!r}")
                return [error_token(f"Unrecognized characters in expression at index {c}")]

            prev_type = infix[-1].type if infix else None

            if op.type in (TokenType.ARGUMENT_SEPARATOR, TokenType.CLOSE_BRACKET):
                # 省略的参数补 null，例如 f(,) -> f(null,null)
                if prev_type in (TokenType.OPEN_BRACKET, TokenType.ARGUMENT_SEPARATOR):
                    infix.append(null_token())
                c += len(op.text)

            elif op.type is TokenType.STRING_DELIMITER:
                # 字符串：读到下一个相同分隔符，不处理转义
                delimiter = op.text
                start = c + len(delimiter)
                end = expression.find(delimiter, start)
                if end < 0:
                    logger.debug(f"Unterminated string at index {c} in {expression!r}")
                    return [error_token(f"Unterminated string literal starting at index {c}")]
                op = string_token(expression[start:end])
                c = end + len(delimiter)

            else:
                c += len(op.text)

            infix.append(op)

        return infix

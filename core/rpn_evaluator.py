"""RPN表达式求值器 - 调用每个Token的求值器"""
import logging

from core.token_system import TokenType, error_token

logger = logging.getLogger(__name__)

_UNARY_TYPES = (TokenType.UNARY_PREFIX, TokenType.UNARY_POSTFIX)
_BINARY_TYPES = (TokenType.BINARY_LEFT, TokenType.BINARY_RIGHT, TokenType.BOOLEAN)
_VALUE_TYPES = (
    TokenType.STRING, TokenType.BOOL, TokenType.NUMERIC,
    TokenType.NULL, TokenType.OPEN_BRACKET,
)


def _invalid_expression():
    return error_token("Invalid expression")


class RPNEvaluator:
    """评估RPN表达式的值"""

    @staticmethod
    def evaluate(postfix):
        """
        Args:
            postfix: InfixConverter 输出的后缀序列
        Returns:
            结果Token；任何错误都以错误Token返回
        """
        if not postfix:
            return _invalid_expression()

        stack = []

        for token in postfix:
            kind = token.type

            if kind is TokenType.ERROR:
                return token

            if kind in _VALUE_TYPES:
                stack.append(token)
                continue

            if kind in _UNARY_TYPES:
                if len(stack) < 1:
                    logger.debug(f"Insufficient operands for {token.text}")
                    return _invalid_expression()
                args = [stack.pop()]

            elif kind in _BINARY_TYPES:
                if len(stack) < 2:
                    logger.debug(f"Insufficient operands for {token.text}")
                    return _invalid_expression()
                right = stack.pop()
                args = [stack.pop(), right]

            elif kind is TokenType.FUNCTION:
                # 弹出直到参数起点标记
                args = []
                while stack and stack[-1].type is not TokenType.OPEN_BRACKET:
                    args.append(stack.pop())
                if not stack:
                    logger.debug(f"Missing argument marker for {token.text}()")
                    return _invalid_expression()
                stack.pop()
                args.reverse()
                if not token.is_variadic and token.arity != len(args):
                    return error_token(
                        f"Argument count mismatch in function {token.text}().  "
                        f"Expected {token.arity} got {len(args)}.")

            elif kind is TokenType.KEYWORD:
                args = []

            else:
                logger.debug(f"Unexpected token in postfix: {token}")
                return _invalid_expression()

            if token.evaluator is None:
                logger.error(f"Unknown operator: {token.text}")
                return error_token(f'Unknown operator: "{token.text}"')

            result = token.evaluator.evaluate(token, args)
            if result.is_error:
                return result
            stack.append(result)

        # 栈中应只剩一个值：结果
        if len(stack) != 1:
            logger.debug(f"Stack has {len(stack)} elements after evaluation, expected 1")
            return _invalid_expression()
        return stack[0]

"""调度场算法 - 中缀Token序列 -> 后缀(RPN)序列"""
import dataclasses
import logging
from typing import List

from config.config import PRECEDENCE_CONFIG
from core.token_system import Token, TokenType, LITERAL_TYPES, error_token
from core.operators import BINARY_OPERATOR, UNARY_PREFIX_OPERATOR

logger = logging.getLogger(__name__)

# 这些Token之后的 +/- 是二元运算符
_BINARY_SIGN_PREDECESSORS = frozenset({
    TokenType.CLOSE_BRACKET, TokenType.NUMERIC,
    TokenType.KEYWORD, TokenType.UNARY_POSTFIX,
})


class ConversionError(Exception):
    """转换失败，message 即错误Token的文本"""


def function_marker():
    """后缀序列中标记函数参数起点的左括号"""
    return Token(TokenType.OPEN_BRACKET, '(', PRECEDENCE_CONFIG["bracket"])


class InfixConverter:

    @staticmethod
    def to_postfix(infix) -> List[Token]:
        """
        Args:
            infix: Tokenizer 输出的中缀序列
        Returns:
            后缀序列；出错时只包含一个错误Token
        """
        postfix = []
        stack = []
        try:
            InfixConverter._convert(infix, postfix, stack)
        except ConversionError as e:
            logger.debug(f"Conversion failed: {e}")
            return [error_token(str(e))]
        return postfix

    @staticmethod
    def _convert(infix, postfix, stack):
        prev_type = None

        for i, token in enumerate(infix):
            kind = token.type

            if kind is TokenType.ERROR:
                # 上一阶段的错误原样传递
                postfix[:] = [token]
                return

            if kind in LITERAL_TYPES:
                postfix.append(token)

            elif kind is TokenType.FUNCTION:
                if i + 1 >= len(infix) or infix[i + 1].type is not TokenType.OPEN_BRACKET:
                    raise ConversionError(f'Function missing open bracket: "{token.text}"')
                stack.append(token)
                postfix.append(function_marker())

            elif kind in (TokenType.UNARY_PREFIX, TokenType.OPEN_BRACKET):
                stack.append(token)

            elif kind is TokenType.BINARY_LEFT:
                InfixConverter._pop_operators(token, postfix, stack, inclusive=True)
                stack.append(token)

            elif kind in (TokenType.BOOLEAN, TokenType.BINARY_RIGHT):
                InfixConverter._pop_operators(token, postfix, stack, inclusive=False)
                stack.append(token)

            elif kind is TokenType.SIGN:
                if prev_type in _BINARY_SIGN_PREDECESSORS:
                    InfixConverter._pop_operators(token, postfix, stack, inclusive=True)
                    stack.append(dataclasses.replace(
                        token, type=TokenType.BINARY_LEFT, evaluator=BINARY_OPERATOR, arity=2))
                else:
                    stack.append(dataclasses.replace(
                        token, type=TokenType.UNARY_PREFIX, evaluator=UNARY_PREFIX_OPERATOR, arity=1))

            elif kind is TokenType.ARGUMENT_SEPARATOR:
                while stack and stack[-1].type not in (TokenType.OPEN_BRACKET, TokenType.ARGUMENT_SEPARATOR):
                    postfix.append(stack.pop())
                if not stack:
                    raise ConversionError("Misplaced argument separator")
                stack.append(token)

            elif kind is TokenType.CLOSE_BRACKET:
                InfixConverter._close_bracket(postfix, stack)

            else:
                raise ConversionError(f"Unsupported symbol type: {kind.value}")

            prev_type = kind

        # 剩余的栈全部输出
        while stack:
            top = stack.pop()
            if top.type is TokenType.OPEN_BRACKET:
                raise ConversionError("Mismatched brackets")
            postfix.append(top)

    @staticmethod
    def _pop_operators(token, postfix, stack, inclusive):
        """弹出优先级不低于(inclusive)或高于当前运算符的栈顶运算符"""
        while stack:
            top = stack[-1]
            if top.type is TokenType.OPEN_BRACKET:
                break
            if top.precedence > token.precedence or (inclusive and top.precedence == token.precedence):
                postfix.append(stack.pop())
            else:
                break

    @staticmethod
    def _close_bracket(postfix, stack):
        if not stack:
            raise ConversionError("Mismatched brackets")

        # 丢弃参数分隔符，同时统计参数个数
        arg_count = 1
        while stack and stack[-1].type is not TokenType.OPEN_BRACKET:
            top = stack.pop()
            if top.type is TokenType.ARGUMENT_SEPARATOR:
                arg_count += 1
            else:
                postfix.append(top)
        if not stack:
            raise ConversionError("Mismatched brackets")
        stack.pop()

        if stack and stack[-1].type is TokenType.FUNCTION:
            func = stack[-1]
            if not func.is_variadic and func.arity != arg_count:
                raise ConversionError(
                    f"Argument count mismatch.  Function {func.text}() expects {func.arity} "
                    f"parameter{'' if func.arity == 1 else 's'}, but received {arg_count}")
            postfix.append(stack.pop())

"""主程序入口 - 命令行计算器"""
import argparse
import logging
import sys

from config.config import LOGGING_CONFIG, validate_config
from calculator import Calculator, register_example_extensions

logger = logging.getLogger(__name__)


def evaluate_expression(calculator, expression, numeric=False, show_rpn=False):
    """求值单个表达式并打印结果，返回是否成功"""
    if show_rpn:
        print(f"RPN: {calculator.explain(expression)}")

    if numeric:
        ok, value = calculator.try_evaluate_numeric(expression)
        print(value)
    else:
        ok, text = calculator.try_evaluate(expression)
        print(text if ok else f"Error: {text}")
    return ok


def main(args, stdin=None):
    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.WARNING),
        format=LOGGING_CONFIG["format"]
    )
    validate_config()

    calculator = Calculator()
    if args.use_examples:
        register_example_extensions(calculator)
        logger.info(f"Registered {len(calculator.registry.extensions)} example extensions")

    if args.expressions:
        expressions = args.expressions
    else:
        # 没有参数时从标准输入逐行读取
        stdin = stdin if stdin is not None else sys.stdin
        expressions = [line.strip() for line in stdin if line.strip()]

    failures = 0
    for expression in expressions:
        if not evaluate_expression(calculator, expression, args.numeric, args.show_rpn):
            failures += 1

    if failures:
        logger.warning(f"{failures} of {len(expressions)} expressions failed")
    return 1 if failures else 0


def build_parser():
    parser = argparse.ArgumentParser(description="Expression Calculator")

    parser.add_argument(
        "expressions",
        nargs="*",
        help="Expressions to evaluate; read from stdin when omitted"
    )
    parser.add_argument(
        "--numeric",
        action="store_true",
        help="Only accept numeric results"
    )
    parser.add_argument(
        "--show_rpn",
        action="store_true",
        help="Print the postfix (RPN) form of each expression"
    )
    parser.add_argument(
        "--use_examples",
        action="store_true",
        help="Register the example extensions (^, %%, max, min, if, e)"
    )
    parser.add_argument(
        "--log_level",
        type=str,
        default=LOGGING_CONFIG["level"],
        help="Logging level (default: WARNING)"
    )
    return parser


if __name__ == "__main__":
    args = build_parser().parse_args()
    sys.exit(main(args))

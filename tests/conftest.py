"""
pytest 公共fixture
"""

import pytest

from calculator import Calculator, register_example_extensions
from core import TokenRegistry, Tokenizer, InfixConverter


@pytest.fixture
def calculator():
    return Calculator()


@pytest.fixture
def example_calculator():
    return register_example_extensions(Calculator())


@pytest.fixture
def registry():
    return TokenRegistry()


@pytest.fixture
def postfix_of(registry):
    """表达式 -> 后缀Token列表"""
    def _postfix_of(expression):
        return InfixConverter.to_postfix(Tokenizer.tokenize(expression, registry))
    return _postfix_of

"""符号查找表测试"""

from core import (
    BUILTIN_TOKENS, Token, TokenType, TokenRegistry,
    make_constant, make_function,
)


def _noop(token, args):
    return None


class TestLookup:

    def test_builtin_match(self, registry):
        token = registry.lookup("1 + 2", 2)
        assert token.type is TokenType.SIGN
        assert token.text == "+"

    def test_case_insensitive(self, registry):
        assert registry.lookup("SIN(1)", 0).text == "sin"
        assert registry.lookup("True", 0).type is TokenType.BOOL

    def test_longer_builtin_symbols_win(self, registry):
        assert registry.lookup("1<=2", 1).text == "<="
        assert registry.lookup("atan2(1,1)", 0).text == "atan2"
        assert registry.lookup("atan(1)", 0).text == "atan"

    def test_functions_only_when_allowed(self, registry):
        assert registry.lookup("sin(1)", 0, allow_functions=False) is None
        assert registry.lookup("pi", 0, allow_functions=False).type is TokenType.KEYWORD

    def test_no_match(self, registry):
        assert registry.lookup("3 @ 4", 2) is None

    def test_symbol_past_end_does_not_match(self, registry):
        assert registry.lookup("at", 0) is None


class TestExtensions:

    def test_extensions_checked_before_builtins(self, registry):
        custom = make_constant("pi", 3)
        registry.register(custom)
        assert registry.lookup("pi", 0) is custom

    def test_registration_order_shadows_longer_symbol(self, registry):
        foo = make_function("foo", _noop, 1)
        foobar = make_function("foobar", _noop, 1)
        registry.register(foo)
        registry.register(foobar)
        assert registry.lookup("foobar(1)", 0) is foo

    def test_registries_are_independent(self):
        first = TokenRegistry()
        second = TokenRegistry()
        first.register(make_constant("e", 2.7))
        assert first.lookup("e", 0) is not None
        assert second.lookup("e", 0) is None

    def test_initial_extensions(self):
        custom = Token(TokenType.BINARY_LEFT, "%", 40)
        registry = TokenRegistry([custom])
        assert registry.extensions == [custom]


def test_builtin_table_is_immutable():
    assert isinstance(BUILTIN_TOKENS, tuple)
    names = {token.text for token in BUILTIN_TOKENS if token.type is TokenType.FUNCTION}
    assert names == {"floor", "ceil", "round", "sqrt", "abs", "pow",
                     "sin", "cos", "tan", "atan", "atan2"}

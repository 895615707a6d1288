import pytest

from tokscope.scope import ScopeError, find_scope_end, tokens_until_unscoped_comma
from tokscope.tokenizer import tokenize


def _values(tokens):
    return [t.value for t in tokens]


def test_find_scope_end_nested():
    tokens = tokenize("f ( a , [ b ] ) x")
    assert find_scope_end(tokens, 0) == _values(tokens).index(")")


def test_find_scope_end_from_start_index():
    tokens = tokenize("{ a } { b }")
    second_open = _values(tokens).index("{", 1)
    assert find_scope_end(tokens, second_open) == len(tokens) - 1


def test_find_scope_end_with_initial_stack():
    tokens = tokenize("a } b")
    assert find_scope_end(tokens, 0, ["{"]) == _values(tokens).index("}")


def test_find_scope_end_does_not_modify_stack():
    stack = ["{"]
    find_scope_end(tokenize("a }"), 0, stack)
    assert stack == ["{"]


def test_find_scope_end_mismatch():
    with pytest.raises(ScopeError, match="Mismatched"):
        find_scope_end(tokenize("( ]"), 0)


def test_find_scope_end_closer_without_opener():
    with pytest.raises(ScopeError, match="without opener"):
        find_scope_end(tokenize("a )"), 0)


def test_find_scope_end_never_closed():
    with pytest.raises(ScopeError, match="never closed"):
        find_scope_end(tokenize("( a"), 0)


def test_until_comma_simple():
    code = "a, b"
    tokens, pos = tokens_until_unscoped_comma(code, 0)
    assert _values(tokens) == ["a"]
    assert pos == code.index(",") + 1
    rest, end = tokens_until_unscoped_comma(code, pos)
    assert _values(rest) == ["b"]
    assert end == len(code)


def test_until_comma_ignores_scoped_commas():
    code = "f(a , b) , c"
    tokens, pos = tokens_until_unscoped_comma(code, 0)
    assert _values(tokens) == ["f", "(", "a", ",", "b", ")"]
    rest, _ = tokens_until_unscoped_comma(code, pos)
    assert _values(rest) == ["c"]


def test_until_comma_mismatch_raises():
    with pytest.raises(ScopeError):
        tokens_until_unscoped_comma("( a ]", 0)


def test_until_comma_unopened_closer_raises():
    with pytest.raises(ScopeError):
        tokens_until_unscoped_comma("a ) b", 0)
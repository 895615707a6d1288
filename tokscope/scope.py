"""Finding where bracketed scopes end in token streams."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from tokscope.tokenizer import next_token
from tokscope.tokens import Token, TokenType

_CLOSER_TO_OPENER = {")": "(", "}": "{", "]": "["}
_OPENERS = frozenset(_CLOSER_TO_OPENER.values())


class ScopeError(ValueError):
    """Raised for unbalanced or mismatched brackets."""


def _close(stack: list[str], closer: str) -> None:
    if not stack:
        raise ScopeError("Unexpected closing scope without opener")
    if stack[-1] != _CLOSER_TO_OPENER[closer]:
        raise ScopeError("Mismatched closing punctuation")
    stack.pop()


def find_scope_end(tokens: Sequence[Token], start: int = 0, stack: Iterable[str] = ()) -> int:
    """Return the index of the token that empties the bracket stack.

    Only single-character punctuation tokens count; ``stack`` holds brackets
    already open before ``start``.
    """
    open_brackets = list(stack)
    for index, token in enumerate(tokens[start:], start):
        if token.type is not TokenType.PUNCTUATION or len(token.value) != 1:
            continue
        if token.value in _OPENERS:
            open_brackets.append(token.value)
        elif token.value in _CLOSER_TO_OPENER:
            _close(open_brackets, token.value)
            if not open_brackets:
                return index
    raise ScopeError("Scope never closed")


def tokens_until_unscoped_comma(code: str, pos: int) -> tuple[list[Token], int]:
    """Read tokens up to a comma outside any brackets.

    The comma is consumed but not returned. Returns the tokens and the
    position to resume from.
    """
    tokens: list[Token] = []
    stack: list[str] = []
    while pos < len(code):
        token, pos = next_token(code, pos)
        if token.type is TokenType.NOTHING:
            break
        if token.type is TokenType.PUNCTUATION:
            if token.value in _OPENERS:
                stack.append(token.value)
            elif token.value in _CLOSER_TO_OPENER:
                _close(stack, token.value)
            elif token.value == "," and not stack:
                break
        tokens.append(token)
    return tokens, pos
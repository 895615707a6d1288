"""Token kinds, the token record and helpers for reporting unexpected tokens."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

_GREEN = "\033[1;32m"
_RESET = "\033[0m"


class TokenType(Enum):
    """The kinds of token the tokenizer produces."""

    COMMENT = "COMMENT"
    IDENTIFIER = "IDENTIFIER"
    KEYWORD = "KEYWORD"
    PUNCTUATION = "PUNCTUATION"
    NUMBER = "NUMBER"
    STRING = "STRING"
    NOTHING = "NOTHING"

    def __str__(self) -> str:
        return self.value


_LETTERS = frozenset("abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ")
_DIGITS = frozenset("0123456789")
_PUNCTUATION = frozenset("!\"#$%&'()*+,-./:;<=>?@[\\]^`{|}~")

# (characters that may start a token, characters that may continue it, kind),
# tried in this order.
CHAR_CATEGORIES: tuple[tuple[frozenset[str], frozenset[str], TokenType], ...] = (
    (_LETTERS | {"_"}, _LETTERS | _DIGITS | {"_"}, TokenType.IDENTIFIER),
    (_DIGITS, _DIGITS | {"."}, TokenType.NUMBER),
    (_PUNCTUATION, _PUNCTUATION, TokenType.PUNCTUATION),
)

BUILT_IN_TYPES: frozenset[str] = frozenset(
    {
        "if", "else", "while", "for", "do", "break", "continue", "return",
        "switch", "case", "default", "try", "catch", "finally", "throw",
        "synchronized", "native", "static",
    }
)

USER_DEFINED_TYPES: set[str] = set()


@dataclass(frozen=True)
class Token:
    """A token; ``pos`` is the offset in the code just past the token."""

    type: TokenType
    value: str
    pos: int

    def __str__(self) -> str:
        return f'Token{{type={self.type}, value="{self.value}", i={self.pos}}}'

    def highlighted(self, code: str) -> str:
        """Return ``code`` with the token's value inserted in green at ``pos``."""
        marked = "".join(f"{_GREEN}{ch}{_RESET}" for ch in self.value)
        if 0 <= self.pos < len(code):
            return code[: self.pos] + marked + code[self.pos:]
        return code


class UnexpectedTokenError(Exception):
    """Raised when a token is not of the kind the parser expected."""

    def __init__(self, message: str, token: Token, expected: TokenType,
                 where: str = "", context: str = "") -> None:
        super().__init__(message)
        self.message = message
        self.token = token
        self.expected = expected
        self.got = token.type
        self.where = where
        self.context = context

    def details(self) -> str:
        """A multi-line description of the mismatch."""
        lines = [
            self.context,
            f"Expected: {self.expected} but got: {self.got}",
            f"token: {self.token}",
            self.where,
        ]
        return "\n".join(lines)


def expect(code: str, token: Token, type: TokenType, message: str, where: str = "") -> Token:
    """Return ``token`` if it is of ``type``; raise UnexpectedTokenError otherwise."""
    if token.type != type:
        raise UnexpectedTokenError(
            message, token, type, where=where, context=token.highlighted(code)
        )
    return token
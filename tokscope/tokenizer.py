"""Turning source text into tokens, one at a time."""

from __future__ import annotations

from tokscope.tokens import CHAR_CATEGORIES, Token, TokenType

SPACE_CHARS = frozenset(" \t\n\r")
QUOTES = ("\"", "'", "`")

KEYWORDS: frozenset[str] = frozenset(
    {
        "if", "else", "while", "for", "do", "break", "continue", "return",
        "switch", "case", "default", "try", "catch", "finally", "throw",
        "synchronized", "native", "static", "class", "function",
    }
)


class TokenizeError(ValueError):
    """Raised when the code holds a character no token can start with."""

    def __init__(self, char: str, pos: int) -> None:
        super().__init__(f"unexpected character {char!r} at {pos}")
        self.char = char
        self.pos = pos


def _skip(code: str, pos: int, chars: frozenset[str]) -> int:
    while pos < len(code) and code[pos] in chars:
        pos += 1
    return pos


def _until(code: str, pos: int, stop: str) -> tuple[str, int]:
    """Read up to ``stop``; the returned position is just past it."""
    end = code.find(stop, pos)
    if end == -1:
        end = len(code)
    return code[pos:end], end + 1


def next_token(code: str, pos: int) -> tuple[Token, int]:
    """Read the token starting at or after ``pos``; return it and where to resume."""
    if pos >= len(code):
        return Token(TokenType.NOTHING, "", pos), pos
    pos = _skip(code, pos, SPACE_CHARS)
    if pos >= len(code):
        return Token(TokenType.NOTHING, "", pos), pos

    char = code[pos]
    if code.startswith("//", pos):
        value, pos = _until(code, pos, "\n")
        return Token(TokenType.COMMENT, value, pos), pos

    if char in QUOTES:
        value, pos = _until(code, pos + 1, char)
        return Token(TokenType.STRING, value, pos), pos

    for starting, continuing, kind in CHAR_CATEGORIES:
        if char in starting:
            end = _skip(code, pos, continuing)
            value = code[pos:end]
            if kind is TokenType.IDENTIFIER and value in KEYWORDS:
                kind = TokenType.KEYWORD
            return Token(kind, value, end), end

    raise TokenizeError(char, pos)


def peek_token(code: str, pos: int) -> Token:
    """Return the token at ``pos`` without advancing."""
    token, _ = next_token(code, pos)
    return token


def tokenize(code: str) -> list[Token]:
    """Return every token in ``code``, leaving out the end-of-input marker."""
    tokens = []
    pos = 0
    while pos < len(code):
        token, pos = next_token(code, pos)
        if token.type is not TokenType.NOTHING:
            tokens.append(token)
    return tokens
"""Tokenizer for the expression language."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

_DIGITS = frozenset("0123456789")
_LETTERS = frozenset("abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ")
_SPACES = frozenset(" \t\n\v\f\r")
_OPERATORS = frozenset("+-*/^")
_PUNCTUATION = {"=": "ASSIGN", "(": "LPAREN", ")": "RPAREN"}


class TokenType(IntEnum):
    """Kinds of tokens produced by :func:`tokenize`."""

    NUMBER = 0
    VARIABLE = 1
    OPERATOR = 2
    CUSTOM = 3
    LPAREN = 4
    RPAREN = 5
    ASSIGN = 6
    FUNC = 7
    END = 8


@dataclass(frozen=True)
class Token:
    """A single lexical token."""

    type: TokenType
    value: str


def _take_while(code: str, start: int, allowed: frozenset) -> int:
    end = start
    while end < len(code) and code[end] in allowed:
        end += 1
    return end


def _word_token(word: str) -> Token:
    if word == "e":
        return Token(TokenType.FUNC, word)
    if word == "KHUS":
        return Token(TokenType.CUSTOM, word)
    return Token(TokenType.VARIABLE, word)


def tokenize(code: str) -> list[Token]:
    """Split *code* into tokens, always ending with an END token.

    Characters that belong to no token are skipped silently.
    """
    tokens: list[Token] = []
    pos = 0
    while pos < len(code):
        char = code[pos]
        if char in _SPACES:
            pos += 1
        elif char in _DIGITS:
            end = _take_while(code, pos, _DIGITS)
            tokens.append(Token(TokenType.NUMBER, code[pos:end]))
            pos = end
        elif char in _LETTERS:
            end = _take_while(code, pos, _LETTERS)
            tokens.append(_word_token(code[pos:end]))
            pos = end
        else:
            if char in _OPERATORS:
                tokens.append(Token(TokenType.OPERATOR, char))
            elif char in _PUNCTUATION:
                tokens.append(Token(TokenType[_PUNCTUATION[char]], char))
            pos += 1
    tokens.append(Token(TokenType.END, ""))
    return tokens
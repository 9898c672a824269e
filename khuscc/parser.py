"""Operator-precedence parser building a binary syntax tree."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Optional

from khuscc.lexer import Token, TokenType


class ParseError(Exception):
    """Raised when the token stream cannot be parsed."""


@dataclass
class Node:
    """A syntax-tree node with an optional left and right child."""

    value: str
    left: Optional["Node"] = None
    right: Optional["Node"] = None

    def is_leaf(self) -> bool:
        """Return True when the node has no children."""
        return self.left is None and self.right is None


def precedence(op: str) -> int:
    """Binding strength of a binary operator; 0 for anything else."""
    if op == "^":
        return 3
    if op in ("*", "/"):
        return 2
    if op in ("+", "-"):
        return 1
    return 0


def parse(tokens: Sequence[Token]) -> Optional[Node]:
    """Parse a token list into a tree.

    A function definition before a KHUS clause becomes the left child of a
    ``;`` node whose right child is the KHUS clause.
    """
    tokens = list(tokens)
    khus_pos = next(
        (
            i
            for i, tok in enumerate(tokens)
            if tok.type is TokenType.CUSTOM and tok.value == "KHUS"
        ),
        len(tokens),
    )
    func_tree = _parse_expression(tokens[:khus_pos])
    if khus_pos < len(tokens):
        khus_tree = _parse_expression(tokens[khus_pos:])
        return Node(";", func_tree, khus_tree)
    return func_tree


def _is_function_header(tokens: Sequence[Token]) -> bool:
    if len(tokens) <= 5:
        return False
    expected = (
        TokenType.FUNC,
        TokenType.LPAREN,
        TokenType.VARIABLE,
        TokenType.RPAREN,
        TokenType.ASSIGN,
    )
    return all(tok.type is kind for tok, kind in zip(tokens, expected))


def _reduce(operands: list, operators: list[str]) -> None:
    op = operators.pop()
    if len(operands) < 2:
        raise ParseError(f"Missing operand for operator '{op}'")
    right = operands.pop()
    left = operands.pop()
    operands.append(Node(op, left, right))


def _matching_paren(tokens: Sequence[Token], open_pos: int) -> int:
    depth = 0
    for pos in range(open_pos, len(tokens)):
        kind = tokens[pos].type
        if kind is TokenType.LPAREN:
            depth += 1
        elif kind is TokenType.RPAREN:
            depth -= 1
            if depth == 0:
                return pos
    raise ParseError("Mismatched parentheses")


def _parse_expression(tokens: Sequence[Token]) -> Optional[Node]:
    if _is_function_header(tokens):
        func_node = Node(tokens[0].value, None, Node(tokens[2].value))
        return Node("=", func_node, _parse_expression(tokens[5:]))

    operands: list[Optional[Node]] = []
    operators: list[str] = []
    pos = 0
    while pos < len(tokens):
        tok = tokens[pos]
        if tok.type in (TokenType.NUMBER, TokenType.VARIABLE):
            operands.append(Node(tok.value))
        elif tok.type is TokenType.OPERATOR:
            while operators and precedence(operators[-1]) >= precedence(tok.value):
                _reduce(operands, operators)
            operators.append(tok.value)
        elif tok.type is TokenType.CUSTOM and tok.value == "KHUS":
            args = tokens[pos + 1 : pos + 4]
            if len(args) < 3 or pos + 3 >= len(tokens) or any(
                a.type is not TokenType.VARIABLE for a in args
            ):
                raise ParseError("Invalid KHUS syntax")
            x, y, z = (Node(a.value) for a in args)
            operands.append(Node("KHUS", x, Node(",", y, z)))
            pos += 3
        elif tok.type is TokenType.LPAREN:
            close = _matching_paren(tokens, pos)
            operands.append(_parse_expression(tokens[pos + 1 : close]))
            pos = close
        pos += 1

    while operators:
        _reduce(operands, operators)

    return operands[-1] if operands else None
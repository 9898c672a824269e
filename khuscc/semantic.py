"""Semantic checks over the syntax tree."""

from __future__ import annotations

from typing import Optional

from khuscc.parser import Node

_LETTERS = frozenset("abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ")


class SemanticError(Exception):
    """Raised when a tree violates the language's semantic rules."""


def collect_declared_variables(node: Optional[Node]) -> set[str]:
    """Return the names declared by function parameters and KHUS operands."""
    declared: set[str] = set()
    _collect(node, declared)
    return declared


def _collect(node: Optional[Node], declared: set[str]) -> None:
    if node is None:
        return
    if node.value == "=" and node.left is not None and node.left.right is not None:
        declared.add(node.left.right.value)
    elif node.value == "KHUS":
        if node.left is not None:
            declared.add(node.left.value)
        if node.right is not None and node.right.value == ",":
            for child in (node.right.left, node.right.right):
                if child is not None:
                    declared.add(child.value)
    _collect(node.left, declared)
    _collect(node.right, declared)


def _check(node: Optional[Node], declared: set[str]) -> None:
    if node is None:
        return
    if node.value == "/" and node.right is not None and node.right.value == "0":
        raise SemanticError("Division by zero.")
    if node.is_leaf() and node.value[:1] in _LETTERS and node.value not in declared:
        raise SemanticError(f"Undeclared variable used -> {node.value}")
    if node.value == "KHUS":
        args = node.right
        if (
            node.left is None
            or args is None
            or args.value != ","
            or args.left is None
            or args.right is None
        ):
            raise SemanticError("Invalid KHUS operation structure")
    _check(node.left, declared)
    _check(node.right, declared)


def semantic_check(root: Optional[Node]) -> frozenset[str]:
    """Validate *root* and return the set of declared variable names.

    Raises SemanticError on division by a literal zero, use of an
    undeclared variable, or a malformed KHUS node.
    """
    declared = collect_declared_variables(root)
    _check(root, declared)
    return frozenset(declared)
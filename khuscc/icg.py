"""Three-address code generation from the syntax tree."""

from __future__ import annotations

from itertools import count
from typing import Optional

from khuscc.parser import Node


def generate_3ac(root: Optional[Node]) -> list[str]:
    """Translate *root* into a list of three-address instructions.

    Each instruction has the form ``dest = left op right``. Temporaries are
    named ``t1``, ``t2`` and so on, in the order they are allocated.
    """
    code: list[str] = []
    counter = count(1)

    def new_temp() -> str:
        return f"t{next(counter)}"

    def visit(node: Optional[Node]) -> str:
        if node is None:
            return ""

        if node.value == ";":
            visit(node.left)
            return visit(node.right)

        if node.is_leaf():
            return node.value

        if node.value == "=" and node.left is not None and node.left.value == "e":
            return visit(node.right)

        if node.value == "KHUS":
            args = node.right
            if args is None:
                raise ValueError("Malformed KHUS node")
            x = visit(node.left)
            y = visit(args.left)
            visit(args.right)

            cube_partial = new_temp()
            cube = new_temp()
            code.append(f"{cube_partial} = {y} * {y}")
            code.append(f"{cube} = {cube_partial} * {y}")

            plus = new_temp()
            minus = new_temp()
            code.append(f"{plus} = {x} + {cube}")
            code.append(f"{minus} = {x} - {cube}")

            # The selected result is named but never computed.
            return new_temp()

        left = visit(node.left)
        right = visit(node.right)
        temp = new_temp()
        code.append(f"{temp} = {left} {node.value} {right}")
        return temp

    if root is not None:
        visit(root)
    return code
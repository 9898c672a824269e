"""Command-line driver running the whole compilation pipeline."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterator
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

from khuscc.codegen import generate_assembly
from khuscc.icg import generate_3ac
from khuscc.lexer import Token, tokenize
from khuscc.parser import Node, ParseError, parse
from khuscc.semantic import SemanticError, semantic_check


class CompileError(Exception):
    """Raised when any compilation stage fails."""


@dataclass(frozen=True)
class _Compilation:
    tokens: list[Token]
    tree: Node
    tac: list[str]
    assembly: str


def _stages(code: str) -> Iterator[tuple[str, Any]]:
    tokens = tokenize(code)
    if not tokens:
        raise CompileError("No tokens generated")
    yield "tokens", tokens

    try:
        tree = parse(tokens)
    except ParseError as exc:
        raise CompileError(f"Parser failed: {exc}") from exc
    if tree is None:
        raise CompileError("Parser failed")
    yield "tree", tree

    try:
        semantic_check(tree)
    except SemanticError as exc:
        raise CompileError(f"Semantic error: {exc}") from exc
    yield "semantic", None

    tac = generate_3ac(tree)
    if not tac:
        raise CompileError("No intermediate code generated")
    yield "tac", tac

    yield "assembly", generate_assembly(tac)


def compile_source(code: str) -> _Compilation:
    """Run every stage on *code* and return tokens, tree, TAC and assembly."""
    results = dict(_stages(code))
    return _Compilation(
        tokens=results["tokens"],
        tree=results["tree"],
        tac=results["tac"],
        assembly=results["assembly"],
    )


def _report(stage: str, value: Any) -> None:
    if stage == "tokens":
        print(f"Tokens ({len(value)}) :")
        for token in value:
            print(f"Type : {int(token.type)}, Value : {token.value}")
        print(f"Lexical analysis completed. Tokens : {len(value)}")
    elif stage == "tree":
        print("Parsing successful.")
    elif stage == "semantic":
        print("Semantic analysis passed.")
    elif stage == "tac":
        for line in value:
            print(line)
        print("3-address code (TAC) generation completed.")


def main(argv: Optional[list[str]] = None) -> int:
    """Compile an input file to an assembly file; return the exit status."""
    parser = argparse.ArgumentParser(
        prog="khuscc", description="Compile an expression file to x86 assembly."
    )
    parser.add_argument("input", nargs="?", default="input.txt", help="source file")
    parser.add_argument(
        "-o", "--output", default="output.asm", help="assembly file to write"
    )
    args = parser.parse_args(argv)

    input_path = Path(args.input)
    output_path = Path(args.output)

    try:
        code = input_path.read_text()
    except OSError:
        print(f"Error: Cannot open {input_path}", file=sys.stderr)
        return 1
    print("Input file read successfully.")

    assembly = ""
    try:
        for stage, value in _stages(code):
            if stage == "assembly":
                assembly = value
            else:
                _report(stage, value)
    except CompileError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    try:
        output_path.write_text(assembly)
    except OSError:
        print(f"Error: Cannot create {output_path}", file=sys.stderr)
        return 1
    print(f"Assembly code written to {output_path}")

    if not output_path.is_file():
        print("Error: Output file not found", file=sys.stderr)
        return 1

    print(f"Successfully created {output_path}")
    return 0
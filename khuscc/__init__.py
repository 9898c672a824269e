"""Compiler for e(x) definitions and KHUS operations down to x86 assembly."""

__version__ = "0.1.0"
__all__ = ["lexer", "parser", "semantic", "icg", "codegen", "cli"]
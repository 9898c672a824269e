# khuscc

A small compiler for a tiny expression language. It reads a function
definition such as `e(x) = x + 5`, optionally followed by a `KHUS` operation,
and runs it through every classic compiler stage:

1. lexical analysis (`khuscc.lexer.tokenize`)
2. parsing into a binary syntax tree of `Node` objects (`khuscc.parser.parse`)
3. semantic checks: undeclared variables, division by a literal zero,
   malformed `KHUS` nodes (`khuscc.semantic.semantic_check`)
4. three-address code generation (`khuscc.icg.generate_3ac`)
5. 32-bit x86 assembly in NASM syntax (`khuscc.codegen.generate_assembly`)

## The language

```
e(x) = x * 2 + 3 ^ 2
KHUS x y z
```

* `e(x) = <expr>` defines a function of one variable. Expressions use integer
  literals, alphabetic variable names, parentheses and the operators
  `+ - * / ^` (`^` binds tightest, then `* /`, then `+ -`; all are
  left-associative).
* `KHUS x y z` takes three variables and emits code computing `x + y^3` and
  `x - y^3`. The third operand is only declared; it does not take part in
  the computation.
* Characters that belong to no token are skipped by the tokenizer.

Every variable that is used has to be declared, either as the parameter of
`e` or as an operand of `KHUS`.

## Installation

```
pip install .
```

## Command line

```
khuscc input.txt -o output.asm
```

Both arguments are optional; they default to `input.txt` and `output.asm`.
The command prints the tokens (with their numeric `TokenType`) and the
three-address code it produced, then writes the assembly. It exits with
status 1 and a message on standard error if the input cannot be read, fails
to parse, fails the semantic checks or yields no code, or if the output file
cannot be written. Run `khuscc --help` for all options.

## Library use

```python
from khuscc.cli import compile_source
from khuscc.lexer import tokenize
from khuscc.parser import parse
from khuscc.semantic import semantic_check
from khuscc.icg import generate_3ac
from khuscc.codegen import generate_assembly

tokens = tokenize("e(x) = x + 5 * x")
tree = parse(tokens)
declared = semantic_check(tree)   # frozenset({'x'})
tac = generate_3ac(tree)
# ['t1 = 5 * x', 't2 = x + t1']
asm = generate_assembly(tac)      # assembly text as a string

# or all stages at once:
result = compile_source("e(x) = x + 5 * x")
result.tokens, result.tree, result.tac, result.assembly
```

Errors are reported as exceptions: `ParseError` from the parser,
`SemanticError` from the semantic checks. `compile_source` wraps both in a
`CompileError`, which it also raises when a stage produces nothing.

## What it does not do

The package only writes assembly text. It does not assemble, link or run
that code. For a `KHUS` operation, the temporary naming the selected result
is allocated but no instruction computes it.

## Running the tests

```
pip install .[test]
pytest
```
"""Translation of three-address code into 32-bit x86 assembly."""

from __future__ import annotations

from collections.abc import Iterable

_DIGITS = frozenset("0123456789")
_FIXED_VARIABLES = ("x", "t1")

_POW_ROUTINE = (
    "\n_pow:\n"
    "    push ebx\n"
    "    mov ebx, eax\n"
    "    mov eax, 1\n"
    "    cmp ecx, 0\n"
    "    je .pow_end\n"
    ".pow_loop:\n"
    "    imul eax, ebx\n"
    "    dec ecx\n"
    "    jnz .pow_loop\n"
    ".pow_end:\n"
    "    pop ebx\n"
    "    ret\n\n"
)

_EXIT = (
    "    ; Exit syscall\n"
    "    mov eax, 1\n"
    "    xor ebx, ebx\n"
    "    int 0x80\n"
)


def _is_number(field: str) -> bool:
    return field[:1] in _DIGITS


def _fields(line: str) -> tuple[str, str, str, str, str]:
    parts = (line.split() + [""] * 5)[:5]
    return parts[0], parts[1], parts[2], parts[3], parts[4]


def _operand(field: str) -> str:
    return field if _is_number(field) else f"[{field}]"


def _instructions(dest: str, op: str, src1: str, src2: str) -> list[str]:
    if op == "+":
        return [f"    mov eax, {src1}\n", f"    add eax, {src2}\n"]
    if op == "-":
        return [f"    mov eax, {src1}\n", f"    sub eax, {src2}\n"]
    if op == "*":
        return [f"    mov eax, {src1}\n", f"    imul eax, {src2}\n"]
    if op == "/":
        return [
            f"    mov eax, {src1}\n",
            "    cdq\n",
            f"    mov ebx, {src2}\n",
            "    idiv ebx\n",
        ]
    if op == "^":
        return [
            f"    mov eax, {src1}\n",
            f"    mov ecx, {src2}\n",
            "    call _pow\n",
        ]
    if op == "?":
        label_false = f".false_{dest}"
        label_end = f".end_{dest}"
        return [
            f"    mov eax, {src1}\n",
            "    cmp eax, 0\n",
            f"    je {label_false}\n",
            f"    mov eax, {src2}\n",
            f"    jmp {label_end}\n",
            f"{label_false}:\n",
            "    mov eax, 0 ; default false value\n",
            f"{label_end}:\n",
        ]
    return []


def generate_assembly(tac: Iterable[str]) -> str:
    """Return NASM-style assembly text for the three-address lines in *tac*."""
    lines = list(tac)

    variables: set[str] = set()
    for line in lines:
        lhs, _, rhs1, _, rhs2 = _fields(line)
        variables.update(f for f in (lhs, rhs1, rhs2) if not _is_number(f))

    out: list[str] = [
        "section .data\n",
        "global x, t1\n",
        "x: dd 0\n",
        "t1: dd 0\n",
    ]
    out.extend(
        f"{name}: dd 0\n" for name in sorted(variables) if name not in _FIXED_VARIABLES
    )

    out.append("\nsection .text\n")
    out.append("global _start\n\n")
    out.append("_start:\n")
    out.append(_POW_ROUTINE)

    for line in lines:
        dest, _, src1, op, src2 = _fields(line)
        out.append(f"    ; {line}\n")
        out.extend(_instructions(dest, op, _operand(src1), _operand(src2)))
        out.append(f"    mov [{dest}], eax\n\n")

    out.append(_EXIT)
    return "".join(out)
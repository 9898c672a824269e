import pytest

from khuscc.cli import CompileError, compile_source, main
from khuscc.codegen import generate_assembly
from khuscc.icg import generate_3ac
from khuscc.lexer import TokenType

SOURCE = "e(x) = x + 5 * 2"


def test_compile_source_runs_all_stages():
    result = compile_source(SOURCE)
    assert result.tokens[-1].type is TokenType.END
    assert result.tree.value == "="
    assert result.tac == generate_3ac(result.tree)
    assert result.assembly == generate_assembly(result.tac)
    assert len(result.tac) == 2


def test_compile_source_with_khus():
    result = compile_source("e(x) = x + 1 KHUS a b c")
    assert result.tree.value == ";"
    assert len(result.tac) == 5


@pytest.mark.parametrize(
    "code",
    [
        "e(x) = y + 1",
        "e(x) = x / 0",
        "",
        "e(x) = x",
        "KHUS a b",
        "e(x) = (x + 1",
    ],
)
def test_compile_source_errors(code):
    with pytest.raises(CompileError):
        compile_source(code)


def test_undeclared_variable_message_names_variable():
    with pytest.raises(CompileError, match="zeta"):
        compile_source("e(x) = zeta + 1")


def test_main_writes_assembly(tmp_path, capsys):
    source = tmp_path / "prog.txt"
    source.write_text(SOURCE)
    target = tmp_path / "prog.asm"
    assert main([str(source), "-o", str(target)]) == 0
    assert target.read_text() == compile_source(SOURCE).assembly
    out = capsys.readouterr().out
    assert "Parsing successful." in out
    assert "Semantic analysis passed." in out
    for line in compile_source(SOURCE).tac:
        assert line in out


def test_main_missing_input(tmp_path, capsys):
    target = tmp_path / "out.asm"
    assert main([str(tmp_path / "absent.txt"), "-o", str(target)]) == 1
    assert "Cannot open" in capsys.readouterr().err
    assert not target.exists()


def test_main_reports_compile_error(tmp_path, capsys):
    source = tmp_path / "bad.txt"
    source.write_text("e(x) = x / 0")
    target = tmp_path / "bad.asm"
    assert main([str(source), "-o", str(target)]) == 1
    captured = capsys.readouterr()
    assert "Division by zero" in captured.err
    assert "Parsing successful." in captured.out
    assert not target.exists()
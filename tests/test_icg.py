from khuscc.icg import generate_3ac
from khuscc.lexer import tokenize
from khuscc.parser import Node, parse


def _tac(source):
    return generate_3ac(parse(tokenize(source)))


def _dests(tac):
    return [line.split()[0] for line in tac]


def test_simple_function_body():
    assert _tac("e(x) = x + 5") == ["t1 = x + 5"]


def test_line_shape_uses_input_operands():
    (line,) = _tac("e(x) = x * 7")
    parts = line.split()
    assert len(parts) == 5
    assert parts[0].startswith("t")
    assert parts[1:] == ["=", "x", "*", "7"]


def test_precedence_computes_product_first():
    tac = _tac("e(x) = x + 2 * 3")
    assert len(tac) == 2
    first = tac[0].split()
    second = tac[1].split()
    assert first[2:] == ["2", "*", "3"]
    assert second[2] == "x"
    assert second[3] == "+"
    assert second[4] == first[0]


def test_parentheses_change_order():
    tac = _tac("e(x) = (x + 2) * 3")
    first = tac[0].split()
    second = tac[1].split()
    assert first[3] == "+"
    assert second[3] == "*"
    assert second[2] == first[0]


def test_temporaries_are_unique():
    tac = _tac("e(x) = x + 1 - x * 2 / 4")
    dests = _dests(tac)
    assert len(dests) == len(set(dests)) == len(tac)


def test_khus_emits_four_instructions():
    tac = _tac("e(x) = x KHUS a b c")
    assert len(tac) == 4
    ops = [line.split()[3] for line in tac]
    assert ops == ["*", "*", "+", "-"]
    dests = _dests(tac)
    first, second, third, fourth = (line.split() for line in tac)
    assert first[2] == first[4] == "b"
    assert second[2] == dests[0] and second[4] == "b"
    assert third[2] == "a" and third[4] == dests[1]
    assert fourth[2] == "a" and fourth[4] == dests[1]


def test_khus_result_temporary_is_never_assigned():
    khus = Node("KHUS", Node("a"), Node(",", Node("b"), Node("c")))
    tac = generate_3ac(Node("+", khus, Node("1")))
    assert len(tac) == 5
    last = tac[-1].split()
    assert last[4] == "1"
    assert last[2] not in _dests(tac)


def test_function_and_khus_both_generate():
    tac = _tac("e(x) = x + 1 KHUS a b c")
    assert len(tac) == 5
    assert tac[0].split()[2:] == ["x", "+", "1"]


def test_none_and_leaf_produce_no_code():
    assert generate_3ac(None) == []
    assert generate_3ac(Node("x")) == []
    assert _tac("e(x) = x") == []
import pytest
from hypothesis import assume, given, strategies as st

from simplysp.evaluation.builtins import builtin_op, BUILTINS
from simplysp.types.value import Error, Number, Symbol, INT64_MAX, INT64_MIN
from simplysp.types.sexpr import SExpr

int64s = st.integers(min_value=INT64_MIN, max_value=INT64_MAX)


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(+ 1 2 3)", "6"),
        ("(* (+ 1 2) 3)", "9"),
        ("(- 5)", "-5"),
        ("(- -5)", "5"),
        ("(- 10 3 2)", "5"),
        ("(* 2 3 4)", "24"),
        ("(/ 12 3)", "4"),
        ("(/ 7 2)", "3"),
        ("(/ -7 2)", "-3"),
        ("(/ 7 -2)", "-3"),
        ("(/ -7 -2)", "3"),
        ("(+ 5)", "5"),
        ("(* 5)", "5"),
        ("(/ 5)", "5"),
        ("(+ (* 2 3) (- 10 4))", "12"),
        ("(/ (+ 20 10) (* 2 5))", "3"),
        ("(+ 1 (* 2 (+ 3 4) (- 10 6)))", "57"),
        ("(+ -1 5 -3)", "1"),
        ("(-5)", "-5"),
        ("((((7))))", "7"),
        ("()", "()"),
        ("", "()"),
        ("+", "+"),
        ("(+)", "+"),
        ("- 3", "-3"),
        ("+ 1 2", "3"),
        ("(/ 4 0)", "Error: Division by zero is not supported"),
        ("(/ 10 2 0)", "Error: Division by zero is not supported"),
        ("(/ 0 5)", "0"),
        ("(+ 1 +)", "Error: Cannot operate on a non-number!"),
        ("(+ 1 ())", "Error: Cannot operate on a non-number!"),
        ("(1 2 3)", "Error: S-expression does not start with symbol"),
        ("(() 1)", "Error: S-expression does not start with symbol"),
        ("1 2", "Error: S-expression does not start with symbol"),
        ("(+ 1 9223372036854775808)", "Error: invalid number"),
        ("(+ 9223372036854775807 1)", "-9223372036854775808"),
        ("(- -9223372036854775808)", "-9223372036854775808"),
        ("(/ -9223372036854775808 -1)", "-9223372036854775808"),
    ]
)
def test_arithmetic(interp, source, expected):
    assert interp.rep(source) == expected


def test_division_by_zero_returns_no_number(interp):
    result = interp.eval("(/ 100 5 0 2)")
    assert not isinstance(result, Number)
    assert result == Error("Division by zero is not supported")


def test_builtin_op_consumes_operands():
    a = SExpr([Number(8), Number(2), Number(2)])
    assert builtin_op(a, "/") == Number(2)
    assert len(a) == 0


def test_builtin_op_division_by_zero_discards_rest():
    a = SExpr([Number(8), Number(0), Number(2)])
    assert builtin_op(a, "/") == Error("Division by zero is not supported")
    assert len(a) == 0


def test_builtin_op_rejects_non_numbers_before_folding():
    a = SExpr([Number(8), Number(0), Symbol("x")])
    assert builtin_op(a, "/") == Error("Cannot operate on a non-number!")
    assert len(a) == 0


def test_builtin_op_without_operands():
    assert builtin_op(SExpr(), "+") == Error("Operator '+' needs at least one operand")


def test_builtin_table():
    assert sorted(BUILTINS) == ["*", "+", "-", "/"]


@given(st.lists(int64s, min_size=1, max_size=8))
def test_sum_folds_left(ns):
    total = sum(ns)
    expected = (total - INT64_MIN) % 2 ** 64 + INT64_MIN
    assert builtin_op(SExpr([Number(n) for n in ns]), "+") == Number(expected)


@given(int64s, int64s)
def test_subtraction(a, b):
    assert builtin_op(SExpr([Number(a), Number(b)]), "-") == Number(a - b)


@given(int64s, int64s.filter(lambda n: n != 0))
def test_division_truncates_toward_zero(a, b):
    assume(not (a == INT64_MIN and b == -1))
    q = builtin_op(SExpr([Number(a), Number(b)]), "/").num
    r = a - q * b
    assert abs(r) < abs(b)
    assert r == 0 or (r < 0) == (a < 0)

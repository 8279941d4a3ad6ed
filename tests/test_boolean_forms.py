import pytest

from minilisp.errors import MalformedSpecialForm, TypeMismatch


@pytest.mark.parametrize(
    "code,expected",
    [
        ("(and True True)", True),
        ("(and True False True)", False),
        ("(or False False)", False),
        ("(or False True)", True),
        ("(or False False (not False))", True),
        ("(not True)", False),
        ("(not (not True))", True),
        ("(and True)", True),
        ("(or False)", False),
    ]
)
def test_boolean_operators(interp, code, expected):
    assert interp.eval(code) is expected


def test_or_short_circuits(interp):
    assert interp.eval("(or True undefined-symbol)") is True
    assert interp.eval("(or False True (/ 1 0))") is True


def test_and_short_circuits(interp):
    assert interp.eval("(and False (/ 1 0))") is False


def test_short_circuit_skips_side_effects(run):
    _, lines = run("(and False (= (print never) 1))")
    assert lines == []


@pytest.mark.parametrize("code", ["(and 1 True)", "(or False 0)", "(not 1)", "(and True (+ 1 1))"])
def test_non_boolean_operand(interp, code):
    with pytest.raises(TypeMismatch):
        interp.eval(code)


@pytest.mark.parametrize("code", ["(and)", "(or)", "(not)", "(not True False)"])
def test_boolean_malformed(interp, code):
    with pytest.raises(MalformedSpecialForm):
        interp.eval(code)


def test_boolean_variables(interp):
    interp.eval("(let t True) (let f False)")
    assert interp.eval("(and t (not f))") is True
    assert interp.eval("(or (f) (t))") is True


# ------------------ equality ------------------

@pytest.mark.parametrize(
    "code,expected",
    [
        ("(= 1 1)", True),
        ("(= 1 1.0)", True),
        ("(= 1 2)", False),
        ("(!= 1 2)", True),
        ("(!= 1 1)", False),
        ("(= True True)", True),
        ("(= True False)", False),
        ("(= (+ 1 1) (* 2 1))", True),
    ]
)
def test_equality(interp, code, expected):
    assert interp.eval(code) is expected


def test_mismatched_kinds_are_unequal(interp):
    assert interp.eval("(= True 1)") is False
    assert interp.eval("(= 0 False)") is False
    assert interp.eval("(!= True 1)") is True


def test_closure_equality_is_identity(interp):
    interp.eval("(fn f () 1) (fn g () 1) (let h f)")
    assert interp.eval("(= f h)") is True
    assert interp.eval("(= f g)") is False


@pytest.mark.parametrize("code", ["(= 1)", "(= 1 1 1)", "(!= 1 2 3)", "(=)"])
def test_equality_needs_two_operands(interp, code):
    with pytest.raises(MalformedSpecialForm):
        interp.eval(code)

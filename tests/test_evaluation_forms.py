import pytest

from minilisp.errors import (
    ArityMismatch, MalformedSpecialForm, RecursionDepthExceeded, TypeMismatch,
)
from minilisp.interpreter import Interpreter
from minilisp.types.closure import Closure
from minilisp.types.symbol import Symbol
from minilisp.types.unit import Unit


# ------------------ let ------------------

def test_let_binds_and_returns_unit(interp):
    assert interp.eval("(let x (+ 1 2))") is Unit
    assert interp.eval("x") == 3


def test_let_rebinding_shadows(interp):
    interp.eval("(let x 1)")
    interp.eval("(let x (+ x 10))")
    assert interp.eval("x") == 11


@pytest.mark.parametrize(
    "code", ["(let x)", "(let x 1 2)", "(let 5 1)", "(let (x) 1)", "(let if 1)", "(let True 1)", "(let + 1)"]
)
def test_let_malformed(interp, code):
    with pytest.raises(MalformedSpecialForm):
        interp.eval(code)


def test_let_cannot_bind_unit(interp, out):
    with pytest.raises(TypeMismatch):
        interp.eval("(let x (print hi))")
    assert out.getvalue() == "hi\n"


# ------------------ fn ------------------

def test_fn_defines_closure(interp):
    assert interp.eval("(fn add (a b) (+ a b))") is Unit
    fn = interp.env.lookup(Symbol("add"))
    assert isinstance(fn, Closure)
    assert fn.arity == 2
    assert fn.env is interp.env
    assert interp.eval("(add 1 2)") == 3


def test_fn_without_parameters(interp):
    interp.eval("(fn seven () 7)")
    assert interp.eval("(seven)") == 7


@pytest.mark.parametrize("code", ["(f 1)", "(f 1 2 3)", "(f)"])
def test_arity_mismatch(interp, code):
    interp.eval("(fn f (a b) (+ a b))")
    with pytest.raises(ArityMismatch) as excinfo:
        interp.eval(code)
    assert excinfo.value.expected == 2


@pytest.mark.parametrize(
    "code",
    [
        "(fn f (a))",
        "(fn f a a)",
        "(fn f (a 1) a)",
        "(fn f (a a) a)",
        "(fn let (a) a)",
        "(fn f (print) 1)",
        "(fn (f) (a) a)",
    ]
)
def test_fn_malformed(interp, code):
    with pytest.raises(MalformedSpecialForm):
        interp.eval(code)


def test_call_frame_is_discarded(interp):
    interp.eval("(fn f (a) ((let tmp (* a 2)) tmp))")
    assert interp.eval("(f 4)") == 8
    assert not interp.env.contains(Symbol("tmp"))
    assert not interp.env.contains(Symbol("a"))


def test_lexical_not_dynamic_scope(interp):
    interp.eval("""
        (let n 10)
        (fn get-n () n)
        (fn shadow (n) (get-n))
    """)
    assert interp.eval("(shadow 99)") == 10


def test_closure_sees_later_global_rebinding(interp):
    interp.eval("(let k 1) (fn get-k () k)")
    interp.eval("(let k 2)")
    assert interp.eval("(get-k)") == 2


def test_inner_function_captures_call_frame(interp):
    interp.eval("(fn add-k (k x) ((fn inner (y) (+ y k)) (inner x)))")
    assert interp.eval("(add-k 3 5)") == 8
    assert not interp.env.contains(Symbol("inner"))


def test_recursion(interp):
    interp.eval("(fn fact (n) (if (= n 0) 1 (* n (fact (- n 1)))))")
    assert interp.eval("(fact 5)") == 120


def test_recursion_depth_limit(out):
    interp = Interpreter(out=out, max_depth=20)
    interp.eval("(fn down (n) (if (= n 0) 0 (down (- n 1))))")
    assert interp.eval("(down 10)") == 0
    with pytest.raises(RecursionDepthExceeded):
        interp.eval("(down 100)")
    assert interp.runtime.depth == 0
    assert interp.eval("(down 5)") == 0


def test_unit_argument_rejected(interp):
    interp.eval("(fn id (a) a)")
    with pytest.raises(TypeMismatch):
        interp.eval("(id (let y 1))")


# ------------------ if ------------------

def test_if_takes_then_branch(run):
    _, lines = run("(if True (print A) (print B))")
    assert lines == ["A"]


def test_if_takes_else_branch(run):
    value, lines = run("(if (= 1 2) 1 2)")
    assert value == 2
    assert lines == []


def test_if_parenthesized_predicate(run):
    _, lines = run("(let x True) (if (x) (print Success-1) (print Failure-2))")
    assert lines == ["Success-1"]


def test_if_untaken_branch_is_not_evaluated(interp):
    assert interp.eval("(if False (/ 1 0) 5)") == 5
    assert interp.eval("(if True 5 undefined-thing)") == 5


def test_if_any_non_false_value_is_truthy(interp):
    assert interp.eval("(if 0 1 2)") == 1
    interp.eval("(fn f () 1)")
    assert interp.eval("(if f 1 2)") == 1


def test_if_unit_predicate(interp):
    with pytest.raises(TypeMismatch):
        interp.eval("(if (let z 1) 1 2)")


@pytest.mark.parametrize("code", ["(if True 1)", "(if True 1 2 3)", "(if)"])
def test_if_malformed(interp, code):
    with pytest.raises(MalformedSpecialForm):
        interp.eval(code)

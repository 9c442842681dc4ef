import pytest
from sprig.errors import SprigArityError, SprigInvalidSymbol, SprigUnboundSymbol
from sprig.types.closure import Closure
from sprig.types.environment import Environment
from sprig.types.symbol import Symbol

x, y = Symbol("x"), Symbol("y")


def test_symbols_are_interned_names():
    assert Symbol("abc") == Symbol("abc")
    assert hash(Symbol("abc")) == hash(Symbol("abc"))
    assert Symbol("abc") != "abc"
    assert str(Symbol("abc")) == "abc"


def test_define_and_lookup():
    env = Environment()
    env.define(x, 1)
    assert env.lookup(x) == 1


def test_child_sees_parent_and_shadows_locally():
    parent = Environment()
    parent.define(x, 1)
    child = Environment(outer=parent)
    assert child.lookup(x) == 1
    child.define(x, 2)
    assert child.lookup(x) == 2
    assert parent.lookup(x) == 1


def test_lookup_failure_is_an_error():
    with pytest.raises(SprigUnboundSymbol) as excinfo:
        Environment().lookup(y)
    assert str(excinfo.value) == "atom not defined: y"


def test_set_updates_nearest_frame():
    parent = Environment()
    parent.define(x, 1)
    child = Environment(outer=parent)
    child.set(x, 5)
    assert parent.lookup(x) == 5
    assert x not in child.vars
    with pytest.raises(SprigUnboundSymbol):
        child.set(y, 1)


def test_define_requires_symbol():
    with pytest.raises(SprigInvalidSymbol):
        Environment().define("x", 1)


def test_snapshot_is_a_copy():
    env = Environment()
    env.define(x, 1)
    snap = env.snapshot()
    env.define(y, 2)
    assert snap == {x: 1}


def test_repr_lists_names():
    env = Environment(outer=Environment())
    env.define(x, 1)
    assert repr(env) == "<Environment {x} -> ...>"


def test_closure_bind_creates_child_of_captured_env():
    captured = Environment()
    captured.define(y, 10)
    fn = Closure([x], [Symbol("+"), x, y], captured)
    frame = fn.bind([3])
    assert frame.outer is captured
    assert frame.vars == {x: 3}
    with pytest.raises(SprigArityError):
        fn.bind([1, 2])


def test_interpreter_evaluates_in_context_root(interp):
    interp.bind("answer", 42)
    assert interp.context.root is interp.env
    assert interp.context.root.lookup(Symbol("answer")) == 42
    interp.eval("(define z 7)")
    assert interp.context.root.vars[Symbol("z")] == 7

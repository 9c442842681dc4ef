import pytest
from sprig.errors import (
    SprigArityError,
    SprigInvalidSymbol,
    SprigTypeError,
    SprigUnboundSymbol,
)
from sprig.types.closure import Closure
from sprig.types.symbol import Symbol


# ------------------ if ------------------

@pytest.mark.parametrize(
    "source,expected",
    [
        ("(if 0 1 2)", 2),
        ("(if 5 1 2)", 1),
        ("(if -1 1 2)", 1),
        ("(if 0.0 1 2)", 2),
        ("(if (list) 1 2)", 2),
        ("(if (list 0) 1 2)", 1),
        ('(if "" 1 2)', 2),
        ('(if "x" 1 2)', 1),
        ("(if 'a 1 2)", 1),
        ("(if 0 1)", []),
        ("(if (< 1 2) 'yes 'no)", Symbol("yes")),
    ]
)
def test_if_truthiness(interp, source, expected):
    assert interp.eval(source) == expected


def test_if_evaluates_only_the_taken_branch(interp, output):
    assert interp.eval("(if 1 (print 1) (print 2))") == 1
    assert interp.eval("(if 0 (undefined) 3)") == 3
    assert output == ["1"]


def test_if_arity(interp):
    with pytest.raises(SprigArityError):
        interp.eval("(if 1)")
    with pytest.raises(SprigArityError):
        interp.eval("(if 1 2 3 4)")


# ------------------ do / scope ------------------

def test_do_sequences_in_current_env(interp):
    assert interp.eval("(do (define a 10) (define b 20) (+ a b))") == 30
    assert interp.eval("a") == 10
    assert interp.eval("(do)") == []


def test_scope_isolates_definitions(interp):
    assert interp.eval("(scope (define x 1) x)") == 1
    with pytest.raises(SprigUnboundSymbol):
        interp.eval("x")


def test_scope_sees_and_shadows_outer(interp):
    interp.eval("(define y 5)")
    assert interp.eval("(scope (+ y 1))") == 6
    assert interp.eval("(scope (define y 2) y)") == 2
    assert interp.eval("y") == 5
    assert interp.eval("(scope)") == []


# ------------------ define / defun / set ------------------

def test_define_returns_value(interp):
    assert interp.eval("(define a 7)") == 7
    assert interp.eval("(define a (+ a 1))") == 8


def test_define_writes_innermost_frame(interp):
    interp.eval("(define n 1)")
    assert interp.eval("((lambda (m) (define n m)) 5)") == 5
    assert interp.eval("n") == 1


def test_define_requires_symbol(interp):
    with pytest.raises(SprigInvalidSymbol):
        interp.eval("(define 1 2)")
    with pytest.raises(SprigArityError):
        interp.eval("(define a)")


def test_defun_factorial(interp):
    fact = interp.eval("(defun fact (n) (if (<= n 1) 1 (* n (fact (- n 1)))))")
    assert isinstance(fact, Closure)
    assert fact.name == Symbol("fact")
    assert interp.eval("(fact 5)") == 120
    assert interp.eval("(fact 0)") == 1
    assert interp.eval("(fact 20)") == 2432902008176640000


def test_defun_malformed(interp):
    with pytest.raises(SprigArityError):
        interp.eval("(defun f (n))")
    with pytest.raises(SprigInvalidSymbol):
        interp.eval("(defun f (n 1) n)")
    with pytest.raises(SprigInvalidSymbol):
        interp.eval("(defun f (n n) n)")


def test_set_updates_nearest_binding(interp):
    interp.eval("(define counter 0)")
    assert interp.eval("(scope (set counter 5))") == 5
    assert interp.eval("counter") == 5


def test_set_unbound(interp):
    with pytest.raises(SprigUnboundSymbol):
        interp.eval("(set nothing 1)")


# ------------------ lambda / closures ------------------

def test_closure_captures_definition_env(interp):
    interp.eval("(define f (scope (define k 10) (lambda (n) (+ n k))))")
    assert interp.eval("(f 1)") == 11
    with pytest.raises(SprigUnboundSymbol):
        interp.eval("k")
    interp.eval("(define k 100)")
    assert interp.eval("(f 1)") == 11


def test_closures_share_captured_frame(interp):
    interp.eval(
        "(define pair (scope (define count 0)"
        "  (list (lambda () count) (lambda (v) (set count v)))))"
    )
    assert interp.eval("((first pair))") == 0
    interp.eval("((nth pair 1) 5)")
    assert interp.eval("((first pair))") == 5


def test_later_define_in_captured_frame_is_visible(interp):
    assert interp.eval("(scope (define get (lambda () v)) (define v 42) (get))") == 42


def test_lambda_malformed(interp):
    with pytest.raises(SprigArityError):
        interp.eval("(lambda (x))")
    with pytest.raises(SprigArityError):
        interp.eval("(lambda (x) x x)")
    with pytest.raises(SprigInvalidSymbol):
        interp.eval("(lambda (1) 1)")
    with pytest.raises(SprigInvalidSymbol):
        interp.eval("(lambda x x)")


# ------------------ quote ------------------

def test_quote_forms(interp):
    assert interp.eval("(quote (a b))") == [Symbol("a"), Symbol("b")]
    assert interp.eval("'(1 2)") == [1, 2]
    with pytest.raises(SprigArityError):
        interp.eval("(quote)")


# ------------------ for ------------------

def test_for_returns_last_body_result(interp):
    assert interp.eval("(for x (list 1 2 3) (* x 10))") == 30


def test_for_runs_body_like_do(interp, output):
    assert interp.eval("(for x (list 1 2) (print x) (define y (* x 2)) (+ y 1))") == 5
    assert output == ["1", "2"]


def test_for_empty_list(interp, output):
    assert interp.eval("(for x (list) (print x))") == []
    assert output == []


def test_for_binding_does_not_leak(interp):
    interp.eval("(for x (list 1 2) (define inner x))")
    with pytest.raises(SprigUnboundSymbol):
        interp.eval("x")
    with pytest.raises(SprigUnboundSymbol):
        interp.eval("inner")


def test_for_errors(interp):
    with pytest.raises(SprigTypeError):
        interp.eval("(for x 5 x)")
    with pytest.raises(SprigInvalidSymbol):
        interp.eval("(for 1 (list 1) 1)")
    with pytest.raises(SprigArityError):
        interp.eval("(for x)")


# ------------------ while ------------------

def test_while_zero_iterations(interp, output):
    assert interp.eval("(while 0 1)") == []
    assert interp.eval("(while 0 (print 1))") == []
    assert output == []


def test_while_counts_with_set(interp):
    interp.eval("(define i 0)")
    assert interp.eval("(while (< i 3) (set i (+ i 1)))") == 3
    assert interp.eval("i") == 3


def test_while_body_gets_fresh_frame(interp):
    interp.eval("(define j 0)")
    interp.eval("(while (< j 2) (define tmp j) (set j (+ j 1)))")
    with pytest.raises(SprigUnboundSymbol):
        interp.eval("tmp")


def test_while_requires_condition(interp):
    with pytest.raises(SprigArityError):
        interp.eval("(while)")


# ------------------ programs ------------------

def test_quicksort(interp):
    interp.eval("""
        (defun qsort (xs)
          (if (= (len xs) 0)
              (list)
              (scope
                (define p (first xs))
                (define rest (tail xs))
                (+ (qsort (filter (lambda (n) (< n p)) rest))
                   (list p)
                   (qsort (filter (lambda (n) (>= n p)) rest))))))
    """)
    assert interp.eval("(qsort (list 3 1 4 1 5 9 2 6))") == [1, 1, 2, 3, 4, 5, 6, 9]
    assert interp.eval("(qsort (list))") == []

"""Test the Engine class with AST nodes."""

import logging
import time

import pytest

import sprig
import sprigtest
from sprig.ast import ListLiteral, Literal


class _Fallback(sprig.ast.Expression):
    """Evaluates a child, substituting a value if the child fails."""

    def __init__(self, child, fallback):
        self.child = child
        self.fallback = fallback

    def evaluate(self, frame):
        try:
            return (yield self.child)
        except sprig.EvalError:
            return self.fallback


class _YieldsJunk(sprig.ast.Expression):

    def evaluate(self, frame):
        return (yield 42)


def test_simple_literal():
    assert sprigtest.run_ast(Literal(42)) == 42
    assert sprigtest.run_ast(Literal("forty-two")) == "forty-two"


def test_identifier():
    assert sprigtest.run_ast(sprig.ast.Identifier("x"), x=5) == 5
    with pytest.raises(sprig.EvalError, match="'y' is not defined"):
        sprigtest.run_ast(sprig.ast.Identifier("y"), x=5)


def test_evaluate_default_environment():
    value = sprig.evaluate(ListLiteral.make_list(sprigtest.lit(1)))
    assert value == sprig.MutableList([1])
    assert not value.mutability.frozen


def test_errors_thrown_into_parent():
    failing = sprigtest.Fail(sprig.EvalError("boom"))
    node = ListLiteral.make_tuple([Literal(1), _Fallback(failing, "safe"), Literal(3)])
    assert sprigtest.run_ast(node) == sprig.Tuple([1, "safe", 3])


def test_cancellation_not_caught_by_error_handlers(env):
    inner = ListLiteral.make_list([sprigtest.Cancel(), Literal(1)])
    node = ListLiteral.make_tuple([_Fallback(inner, "safe"), Literal(2)])
    with pytest.raises(sprig.Cancelled):
        sprigtest.run_ast(node, env)


def test_non_node_request():
    node = ListLiteral.make_list([_YieldsJunk()])
    with pytest.raises(TypeError, match="expected AstNode"):
        sprigtest.run_ast(node)


def test_deep_nesting_without_recursion():
    node = Literal(0)
    for _ in range(5000):
        node = ListLiteral.make_tuple([node])
    value = sprigtest.run_ast(node)
    depth = 0
    while isinstance(value, sprig.Tuple):
        value = value[0]
        depth += 1
    assert depth == 5000
    assert value == 0


def test_deadline():
    token = sprig.CancelToken(deadline=0)
    time.sleep(0.001)
    env = sprig.Environment(cancel=token)
    with pytest.raises(sprig.Cancelled) as exc_info:
        sprigtest.run_ast(ListLiteral.empty_list(), env)
    assert exc_info.value.reason == "deadline exceeded"
    assert token.cancelled


def test_token_keeps_first_reason():
    token = sprig.CancelToken()
    assert not token.cancelled
    token.check()
    token.cancel("first")
    token.cancel("second")
    with pytest.raises(sprig.Cancelled, match="first"):
        token.check()
    assert repr(token) == "CancelToken(cancelled)"


def test_cancellation_logged(env, caplog):
    env.cancel.cancel("host shutdown")
    with caplog.at_level(logging.INFO, logger="sprig._engine"):
        with pytest.raises(sprig.Cancelled):
            sprigtest.run_ast(Literal(1), env)
    assert "host shutdown" in caplog.text


def test_validate_default_environment():
    sprig.validate(ListLiteral.make_list(sprigtest.lit(1, 2)))
    with pytest.raises(sprig.ValidationError):
        sprig.validate(sprig.ast.Identifier("nope"))


def test_frame_repr():
    seen = []

    class Spy(sprig.ast.Expression):
        def evaluate(self, frame):
            seen.append(repr(frame))
            return None
            yield

    sprigtest.run_ast(ListLiteral.make_list([ListLiteral.make_list([Spy()])]))
    assert seen[0].startswith("_Frame(depth=2,")

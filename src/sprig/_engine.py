"""Engine for evaluating AST nodes.

Nodes implement `evaluate` as a generator. They yield child nodes that need
evaluating and receive each child's value back from the yield. The engine
runs these generators with an explicit frame chain instead of Python
recursion, which gives one place to check for cancellation before every
node starts.

Errors raised while evaluating a child are thrown back into the parent at
its yield. A parent that does not handle the error re-raises it, so the
error travels up through every enclosing evaluation unchanged.
"""

__all__ = ["Engine", "evaluate", "validate"]

import logging

import sprig


_log = logging.getLogger(__name__)


class Engine:
    """Evaluation engine.

    The engine is a generic processor for nodes that contain `evaluate`
    generators. It doesn't know about language semantics, it only moves
    values and errors between frames.
    """

    def run(self, node, env):
        """Evaluate a node and return its value.

        Args:
            node: (AstNode) Root of the expression to evaluate
            env: (Environment) Context shared by every node in the run

        Returns:
            (object) Value produced by the root node

        Raises:
            EvalError: A node failed
            Cancelled: The environment's cancel token was triggered
        """
        _log.debug("run %r in %r", node, env)
        try:
            value = self._run(node, env)
        except sprig.Cancelled as exc:
            _log.info("evaluation of %r cancelled: %s", node, exc.reason)
            raise
        _log.debug("run %r finished", node)
        return value

    def _run(self, node, env):
        current = _enter(node, None, env)
        value = None
        pending = None

        while True:
            try:
                if pending is None:
                    request = current.gen.send(value)
                else:
                    error, pending = pending, None
                    request = current.gen.throw(error)
            except StopIteration as stop:
                value = stop.value
                current = current.previous
                if current is None:
                    return value
                continue
            except Exception as error:
                # The frame's generator is finished, hand the error to its parent
                current = current.previous
                if current is None:
                    raise
                pending = error
                continue

            try:
                current = _enter(request, current, env)
            except Exception as error:
                pending = error
                continue
            value = None


def _enter(node, previous, env):
    """Create the frame for a node once the host has not cancelled."""
    env.check_cancelled()
    return _Frame(node, previous, env)


class _Frame:
    """Evaluation frame, one step in the chain of active nodes.

    Frames form a linked list through `previous`. The generator is created
    during initialization.

    Args:
        node: AST node being evaluated
        previous: Parent frame (None for root)
        env: Environment for the run
    """
    __slots__ = ("node", "gen", "previous", "env")

    def __init__(self, node, previous, env):
        if not isinstance(node, sprig.ast.AstNode):
            raise TypeError(f"Cannot evaluate {node!r}, expected AstNode")
        self.node = node
        self.previous = previous
        self.env = env
        self.gen = node.evaluate(self)

    def __repr__(self):
        depth = 0
        frame = self
        while frame.previous:
            depth += 1
            frame = frame.previous
        return f"_Frame(depth={depth}, node={self.node!r})"


def evaluate(node, env=None):
    """Evaluate a node with a fresh engine.

    Args:
        node: (AstNode) Expression to evaluate
        env: (Environment | None) Context, a new empty one by default

    Returns:
        (object) Resulting value
    """
    if env is None:
        env = sprig.Environment()
    return Engine().run(node, env)


def validate(node, venv=None):
    """Run the static validation pass over a node.

    Args:
        node: (AstNode) Expression to check
        venv: (ValidationEnvironment | None) Declared names, empty by default

    Raises:
        ValidationError: The first problem found
    """
    if venv is None:
        venv = sprig.ValidationEnvironment()
    node.validate(venv)

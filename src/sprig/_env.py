"""Evaluation and validation environments."""

__all__ = ["Environment", "ValidationEnvironment"]

import sprig


class Environment:
    """Runtime context that expressions are evaluated against.

    Holds the name bindings visible to expressions, the mutability domain
    that owns lists created during evaluation, and an optional cancel token
    checked by the engine.

    Use the environment as a context manager to bound its lifetime. Leaving
    the block freezes the domain, after which lists created inside are
    read-only for every alias.

    Args:
        bindings: (dict | None) Initial name to value bindings
        name: (str) Label for the mutability domain
        cancel: (CancelToken | None) Token the host uses to stop evaluation
    """

    def __init__(self, bindings=None, name="env", cancel=None):
        self.bindings = dict(bindings or {})
        self.mutability = sprig.Mutability(name)
        self.cancel = cancel

    def lookup(self, name):
        """Look up a binding.

        Raises:
            KeyError: If the name is not bound
        """
        return self.bindings[name]

    def has(self, name):
        return name in self.bindings

    def update(self, name, value):
        """Bind or rebind a name."""
        if self.mutability.frozen:
            raise sprig.EvalError(f"cannot assign '{name}' in a frozen environment")
        self.bindings[name] = value

    def check_cancelled(self):
        """Raise `Cancelled` if the host asked evaluation to stop."""
        if self.cancel is not None:
            self.cancel.check()

    def close(self):
        """End the environment's lifetime, freezing its values."""
        self.mutability.freeze()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
        return False

    def __repr__(self):
        return f"Environment({self.mutability.name!r}, {len(self.bindings)} bindings)"


class ValidationEnvironment:
    """Static state consulted by the validation pass.

    Tracks which names are declared so identifier references can be checked
    before the program runs.

    Args:
        names: (Iterable[str]) Names declared up front
    """

    def __init__(self, names=()):
        self.names = set(names)

    def declare(self, name):
        self.names.add(name)

    def is_defined(self, name):
        return name in self.names

    def __repr__(self):
        return f"ValidationEnvironment({len(self.names)} names)"

"""Nodes for literal values and names."""

__all__ = ["Literal", "Identifier"]

import sprig

from . import _base


class Literal(_base.Expression):
    """Constant literal: number, string, boolean or None."""

    def __init__(self, value: int | str | bool | None):
        if value is not None and not isinstance(value, (int, str)):
            raise TypeError(f"Literal value must be int, str, bool or None, got {type(value)}")
        self.value = value

    def evaluate(self, frame):
        """Literals evaluate to themselves."""
        return self.value
        yield  # Make it a generator

    def accept(self, visitor):
        return visitor.visit_literal(self)

    def pretty_print(self, sink):
        sink.write(sprig.repr_value(self.value))

    def __repr__(self):
        return f"Literal({self.value!r})"


class Identifier(_base.Expression):
    """Reference to a name bound in the environment."""

    def __init__(self, name: str):
        if not isinstance(name, str) or not name:
            raise TypeError(f"Identifier name must be a non-empty str, got {name!r}")
        self.name = name

    def evaluate(self, frame):
        try:
            return frame.env.lookup(self.name)
        except KeyError:
            raise sprig.EvalError(f"name '{self.name}' is not defined", self.position) from None
        yield  # Make it a generator

    def validate(self, venv):
        if not venv.is_defined(self.name):
            raise sprig.ValidationError(f"name '{self.name}' is not defined", self.position)

    def accept(self, visitor):
        return visitor.visit_identifier(self)

    def pretty_print(self, sink):
        sink.write(self.name)

    def __repr__(self):
        return f"Identifier({self.name})"

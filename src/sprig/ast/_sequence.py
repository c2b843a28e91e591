"""List and tuple literal AST nodes."""

__all__ = ["Kind", "ListLiteral"]

import enum

import sprig

from . import _base


class Kind(enum.Enum):
    """Which runtime sequence a literal builds."""
    LIST = "list"
    TUPLE = "tuple"


def _render_element(element):
    if element is None:
        return "<missing>"
    return str(element)


class ListLiteral(_base.Expression):
    """Sequence literal: [a, b] or (a, b)

    Both kinds share one node. Lists evaluate to a `MutableList` owned by
    the evaluating environment, tuples to an immutable `Tuple`. Every
    evaluation builds a new value, even for identical contents.

    Elements are evaluated strictly left to right. Errors and cancellation
    from an element pass through untouched.

    Correct by Construction:
    - kind is a Kind and never changes
    - elements keep the order they were given in (can be empty)
    """

    def __init__(self, kind: Kind, elements):
        """Create sequence literal.

        Args:
            kind: Kind.LIST or Kind.TUPLE
            elements: Sequence of Expression nodes in source order

        Raises:
            TypeError: If kind is not a Kind
        """
        if not isinstance(kind, Kind):
            raise TypeError(f"ListLiteral kind must be Kind, got {type(kind)}")
        self._kind = kind
        self._elements = tuple(elements)

    @classmethod
    def make_list(cls, elements) -> "ListLiteral":
        return cls(Kind.LIST, elements)

    @classmethod
    def make_tuple(cls, elements) -> "ListLiteral":
        return cls(Kind.TUPLE, elements)

    @classmethod
    def empty_list(cls) -> "ListLiteral":
        """New empty list literal, position is left for the caller to attach."""
        return cls.make_list(())

    @property
    def kind(self) -> Kind:
        return self._kind

    @property
    def elements(self) -> tuple:
        return self._elements

    @property
    def is_tuple(self) -> bool:
        """True if this literal builds an immutable tuple."""
        return self._kind is Kind.TUPLE

    def evaluate(self, frame):
        """Evaluate elements in order and build the sequence value."""
        result = []
        for element in self._elements:
            if element is None:
                raise self.missing_element(sprig.EvalError)
            value = yield element
            result.append(value)
        if self.is_tuple:
            # A new tuple per evaluation, even when empty
            return sprig.Tuple(result)
        return sprig.MutableList(result, frame.env)

    def validate(self, venv):
        for element in self._elements:
            if element is None:
                raise self.missing_element(sprig.ValidationError)
            element.validate(venv)

    def missing_element(self, error_class=None):
        """Error for an absent element slot, attributed to this literal."""
        if error_class is None:
            error_class = sprig.SprigError
        return error_class(f"null expression in {self}", self.position)

    def accept(self, visitor):
        return visitor.visit_list_literal(self)

    def pretty_print(self, sink):
        sink.write("(" if self.is_tuple else "[")
        sep = ""
        for element in self._elements:
            if element is None:
                raise self.missing_element()
            sink.write(sep)
            element.pretty_print(sink)
            sep = ", "
        if self.is_tuple and len(self._elements) == 1:
            sink.write(",")
        sink.write(")" if self.is_tuple else "]")

    def __str__(self):
        """Abbreviated form for diagnostics."""
        return sprig.print_abbreviated_list(
            self._elements, self.is_tuple, render=_render_element
        )

    def __repr__(self):
        return f"ListLiteral({self._kind.value}, {len(self._elements)} elements)"

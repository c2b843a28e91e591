"""Node for base classes."""

__all__ = ["AstNode", "Expression", "SourcePosition"]

import io
from collections.abc import Generator
from dataclasses import dataclass


@dataclass
class SourcePosition:
    """Source code position information for AST nodes.

    Tracks where an AST node originated in the source code,
    useful for error messages and debugging.

    Attributes:
        filename: Source file path (e.g., "scripts/build.sprig")
        start_line: Starting line number (1-indexed)
        start_column: Starting column number (1-indexed)
        end_line: Ending line number (1-indexed)
        end_column: Ending column number (1-indexed)
    """
    filename: str | None = None
    start_line: int | None = None
    start_column: int | None = None
    end_line: int | None = None
    end_column: int | None = None

    def __str__(self) -> str:
        """Format position for error messages as file:line:column."""
        if self.start_line is None:
            return self.filename or ""
        text = f"{self.filename or '<expr>'}:{self.start_line}"
        if self.start_column is not None:
            text += f":{self.start_column}"
        return text


class AstNode:
    """Base class for all AST nodes.

    They are driven by the `evaluate` generator that returns the computed
    runtime value and may yield AstNodes to request further evaluation.
    The yield is a two way channel that receives the resulting value from
    the evaluated node.

    This is a base class that should not be instantiated directly.
    Subclasses must implement evaluate(), pretty_print() and accept().

    Attributes:
        position: Optional source position information (filename, line, column).
                  Attached after construction with `with_position`.
    """
    position = None

    def with_position(self, position: SourcePosition | None) -> "AstNode":
        """Attach source position and return the node for chaining."""
        self.position = position
        return self

    def evaluate(self, frame) -> Generator["AstNode", object, object]:
        """Evaluate this node to produce a runtime value.

        Args:
            frame: The engine frame, `frame.env` is the Environment

        Yields:
            Child node instances that need evaluation

        Receives:
            Values (results from evaluating children)

        Returns:
            Final value result
        """
        raise NotImplementedError(f"{self.__class__.__name__}.evaluate() not implemented")

    def validate(self, venv) -> None:
        """Check this node before execution.

        Nodes without static rules accept everything.

        Args:
            venv: ValidationEnvironment with the declared names

        Raises:
            ValidationError: If the node is invalid
        """

    def accept(self, visitor):
        """Dispatch to the visitor method for this node type."""
        raise NotImplementedError(f"{self.__class__.__name__}.accept() not implemented")

    def pretty_print(self, sink) -> None:
        """Write this node as source code.

        Args:
            sink: Any object with a `write(str)` method
        """
        raise NotImplementedError(f"{self.__class__.__name__}.pretty_print() not implemented")

    def unparse(self) -> str:
        """Convert this node back to source code.

        Returns:
            Source code string
        """
        buffer = io.StringIO()
        self.pretty_print(buffer)
        return buffer.getvalue()

    def __str__(self):
        return self.unparse()

    def print_tree(self, depth=0):
        """Print ast nodes for debugging."""
        indent = "  " * depth
        print(f"{indent}{self!r}")
        for value in vars(self).values():
            if isinstance(value, AstNode):
                value.print_tree(depth + 1)
            elif isinstance(value, (list, tuple)):
                for child in value:
                    if isinstance(child, AstNode):
                        child.print_tree(depth + 1)


class Expression(AstNode):
    """Base class for nodes that evaluate to runtime values.

    Expressions can appear anywhere a value is expected: list elements,
    call arguments, assignment right hand sides.
    """
    pass

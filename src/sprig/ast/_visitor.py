"""Visitor base for passes that walk the expression tree."""

__all__ = ["SyntaxTreeVisitor"]


class SyntaxTreeVisitor:
    """Base class for tree walking passes.

    Each node's `accept` calls the matching `visit_*` method here, so a pass
    can be added without touching the node classes. The defaults walk into
    every child and do nothing else. Override the methods for the nodes a
    pass cares about and call the base method to keep descending.
    """

    def visit(self, node):
        """Visit a single node."""
        return node.accept(self)

    def visit_all(self, nodes):
        """Visit nodes in order."""
        for node in nodes:
            self.visit(node)

    def visit_list_literal(self, node):
        if None in node.elements:
            raise node.missing_element()
        self.visit_all(node.elements)

    def visit_literal(self, node):
        pass

    def visit_identifier(self, node):
        pass

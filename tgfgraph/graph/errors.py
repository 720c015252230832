"""Exception hierarchy for graph operations.

Edge and traversal failures are raised as exceptions and propagate to the
caller. Deleting a vertex that is already gone is deliberately not an error;
see VertexStore.delete().
"""


class GraphError(Exception):
    """Base class for all graph errors."""
    pass


class VertexNotFoundError(GraphError, LookupError):
    """A handle does not refer to a live vertex.

    Raised when an operation needs the vertex itself (reading it, adding an
    edge to it, starting a traversal from it) and the slot is unknown or has
    been deleted.
    """
    pass


class EdgeNotFoundError(GraphError, LookupError):
    """No resolvable edge half connects the two vertices."""
    pass


class EmptyGraphError(GraphError):
    """Traversal was requested without a start vertex on an empty graph."""
    pass


class UnresolvedEdgeError(GraphError):
    """An edge half points at a deleted vertex and cannot be serialized."""
    pass


class GraphFormatError(GraphError, ValueError):
    """Serialized graph text is malformed or incomplete.

    Attributes:
        lineno: 1-based line number of the offending line, if known.
    """

    def __init__(self, message: str, lineno: int | None = None) -> None:
        self.lineno = lineno
        if lineno is not None:
            message = f"line {lineno}: {message}"
        super().__init__(message)

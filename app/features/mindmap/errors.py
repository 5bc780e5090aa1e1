"""Custom exceptions for the node and edge use cases."""


class InvalidArgumentError(ValueError):
    """Raised when a required field is missing or blank."""

    pass


class NotFoundError(ValueError):
    """Raised when a referenced node or edge does not exist."""

    pass


class NodeNotFoundError(NotFoundError):
    """Raised when no node matches the requested ID."""

    def __init__(self):
        super().__init__("Node not found")


class EdgeNotFoundError(NotFoundError):
    """Raised when no edge matches the requested ID."""

    def __init__(self):
        super().__init__("Edge not found")


class SourceNodeNotFoundError(NotFoundError):
    """Raised when an edge's source node does not exist."""

    def __init__(self):
        super().__init__("Source node not found")


class TargetNodeNotFoundError(NotFoundError):
    """Raised when an edge's target node does not exist."""

    def __init__(self):
        super().__init__("Target node not found")

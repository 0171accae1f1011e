"""Exceptions raised by the knowledge graph store and its tool boundary."""


class KnowledgeGraphError(Exception):
    """Base class for all knowledge graph failures."""


class EntityNotFoundError(KnowledgeGraphError):
    """Raised when an operation references an entity that is not in the graph."""

    def __init__(self, entity_name: str):
        self.entity_name = entity_name
        super().__init__(f"Entity {entity_name} does not exist")


class InvalidArgumentsError(KnowledgeGraphError):
    """Raised when tool arguments are missing required fields or have the wrong type."""

    def __init__(self, operation: str, detail: str):
        self.operation = operation
        self.detail = detail
        super().__init__(f"Invalid arguments for {operation}: {detail}")


class UnknownOperationError(KnowledgeGraphError):
    """Raised when a tool name is not one of the supported operations."""

    def __init__(self, operation: str):
        self.operation = operation
        super().__init__(f"Unknown tool: {operation}")


class ToolExecutionError(KnowledgeGraphError):
    """Raised at the tool boundary so the transport reports the call as failed."""

    def __init__(self, operation: str, cause: KnowledgeGraphError):
        self.operation = operation
        self.cause = cause
        super().__init__(f"Error in {operation}: {cause}")

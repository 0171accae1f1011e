"""Core package containing fundamental interfaces and exceptions."""

from ..interfaces import Entity, Relation, KnowledgeGraph
from ..exceptions import (
    KnowledgeGraphError,
    EntityNotFoundError,
    InvalidArgumentsError,
    UnknownOperationError,
    ToolExecutionError,
)

__all__ = [
    'Entity',
    'Relation',
    'KnowledgeGraph',
    'KnowledgeGraphError',
    'EntityNotFoundError',
    'InvalidArgumentsError',
    'UnknownOperationError',
    'ToolExecutionError',
]

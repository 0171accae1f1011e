import asyncio
import logging
import time
from typing import Dict, Any, List, Optional

import mcp.types as types
import orjson

from ..core.validation.validators import ARGUMENT_MODELS, input_schema, validate_arguments
from ..exceptions import KnowledgeGraphError, ToolExecutionError
from ..monitoring.metrics import MetricsCollector
from ..storage.base import StorageBackend

logger = logging.getLogger(__name__)

TOOL_DESCRIPTIONS: Dict[str, str] = {
    "create_entities": "Create multiple new entities in the knowledge graph",
    "create_relations": (
        "Create multiple new relations between entities in the knowledge graph. "
        "Relations should be in active voice"
    ),
    "add_observations": "Add new observations to existing entities in the knowledge graph",
    "delete_entities": "Delete multiple entities and their associated relations from the knowledge graph",
    "delete_observations": "Delete specific observations from entities in the knowledge graph",
    "delete_relations": "Delete multiple relations from the knowledge graph",
    "read_graph": "Read the entire knowledge graph",
    "search_nodes": "Search for nodes in the knowledge graph based on a query",
    "open_nodes": "Open specific nodes in the knowledge graph by their names",
}


class ToolDispatcher:
    """Routes tool calls to a storage backend one call at a time."""

    def __init__(self, storage: StorageBackend, metrics: Optional[MetricsCollector] = None):
        self.storage = storage
        self.metrics = metrics or MetricsCollector()
        self._lock = asyncio.Lock()

    def list_tools(self) -> List[types.Tool]:
        return [
            types.Tool(name=name, description=description, inputSchema=input_schema(name))
            for name, description in TOOL_DESCRIPTIONS.items()
        ]

    async def invoke(self, name: str, arguments: Optional[Dict[str, Any]]) -> Dict[str, Any]:
        """Validate arguments and run the named operation against the store.

        Raises:
            UnknownOperationError: If name is not a supported tool
            InvalidArgumentsError: If arguments fail validation
            EntityNotFoundError: If the operation references a missing entity
        """
        start = time.perf_counter()
        failed = False
        try:
            kwargs = validate_arguments(name, arguments)
            async with self._lock:
                return await getattr(self.storage, name)(**kwargs)
        except KnowledgeGraphError as e:
            failed = True
            logger.warning(f"{name} failed: {e}")
            raise
        except Exception:
            failed = True
            logger.exception(f"Unexpected error in {name}")
            raise
        finally:
            duration = time.perf_counter() - start
            if name in ARGUMENT_MODELS:
                self.metrics.record_operation(name, duration, failed=failed)
            logger.debug(f"{name} completed in {duration:.6f}s")

    async def handle_tool(self, name: str, arguments: Optional[Dict[str, Any]]) -> List[types.TextContent]:
        """Run a tool and render its result as MCP text content.

        Raises:
            ToolExecutionError: If the call fails with a knowledge graph error,
                so the MCP server returns the result with isError set
        """
        try:
            result = await self.invoke(name, arguments)
        except KnowledgeGraphError as e:
            raise ToolExecutionError(name, e) from e
        return [types.TextContent(
            type="text",
            text=orjson.dumps(result).decode()
        )]

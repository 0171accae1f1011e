from abc import ABC, abstractmethod
from typing import List, Dict, Any


class StorageBackend(ABC):
    """Abstract base class for storage backends."""

    @abstractmethod
    async def initialize(self) -> None:
        """Initialize storage backend."""
        pass

    @abstractmethod
    async def cleanup(self) -> None:
        """Clean up resources."""
        pass

    @abstractmethod
    async def create_entities(self, entities: List[Dict[str, Any]]) -> Dict[str, Any]:
        """Create or overwrite multiple entities."""
        pass

    @abstractmethod
    async def create_relations(self, relations: List[Dict[str, Any]]) -> Dict[str, Any]:
        """Create multiple relations between existing entities."""
        pass

    @abstractmethod
    async def add_observations(self, observations: List[Dict[str, Any]]) -> Dict[str, Any]:
        """Append observations to existing entities."""
        pass

    @abstractmethod
    async def delete_entities(self, entityNames: List[str]) -> Dict[str, Any]:
        """Remove entities and every relation that references them."""
        pass

    @abstractmethod
    async def delete_observations(self, deletions: List[Dict[str, Any]]) -> Dict[str, Any]:
        """Remove specific observations from entities."""
        pass

    @abstractmethod
    async def delete_relations(self, relations: List[Dict[str, Any]]) -> Dict[str, Any]:
        """Remove every relation matching the given triples."""
        pass

    @abstractmethod
    async def read_graph(self) -> Dict[str, Any]:
        """Read entire graph."""
        pass

    @abstractmethod
    async def search_nodes(self, query: str) -> Dict[str, Any]:
        """Search nodes by query."""
        pass

    @abstractmethod
    async def open_nodes(self, names: List[str]) -> Dict[str, Any]:
        """Retrieve specific nodes by name."""
        pass

    @abstractmethod
    async def get_statistics(self) -> Dict[str, Any]:
        """Get entity and relation counts grouped by type."""
        pass

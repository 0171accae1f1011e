"""Test configuration and fixtures for the in-memory graph store tests."""
import pytest
from typing import AsyncGenerator, Dict, Any, List

from ..storage.memory.graph_store import InMemoryGraphStore
from ..api.tools import ToolDispatcher
from ..monitoring.metrics import MetricsCollector

@pytest.fixture
async def store() -> AsyncGenerator[InMemoryGraphStore, None]:
    """Create an empty graph store for testing."""
    graph_store = InMemoryGraphStore()
    await graph_store.initialize()
    yield graph_store
    await graph_store.cleanup()

@pytest.fixture
def sample_entities() -> List[Dict[str, Any]]:
    """Create sample entity data for testing."""
    return [
        {
            "name": "Alice",
            "entityType": "person",
            "observations": ["likes tea", "works remotely"]
        },
        {
            "name": "Bob",
            "entityType": "person",
            "observations": []
        },
        {
            "name": "Acme",
            "entityType": "organization",
            "observations": ["founded in 1999"]
        }
    ]

@pytest.fixture
def sample_relations() -> List[Dict[str, Any]]:
    """Create sample relation data for testing."""
    return [
        {"from": "Alice", "to": "Bob", "relationType": "knows"},
        {"from": "Bob", "to": "Acme", "relationType": "works_at"},
        {"from": "Alice", "to": "Acme", "relationType": "consults_for"}
    ]

@pytest.fixture
async def populated_store(
    store: InMemoryGraphStore,
    sample_entities: List[Dict[str, Any]],
    sample_relations: List[Dict[str, Any]]
) -> InMemoryGraphStore:
    """Create a store populated with test data."""
    await store.create_entities(sample_entities)
    await store.create_relations(sample_relations)
    return store

@pytest.fixture
def dispatcher(store: InMemoryGraphStore) -> ToolDispatcher:
    """Create a tool dispatcher bound to the empty store."""
    return ToolDispatcher(store, MetricsCollector())

"""In-memory storage backend for the knowledge graph."""
import logging
from collections import Counter
from typing import List, Dict, Any, Iterable

from ..base import StorageBackend
from ...interfaces import Entity, Relation, KnowledgeGraph
from ...exceptions import EntityNotFoundError

logger = logging.getLogger(__name__)


class InMemoryGraphStore(StorageBackend):
    """Holds entities and relations for the lifetime of the process.

    Batch operations apply their items one at a time. When an item fails the
    items before it stay applied; nothing is rolled back.
    """

    def __init__(self) -> None:
        self._entities: Dict[str, Entity] = {}
        self._relations: List[Relation] = []

    async def initialize(self) -> None:
        """Start from an empty graph."""
        self._entities.clear()
        self._relations.clear()

    async def cleanup(self) -> None:
        """Drop all state."""
        self._entities.clear()
        self._relations.clear()

    def _require_entity(self, name: str) -> Entity:
        entity = self._entities.get(name)
        if entity is None:
            raise EntityNotFoundError(name)
        return entity

    # Entity Operations
    async def create_entities(self, entities: List[Dict[str, Any]]) -> Dict[str, Any]:
        """Insert or overwrite entities by name; the last write in a batch wins."""
        for data in entities:
            entity = Entity.from_dict(data)
            if entity.name in self._entities:
                logger.debug(f"Overwriting entity {entity.name}")
            self._entities[entity.name] = entity
        logger.debug(f"Created {len(entities)} entities")
        return {"success": True, "entitiesCreated": len(entities)}

    async def add_observations(self, observations: List[Dict[str, Any]]) -> Dict[str, Any]:
        """Append observation contents to existing entities, duplicates included."""
        for item in observations:
            entity = self._require_entity(item["entityName"])
            self._entities[entity.name] = Entity(
                name=entity.name,
                entityType=entity.entityType,
                observations=entity.observations + tuple(item["contents"])
            )
        return {"success": True}

    async def delete_entities(self, entityNames: List[str]) -> Dict[str, Any]:
        """Remove entities and cascade to their relations. Absent names are ignored."""
        for name in entityNames:
            self._entities.pop(name, None)
            self._relations = [r for r in self._relations if not r.involves(name)]
        return {"success": True}

    async def delete_observations(self, deletions: List[Dict[str, Any]]) -> Dict[str, Any]:
        """Remove every occurrence of the listed observation values."""
        for item in deletions:
            entity = self._require_entity(item["entityName"])
            doomed = set(item["observations"])
            self._entities[entity.name] = Entity(
                name=entity.name,
                entityType=entity.entityType,
                observations=[obs for obs in entity.observations if obs not in doomed]
            )
        return {"success": True}

    # Relation Operations
    async def create_relations(self, relations: List[Dict[str, Any]]) -> Dict[str, Any]:
        """Append relations whose endpoints both exist. Duplicates are kept."""
        for data in relations:
            relation = Relation.from_dict(data)
            for entity_name in (relation.from_, relation.to):
                self._require_entity(entity_name)
            self._relations.append(relation)
        logger.debug(f"Created {len(relations)} relations")
        return {"success": True, "relationsCreated": len(relations)}

    async def delete_relations(self, relations: List[Dict[str, Any]]) -> Dict[str, Any]:
        """Remove all relations matching each (from, to, relationType) triple."""
        for data in relations:
            target = Relation.from_dict(data)
            self._relations = [r for r in self._relations if r != target]
        return {"success": True}

    # Query Operations
    async def read_graph(self) -> Dict[str, Any]:
        return KnowledgeGraph(
            entities=dict(self._entities),
            relations=list(self._relations)
        ).to_dict()

    async def search_nodes(self, query: str) -> Dict[str, Any]:
        """Entities matching the query, plus relations between matched entities."""
        matched = {
            name: entity for name, entity in self._entities.items()
            if entity.matches(query)
        }
        logger.debug(f"Search for '{query}' matched {len(matched)} entities")
        return self._subgraph(matched, matched.keys())

    async def open_nodes(self, names: List[str]) -> Dict[str, Any]:
        """Entities with the given names, plus relations between requested names.

        Relations are filtered by the requested names, not by the entities
        that were actually found.
        """
        found = {
            name: self._entities[name] for name in names
            if name in self._entities
        }
        return self._subgraph(found, names)

    def _subgraph(self, entities: Dict[str, Entity], endpoints: Iterable[str]) -> Dict[str, Any]:
        allowed = set(endpoints)
        return KnowledgeGraph(
            entities=entities,
            relations=[
                r for r in self._relations
                if r.from_ in allowed and r.to in allowed
            ]
        ).to_dict()

    async def get_statistics(self) -> Dict[str, Any]:
        """Count entities and relations grouped by their type."""
        return {
            "entity_count": len(self._entities),
            "relation_count": len(self._relations),
            "entity_types": dict(Counter(e.entityType for e in self._entities.values())),
            "relation_types": dict(Counter(r.relationType for r in self._relations))
        }

from dataclasses import dataclass, field
from typing import List, Dict, Any, Union, Tuple


@dataclass(frozen=True)
class Entity:
    name: str
    entityType: str
    observations: Tuple[str, ...] = ()

    def __init__(
        self,
        name: str,
        entityType: str,
        observations: Union[List[str], Tuple[str, ...], None] = None
    ):
        object.__setattr__(self, "name", name)
        object.__setattr__(self, "entityType", entityType)
        object.__setattr__(self, "observations", tuple(observations or ()))

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Entity':
        return cls(
            name=data["name"],
            entityType=data["entityType"],
            observations=data.get("observations") or []
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "entityType": self.entityType,
            "observations": list(self.observations)  # Convert tuple back to list
        }

    def matches(self, query: str) -> bool:
        """Case-insensitive substring match on name, type or any observation."""
        needle = query.lower()
        if needle in self.name.lower() or needle in self.entityType.lower():
            return True
        return any(needle in obs.lower() for obs in self.observations)


@dataclass(frozen=True)
class Relation:
    from_: str
    to: str
    relationType: str

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Relation':
        """Create a Relation instance from a dictionary."""
        return cls(
            from_=data.get("from_", data.get("from")),
            to=data["to"],
            relationType=data["relationType"]
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to API-compatible dictionary format."""
        return {
            "from": self.from_,
            "to": self.to,
            "relationType": self.relationType
        }

    def involves(self, entity_name: str) -> bool:
        return self.from_ == entity_name or self.to == entity_name


@dataclass
class KnowledgeGraph:
    entities: Dict[str, Entity] = field(default_factory=dict)
    relations: List[Relation] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "entities": {name: e.to_dict() for name, e in self.entities.items()},
            "relations": [r.to_dict() for r in self.relations]
        }

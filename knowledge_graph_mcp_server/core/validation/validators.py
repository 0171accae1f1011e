"""Argument models and validation for the knowledge graph tools."""
from typing import List, Dict, Any, Type

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ...exceptions import InvalidArgumentsError, UnknownOperationError


class EntityInput(BaseModel):
    name: str = Field(description="The name of the entity")
    entityType: str = Field(description="The type of the entity")
    observations: List[str] = Field(
        default_factory=list,
        description="An array of observation contents associated with the entity"
    )


class RelationInput(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    from_: str = Field(alias="from", description="The name of the entity where the relation starts")
    to: str = Field(description="The name of the entity where the relation ends")
    relationType: str = Field(description="The type of the relation")


class ObservationInput(BaseModel):
    entityName: str = Field(description="The name of the entity to add the observations to")
    contents: List[str] = Field(description="An array of observation contents to add")


class ObservationDeletion(BaseModel):
    entityName: str = Field(description="The name of the entity containing the observations")
    observations: List[str] = Field(description="An array of observations to delete")


class CreateEntitiesArgs(BaseModel):
    entities: List[EntityInput]


class CreateRelationsArgs(BaseModel):
    relations: List[RelationInput]


class AddObservationsArgs(BaseModel):
    observations: List[ObservationInput]


class DeleteEntitiesArgs(BaseModel):
    entityNames: List[str] = Field(description="An array of entity names to delete")


class DeleteObservationsArgs(BaseModel):
    deletions: List[ObservationDeletion]


class DeleteRelationsArgs(BaseModel):
    relations: List[RelationInput] = Field(description="An array of relations to delete")


class ReadGraphArgs(BaseModel):
    pass


class SearchNodesArgs(BaseModel):
    query: str = Field(
        description="The search query to match against entity names, types, and observation content"
    )


class OpenNodesArgs(BaseModel):
    names: List[str] = Field(description="An array of entity names to retrieve")


ARGUMENT_MODELS: Dict[str, Type[BaseModel]] = {
    "create_entities": CreateEntitiesArgs,
    "create_relations": CreateRelationsArgs,
    "add_observations": AddObservationsArgs,
    "delete_entities": DeleteEntitiesArgs,
    "delete_observations": DeleteObservationsArgs,
    "delete_relations": DeleteRelationsArgs,
    "read_graph": ReadGraphArgs,
    "search_nodes": SearchNodesArgs,
    "open_nodes": OpenNodesArgs,
}


def input_schema(operation: str) -> Dict[str, Any]:
    """JSON Schema for an operation's arguments, using wire field names."""
    if operation not in ARGUMENT_MODELS:
        raise UnknownOperationError(operation)
    return ARGUMENT_MODELS[operation].model_json_schema(by_alias=True)


def validate_arguments(operation: str, arguments: Dict[str, Any] | None) -> Dict[str, Any]:
    """Validate tool arguments and return them as plain keyword arguments.

    Args:
        operation: The tool name
        arguments: Raw arguments as received from the client

    Returns:
        Dict[str, Any]: Arguments keyed by wire field names, with defaults filled in

    Raises:
        UnknownOperationError: If the operation is not supported
        InvalidArgumentsError: If required fields are missing or mistyped
    """
    model = ARGUMENT_MODELS.get(operation)
    if model is None:
        raise UnknownOperationError(operation)
    try:
        parsed = model.model_validate(arguments or {})
    except ValidationError as e:
        errors = "; ".join(
            f"{'.'.join(str(p) for p in err['loc']) or '<root>'}: {err['msg']}"
            for err in e.errors()
        )
        raise InvalidArgumentsError(operation, errors) from e
    return parsed.model_dump(by_alias=True)

"""Entity use cases."""

from .create_entity_usecase import CreateEntityUseCaseImpl
from .delete_entity_usecase import DeleteEntityUseCaseImpl
from .get_entity_usecase import GetEntityUseCaseImpl
from .list_entities_usecase import ListEntitiesUseCaseImpl
from .update_entity_usecase import UpdateEntityUseCaseImpl

__all__ = [
    "ListEntitiesUseCaseImpl",
    "CreateEntityUseCaseImpl",
    "GetEntityUseCaseImpl",
    "UpdateEntityUseCaseImpl",
    "DeleteEntityUseCaseImpl",
]

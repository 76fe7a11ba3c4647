import os

from core.application.ports.tarea_service import TareaService
from core.application.tarea_service import TareaServiceImpl
from core.domain.ports.tarea_repository import TareaRepository
from infrastructure.mongo.repository.tarea_repository import MongoTareaRepository
from infrastructure.peewee.repository.tarea_repository import (
    PeeweeTareaRepository,
)
from infrastructure.sqlalchemy.repository.tarea_repository import (
    SqlAlchemyTareaRepository,
)


def get_tarea_repository() -> TareaRepository:
    orm = os.getenv("ORM", "peewee").lower()

    if orm == "mongo":
        return MongoTareaRepository()
    elif orm == "sqlalchemy":
        return SqlAlchemyTareaRepository()
    # Default to Peewee
    return PeeweeTareaRepository()


def get_tarea_service() -> TareaService:
    return TareaServiceImpl(repository=get_tarea_repository())

import logging

from core.application.dto import TareaDTO
from core.application.ports.tarea_service import TareaService
from core.application.tarea_mapper import to_dto, to_entity
from core.domain.ports.tarea_repository import TareaRepository

logger = logging.getLogger(__name__)


class TareaServiceImpl(TareaService):
    def __init__(self, repository: TareaRepository) -> None:
        self._repository = repository

    def save(self, tarea_dto: TareaDTO) -> TareaDTO:
        logger.debug(f"Request to save Tarea : {tarea_dto}")
        tarea = self._repository.save(to_entity(tarea_dto))
        return to_dto(tarea)

    def find_all(self) -> list[TareaDTO]:
        logger.debug("Request to get all Tareas")
        return [to_dto(tarea) for tarea in self._repository.list()]

    def find_one(self, tarea_id: int) -> TareaDTO | None:
        logger.debug(f"Request to get Tarea : {tarea_id}")
        tarea = self._repository.get(tarea_id)
        if tarea is None:
            return None
        return to_dto(tarea)

    def delete(self, tarea_id: int) -> None:
        logger.debug(f"Request to delete Tarea : {tarea_id}")
        self._repository.eliminar(tarea_id)

from abc import ABC, abstractmethod

from core.application.dto import TareaDTO


class TareaService(ABC):
    """
    Puerto de servicio consumido por la capa web.

    La asignación de identidad y la persistencia son responsabilidad
    exclusiva de la implementación.
    """

    @abstractmethod
    def save(self, tarea_dto: TareaDTO) -> TareaDTO:
        raise NotImplementedError

    @abstractmethod
    def find_all(self) -> list[TareaDTO]:
        raise NotImplementedError

    @abstractmethod
    def find_one(self, tarea_id: int) -> TareaDTO | None:
        raise NotImplementedError

    @abstractmethod
    def delete(self, tarea_id: int) -> None:
        raise NotImplementedError

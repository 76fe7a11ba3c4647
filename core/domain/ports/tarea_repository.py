from abc import ABC, abstractmethod

from core.domain.models.tarea import Tarea


class TareaRepository(ABC):
    @abstractmethod
    def list(self) -> list[Tarea]:
        raise NotImplementedError

    @abstractmethod
    def save(self, tarea: Tarea) -> Tarea:
        """Persiste la tarea y la devuelve con su id asignado."""
        raise NotImplementedError

    @abstractmethod
    def get(self, tarea_id: int) -> Tarea | None:
        raise NotImplementedError

    @abstractmethod
    def eliminar(self, tarea_id: int) -> None:
        raise NotImplementedError

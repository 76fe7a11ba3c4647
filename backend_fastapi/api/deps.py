from core.application.ports.tarea_service import TareaService
from infrastructure.container import get_tarea_service


def tarea_service() -> TareaService:
    return get_tarea_service()

from dataclasses import dataclass
from enum import Enum


class EstadoTarea(Enum):
    PENDIENTE = "pendiente"
    EN_PROGRESO = "en_progreso"
    COMPLETADA = "completada"


@dataclass(slots=True)
class Tarea:
    titulo: str
    id: int | None = None
    descripcion: str | None = None
    estado: EstadoTarea = EstadoTarea.PENDIENTE

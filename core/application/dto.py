from pydantic import BaseModel

from core.domain.models.tarea import EstadoTarea


class TareaDTO(BaseModel):
    """
    Representación de transferencia de una tarea.

    `id` es None para tareas nuevas; el resto de campos viaja sin
    transformación entre la API y el servicio.
    """

    id: int | None = None
    titulo: str
    descripcion: str | None = None
    estado: EstadoTarea = EstadoTarea.PENDIENTE

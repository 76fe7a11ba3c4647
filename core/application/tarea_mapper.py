from core.application.dto import TareaDTO
from core.domain.models.tarea import Tarea


def to_entity(dto: TareaDTO) -> Tarea:
    return Tarea(
        id=dto.id,
        titulo=dto.titulo,
        descripcion=dto.descripcion,
        estado=dto.estado,
    )


def to_dto(tarea: Tarea) -> TareaDTO:
    return TareaDTO(
        id=tarea.id,
        titulo=tarea.titulo,
        descripcion=tarea.descripcion,
        estado=tarea.estado,
    )

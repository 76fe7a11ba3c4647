import logging

from fastapi import APIRouter, Depends, Response, status

from backend_fastapi.api import header_util
from backend_fastapi.api.deps import tarea_service
from backend_fastapi.api.errors import BadRequestAlertError
from core.application.dto import TareaDTO
from core.application.ports.tarea_service import TareaService

logger = logging.getLogger(__name__)

ENTITY_NAME = "tarea"

router = APIRouter(prefix="/tareas", tags=["tareas"])


@router.post(
    "",
    response_model=TareaDTO,
    status_code=status.HTTP_201_CREATED,
    summary="Crear una nueva tarea",
)
def crear_tarea(
    tarea_dto: TareaDTO,
    response: Response,
    service: TareaService = Depends(tarea_service),
) -> TareaDTO:
    """
    Crea una nueva tarea.

    - **titulo**: Título de la tarea.
    - **descripcion**: Descripción opcional de la tarea.
    - **estado**: Estado inicial de la tarea (por defecto PENDIENTE).

    Responde 201 con cabecera `Location`, o 400 si la tarea ya trae `id`.
    """
    logger.debug(f"REST request to save Tarea : {tarea_dto}")
    if tarea_dto.id is not None:
        raise BadRequestAlertError(
            "A new tarea cannot already have an ID", ENTITY_NAME, "idexists"
        )
    result = service.save(tarea_dto)
    response.status_code = status.HTTP_201_CREATED
    response.headers["Location"] = f"/tareas/{result.id}"
    response.headers.update(
        header_util.create_entity_creation_alert(ENTITY_NAME, str(result.id))
    )
    return result


@router.put(
    "",
    response_model=TareaDTO,
    summary="Actualizar una tarea existente",
)
def actualizar_tarea(
    tarea_dto: TareaDTO,
    response: Response,
    service: TareaService = Depends(tarea_service),
) -> TareaDTO:
    """
    Actualiza una tarea existente.

    Si la tarea no trae `id` se trata como una creación (201).
    """
    logger.debug(f"REST request to update Tarea : {tarea_dto}")
    if tarea_dto.id is None:
        return crear_tarea(tarea_dto, response, service)
    result = service.save(tarea_dto)
    response.headers.update(
        header_util.create_entity_update_alert(ENTITY_NAME, str(tarea_dto.id))
    )
    return result


@router.get(
    "",
    response_model=list[TareaDTO],
    summary="Listar todas las tareas",
)
def listar_tareas(
    service: TareaService = Depends(tarea_service),
) -> list[TareaDTO]:
    """
    Obtiene una lista de todas las tareas registradas.
    """
    logger.debug("REST request to get all Tareas")
    return service.find_all()


@router.get(
    "/{tarea_id}",
    response_model=TareaDTO,
    summary="Obtener una tarea",
    responses={status.HTTP_404_NOT_FOUND: {"description": "Tarea no encontrada"}},
)
def obtener_tarea(
    tarea_id: int,
    service: TareaService = Depends(tarea_service),
) -> TareaDTO | Response:
    """
    Obtiene la tarea con el id indicado, o 404 sin cuerpo si no existe.
    """
    logger.debug(f"REST request to get Tarea : {tarea_id}")
    tarea_dto = service.find_one(tarea_id)
    if tarea_dto is None:
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    return tarea_dto


@router.delete(
    "/{tarea_id}",
    status_code=status.HTTP_200_OK,
    response_class=Response,
    summary="Eliminar una tarea",
)
def eliminar_tarea(
    tarea_id: int,
    service: TareaService = Depends(tarea_service),
) -> Response:
    """
    Elimina una tarea del sistema.

    - **tarea_id**: id de la tarea a eliminar.
    """
    logger.debug(f"REST request to delete Tarea : {tarea_id}")
    service.delete(tarea_id)
    return Response(
        status_code=status.HTTP_200_OK,
        headers=header_util.create_entity_deletion_alert(ENTITY_NAME, str(tarea_id)),
    )

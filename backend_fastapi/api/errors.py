import logging

from fastapi import Request, status
from fastapi.responses import JSONResponse

from backend_fastapi.api.header_util import create_failure_alert

logger = logging.getLogger(__name__)


class BadRequestAlertError(Exception):
    """
    Petición inválida asociada a una entidad concreta.

    Args:
        title:       Mensaje legible del error.
        entity_name: Nombre de la entidad afectada, ej: "tarea".
        error_key:   Código de motivo, ej: "idexists".
    """

    def __init__(self, title: str, entity_name: str, error_key: str) -> None:
        super().__init__(title)
        self.title = title
        self.entity_name = entity_name
        self.error_key = error_key

    def to_problem(self) -> dict[str, str | int]:
        return {
            "title": self.title,
            "status": status.HTTP_400_BAD_REQUEST,
            "entityName": self.entity_name,
            "errorKey": self.error_key,
            "message": f"error.{self.error_key}",
            "params": self.entity_name,
        }


async def bad_request_alert_handler(
    request: Request, exc: BadRequestAlertError
) -> JSONResponse:
    logger.warning(
        f"⚠️ {request.method} {request.url.path} rechazado: "
        f"{exc.entity_name}.{exc.error_key} ({exc.title})"
    )
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=exc.to_problem(),
        headers=create_failure_alert(exc.entity_name, exc.error_key),
    )

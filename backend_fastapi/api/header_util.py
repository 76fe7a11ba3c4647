"""
Cabeceras de alerta para clientes de la API.

Convención:
    X-<app>-alert:  <app>.<entidad>.<created|updated|deleted>
    X-<app>-error:  error.<clave de error>
    X-<app>-params: id afectado (alertas) o nombre de entidad (errores)
"""

import os

APPLICATION_NAME = os.getenv("APP_NAME", "tareasApp")


def create_alert(message: str, param: str) -> dict[str, str]:
    return {
        f"X-{APPLICATION_NAME}-alert": message,
        f"X-{APPLICATION_NAME}-params": param,
    }


def create_entity_creation_alert(entity_name: str, param: str) -> dict[str, str]:
    return create_alert(f"{APPLICATION_NAME}.{entity_name}.created", param)


def create_entity_update_alert(entity_name: str, param: str) -> dict[str, str]:
    return create_alert(f"{APPLICATION_NAME}.{entity_name}.updated", param)


def create_entity_deletion_alert(entity_name: str, param: str) -> dict[str, str]:
    return create_alert(f"{APPLICATION_NAME}.{entity_name}.deleted", param)


def create_failure_alert(entity_name: str, error_key: str) -> dict[str, str]:
    return {
        f"X-{APPLICATION_NAME}-error": f"error.{error_key}",
        f"X-{APPLICATION_NAME}-params": entity_name,
    }


def exposed_headers() -> list[str]:
    """Cabeceras que el navegador debe poder leer en respuestas CORS."""
    return [
        "Location",
        f"X-{APPLICATION_NAME}-alert",
        f"X-{APPLICATION_NAME}-error",
        f"X-{APPLICATION_NAME}-params",
    ]

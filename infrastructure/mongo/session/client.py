import os
from typing import Any

from pymongo import MongoClient
from pymongo.database import Database

_client: MongoClient[Any] | None = None


def get_client() -> MongoClient[Any]:
    """
    Obtiene el cliente de MongoDB (Singleton).

    La conexión es perezosa: no se contacta al servidor hasta la primera
    operación.
    """
    global _client
    if _client is None:
        mongo_uri = os.getenv("MONGO_URI", "mongodb://localhost:27017")
        timeout_ms = int(os.getenv("MONGO_TIMEOUT_MS", "5000"))
        _client = MongoClient(mongo_uri, serverSelectionTimeoutMS=timeout_ms)
    return _client


def get_db() -> Database[Any]:
    """
    Obtiene la base de datos de MongoDB.

    Retorna:
        Database: La base de datos donde viven `tareas` y `counters`.
    """
    client = get_client()
    db_name = os.getenv("MONGO_DB_NAME", "tareas_api")
    return client[db_name]

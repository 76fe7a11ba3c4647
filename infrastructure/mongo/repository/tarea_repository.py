from typing import Any

from pymongo import ASCENDING, ReturnDocument
from pymongo.collection import Collection

from core.domain.models.tarea import Tarea
from core.domain.ports.tarea_repository import TareaRepository
from infrastructure.mongo.models.tarea import TareaMongo
from infrastructure.mongo.session.client import get_db

_SEQUENCE_NAME = "tareas"


class MongoTareaRepository(TareaRepository):
    """
    Implementación de TareaRepository usando MongoDB (Synchronous).

    Los ids son enteros secuenciales obtenidos de la colección `counters`.
    """

    def __init__(self) -> None:
        self.db = get_db()
        self.collection: Collection[Any] = self.db.tareas
        self.counters: Collection[Any] = self.db.counters

    def _next_id(self) -> int:
        """
        Reserva el siguiente id de forma atómica.

        Retorna:
            int: El nuevo identificador.
        """
        counter = self.counters.find_one_and_update(
            {"_id": _SEQUENCE_NAME},
            {"$inc": {"seq": 1}},
            upsert=True,
            return_document=ReturnDocument.AFTER,
        )
        return int(counter["seq"])

    def _advance_sequence(self, tarea_id: int) -> None:
        """
        Garantiza que la secuencia no vuelva a entregar un id ya usado.

        Argumentos:
            tarea_id (int): Id guardado explícitamente por el cliente.
        """
        self.counters.update_one(
            {"_id": _SEQUENCE_NAME}, {"$max": {"seq": tarea_id}}, upsert=True
        )

    def save(self, tarea: Tarea) -> Tarea:
        """
        Guarda o actualiza una tarea en la base de datos.

        Argumentos:
            tarea (Tarea): La tarea a guardar. Si no tiene id se le asigna uno.

        Retorna:
            Tarea: La tarea tal como quedó almacenada.
        """
        if tarea.id is None:
            tarea_id = self._next_id()
        else:
            tarea_id = tarea.id
            self._advance_sequence(tarea_id)
        tarea_mongo = TareaMongo.from_domain(tarea, tarea_id)
        tarea_dict = tarea_mongo.model_dump(by_alias=True)

        self.collection.update_one(
            {"_id": tarea_dict["_id"]}, {"$set": tarea_dict}, upsert=True
        )
        return tarea_mongo.to_domain()

    def get(self, tarea_id: int) -> Tarea | None:
        """
        Obtiene una tarea por su ID.

        Argumentos:
            tarea_id (int): El ID de la tarea.

        Retorna:
            Tarea | None: La tarea encontrada o None si no existe.
        """
        doc = self.collection.find_one({"_id": tarea_id})
        if not doc:
            return None

        return TareaMongo(**doc).to_domain()

    def list(self) -> list[Tarea]:
        """
        Lista todas las tareas ordenadas por id.

        Retorna:
            list[Tarea]: Lista de todas las tareas.
        """
        docs = self.collection.find().sort("_id", ASCENDING)
        return [TareaMongo(**doc).to_domain() for doc in docs]

    def eliminar(self, tarea_id: int) -> None:
        """
        Elimina una tarea por su ID.

        Argumentos:
            tarea_id (int): El ID de la tarea a eliminar.
        """
        self.collection.delete_one({"_id": tarea_id})

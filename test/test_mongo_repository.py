from unittest.mock import MagicMock

import pytest
from core.domain.models.tarea import EstadoTarea, Tarea
from infrastructure.mongo.repository.tarea_repository import MongoTareaRepository


@pytest.fixture
def mock_mongo_collection():
    collection = MagicMock()
    return collection


@pytest.fixture
def mock_counters_collection():
    counters = MagicMock()
    counters.find_one_and_update.return_value = {"_id": "tareas", "seq": 7}
    return counters


@pytest.fixture
def mongo_repository(mock_mongo_collection, mock_counters_collection):
    repo = MongoTareaRepository()
    repo.collection = mock_mongo_collection
    repo.counters = mock_counters_collection
    return repo


def test_save_tarea_nueva_reserva_id(
    mongo_repository, mock_mongo_collection, mock_counters_collection
):
    tarea = Tarea(
        titulo="Test Tarea",
        descripcion="Test Descripcion",
        estado=EstadoTarea.PENDIENTE,
    )

    saved = mongo_repository.save(tarea)

    assert saved.id == 7
    mock_counters_collection.find_one_and_update.assert_called_once()
    args, kwargs = mock_mongo_collection.update_one.call_args
    assert args[0] == {"_id": 7}
    assert args[1]["$set"]["titulo"] == "Test Tarea"
    assert kwargs["upsert"] is True


def test_save_tarea_existente_no_consume_secuencia(
    mongo_repository, mock_mongo_collection, mock_counters_collection
):
    saved = mongo_repository.save(Tarea(id=3, titulo="Existente"))

    assert saved.id == 3
    mock_counters_collection.find_one_and_update.assert_not_called()
    mock_counters_collection.update_one.assert_called_once_with(
        {"_id": "tareas"}, {"$max": {"seq": 3}}, upsert=True
    )
    args, _ = mock_mongo_collection.update_one.call_args
    assert args[0] == {"_id": 3}


def test_get_tarea_found(mongo_repository, mock_mongo_collection):
    mock_doc = {
        "_id": 11,
        "titulo": "Found Tarea",
        "descripcion": "Found Descripcion",
        "estado": "pendiente",
    }
    mock_mongo_collection.find_one.return_value = mock_doc

    result = mongo_repository.get(11)

    assert result is not None
    assert result.id == 11
    assert result.titulo == "Found Tarea"
    mock_mongo_collection.find_one.assert_called_once_with({"_id": 11})


def test_get_tarea_not_found(mongo_repository, mock_mongo_collection):
    mock_mongo_collection.find_one.return_value = None

    result = mongo_repository.get(404)

    assert result is None


def test_list_tareas(mongo_repository, mock_mongo_collection):
    mock_docs = [
        {
            "_id": 1,
            "titulo": "Tarea 1",
            "descripcion": "Desc 1",
            "estado": "pendiente",
        },
        {
            "_id": 2,
            "titulo": "Tarea 2",
            "descripcion": "Desc 2",
            "estado": "completada",
        },
    ]
    mock_mongo_collection.find.return_value.sort.return_value = mock_docs

    results = mongo_repository.list()

    assert len(results) == 2
    assert results[0].titulo == "Tarea 1"
    assert results[1].estado == EstadoTarea.COMPLETADA


def test_eliminar_tarea(mongo_repository, mock_mongo_collection):
    mongo_repository.eliminar(5)

    mock_mongo_collection.delete_one.assert_called_once_with({"_id": 5})


class FakeCounters:
    """Colección `counters` en memoria con `$inc` y `$max`."""

    def __init__(self):
        self.docs = {}

    def _doc(self, filtro):
        return self.docs.setdefault(filtro["_id"], {"_id": filtro["_id"], "seq": 0})

    def find_one_and_update(self, filtro, update, upsert=False, return_document=None):
        doc = self._doc(filtro)
        doc["seq"] += update["$inc"]["seq"]
        return dict(doc)

    def update_one(self, filtro, update, upsert=False):
        doc = self._doc(filtro)
        doc["seq"] = max(doc["seq"], update["$max"]["seq"])


class FakeTareas:
    """Colección `tareas` en memoria con upsert por `_id`."""

    def __init__(self):
        self.docs = {}

    def update_one(self, filtro, update, upsert=False):
        self.docs.setdefault(filtro["_id"], {}).update(update["$set"])

    def find_one(self, filtro):
        return self.docs.get(filtro["_id"])


@pytest.fixture
def stateful_repository():
    repo = MongoTareaRepository()
    repo.collection = FakeTareas()
    repo.counters = FakeCounters()
    return repo


def test_id_explicito_no_lo_reutiliza_una_creacion_posterior(stateful_repository):
    stateful_repository.save(Tarea(id=1, titulo="Importada via PUT"))

    nueva = stateful_repository.save(Tarea(titulo="Nueva via POST"))

    assert nueva.id != 1
    assert stateful_repository.get(1).titulo == "Importada via PUT"
    assert stateful_repository.get(nueva.id).titulo == "Nueva via POST"


def test_id_explicito_menor_no_retrocede_la_secuencia(stateful_repository):
    primera = stateful_repository.save(Tarea(titulo="a"))
    segunda = stateful_repository.save(Tarea(titulo="b"))

    stateful_repository.save(Tarea(id=primera.id, titulo="a editada"))
    tercera = stateful_repository.save(Tarea(titulo="c"))

    assert tercera.id == segunda.id + 1

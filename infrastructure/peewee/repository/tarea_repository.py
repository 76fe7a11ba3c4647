from typing import List
from peewee import PostgresqlDatabase
from core.domain.models.tarea import Tarea, EstadoTarea
from core.domain.ports.tarea_repository import TareaRepository
from infrastructure.peewee.model.models import TareaModel
from infrastructure.peewee.session.db import db


def _to_domain(tarea_model: TareaModel) -> Tarea:
    return Tarea(
        id=tarea_model.id,
        titulo=tarea_model.titulo,
        descripcion=tarea_model.descripcion,
        estado=EstadoTarea(tarea_model.estado)
    )


class PeeweeTareaRepository(TareaRepository):
    def __init__(self):
        # Tables are created on init; there are no migrations in this setup.
        db.connect(reuse_if_open=True)
        db.create_tables([TareaModel], safe=True)

    def save(self, tarea: Tarea) -> Tarea:
        with db.atomic():
            fields = {
                "titulo": tarea.titulo,
                "descripcion": tarea.descripcion,
                "estado": tarea.estado.value,
            }
            if tarea.id is None:
                tarea_model = TareaModel.create(**fields)
                return _to_domain(tarea_model)
            try:
                existing = TareaModel.get(TareaModel.id == tarea.id)
                for name, value in fields.items():
                    setattr(existing, name, value)
                existing.save()
                return _to_domain(existing)
            except TareaModel.DoesNotExist:
                tarea_model = TareaModel.create(id=tarea.id, **fields)
                self._advance_sequence()
                return _to_domain(tarea_model)

    def _advance_sequence(self) -> None:
        # Postgres serials ignore explicit ids; SQLite uses MAX(rowid) + 1 on its own
        if isinstance(db, PostgresqlDatabase):
            db.execute_sql(
                "SELECT setval(pg_get_serial_sequence('tareas', 'id'), "
                "COALESCE(MAX(id), 1)) FROM tareas"
            )

    def get(self, tarea_id: int) -> Tarea | None:
        try:
            return _to_domain(TareaModel.get(TareaModel.id == tarea_id))
        except TareaModel.DoesNotExist:
            return None

    def list(self) -> List[Tarea]:
        return [_to_domain(t) for t in TareaModel.select().order_by(TareaModel.id)]

    def eliminar(self, tarea_id: int) -> None:
        query = TareaModel.delete().where(TareaModel.id == tarea_id)
        query.execute()

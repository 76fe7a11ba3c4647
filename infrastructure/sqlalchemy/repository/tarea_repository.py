from sqlalchemy import text
from sqlalchemy.orm import Session

from core.domain.models.tarea import EstadoTarea, Tarea
from core.domain.ports.tarea_repository import TareaRepository
from infrastructure.sqlalchemy.session.db import get_session, init_db
from infrastructure.sqlalchemy.model.models import TareaModel


def _to_domain(tarea_model: TareaModel) -> Tarea:
    return Tarea(
        id=tarea_model.id,
        titulo=tarea_model.titulo,
        descripcion=tarea_model.descripcion,
        estado=EstadoTarea(tarea_model.estado),
    )


def _advance_sequence(session: Session) -> None:
    # Postgres serials ignore explicit ids; SQLite uses MAX(rowid) + 1 on its own
    if session.get_bind().dialect.name == "postgresql":
        session.execute(
            text(
                "SELECT setval(pg_get_serial_sequence('tareas', 'id'), "
                "COALESCE(MAX(id), 1)) FROM tareas"
            )
        )


class SqlAlchemyTareaRepository(TareaRepository):
    def __init__(self) -> None:
        init_db()

    def save(self, tarea: Tarea) -> Tarea:
        session = get_session()
        try:
            tarea_model = TareaModel(
                id=tarea.id,
                titulo=tarea.titulo,
                descripcion=tarea.descripcion,
                estado=tarea.estado.value,
            )
            # merge() inserts when id is None or unknown, updates otherwise
            tarea_model = session.merge(tarea_model)
            if tarea.id is not None:
                session.flush()
                _advance_sequence(session)
            session.commit()
            return _to_domain(tarea_model)
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    def get(self, tarea_id: int) -> Tarea | None:
        session = get_session()
        try:
            tarea_model = session.get(TareaModel, tarea_id)
            if tarea_model is None:
                return None
            return _to_domain(tarea_model)
        finally:
            session.close()

    def list(self) -> list[Tarea]:
        session = get_session()
        try:
            tarea_models = session.query(TareaModel).order_by(TareaModel.id).all()
            return [_to_domain(tarea_model) for tarea_model in tarea_models]
        finally:
            session.close()

    def eliminar(self, tarea_id: int) -> None:
        session = get_session()
        try:
            tarea_model = session.get(TareaModel, tarea_id)
            if tarea_model is None:
                return
            session.delete(tarea_model)
            session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

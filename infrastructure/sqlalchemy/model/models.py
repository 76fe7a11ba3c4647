from sqlalchemy import Column, Integer, String, Text
from infrastructure.sqlalchemy.session.db import Base


class TareaModel(Base):
    __tablename__ = "tareas"

    id = Column(Integer, primary_key=True, autoincrement=True)
    titulo = Column(String, nullable=False)
    descripcion = Column(Text, nullable=True)
    estado = Column(String, nullable=False)

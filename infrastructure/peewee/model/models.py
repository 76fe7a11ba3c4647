from peewee import AutoField, CharField, Model, TextField
from infrastructure.peewee.session.db import db

class TareaModel(Model):
    id = AutoField()
    titulo = CharField()
    descripcion = TextField(null=True)
    estado = CharField()

    class Meta:
        database = db
        table_name = "tareas"

import os
from playhouse.db_url import connect

# Default to a local SQLite file; any playhouse URL works (postgres:// needs psycopg2)
DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///tareas.db")

db = connect(DATABASE_URL)

def get_db():
    return db

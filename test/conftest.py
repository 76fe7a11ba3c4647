import os

# Repositories read DATABASE_URL at import time; keep every test in memory.
os.environ["DATABASE_URL"] = "sqlite:///:memory:"
os.environ.setdefault("ORM", "peewee")

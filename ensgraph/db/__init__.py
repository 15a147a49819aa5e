from ensgraph.db.models import Base
from ensgraph.db.database import engine, get_db
from ensgraph.db.init_db import init_database

__all__ = ["Base", "engine", "get_db", "init_database"]

"""Database connection management."""

from pathlib import Path
from typing import Optional

from peewee import PeeweeException, SqliteDatabase

from keywordhighlighter.config import Config
from keywordhighlighter.database.models import create_tables, db_proxy
from keywordhighlighter.exceptions import DatabaseError
from keywordhighlighter.logging_config import get_logger

logger = get_logger(__name__)


class DatabaseManager:
    """Owns the SQLite connection behind the model proxy."""

    def __init__(self, path: str) -> None:
        self.path = path
        self.database: Optional[SqliteDatabase] = None

    def connect(self) -> SqliteDatabase:
        if self.database is not None:
            return self.database

        if self.path != ":memory:":
            Path(self.path).expanduser().parent.mkdir(parents=True, exist_ok=True)
            path = str(Path(self.path).expanduser())
        else:
            path = self.path

        try:
            database = SqliteDatabase(path, pragmas={"foreign_keys": 1})
            db_proxy.initialize(database)
            database.connect(reuse_if_open=True)
            create_tables()
        except PeeweeException as e:
            raise DatabaseError(f"Failed to open database at {self.path}", details=str(e)) from e

        self.database = database
        logger.debug("Database initialized", path=self.path)
        return database

    def close(self) -> None:
        if self.database is not None and not self.database.is_closed():
            self.database.close()
        self.database = None


_manager: Optional[DatabaseManager] = None


def initialize_database(config: Config) -> DatabaseManager:
    """Open the configured database and create missing tables."""
    global _manager
    close_database()
    _manager = DatabaseManager(config.database.path)
    _manager.connect()
    return _manager


def close_database() -> None:
    global _manager
    if _manager is not None:
        _manager.close()
        _manager = None

"""
Category page store.

The pipeline only ever looks pages up by slug and patches columns of an
existing row by id. Rows are seeded by an external process; nothing here
creates or deletes them.
"""

import copy
import json
import re
import sqlite3
from abc import ABC, abstractmethod
from typing import Callable, Optional

from pallet_seo.errors import FatalConfigError, NotFoundError

TABLE_NAME = "CategoryPage"

# Columns holding JSON documents, stored as TEXT in SQLite
JSON_COLUMNS = {"contentBlocks", "faqs"}

_IDENTIFIER = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")


class PageStore(ABC):
    """Abstract persistence collaborator for category pages."""

    @abstractmethod
    def find_by_slug(self, slug: str) -> Optional[dict]:
        """Return the page record for slug, or None."""
        pass

    @abstractmethod
    def update_by_id(self, record_id, fields: dict) -> None:
        """Overwrite only the given columns of an existing record."""
        pass

    def close(self):
        pass


class InMemoryPageStore(PageStore):
    """Dict-backed store. Records are copied in and out."""

    def __init__(self, records: Optional[list] = None):
        self.records = {}
        self.writes = []
        for record in records or []:
            self.records[record["id"]] = copy.deepcopy(record)

    def find_by_slug(self, slug: str) -> Optional[dict]:
        for record in self.records.values():
            if record.get("slug") == slug:
                return copy.deepcopy(record)
        return None

    def update_by_id(self, record_id, fields: dict) -> None:
        if record_id not in self.records:
            raise NotFoundError(f"No record with id {record_id}")
        self.records[record_id].update(copy.deepcopy(fields))
        self.writes.append({"id": record_id, "fields": sorted(fields)})


class SqlPageStore(PageStore):
    """SQLite-backed store over the CategoryPage table."""

    def __init__(self, connection: sqlite3.Connection, table: str = TABLE_NAME):
        if not _IDENTIFIER.match(table):
            raise ValueError(f"Invalid table name: {table}")
        self.conn = connection
        self.conn.row_factory = sqlite3.Row
        self.table = table

    @classmethod
    def connect(cls, path: str) -> "SqlPageStore":
        return cls(sqlite3.connect(path))

    def _decode(self, row: sqlite3.Row) -> dict:
        record = dict(row)
        for column in JSON_COLUMNS:
            value = record.get(column)
            if isinstance(value, str) and value:
                record[column] = json.loads(value)
        return record

    def find_by_slug(self, slug: str) -> Optional[dict]:
        cursor = self.conn.execute(
            f'SELECT * FROM "{self.table}" WHERE "slug" = ?', (slug,)
        )
        row = cursor.fetchone()
        return self._decode(row) if row is not None else None

    def update_by_id(self, record_id, fields: dict) -> None:
        if not fields:
            return
        for column in fields:
            if not _IDENTIFIER.match(column):
                raise ValueError(f"Invalid column name: {column}")

        assignments = ", ".join(f'"{column}" = ?' for column in fields)
        values = []
        for column, value in fields.items():
            if column in JSON_COLUMNS or isinstance(value, (list, dict)):
                value = json.dumps(value, ensure_ascii=False)
            values.append(value)
        values.append(record_id)

        with self.conn:
            cursor = self.conn.execute(
                f'UPDATE "{self.table}" SET {assignments} WHERE "id" = ?', values
            )
        if cursor.rowcount == 0:
            raise NotFoundError(f"No record with id {record_id}")

    def close(self):
        self.conn.close()


def _open_sqlite(path: str) -> PageStore:
    if not path:
        raise FatalConfigError("DATABASE_URL does not name a database file")
    return SqlPageStore.connect(path)


# DATABASE_URL prefix -> opener(rest of URL), checked in order
STORE_OPENERS = {
    "sqlite:///": _open_sqlite,
    "file:": _open_sqlite,
}

STORE_URL_HELP = (
    "DATABASE_URL must be sqlite:///<path> or file:<path> (a SQLite copy of the "
    "CategoryPage table). PostgreSQL URLs are rejected: no PostgreSQL store is built in."
)


def register_store_opener(prefix: str, opener: Callable[[str], PageStore]) -> None:
    """Make open_page_store accept URLs starting with prefix."""
    STORE_OPENERS[prefix] = opener


def open_page_store(database_url: Optional[str]) -> PageStore:
    """
    Open a store from a database URL.

    Accepts sqlite:///<path> and Prisma-style file:<path>, plus any prefix
    added with register_store_opener().
    """
    if not database_url:
        raise FatalConfigError("DATABASE_URL environment variable is required")

    for prefix, opener in STORE_OPENERS.items():
        if database_url.startswith(prefix):
            return opener(database_url[len(prefix):])

    scheme = database_url.split(":", 1)[0]
    message = f"Unsupported DATABASE_URL scheme '{scheme}'. Supported prefixes: {', '.join(STORE_OPENERS)}."
    if scheme in ("postgres", "postgresql"):
        message += (
            " The Prisma production database is PostgreSQL, which has no built-in store."
            " Point DATABASE_URL at a SQLite copy, or register an opener with register_store_opener()."
        )
    raise FatalConfigError(message)

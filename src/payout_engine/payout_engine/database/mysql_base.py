from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Callable, Dict, Iterable, List, Optional, Type, TypeVar

import mysql.connector

from ..core.exceptions import StoreError, StoreReadError
from .connection import DatabaseConnection

T = TypeVar("T")


@contextmanager
def db_cursor(
    conn_factory: DatabaseConnection,
    *,
    dictionary: bool = True,
    error_cls: Type[StoreError] = StoreError,
):
    """Yield ``(conn, cursor)``; commit on success, roll back on any error.

    Connector errors are re-raised as ``error_cls`` so callers never depend on
    the driver's exception types.
    """
    try:
        conn = conn_factory.connect()
    except mysql.connector.Error as exc:
        raise error_cls(f"Database unavailable: {exc}") from exc

    try:
        cur = conn.cursor(dictionary=dictionary)
        try:
            yield conn, cur
            conn.commit()
        finally:
            cur.close()
    except mysql.connector.Error as exc:
        conn.rollback()
        raise error_cls(str(exc)) from exc
    except Exception:
        conn.rollback()
        raise
    finally:
        conn.close()


def fetchall(cur) -> List[Dict[str, Any]]:
    rows = cur.fetchall()
    return list(rows or [])


def split_csv(value: Optional[str]) -> Optional[list[str]]:
    """Stored weekday lists are comma separated; NULL keeps the default."""
    if value is None:
        return None
    return [part for part in (p.strip() for p in str(value).split(",")) if part]


def map_rows(rows: Iterable[Dict[str, Any]], to_record: Callable[[Dict[str, Any]], T]) -> List[T]:
    """Map fetched rows to records; a stored value the domain rejects is a read failure."""
    try:
        return [to_record(r) for r in rows]
    except (KeyError, TypeError, ValueError) as exc:
        raise StoreReadError(f"Unreadable row: {exc!r}") from exc

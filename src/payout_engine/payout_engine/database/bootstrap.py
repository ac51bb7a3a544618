from __future__ import annotations

import re
from pathlib import Path
from typing import Iterable

from .connection import DBConfig, DatabaseConnection


def _strip_create_db_and_use(sql: str) -> str:
    # schema.sql must work whatever the configured database name is.
    sql = re.sub(r"(?im)^\s*CREATE\s+DATABASE\b.*?;\s*$", "", sql)
    return re.sub(r"(?im)^\s*USE\b.*?;\s*$", "", sql)


def iter_sql_statements(sql: str) -> Iterable[str]:
    """Split a script on ``;`` outside of quoted strings and ``--`` comments."""
    buf: list[str] = []
    quote = None
    i = 0
    while i < len(sql):
        ch = sql[i]
        if quote:
            buf.append(ch)
            if ch == "\\" and i + 1 < len(sql):
                buf.append(sql[i + 1])
                i += 1
            elif ch == quote:
                quote = None
        elif ch in ("'", '"', "`"):
            quote = ch
            buf.append(ch)
        elif ch == "-" and sql.startswith("--", i):
            newline = sql.find("\n", i)
            i = len(sql) if newline < 0 else newline
            continue
        elif ch == ";":
            stmt = "".join(buf).strip()
            buf.clear()
            if stmt:
                yield stmt
        else:
            buf.append(ch)
        i += 1

    tail = "".join(buf).strip()
    if tail:
        yield tail


def apply_schema(db_config: dict, *, schema_path: str | Path) -> None:
    config = DBConfig.from_dict(db_config)
    factory = DatabaseConnection(config)

    conn = factory.connect(with_database=False)
    try:
        cur = conn.cursor()
        cur.execute(
            f"CREATE DATABASE IF NOT EXISTS `{config.database}` CHARACTER SET utf8mb4 COLLATE utf8mb4_unicode_ci"
        )
        conn.commit()
    finally:
        conn.close()

    sql = _strip_create_db_and_use(Path(schema_path).read_text(encoding="utf-8"))
    conn = factory.connect()
    try:
        cur = conn.cursor()
        for stmt in iter_sql_statements(sql):
            cur.execute(stmt)
        conn.commit()
    finally:
        conn.close()


def list_tables(db_config: dict) -> list[str]:
    conn = DatabaseConnection(DBConfig.from_dict(db_config)).connect()
    try:
        cur = conn.cursor()
        cur.execute("SHOW TABLES")
        return [row[0] for row in cur.fetchall()]
    finally:
        conn.close()

from __future__ import annotations

import sqlite3
from datetime import datetime
from pathlib import Path
from typing import Optional

from designqube.domain.errors import PersistenceError


class SqliteStore:
    """Key-value blob storage in a single sqlite file.

    Plays the role browser localStorage had for the web version: synchronous
    get/set of opaque strings, last write wins.
    """

    def __init__(self, db_path: Path | str):
        self.db_path = str(db_path)

    def _conn(self) -> sqlite3.Connection:
        return sqlite3.connect(self.db_path)

    def init_db(self) -> None:
        self.run_migrations()

    def run_migrations(self) -> None:
        conn = self._conn()
        try:
            cur = conn.cursor()
            cur.execute("BEGIN")
            cur.execute("CREATE TABLE IF NOT EXISTS schema_migrations (version INTEGER PRIMARY KEY, applied_at TEXT NOT NULL)")
            cur.execute("SELECT COALESCE(MAX(version), 0) FROM schema_migrations")
            current_version = int(cur.fetchone()[0])

            migrations = [
                (1, self._migration_v1_kv),
            ]

            for version, migration in migrations:
                if version <= current_version:
                    continue
                migration(cur)
                cur.execute(
                    "INSERT INTO schema_migrations (version, applied_at) VALUES (?, datetime('now'))",
                    (version,),
                )
            conn.commit()
        except sqlite3.Error as exc:
            conn.rollback()
            raise PersistenceError(f"Store migration failed: {exc}") from exc
        finally:
            conn.close()

    def _migration_v1_kv(self, cur: sqlite3.Cursor) -> None:
        cur.execute(
            """
        CREATE TABLE IF NOT EXISTS kv (
            key TEXT PRIMARY KEY,
            value TEXT NOT NULL,
            updated_at TEXT NOT NULL
        )
        """
        )

    def get(self, key: str) -> Optional[str]:
        try:
            conn = self._conn()
        except sqlite3.Error as exc:
            raise PersistenceError(f"Cannot open store: {exc}") from exc
        try:
            cur = conn.cursor()
            cur.execute("SELECT value FROM kv WHERE key=?", (key,))
            r = cur.fetchone()
        except sqlite3.Error as exc:
            raise PersistenceError(f"Cannot read key {key!r}: {exc}") from exc
        finally:
            conn.close()
        if not r:
            return None
        return str(r[0])

    def set(self, key: str, blob: str) -> None:
        ts = datetime.now().replace(microsecond=0).isoformat(sep=" ")
        try:
            conn = self._conn()
        except sqlite3.Error as exc:
            raise PersistenceError(f"Cannot open store: {exc}") from exc
        try:
            cur = conn.cursor()
            cur.execute(
                """
                INSERT INTO kv (key, value, updated_at) VALUES (?, ?, ?)
                ON CONFLICT(key) DO UPDATE SET value=excluded.value, updated_at=excluded.updated_at
                """,
                (key, str(blob), ts),
            )
            conn.commit()
        except sqlite3.Error as exc:
            conn.rollback()
            raise PersistenceError(f"Cannot write key {key!r}: {exc}") from exc
        finally:
            conn.close()


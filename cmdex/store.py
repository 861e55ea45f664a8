"""SQLite-backed alias store.

Aliases live in a single table, ``commands``, keyed by alias name. The
connection runs in exclusive locking mode and grabs the write lock as soon as
the store is opened, so a second cmdex process cannot open the same file until
the first one closes it.
"""

from __future__ import annotations

import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Callable, Iterator, Optional, Tuple, Union

from cmdex.errors import AliasNotFound, StorageOpenError, StorageTxError

BUCKET = "commands"
DEFAULT_LOCK_TIMEOUT = 1.0

PathLike = Union[str, Path]


class AliasStore:
    """Durable alias -> command template mapping."""

    def __init__(self, conn: sqlite3.Connection, path: Path):
        self._conn: Optional[sqlite3.Connection] = conn
        self.path = path

    @classmethod
    def open(
        cls, path: PathLike, *, lock_timeout: float = DEFAULT_LOCK_TIMEOUT
    ) -> "AliasStore":
        """Open (or create) the store at ``path`` and take its exclusive lock."""
        resolved = Path(path).expanduser()
        conn: Optional[sqlite3.Connection] = None
        try:
            if not resolved.parent.exists():
                resolved.parent.mkdir(parents=True, exist_ok=True)
            conn = sqlite3.connect(
                str(resolved), timeout=lock_timeout, isolation_level=None
            )
            conn.execute("PRAGMA locking_mode=EXCLUSIVE;")
            conn.execute("BEGIN EXCLUSIVE")
            conn.execute(
                f"""
                CREATE TABLE IF NOT EXISTS {BUCKET} (
                    alias TEXT PRIMARY KEY NOT NULL,
                    command TEXT NOT NULL
                );
                """
            )
            conn.execute("COMMIT")
        except (sqlite3.Error, OSError) as exc:
            if conn is not None:
                conn.close()
            raise StorageOpenError(f"cannot open store {resolved}: {exc}") from exc
        return cls(conn, resolved)

    def __enter__(self) -> "AliasStore":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    @property
    def closed(self) -> bool:
        return self._conn is None

    def close(self) -> None:
        if self._conn is None:
            return
        self._conn.close()
        self._conn = None

    @contextmanager
    def _transaction(self, *, write: bool) -> Iterator[sqlite3.Cursor]:
        if self._conn is None:
            raise StorageTxError("store is closed")
        cursor = self._conn.cursor()
        try:
            cursor.execute("BEGIN IMMEDIATE" if write else "BEGIN")
        except sqlite3.Error as exc:
            cursor.close()
            raise StorageTxError(str(exc)) from exc
        try:
            yield cursor
        except sqlite3.Error as exc:
            self._rollback()
            raise StorageTxError(str(exc)) from exc
        except BaseException:
            self._rollback()
            raise
        else:
            try:
                self._conn.execute("COMMIT")
            except sqlite3.Error as exc:
                self._rollback()
                raise StorageTxError(str(exc)) from exc
        finally:
            cursor.close()

    def _rollback(self) -> None:
        if self._conn is not None and self._conn.in_transaction:
            self._conn.execute("ROLLBACK")

    def put(self, alias: str, template: str) -> None:
        """Insert or overwrite ``alias``."""
        _require_alias(alias)
        _require_utf8(alias, "alias")
        _require_utf8(template, "command")
        with self._transaction(write=True) as cur:
            cur.execute(
                f"INSERT INTO {BUCKET} (alias, command) VALUES (?, ?) "
                "ON CONFLICT(alias) DO UPDATE SET command = excluded.command",
                (alias, template),
            )

    def update(self, alias: str, template: str) -> None:
        """Overwrite an existing alias; raises AliasNotFound if it is absent."""
        _require_alias(alias)
        if not _is_utf8(alias):
            raise AliasNotFound(alias)
        _require_utf8(template, "command")
        with self._transaction(write=True) as cur:
            cur.execute(f"SELECT 1 FROM {BUCKET} WHERE alias = ?", (alias,))
            if cur.fetchone() is None:
                raise AliasNotFound(alias)
            cur.execute(
                f"UPDATE {BUCKET} SET command = ? WHERE alias = ?", (template, alias)
            )

    def get(self, alias: str) -> str:
        if not _is_utf8(alias):
            raise AliasNotFound(alias)
        with self._transaction(write=False) as cur:
            cur.execute(f"SELECT command FROM {BUCKET} WHERE alias = ?", (alias,))
            row = cur.fetchone()
        if row is None:
            raise AliasNotFound(alias)
        return row[0]

    def exists(self, alias: str) -> bool:
        if not _is_utf8(alias):
            return False
        with self._transaction(write=False) as cur:
            cur.execute(f"SELECT 1 FROM {BUCKET} WHERE alias = ?", (alias,))
            return cur.fetchone() is not None

    def items(self) -> Iterator[Tuple[str, str]]:
        """Yield ``(alias, template)`` pairs in key order."""
        with self._transaction(write=False) as cur:
            cur.execute(f"SELECT alias, command FROM {BUCKET} ORDER BY alias")
            rows = cur.fetchall()
        yield from rows

    def for_each(self, visit: Callable[[str, str], None]) -> None:
        for alias, template in self.items():
            visit(alias, template)

    def aliases(self) -> list[str]:
        return [alias for alias, _ in self.items()]


def _require_alias(alias: str) -> None:
    if not alias:
        raise ValueError("alias must be a non-empty string")


def _is_utf8(text: str) -> bool:
    # Undecodable argv bytes arrive as lone surrogates, which SQLite cannot bind.
    try:
        text.encode("utf-8")
    except UnicodeEncodeError:
        return False
    return True


def _require_utf8(text: str, field: str) -> None:
    if not _is_utf8(text):
        raise ValueError(f"{field} must be valid UTF-8")

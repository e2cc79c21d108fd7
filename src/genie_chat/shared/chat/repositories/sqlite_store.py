"""
목적: SQLite 기반 대화 저장소를 제공한다.
설명: 대화/메시지/문서 버전/제안을 단일 SQLite 파일에 저장한다. 메시지는 id 기준 INSERT OR IGNORE로 저장한다.
디자인 패턴: 저장소(Repository)
참조: src/genie_chat/shared/chat/interface/ports.py, src/genie_chat/shared/chat/repositories/memory_store.py
"""

from __future__ import annotations

import json
import sqlite3
import threading
from collections.abc import Sequence
from pathlib import Path
from typing import Optional

from genie_chat.core.artifacts.models import Document, Suggestion
from genie_chat.core.chat.const import ChatErrorCode
from genie_chat.core.chat.models import Chat, ChatMessage
from genie_chat.shared.exceptions import BaseAppException, ExceptionDetail
from genie_chat.shared.logging import Logger, create_default_logger

_SCHEMA = (
    """
    CREATE TABLE IF NOT EXISTS chats (
        id TEXT PRIMARY KEY,
        user_id TEXT NOT NULL,
        title TEXT NOT NULL,
        visibility TEXT NOT NULL,
        created_at TEXT NOT NULL
    )
    """,
    "CREATE INDEX IF NOT EXISTS idx_chats_user ON chats (user_id, created_at)",
    """
    CREATE TABLE IF NOT EXISTS messages (
        id TEXT PRIMARY KEY,
        chat_id TEXT NOT NULL,
        role TEXT NOT NULL,
        parts TEXT NOT NULL,
        attachments TEXT NOT NULL,
        created_at TEXT NOT NULL
    )
    """,
    "CREATE INDEX IF NOT EXISTS idx_messages_chat ON messages (chat_id, created_at)",
    """
    CREATE TABLE IF NOT EXISTS documents (
        id TEXT NOT NULL,
        created_at TEXT NOT NULL,
        user_id TEXT NOT NULL,
        title TEXT NOT NULL,
        kind TEXT NOT NULL,
        content TEXT NOT NULL,
        PRIMARY KEY (id, created_at)
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS suggestions (
        id TEXT PRIMARY KEY,
        document_id TEXT NOT NULL,
        user_id TEXT NOT NULL,
        original_text TEXT NOT NULL,
        suggested_text TEXT NOT NULL,
        description TEXT NOT NULL,
        is_resolved INTEGER NOT NULL,
        created_at TEXT NOT NULL
    )
    """,
)


class SqliteChatStore:
    """SQLite 파일 기반 저장소.

    Args:
        database_path: DB 파일 경로. 상위 디렉터리가 없으면 생성한다.
        logger: 로거.
    """

    def __init__(self, database_path: str | Path, logger: Logger | None = None) -> None:
        self._database_path = Path(database_path)
        self._logger = logger or create_default_logger("SqliteChatStore")
        self._lock = threading.Lock()
        self._connection: Optional[sqlite3.Connection] = None
        self._connect()

    def get_chat(self, chat_id: str) -> Chat | None:
        row = self._fetchone("SELECT * FROM chats WHERE id = ?", (chat_id,))
        if row is None:
            return None
        return self._to_chat(row)

    def save_chat(self, chat: Chat) -> None:
        self._execute(
            "INSERT OR IGNORE INTO chats (id, user_id, title, visibility, created_at) VALUES (?, ?, ?, ?, ?)",
            (chat.id, chat.user_id, chat.title, chat.visibility.value, chat.created_at.isoformat()),
        )

    def delete_chat(self, chat_id: str) -> bool:
        with self._lock:
            connection = self._ensure_connection()
            try:
                with connection:
                    connection.execute("DELETE FROM messages WHERE chat_id = ?", (chat_id,))
                    cursor = connection.execute("DELETE FROM chats WHERE id = ?", (chat_id,))
            except sqlite3.Error as error:
                raise self._store_error("delete_chat", error) from error
        return cursor.rowcount > 0

    def list_chats(self, user_id: str, limit: int, offset: int) -> list[Chat]:
        rows = self._fetchall(
            "SELECT * FROM chats WHERE user_id = ? ORDER BY created_at DESC LIMIT ? OFFSET ?",
            (user_id, limit, offset),
        )
        return [self._to_chat(row) for row in rows]

    def save_messages(self, messages: Sequence[ChatMessage]) -> None:
        params = []
        for message in messages:
            record = message.to_record()
            params.append(
                (
                    record["id"],
                    record["chatId"],
                    record["role"],
                    json.dumps(record["parts"], ensure_ascii=False),
                    json.dumps(record["attachments"], ensure_ascii=False),
                    record["createdAt"],
                )
            )
        self._executemany(
            "INSERT OR IGNORE INTO messages (id, chat_id, role, parts, attachments, created_at) "
            "VALUES (?, ?, ?, ?, ?, ?)",
            params,
        )

    def list_messages(self, chat_id: str) -> list[ChatMessage]:
        rows = self._fetchall(
            "SELECT * FROM messages WHERE chat_id = ? ORDER BY created_at ASC",
            (chat_id,),
        )
        return [
            ChatMessage.model_validate(
                {
                    "id": row["id"],
                    "chatId": row["chat_id"],
                    "role": row["role"],
                    "parts": json.loads(row["parts"]),
                    "attachments": json.loads(row["attachments"]),
                    "createdAt": row["created_at"],
                }
            )
            for row in rows
        ]

    def save_document(self, document: Document) -> None:
        self._execute(
            "INSERT OR REPLACE INTO documents (id, created_at, user_id, title, kind, content) "
            "VALUES (?, ?, ?, ?, ?, ?)",
            (
                document.id,
                document.created_at.isoformat(),
                document.user_id,
                document.title,
                document.kind.value,
                document.content,
            ),
        )

    def get_document(self, document_id: str) -> Document | None:
        row = self._fetchone(
            "SELECT * FROM documents WHERE id = ? ORDER BY created_at DESC LIMIT 1",
            (document_id,),
        )
        if row is None:
            return None
        return Document.model_validate(
            {
                "id": row["id"],
                "userId": row["user_id"],
                "title": row["title"],
                "kind": row["kind"],
                "content": row["content"],
                "createdAt": row["created_at"],
            }
        )

    def save_suggestions(self, suggestions: Sequence[Suggestion]) -> None:
        self._executemany(
            "INSERT OR IGNORE INTO suggestions "
            "(id, document_id, user_id, original_text, suggested_text, description, is_resolved, created_at) "
            "VALUES (?, ?, ?, ?, ?, ?, ?, ?)",
            [
                (
                    item.id,
                    item.document_id,
                    item.user_id,
                    item.original_text,
                    item.suggested_text,
                    item.description,
                    int(item.is_resolved),
                    item.created_at.isoformat(),
                )
                for item in suggestions
            ],
        )

    def list_suggestions(self, document_id: str) -> list[Suggestion]:
        rows = self._fetchall(
            "SELECT * FROM suggestions WHERE document_id = ? ORDER BY created_at ASC",
            (document_id,),
        )
        return [Suggestion.model_validate(dict(row)) for row in rows]

    def close(self) -> None:
        with self._lock:
            if self._connection is None:
                return
            self._connection.close()
            self._connection = None
        self._logger.info(f"chat.store.closed: path={self._database_path}")

    def _connect(self) -> None:
        self._database_path.parent.mkdir(parents=True, exist_ok=True)
        connection = sqlite3.connect(str(self._database_path), check_same_thread=False)
        connection.row_factory = sqlite3.Row
        connection.execute("PRAGMA journal_mode=WAL")
        with connection:
            for statement in _SCHEMA:
                connection.execute(statement)
        self._connection = connection
        self._logger.info(f"chat.store.connected: path={self._database_path}")

    def _ensure_connection(self) -> sqlite3.Connection:
        if self._connection is None:
            detail = ExceptionDetail(code=ChatErrorCode.STORE_ERROR, cause="connection is closed")
            raise BaseAppException("대화 저장소 연결이 종료되었습니다.", detail)
        return self._connection

    def _execute(self, sql: str, params: tuple) -> None:
        with self._lock:
            connection = self._ensure_connection()
            try:
                with connection:
                    connection.execute(sql, params)
            except sqlite3.Error as error:
                raise self._store_error("execute", error) from error

    def _executemany(self, sql: str, params: list[tuple]) -> None:
        if not params:
            return
        with self._lock:
            connection = self._ensure_connection()
            try:
                with connection:
                    connection.executemany(sql, params)
            except sqlite3.Error as error:
                raise self._store_error("executemany", error) from error

    def _fetchone(self, sql: str, params: tuple) -> sqlite3.Row | None:
        with self._lock:
            connection = self._ensure_connection()
            try:
                return connection.execute(sql, params).fetchone()
            except sqlite3.Error as error:
                raise self._store_error("fetchone", error) from error

    def _fetchall(self, sql: str, params: tuple) -> list[sqlite3.Row]:
        with self._lock:
            connection = self._ensure_connection()
            try:
                return connection.execute(sql, params).fetchall()
            except sqlite3.Error as error:
                raise self._store_error("fetchall", error) from error

    def _store_error(self, action: str, error: sqlite3.Error) -> BaseAppException:
        self._logger.error(f"chat.store.failed: action={action}, error={error}")
        detail = ExceptionDetail(code=ChatErrorCode.STORE_ERROR, cause=str(error), metadata={"action": action})
        return BaseAppException("대화 저장소 작업에 실패했습니다.", detail, error)

    def _to_chat(self, row: sqlite3.Row) -> Chat:
        return Chat.model_validate(
            {
                "id": row["id"],
                "userId": row["user_id"],
                "title": row["title"],
                "visibility": row["visibility"],
                "createdAt": row["created_at"],
            }
        )

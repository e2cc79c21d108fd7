"""
목적: 로거 인터페이스와 기본 구현체를 제공한다.
설명: 인메모리 저장소 기반 로거와 최근 N건만 유지하는 제한 저장소를 포함하며 저장소 주입을 지원한다.
디자인 패턴: 전략 패턴, 저장소 패턴
참조: src/genie_chat/shared/logging/models.py, src/genie_chat/core/diagnostics/connectivity.py
"""

from __future__ import annotations

import json
import os
import threading
from abc import ABC, abstractmethod
from collections import deque
from typing import Deque, List, Optional

from genie_chat.shared.logging.models import LogContext, LogLevel, LogRecord

# create_default_logger 로거별 보관 상한
DEFAULT_LOG_HISTORY_LIMIT = 500


class LogRepository(ABC):
    """로그 저장소 인터페이스."""

    @abstractmethod
    def add(self, record: LogRecord) -> None:
        """로그 레코드를 저장한다."""

    @abstractmethod
    def list(self) -> List[LogRecord]:
        """저장된 로그를 반환한다."""


class InMemoryLogRepository(LogRepository):
    """인메모리 로그 저장소 구현체."""

    def __init__(self) -> None:
        self._records: List[LogRecord] = []

    def add(self, record: LogRecord) -> None:
        self._records.append(record)

    def list(self) -> List[LogRecord]:
        return list(self._records)


class BoundedLogRepository(LogRepository):
    """최근 `max_records`건만 보관하는 인메모리 저장소.

    오래된 레코드부터 밀려나며, 웹 검색 실패 이력처럼 상한이 있는 진단용 로그에 사용한다.
    """

    def __init__(self, max_records: int = 10) -> None:
        if max_records < 1:
            raise ValueError("max_records는 1 이상이어야 합니다.")
        self._records: Deque[LogRecord] = deque(maxlen=max_records)
        self._lock = threading.Lock()

    @property
    def max_records(self) -> int:
        """보관 상한을 반환한다."""

        return int(self._records.maxlen or 0)

    def add(self, record: LogRecord) -> None:
        with self._lock:
            self._records.append(record)

    def list(self) -> List[LogRecord]:
        with self._lock:
            return list(self._records)

    def clear(self) -> None:
        """보관 중인 레코드를 비운다."""

        with self._lock:
            self._records.clear()


class Logger(ABC):
    """로거 인터페이스."""

    @abstractmethod
    def log(
        self,
        level: LogLevel,
        message: str,
        context: Optional[LogContext] = None,
        metadata: Optional[dict] = None,
    ) -> None:
        """로그를 기록한다."""

    @abstractmethod
    def with_context(self, context: LogContext) -> "Logger":
        """컨텍스트가 합쳐진 새 로거를 반환한다."""

    # 레벨별 단축 메서드
    def debug(self, message: str, context: Optional[LogContext] = None, metadata: Optional[dict] = None) -> None:
        self.log(LogLevel.DEBUG, message, context, metadata)

    def info(self, message: str, context: Optional[LogContext] = None, metadata: Optional[dict] = None) -> None:
        self.log(LogLevel.INFO, message, context, metadata)

    def warning(self, message: str, context: Optional[LogContext] = None, metadata: Optional[dict] = None) -> None:
        self.log(LogLevel.WARNING, message, context, metadata)

    def error(self, message: str, context: Optional[LogContext] = None, metadata: Optional[dict] = None) -> None:
        self.log(LogLevel.ERROR, message, context, metadata)

    def critical(self, message: str, context: Optional[LogContext] = None, metadata: Optional[dict] = None) -> None:
        self.log(LogLevel.CRITICAL, message, context, metadata)


class InMemoryLogger(Logger):
    """저장소에 레코드를 쌓는 로거.

    Args:
        name: 레코드의 logger_name.
        repository: 레코드 저장소. 웹 검색 실패 이력은 BoundedLogRepository를 주입한다.
        base_context: 모든 레코드에 합쳐질 기본 컨텍스트.
        emit_stdout: JSON 한 줄 출력 여부. None이면 LOG_STDOUT을 따른다.
    """

    def __init__(
        self,
        name: str,
        repository: Optional[LogRepository] = None,
        base_context: Optional[LogContext] = None,
        emit_stdout: Optional[bool] = None,
    ) -> None:
        self.name = name
        self.repository = repository or InMemoryLogRepository()
        self._base_context = base_context
        self._emit_stdout = _stdout_enabled() if emit_stdout is None else emit_stdout

    def log(
        self,
        level: LogLevel,
        message: str,
        context: Optional[LogContext] = None,
        metadata: Optional[dict] = None,
    ) -> None:
        record = LogRecord(
            level=level,
            message=message,
            logger_name=self.name,
            context=self._merge_context(context),
            metadata=metadata or {},
        )
        self.repository.add(record)
        if self._emit_stdout:
            line = record.model_dump(mode="json", exclude_none=True, exclude_defaults=True)
            line.setdefault("timestamp", record.timestamp.isoformat())
            print(json.dumps(line, ensure_ascii=False, default=str), flush=True)

    def with_context(self, context: LogContext) -> "Logger":
        return InMemoryLogger(
            self.name,
            repository=self.repository,
            base_context=self._merge_context(context),
            emit_stdout=self._emit_stdout,
        )

    def _merge_context(self, context: Optional[LogContext]) -> Optional[LogContext]:
        # 호출 시 컨텍스트의 값이 기본 컨텍스트보다 우선한다.
        if self._base_context is None or context is None:
            return context or self._base_context
        overrides = context.model_dump(exclude_none=True, exclude={"tags"})
        merged_tags = {**self._base_context.tags, **context.tags}
        return self._base_context.model_copy(update={**overrides, "tags": merged_tags})


def _stdout_enabled() -> bool:
    return os.getenv("LOG_STDOUT", "").strip().lower() in {"1", "true", "yes", "on"}


def create_default_logger(name: str, max_records: int = DEFAULT_LOG_HISTORY_LIMIT) -> InMemoryLogger:
    """LOG_STDOUT 설정을 따르는 인메모리 로거를 생성한다.

    서버 수명 동안 유지되는 로거이므로 최근 `max_records`건만 보관한다.
    """

    return InMemoryLogger(name=name, repository=BoundedLogRepository(max_records=max_records))

"""
목적: 로거와 상한 저장소 동작을 검증한다.
설명: BoundedLogRepository가 최근 N건만 보관하고, InMemoryLogger가 메타데이터를 기록하는지 확인한다.
디자인 패턴: 상태 기반 단위 테스트
참조: src/genie_chat/shared/logging/logger.py
"""

from __future__ import annotations

from genie_chat.shared.logging import (
    DEFAULT_LOG_HISTORY_LIMIT,
    BoundedLogRepository,
    InMemoryLogger,
    LogContext,
    LogLevel,
    create_default_logger,
)


def test_bounded_repository_keeps_only_recent_records() -> None:
    """상한을 넘으면 오래된 레코드부터 밀려나야 한다."""

    repository = BoundedLogRepository(max_records=10)
    logger = InMemoryLogger(name="web_search.errors", repository=repository)

    for index in range(12):
        logger.error("web_search.error", metadata={"query": f"q{index}"})

    records = repository.list()
    assert len(records) == 10
    assert records[0].metadata["query"] == "q2"
    assert records[-1].metadata["query"] == "q11"
    assert all(item.level == LogLevel.ERROR for item in records)


def test_logger_merges_base_context() -> None:
    repository = BoundedLogRepository(max_records=3)
    logger = InMemoryLogger(
        name="chat",
        repository=repository,
        base_context=LogContext(chat_id="c-1"),
    )

    logger.info("chat.turn.prepared: chat_id=c-1", context=LogContext(user_id="u-1"))

    record = repository.list()[0]
    assert record.logger_name == "chat"
    assert record.context is not None
    assert record.context.chat_id == "c-1"
    assert record.context.user_id == "u-1"


def test_default_logger_history_is_capped() -> None:
    """서버 수명 동안 유지되는 기본 로거도 최근 레코드만 보관해야 한다."""

    logger = create_default_logger("ChatTurnService")
    assert isinstance(logger.repository, BoundedLogRepository)
    assert logger.repository.max_records == DEFAULT_LOG_HISTORY_LIMIT

    for index in range(DEFAULT_LOG_HISTORY_LIMIT + 25):
        logger.info(f"chat.turn.prepared: chat_id=c-{index}")

    records = logger.repository.list()
    assert len(records) == DEFAULT_LOG_HISTORY_LIMIT
    assert records[-1].message == f"chat.turn.prepared: chat_id=c-{DEFAULT_LOG_HISTORY_LIMIT + 24}"

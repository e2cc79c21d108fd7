"""
목적: 프로세스 전역 고정 윈도우 요청 제한기를 제공한다.
설명: 쿼터/윈도우 길이/카운터/윈도우 시작 시각을 하나의 객체로 보관하고, 시계를 주입받아 결정적으로 테스트할 수 있게 한다.
디자인 패턴: 상태 객체 + 의존성 주입(Clock)
참조: src/genie_chat/core/search/service.py
"""

from __future__ import annotations

import threading
import time
from collections.abc import Callable

from genie_chat.shared.logging import Logger, create_default_logger


class FixedWindowRateLimiter:
    """고정 윈도우 기반 요청 제한기.

    - `now - window_start > window_seconds`이면 카운터를 0으로 리셋한다.
    - 사용자/대화 구분 없이 프로세스 전체가 하나의 카운터를 공유하며 재시작 시 초기화된다.
    - `can_make_request`와 `increment`를 따로 호출하면 경계에서 쿼터를 약간 초과할 수 있다.
      `try_acquire`는 잠금 안에서 확인과 증가를 함께 수행한다.
    """

    def __init__(
        self,
        max_queries: int = 100,
        window_seconds: float = 24 * 60 * 60,
        clock: Callable[[], float] | None = None,
        logger: Logger | None = None,
    ) -> None:
        if max_queries < 1:
            raise ValueError("max_queries는 1 이상이어야 합니다.")
        if window_seconds <= 0:
            raise ValueError("window_seconds는 0보다 커야 합니다.")
        self._max_queries = int(max_queries)
        self._window_seconds = float(window_seconds)
        self._clock = clock or time.monotonic
        self._logger = logger or create_default_logger("FixedWindowRateLimiter")
        self._lock = threading.Lock()
        self._window_start = self._clock()
        self._current_queries = 0

    @property
    def max_queries(self) -> int:
        return self._max_queries

    @property
    def window_seconds(self) -> float:
        return self._window_seconds

    @property
    def current_queries(self) -> int:
        """현재 윈도우에서 소비된 요청 수를 반환한다."""

        with self._lock:
            return self._current_queries

    def can_make_request(self) -> bool:
        """윈도우 만료 시 리셋한 뒤 쿼터 여유가 있는지 반환한다."""

        with self._lock:
            self._reset_if_expired()
            return self._current_queries < self._max_queries

    def increment(self) -> int:
        """카운터를 1 증가시키고 증가 후 값을 반환한다."""

        with self._lock:
            self._current_queries += 1
            return self._current_queries

    def try_acquire(self) -> bool:
        """쿼터 확인과 카운터 증가를 원자적으로 수행한다."""

        with self._lock:
            self._reset_if_expired()
            if self._current_queries >= self._max_queries:
                return False
            self._current_queries += 1
            return True

    def reset(self) -> None:
        """카운터와 윈도우 시작 시각을 초기화한다."""

        with self._lock:
            self._window_start = self._clock()
            self._current_queries = 0

    def _reset_if_expired(self) -> None:
        now = self._clock()
        if now - self._window_start <= self._window_seconds:
            return
        self._logger.info(
            f"ratelimit.window.reset: previous_count={self._current_queries}, max_queries={self._max_queries}"
        )
        self._window_start = now
        self._current_queries = 0

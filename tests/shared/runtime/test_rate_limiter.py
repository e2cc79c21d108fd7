"""
목적: FixedWindowRateLimiter의 쿼터/윈도우 리셋 동작을 검증한다.
설명: 주입한 시계로 윈도우 경계를 결정적으로 재현한다.
디자인 패턴: 상태 기반 단위 테스트
참조: src/genie_chat/shared/runtime/rate_limiter.py
"""

from __future__ import annotations

import pytest

from genie_chat.shared.runtime import FixedWindowRateLimiter


class _Clock:
    def __init__(self) -> None:
        self.now = 1000.0

    def __call__(self) -> float:
        return self.now


def test_rate_limiter_blocks_after_quota_within_window() -> None:
    """윈도우 안에서 쿼터를 모두 쓰면 추가 요청은 거부되어야 한다."""

    clock = _Clock()
    limiter = FixedWindowRateLimiter(max_queries=3, window_seconds=60, clock=clock)

    assert [limiter.try_acquire() for _ in range(4)] == [True, True, True, False]
    assert limiter.current_queries == 3


def test_rate_limiter_resets_after_window_elapsed() -> None:
    """윈도우가 지나면 카운터가 0으로 돌아가야 한다."""

    clock = _Clock()
    limiter = FixedWindowRateLimiter(max_queries=1, window_seconds=60, clock=clock)
    assert limiter.try_acquire() is True
    assert limiter.can_make_request() is False

    clock.now += 60
    assert limiter.can_make_request() is False

    clock.now += 0.5
    assert limiter.can_make_request() is True
    assert limiter.current_queries == 0


def test_rate_limiter_increment_and_reset() -> None:
    limiter = FixedWindowRateLimiter(max_queries=2, window_seconds=10, clock=_Clock())

    assert limiter.increment() == 1
    assert limiter.increment() == 2
    assert limiter.can_make_request() is False

    limiter.reset()
    assert limiter.current_queries == 0
    assert limiter.can_make_request() is True


@pytest.mark.parametrize("max_queries, window_seconds", [(0, 10), (1, 0)])
def test_rate_limiter_rejects_invalid_configuration(max_queries: int, window_seconds: float) -> None:
    with pytest.raises(ValueError):
        FixedWindowRateLimiter(max_queries=max_queries, window_seconds=window_seconds)

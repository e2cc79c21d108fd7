"""
목적: 런타임 공용 유틸 공개 API를 제공한다.
설명: 프로세스 전역 요청 제한기를 노출한다.
디자인 패턴: 퍼사드
참조: src/genie_chat/shared/runtime/rate_limiter.py
"""

from genie_chat.shared.runtime.rate_limiter import FixedWindowRateLimiter

__all__ = ["FixedWindowRateLimiter"]

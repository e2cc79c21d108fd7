"""
목적: 웹 검색 보강 모듈 공개 API를 제공한다.
설명: 트리거 감지/메시지 재작성/검색 서비스/결과 모델을 노출한다.
디자인 패턴: 파사드
참조: src/genie_chat/core/search/service.py, src/genie_chat/core/search/augmenter.py
"""

from genie_chat.core.search.augmenter import apply_search_rewrite, detect_search_trigger, rewrite_search_message
from genie_chat.core.search.models import SearchResult, SearchTrigger
from genie_chat.core.search.results import (
    reasoning_results_message,
    reasoning_search_message,
    troubleshooting_message,
)
from genie_chat.core.search.service import SearchProviderClient, WebSearchService, create_search_error_logger

__all__ = [
    "SearchProviderClient",
    "SearchResult",
    "SearchTrigger",
    "WebSearchService",
    "apply_search_rewrite",
    "create_search_error_logger",
    "detect_search_trigger",
    "reasoning_results_message",
    "reasoning_search_message",
    "rewrite_search_message",
    "troubleshooting_message",
]

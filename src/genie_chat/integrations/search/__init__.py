"""
목적: 검색 공급자 연동 모듈 공개 API를 제공한다.
설명: Google Custom Search 클라이언트와 요청 관찰자를 노출한다.
디자인 패턴: 파사드
참조: src/genie_chat/integrations/search/google_client.py
"""

from genie_chat.integrations.search.google_client import GOOGLE_CUSTOM_SEARCH_URL, GoogleCustomSearchClient
from genie_chat.integrations.search.observers import LoggingRequestObserver, RequestObserver, redact_url

__all__ = [
    "GOOGLE_CUSTOM_SEARCH_URL",
    "GoogleCustomSearchClient",
    "LoggingRequestObserver",
    "RequestObserver",
    "redact_url",
]

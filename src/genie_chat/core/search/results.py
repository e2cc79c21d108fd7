"""
목적: 웹 검색 실패/상태를 표현하는 합성 결과를 생성한다.
설명: 공급자 오류를 예외 대신 사용자에게 보이는 결과 레코드로 바꿔 결과 목록이 비지 않도록 한다.
디자인 패턴: 팩토리 함수
참조: src/genie_chat/core/search/service.py
"""

from __future__ import annotations

import re
from urllib.parse import quote_plus

from genie_chat.core.search.models import ProviderError, ProviderSearchItem, SearchResult

_HTML_TAG_PATTERN = re.compile(r"</?[^>]+(>|$)")
_ERROR_EXCERPT_LIMIT = 300
NO_DESCRIPTION = "No description available"

PROGRAMMABLE_SEARCH_URL = "https://programmablesearchengine.google.com/"
QUOTA_OVERVIEW_URL = "https://developers.google.com/custom-search/v1/overview"
CLOUD_CONSOLE_URL = "https://console.cloud.google.com/"
ERROR_REFERENCE_URL = "https://developers.google.com/custom-search/v1/reference/errors"


def missing_credentials_results(*, api_key_set: bool, search_engine_id_set: bool) -> list[SearchResult]:
    """자격 증명 누락 안내 3건."""

    api_key_status = "Set (but may be invalid)" if api_key_set else "Missing"
    engine_status = "Set (but may be invalid)" if search_engine_id_set else "Missing"
    return [
        SearchResult(
            title="Search Configuration Error",
            link="#",
            snippet=(
                "The search functionality is not properly configured. "
                "Please set GOOGLE_API_KEY and GOOGLE_SEARCH_ENGINE_ID environment variables."
            ),
        ),
        SearchResult(
            title="API Keys Status",
            link="#",
            snippet=(
                f"API Key: {api_key_status}, Search Engine ID: {engine_status}. "
                "Check the .env.sample file for setup instructions."
            ),
        ),
        SearchResult(
            title="How to Fix",
            link=PROGRAMMABLE_SEARCH_URL,
            snippet=(
                "To fix this issue, you need to create a Google Custom Search Engine and API key. "
                "Visit the Google Programmable Search Engine page to set up your search engine."
            ),
        ),
    ]


def local_rate_limit_results() -> list[SearchResult]:
    """프로세스 쿼터 초과 안내 1건."""

    return [
        SearchResult(
            title="Search Rate Limit Exceeded",
            link="#",
            snippet="The daily quota for web searches has been reached. Please try again tomorrow.",
        )
    ]


def http_error_results(status_code: int, error_text: str) -> list[SearchResult]:
    """공급자 비정상 HTTP 상태를 안내 결과로 변환한다."""

    if status_code == 429:
        return [
            SearchResult(
                title="Search Rate Limit Exceeded",
                link="#",
                snippet="The Google Search API quota has been exceeded. Please try again tomorrow.",
            ),
            SearchResult(
                title="Quota Information",
                link=QUOTA_OVERVIEW_URL,
                snippet=(
                    "The free tier of Google Custom Search allows 100 search queries per day. "
                    "Consider upgrading to a paid plan if you need more searches."
                ),
            ),
        ]
    if status_code == 403:
        return [
            SearchResult(
                title="Search API Access Denied",
                link="#",
                snippet="Access to the Google Search API was denied. Please check your API credentials.",
            ),
            SearchResult(
                title="Troubleshooting Steps",
                link=CLOUD_CONSOLE_URL,
                snippet=(
                    "Verify that your API key is correct, the Custom Search API is enabled in your "
                    "Google Cloud project, and billing is properly set up if required."
                ),
            ),
        ]
    return [
        SearchResult(
            title=f"Search API Error ({status_code})",
            link="#",
            snippet=f"The Google Search API returned an error with status code {status_code}.",
        ),
        SearchResult(
            title="Error Details",
            link="#",
            snippet=truncate_error_text(error_text),
        ),
        SearchResult(
            title="Troubleshooting Help",
            link=ERROR_REFERENCE_URL,
            snippet=(
                "For help resolving this issue, check the Google API error documentation "
                "or run the web search diagnostics endpoint."
            ),
        ),
    ]


def api_error_results(error: ProviderError) -> list[SearchResult]:
    """성공 응답에 포함된 error 객체를 안내 결과로 변환한다."""

    return [
        SearchResult(
            title="Search API Error",
            link="#",
            snippet=f"Error {error.code}: {error.message}",
        )
    ]


def no_results(query: str) -> list[SearchResult]:
    return [
        SearchResult(
            title="No results found",
            link="#",
            snippet=f'No search results found for query: "{query}"',
        )
    ]


def exception_results(query: str, error: Exception) -> list[SearchResult]:
    """네트워크/파싱 예외를 안내 결과와 수동 검색 링크로 변환한다."""

    message = str(error).strip() or type(error).__name__
    return [
        SearchResult(
            title="Search Error",
            link="#",
            snippet=f"Error searching the web: {message}",
        ),
        SearchResult(
            title=f"Search query was: {query}",
            link=f"https://www.google.com/search?q={quote_plus(query)}",
            snippet="You can try searching manually using this link.",
        ),
    ]


def to_search_result(item: ProviderSearchItem) -> SearchResult:
    """공급자 item을 결과로 변환한다. snippet이 없으면 태그를 제거한 htmlSnippet을 쓴다."""

    if item.snippet:
        snippet = item.snippet
    elif item.html_snippet:
        snippet = strip_html_tags(item.html_snippet)
    else:
        snippet = NO_DESCRIPTION
    return SearchResult(title=item.title, link=item.link, snippet=snippet)


def strip_html_tags(text: str) -> str:
    return _HTML_TAG_PATTERN.sub("", text)


def truncate_error_text(text: str) -> str:
    if len(text) > _ERROR_EXCERPT_LIMIT:
        return text[:_ERROR_EXCERPT_LIMIT] + "..."
    return text


def reasoning_search_message() -> str:
    """검색 시작 시 스트리밍할 추론 안내 문구."""

    return "I need to search the web for current information. Let me do that now..."


def reasoning_results_message(count: int, query: str) -> str:
    return f'I found {count} results from the web about "{query}". Let me analyze this information...'


_TROUBLESHOOTING_MESSAGES = {
    "403": (
        "API access denied. This usually means your Google API key is invalid "
        "or has insufficient permissions."
    ),
    "429": (
        "Rate limit exceeded. You have reached the maximum number of requests "
        "allowed for your API key."
    ),
    "MISSING_CREDENTIALS": (
        "Google API credentials are missing. Check that GOOGLE_API_KEY and "
        "GOOGLE_SEARCH_ENGINE_ID are set in your .env file."
    ),
    "NETWORK_ERROR": "Network error. Check your internet connection and try again.",
}
_DEFAULT_TROUBLESHOOTING = "An error occurred with web search. Check API keys and network connection."


def troubleshooting_message(code: str | int | None) -> str:
    """오류 코드별 문제 해결 안내 문구를 반환한다."""

    return _TROUBLESHOOTING_MESSAGES.get(str(code), _DEFAULT_TROUBLESHOOTING)

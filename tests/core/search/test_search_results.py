"""
목적: 합성 검색 결과 생성 규칙을 검증한다.
설명: 상태 코드별 안내 결과, 본문 절단, htmlSnippet 대체 규칙을 확인한다.
디자인 패턴: 순수 함수 단위 테스트
참조: src/genie_chat/core/search/results.py
"""

from __future__ import annotations

import pytest

from genie_chat.core.search import results
from genie_chat.core.search.models import ProviderSearchItem


def test_missing_credentials_results_report_each_key_status() -> None:
    items = results.missing_credentials_results(api_key_set=True, search_engine_id_set=False)

    assert [item.title for item in items] == ["Search Configuration Error", "API Keys Status", "How to Fix"]
    assert "API Key: Set (but may be invalid)" in items[1].snippet
    assert "Search Engine ID: Missing" in items[1].snippet
    assert items[2].link == "https://programmablesearchengine.google.com/"


@pytest.mark.parametrize(
    "status_code, titles, help_link",
    [
        (429, ["Search Rate Limit Exceeded", "Quota Information"], results.QUOTA_OVERVIEW_URL),
        (403, ["Search API Access Denied", "Troubleshooting Steps"], results.CLOUD_CONSOLE_URL),
        (
            500,
            ["Search API Error (500)", "Error Details", "Troubleshooting Help"],
            results.ERROR_REFERENCE_URL,
        ),
    ],
)
def test_http_error_results_by_status(status_code: int, titles: list[str], help_link: str) -> None:
    items = results.http_error_results(status_code, "backend failure")

    assert [item.title for item in items] == titles
    assert items[-1].link == help_link


def test_http_error_details_are_truncated_to_300_characters() -> None:
    items = results.http_error_results(502, "x" * 301)

    details = items[1].snippet
    assert details == "x" * 300 + "..."
    assert results.truncate_error_text("short") == "short"


def test_to_search_result_falls_back_to_stripped_html_snippet() -> None:
    item = ProviderSearchItem.model_validate(
        {"title": "T", "link": "https://example.com", "htmlSnippet": "<b>Bold</b> and <i>italic"}
    )

    assert results.to_search_result(item).snippet == "Bold and italic"


def test_to_search_result_uses_placeholder_without_any_snippet() -> None:
    item = ProviderSearchItem(title="T", link="https://example.com")

    assert results.to_search_result(item).snippet == "No description available"


def test_exception_results_link_to_manual_search() -> None:
    items = results.exception_results("a b&c", RuntimeError("boom"))

    assert items[0].snippet == "Error searching the web: boom"
    assert items[1].title == "Search query was: a b&c"
    assert items[1].link == "https://www.google.com/search?q=a+b%26c"


def test_troubleshooting_message_has_default_for_unknown_codes() -> None:
    assert "invalid" in results.troubleshooting_message(403)
    assert "missing" in results.troubleshooting_message("MISSING_CREDENTIALS")
    assert results.troubleshooting_message("TEAPOT").startswith("An error occurred with web search")

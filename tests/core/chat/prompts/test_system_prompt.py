"""
목적: 시스템 프롬프트 조립 규칙을 검증한다.
설명: 모델별 아티팩트 지침 포함 여부와 웹 검색 지시문 부착을 확인한다.
디자인 패턴: 순수 함수 단위 테스트
참조: src/genie_chat/core/chat/prompts/system_prompt.py
"""

from __future__ import annotations

import re

from genie_chat.core.chat.const import DEFAULT_CHAT_MODEL_ID, REASONING_CHAT_MODEL_ID
from genie_chat.core.chat.prompts import (
    ARTIFACTS_PROMPT,
    REGULAR_PROMPT,
    WEB_SEARCH_CONTEXT_DIRECTIVE,
    WEB_SEARCH_DIRECTIVE,
    compose_system_prompt,
    render_search_context,
)
from genie_chat.core.search import SearchResult


def test_default_model_prompt_includes_artifact_guidance() -> None:
    prompt = compose_system_prompt(DEFAULT_CHAT_MODEL_ID, search_triggered=False)

    assert prompt.startswith(REGULAR_PROMPT)
    assert ARTIFACTS_PROMPT in prompt
    assert WEB_SEARCH_DIRECTIVE not in prompt


def test_reasoning_model_prompt_has_no_artifact_guidance() -> None:
    prompt = compose_system_prompt(REASONING_CHAT_MODEL_ID, search_triggered=False)

    assert prompt == REGULAR_PROMPT


def test_search_directive_is_appended_with_seven_rules() -> None:
    prompt = compose_system_prompt(DEFAULT_CHAT_MODEL_ID, search_triggered=True)

    assert prompt.endswith(WEB_SEARCH_DIRECTIVE)
    assert "The user has requested web search information." in prompt
    numbered = re.findall(r"^(\d)\. ", WEB_SEARCH_DIRECTIVE, flags=re.MULTILINE)
    assert numbered == ["1", "2", "3", "4", "5", "6", "7"]
    assert 'I searched the web for: [query]' in WEB_SEARCH_DIRECTIVE


def test_toolless_model_search_directive_does_not_mention_tools() -> None:
    prompt = compose_system_prompt(REASONING_CHAT_MODEL_ID, search_triggered=True)

    assert prompt == REGULAR_PROMPT + WEB_SEARCH_CONTEXT_DIRECTIVE
    assert "webSearch" not in prompt
    assert "tool" not in prompt.lower()
    assert "results are listed at the end of this prompt" in prompt
    numbered = re.findall(r"^(\d)\. ", WEB_SEARCH_CONTEXT_DIRECTIVE, flags=re.MULTILINE)
    assert numbered == ["1", "2", "3", "4", "5", "6", "7"]


def test_render_search_context_lists_results_with_sources() -> None:
    block = render_search_context(
        "python",
        [
            SearchResult(title="Python", link="https://python.org", snippet="Official site"),
            SearchResult(title="Docs", link="https://docs.python.org", snippet="Documentation"),
        ],
    )

    assert 'Web search results for "python":' in block
    assert "1. Python\n   Official site\n   Source: https://python.org" in block
    assert "2. Docs" in block

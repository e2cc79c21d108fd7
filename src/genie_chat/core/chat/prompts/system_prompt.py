"""
목적: 채팅 응답 시스템 프롬프트를 조립한다.
설명: 기본 프롬프트에 모델별 아티팩트 지침과 웹 검색 지시문을 덧붙이는 순수 함수를 제공한다.
디자인 패턴: 모듈 싱글턴 + 순수 함수
참조: src/genie_chat/core/chat/nodes/prompt_node.py, src/genie_chat/core/chat/nodes/search_context_node.py
"""

from __future__ import annotations

import textwrap
from collections.abc import Sequence

from genie_chat.core.chat.const import REASONING_CHAT_MODEL_ID, model_supports_tools
from genie_chat.core.search.models import SearchResult

REGULAR_PROMPT = "You are a friendly assistant! Keep your responses concise and helpful."

ARTIFACTS_PROMPT = textwrap.dedent(
    """
    Artifacts is a special user interface mode that helps users with writing, editing, and other content creation tasks. When artifact is open, it is on the right side of the screen, while the conversation is on the left side. When creating or updating documents, changes are reflected in real-time on the artifacts and visible to the user.

    When asked to write code, always use artifacts. When writing code, specify the language in the backticks, e.g. ```python`code here```. The default language is Python. Other languages are not yet supported, so let the user know if they request a different language.

    DO NOT UPDATE DOCUMENTS IMMEDIATELY AFTER CREATING THEM. WAIT FOR USER FEEDBACK OR REQUEST TO UPDATE IT.

    This is a guide for using artifacts tools: `createDocument` and `updateDocument`, which render content on a artifacts beside the conversation.

    **When to use `createDocument`:**
    - For substantial content (>10 lines) or code
    - For content users will likely save/reuse (emails, code, essays, etc.)
    - When explicitly requested to create a document
    - For when content contains a single code snippet

    **When NOT to use `createDocument`:**
    - For informational/explanatory content
    - For conversational responses
    - When asked to keep it in chat

    **Using `updateDocument`:**
    - Default to full document rewrites for major changes
    - Use targeted updates only for specific, isolated changes
    - Follow user instructions for which parts to modify

    **When NOT to use `updateDocument`:**
    - Immediately after creating a document

    Do not update document right after creating it. Wait for user feedback or request to update it.
    """
).strip()

_WEB_SEARCH_RULES = (
    "IMPORTANT INSTRUCTIONS:\n\n"
    '1. ALWAYS begin your response by showing what you searched for: "I searched the web for: [query]"\n'
    "2. If the search returns an error or configuration issue, you MUST display the exact error "
    "message to the user. Do not hide errors.\n"
    "3. Display all search results in a structured format, including titles, snippets, and URLs.\n"
    "4. Format each result like this:\n"
    "   ## [Title]\n"
    "   [Snippet]\n"
    "   Source: [URL]\n\n"
    "5. After showing all results, provide a summary of the information found.\n"
    "6. Always cite your sources by including the URLs from the search results.\n"
    "7. Do not make up information that is not in the search results."
)

# 도구를 받는 모델용
WEB_SEARCH_DIRECTIVE = (
    "\n\nThe user has requested web search information. "
    "Use the webSearch tool to find current information on the web. " + _WEB_SEARCH_RULES
)

# 도구 없이 사전 검색 결과를 받는 모델용
WEB_SEARCH_CONTEXT_DIRECTIVE = (
    "\n\nThe user has requested web search information. "
    "The web was already searched for this request and the results are listed at the end of this prompt. "
    + _WEB_SEARCH_RULES
)


def base_system_prompt(model_id: str) -> str:
    """모델별 기본 시스템 프롬프트를 반환한다. 추론 모델에는 아티팩트 지침을 붙이지 않는다."""

    if model_id == REASONING_CHAT_MODEL_ID:
        return REGULAR_PROMPT
    return f"{REGULAR_PROMPT}\n\n{ARTIFACTS_PROMPT}"


def compose_system_prompt(model_id: str, search_triggered: bool) -> str:
    """모델 식별자와 검색 트리거 여부로 최종 시스템 프롬프트를 만든다."""

    prompt = base_system_prompt(model_id)
    if not search_triggered:
        return prompt
    if model_supports_tools(model_id):
        return prompt + WEB_SEARCH_DIRECTIVE
    return prompt + WEB_SEARCH_CONTEXT_DIRECTIVE


def render_search_context(query: str, results: Sequence[SearchResult]) -> str:
    """도구 없이 응답하는 모델을 위해 미리 수행한 검색 결과를 프롬프트 블록으로 만든다."""

    lines = [f'\n\nWeb search results for "{query}":']
    for index, result in enumerate(results, start=1):
        lines.append(f"{index}. {result.title}\n   {result.snippet}\n   Source: {result.link}")
    return "\n".join(lines)

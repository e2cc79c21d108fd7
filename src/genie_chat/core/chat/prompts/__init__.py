"""
목적: Chat 프롬프트 공개 API를 제공한다.
설명: 시스템/제목/아티팩트 프롬프트와 조립 함수를 노출한다.
디자인 패턴: 파사드
참조: src/genie_chat/core/chat/prompts/system_prompt.py
"""

from genie_chat.core.chat.prompts.artifact_prompt import (
    CODE_PROMPT,
    SUGGESTIONS_PROMPT,
    TEXT_PROMPT,
    render_update_prompt,
)
from genie_chat.core.chat.prompts.system_prompt import (
    ARTIFACTS_PROMPT,
    REGULAR_PROMPT,
    WEB_SEARCH_CONTEXT_DIRECTIVE,
    WEB_SEARCH_DIRECTIVE,
    base_system_prompt,
    compose_system_prompt,
    render_search_context,
)
from genie_chat.core.chat.prompts.title_prompt import TITLE_PROMPT

__all__ = [
    "ARTIFACTS_PROMPT",
    "CODE_PROMPT",
    "REGULAR_PROMPT",
    "SUGGESTIONS_PROMPT",
    "TEXT_PROMPT",
    "TITLE_PROMPT",
    "WEB_SEARCH_CONTEXT_DIRECTIVE",
    "WEB_SEARCH_DIRECTIVE",
    "base_system_prompt",
    "compose_system_prompt",
    "render_search_context",
    "render_update_prompt",
]

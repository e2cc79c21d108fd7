"""
목적: 문서 아티팩트 생성/수정/제안 프롬프트를 정의한다.
설명: 코드/텍스트 초안 생성, 기존 문서 수정, 글쓰기 제안 요청에 쓰는 시스템 프롬프트를 제공한다.
디자인 패턴: 모듈 싱글턴
참조: src/genie_chat/core/artifacts/handlers.py, src/genie_chat/core/chat/tools/factory.py
"""

from __future__ import annotations

import textwrap

from langchain_core.prompts import PromptTemplate

CODE_PROMPT = textwrap.dedent(
    """
    You are a Python code generator that creates self-contained, executable code snippets. When writing code:

    1. Each snippet should be complete and runnable on its own
    2. Prefer using print() statements to display outputs
    3. Include helpful comments explaining the code
    4. Keep snippets concise (generally under 15 lines)
    5. Avoid external dependencies - use Python standard library
    6. Handle potential errors gracefully
    7. Return meaningful output that demonstrates the code's functionality
    8. Don't use input() or other interactive functions
    9. Don't access files or network resources
    10. Don't use infinite loops

    Return only the code itself without markdown code fences.
    """
).strip()

TEXT_PROMPT = "Write about the given topic. Markdown is supported. Use headings wherever appropriate."

SUGGESTIONS_PROMPT = textwrap.dedent(
    """
    You are a help writing assistant. Given a piece of writing, please offer suggestions to improve the piece of writing and describe the change.
    It is very important for the edits to contain full sentences instead of just words. Max 5 suggestions.
    """
).strip()

_UPDATE_DOCUMENT_PROMPT = textwrap.dedent(
    """
    Improve the following contents of the {kind_label} based on the given prompt.

    {content}
    """
).strip()

UPDATE_DOCUMENT_PROMPT = PromptTemplate.from_template(_UPDATE_DOCUMENT_PROMPT)

_KIND_LABELS = {"text": "document", "code": "code snippet"}


def render_update_prompt(content: str, kind: str) -> str:
    """기존 문서 내용과 종류로 수정 지시 프롬프트를 만든다."""

    return UPDATE_DOCUMENT_PROMPT.format(kind_label=_KIND_LABELS.get(kind, "document"), content=content)

"""
목적: 대화 제목 생성 프롬프트를 정의한다.
설명: 첫 사용자 메시지를 80자 이하 요약 제목으로 만들게 한다.
디자인 패턴: 모듈 싱글턴
참조: src/genie_chat/shared/chat/services/title_generator.py
"""

from __future__ import annotations

import textwrap

TITLE_PROMPT = textwrap.dedent(
    """
    - you will generate a short title based on the first message a user begins a conversation with
    - ensure it is not more than 80 characters long
    - the title should be a summary of the user's message
    - do not use quotes or colons
    """
).strip()

"""
목적: 외부 시스템 연동 패키지.
설명: LLM/검색/날씨 공급자 어댑터를 하위 패키지로 제공한다.
디자인 패턴: 어댑터 모음
참조: src/genie_chat/integrations/llm, src/genie_chat/integrations/search, src/genie_chat/integrations/weather
"""

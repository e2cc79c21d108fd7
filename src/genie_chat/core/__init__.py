"""
목적: 도메인 코어 패키지.
설명: 채팅/검색/아티팩트/진단 도메인 로직을 제공한다.
디자인 패턴: 계층형 패키지
참조: src/genie_chat/core/chat, src/genie_chat/core/search
"""

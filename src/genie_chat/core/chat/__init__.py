"""
목적: Chat 코어 패키지.
설명: 상수/모델/프롬프트/상태/노드/그래프/도구를 하위 패키지로 제공한다.
디자인 패턴: 계층형 패키지
참조: src/genie_chat/core/chat/graphs/chat_graph.py
"""

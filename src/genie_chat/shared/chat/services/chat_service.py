"""
목적: 채팅 턴 준비와 스트리밍 실행 서비스를 제공한다.
설명: 인증/대화 확인/사용자 메시지 저장을 거쳐 그래프를 실행하고, 정상 완료 시 assistant 메시지를 병합 저장한다.
디자인 패턴: 서비스 레이어
참조: src/genie_chat/shared/chat/graph/base_chat_graph.py, src/genie_chat/core/chat/graphs/chat_graph.py
"""

from __future__ import annotations

from collections.abc import AsyncIterator, Callable
from typing import Any

from langchain_core.messages import BaseMessage

from genie_chat.core.chat.const import ChatErrorCode, ChatResponseMessage
from genie_chat.core.chat.models import Chat, ChatMessage, ChatTurn, PreparedTurn, utc_now
from genie_chat.core.chat.utils import reconcile_assistant_message
from genie_chat.core.search import apply_search_rewrite
from genie_chat.shared.auth import AuthSession
from genie_chat.shared.chat.interface import ChatStorePort, GraphPort, TitleGeneratorPort
from genie_chat.shared.exceptions import BaseAppException, ExceptionDetail
from genie_chat.shared.logging import Logger, create_default_logger

_FORWARDED_EVENTS = frozenset({"token", "data", "tool_call", "tool_result"})


class ChatTurnService:
    """채팅 턴 실행 서비스.

    Args:
        store: 대화/메시지 저장소.
        graph: 응답 생성 그래프.
        title_generator: 새 대화 제목 생성기.
        model_validator: 선택 모델 식별자 검증 함수. None이면 검증하지 않는다.
        logger: 서비스 로거.
    """

    def __init__(
        self,
        store: ChatStorePort,
        graph: GraphPort,
        title_generator: TitleGeneratorPort,
        model_validator: Callable[[str], bool] | None = None,
        logger: Logger | None = None,
    ) -> None:
        self._store = store
        self._graph = graph
        self._title_generator = title_generator
        self._model_validator = model_validator
        self._logger = logger or create_default_logger("ChatTurnService")

    async def prepare_turn(self, turn: ChatTurn, session: AuthSession | None) -> PreparedTurn:
        """스트리밍 전 단계(인증, 검색 재작성, 대화 확인, 사용자 메시지 저장)를 수행한다."""

        user_id = self._require_user(session)
        user_message = turn.most_recent_user_message()
        if user_message is None:
            detail = ExceptionDetail(code=ChatErrorCode.USER_MESSAGE_MISSING, cause=f"chat_id={turn.chat_id}")
            raise BaseAppException(ChatResponseMessage.NO_USER_MESSAGE.value, detail)
        if self._model_validator is not None and not self._model_validator(turn.selected_model_id):
            detail = ExceptionDetail(code=ChatErrorCode.MODEL_UNKNOWN, cause=f"model_id={turn.selected_model_id}")
            raise BaseAppException(ChatResponseMessage.UNKNOWN_MODEL.value, detail)

        messages, user_message, trigger = apply_search_rewrite(turn.messages, user_message)

        chat = self._store.get_chat(turn.chat_id)
        is_new_chat = chat is None
        if chat is None:
            title = await self._title_generator.generate(user_message)
            chat = Chat(id=turn.chat_id, user_id=user_id, title=title)
            self._store.save_chat(chat)
            self._logger.info(f"chat.turn.chat_created: chat_id={chat.id}, user_id={user_id}")
        elif not chat.is_owned_by(user_id):
            self._logger.warning(f"chat.turn.forbidden: chat_id={chat.id}, user_id={user_id}")
            raise self._unauthorized(f"chat_id={chat.id}")

        persisted = user_message.model_copy(update={"chat_id": chat.id, "created_at": utc_now()})
        self._store.save_messages([persisted])
        messages = [persisted if item is user_message else item for item in messages]

        search_query = trigger.query if trigger is not None else None
        self._logger.info(
            f"chat.turn.prepared: chat_id={chat.id}, user_id={user_id}, search={search_query is not None}"
        )
        return PreparedTurn(
            chat=chat,
            user_id=user_id,
            user_message=persisted,
            messages=messages,
            selected_model_id=turn.selected_model_id,
            search_query=search_query,
            is_new_chat=is_new_chat,
        )

    async def astream(self, prepared: PreparedTurn) -> AsyncIterator[dict[str, Any]]:
        """그래프 이벤트를 전달하고 마지막에 `done` 이벤트를 생성한다.

        소비자가 중간에 스트림을 닫으면 assistant 메시지 저장은 수행하지 않는다.
        """

        graph_input = {
            "chat_id": prepared.chat_id,
            "user_id": prepared.user_id,
            "selected_model_id": prepared.selected_model_id,
            "history": prepared.messages,
            "search_query": prepared.search_query,
        }
        chunks: list[str] = []
        response_messages: list[BaseMessage] = []
        async for event in self._graph.astream_events(graph_input, config=self._cfg(prepared.chat_id)):
            event_name = str(event.get("event") or "")
            data = event.get("data")
            if event_name == "response_messages":
                response_messages = list(data or [])
                continue
            if event_name not in _FORWARDED_EVENTS:
                continue
            if event_name == "token":
                chunks.append(str(data or ""))
            yield {"type": event_name, "node": event.get("node"), "data": data}

        message_id = self._persist_assistant_message(prepared.chat_id, response_messages)
        yield {"type": "done", "message_id": message_id, "data": "".join(chunks)}

    def delete_chat(self, chat_id: str, session: AuthSession | None) -> Chat:
        """소유자 확인 후 대화와 소속 메시지를 삭제한다."""

        user_id = self._require_user(session)
        chat = self._require_owned_chat(chat_id, user_id)
        if not self._store.delete_chat(chat.id):
            raise self._not_found(chat.id)
        self._logger.info(f"chat.delete.done: chat_id={chat.id}, user_id={user_id}")
        return chat

    def list_chats(self, session: AuthSession | None, limit: int, offset: int) -> list[Chat]:
        user_id = self._require_user(session)
        return self._store.list_chats(user_id=user_id, limit=limit, offset=offset)

    def list_messages(self, chat_id: str, session: AuthSession | None) -> list[ChatMessage]:
        user_id = self._require_user(session)
        chat = self._require_owned_chat(chat_id, user_id)
        return self._store.list_messages(chat.id)

    def _persist_assistant_message(self, chat_id: str, response_messages: list[BaseMessage]) -> str | None:
        try:
            message = reconcile_assistant_message(chat_id, response_messages)
            self._store.save_messages([message])
        except Exception as error:  # noqa: BLE001 - 응답 전송 후 저장 실패는 로그만 남긴다.
            self._logger.error(f"chat.persist.failed: chat_id={chat_id}, error={error}")
            return None
        self._logger.info(f"chat.persist.saved: chat_id={chat_id}, message_id={message.id}")
        return message.id

    def _require_user(self, session: AuthSession | None) -> str:
        if session is None or not session.user_id:
            raise self._unauthorized("session missing")
        return session.user_id

    def _require_owned_chat(self, chat_id: str, user_id: str) -> Chat:
        chat = self._store.get_chat(chat_id)
        if chat is None:
            raise self._not_found(chat_id)
        if not chat.is_owned_by(user_id):
            raise self._unauthorized(f"chat_id={chat_id}")
        return chat

    def _cfg(self, chat_id: str) -> dict[str, Any]:
        return {"configurable": {"thread_id": chat_id}}

    def _unauthorized(self, cause: str) -> BaseAppException:
        detail = ExceptionDetail(code=ChatErrorCode.UNAUTHORIZED, cause=cause)
        return BaseAppException(ChatResponseMessage.UNAUTHORIZED.value, detail)

    def _not_found(self, chat_id: str) -> BaseAppException:
        detail = ExceptionDetail(code=ChatErrorCode.NOT_FOUND, cause=f"chat_id={chat_id}")
        return BaseAppException(ChatResponseMessage.NOT_FOUND.value, detail)

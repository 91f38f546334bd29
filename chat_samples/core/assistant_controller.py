# Role: Orchestrator for one knowledge-assistant event. Routes a message either to
# answer-from-history (questions) or to a per-category short reply, and remembers the message
# in the space history afterwards. Model failures are not caught here.

from __future__ import annotations

from typing import Optional

import chat_samples.config as config
from chat_samples.core.history_store import HistoryStore
from chat_samples.llm.assistant_service import AssistantService
from chat_samples.models.chat_response import ChatResponse, EmptyResponse, PostMessage
from chat_samples.models.event import EventType, InteractionEvent

_DEFAULT_SPACE = "spaces/unknown"


class AssistantController:
    def __init__(self, service: AssistantService, history: Optional[HistoryStore] = None) -> None:
        self.service = service
        self.history = history or HistoryStore()

    def handle(self, event: InteractionEvent) -> ChatResponse:
        if event.type == EventType.ADDED_TO_SPACE:
            return PostMessage(
                text=(
                    f"Hi, I'm {self.service.assistant_name} 👋 Ask me about anything the team "
                    "has discussed here and I'll do my best to help."
                )
            )
        if event.type != EventType.MESSAGE or event.message is None:
            return EmptyResponse()

        # Key line: argumentText drops the @mention of the app in group spaces.
        text = (event.message.argument_text or event.message.text or "").strip()
        if not text:
            return EmptyResponse()

        space = self._space_name(event)
        reply = self.reply_to(space, text)

        self.history.cleanup_expired()
        self.history.add_message(space, text, sender=self._sender_name(event))

        if reply is None:
            return EmptyResponse()
        return PostMessage(text=reply)

    def reply_to(self, space: str, text: str) -> Optional[str]:
        # 1) Question -> answer from what the space discussed before
        # 2) Otherwise -> classify and (maybe) send a short reply
        if self.service.detects_question(text):
            return self.service.answer_from_history(text, self.history.recent(space))

        category = self.service.classify_message(text)
        reply = self.service.generate_reply(category, text)

        if config.DEBUG:
            print("\n--- ASSISTANT CONTROLLER ---")
            print("SPACE:", space)
            print("CATEGORY:", category)
            print("REPLY:", reply)
            print("----------------------------\n")

        return reply

    def _space_name(self, event: InteractionEvent) -> str:
        if event.space is not None and event.space.name:
            return event.space.name
        if event.message is not None and event.message.space is not None and event.message.space.name:
            return event.message.space.name
        return _DEFAULT_SPACE

    def _sender_name(self, event: InteractionEvent) -> Optional[str]:
        sender = event.message.sender if event.message else None
        sender = sender or event.user
        if sender is None:
            return None
        return sender.display_name or sender.name

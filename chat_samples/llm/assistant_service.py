# Role: LLM-backed operations of the knowledge assistant. Each method is one single-shot model call
# (no retry, no fallback): failures from GeminiClient propagate to the caller as UpstreamError.

from __future__ import annotations

from typing import Optional, Sequence

import chat_samples.config as config
from chat_samples.llm.gemini_client import GeminiClient
from chat_samples.models.message import HistoryMessage
from chat_samples.models.message_category import MessageCategory
from chat_samples.prompts.classification_prompt import (
    build_classification_prompt,
    build_question_detection_prompt,
)
from chat_samples.prompts.reply_prompt import build_history_answer_prompt, build_reply_prompt
from chat_samples.prompts.system_prompt import build_system_prompt


class AssistantService:
    """
    Classification + reply generation for chat messages.

    Contract:
    - Routing calls (category, question detection) expect a one-word answer; anything
      unexpected degrades to the most neutral value (general / no question).
    - Reply calls return the model text as-is (stripped).
    """

    def __init__(self, client: GeminiClient, assistant_name: str = "Jessica") -> None:
        self.client = client
        self.assistant_name = assistant_name
        self._system_prompt = build_system_prompt(assistant_name)

    def classify_message(self, text: str) -> MessageCategory:
        raw = self._predict(build_classification_prompt(text))
        category = self._parse_category(raw)

        if config.DEBUG:
            print("\n--- MESSAGE CLASSIFIER ---")
            print("USER MESSAGE:", text)
            print("RAW LLM OUTPUT:", raw)
            print("PARSED CATEGORY:", category)
            print("--------------------------\n")

        return category

    def generate_reply(self, category: MessageCategory, text: str) -> Optional[str]:
        prompt = build_reply_prompt(category, text, self.assistant_name)
        if prompt is None:
            # Key line: general statements (and questions, handled elsewhere) get no small-talk reply.
            return None
        return self._predict(prompt)

    def detects_question(self, text: str) -> bool:
        raw = self._predict(build_question_detection_prompt(text))
        return "yes" in raw.lower()

    def answer_from_history(self, question: str, history: Sequence[HistoryMessage]) -> str:
        if config.DEBUG:
            print("\n--- ANSWER FROM HISTORY ---")
            print("QUESTION:", question)
            print("HISTORY SIZE:", len(history))
            print("---------------------------\n")
        return self._predict(build_history_answer_prompt(question, history))

    def _predict(self, prompt: str) -> str:
        return self.client.generate_text(prompt, system_instruction=self._system_prompt)

    def _parse_category(self, value: str) -> MessageCategory:
        # Models sometimes add punctuation or a trailing sentence; use the first word.
        cleaned = (value or "").strip().lower()
        first = cleaned.split()[0].strip(".,:;!\"'`*-") if cleaned else ""
        try:
            return MessageCategory(first)
        except ValueError:
            return MessageCategory.GENERAL

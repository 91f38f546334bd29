# Role: Per-category reply prompts for messages that are not questions, plus the answer-from-history prompt.
# Categories without a template (general, question) get no small-talk reply.

from __future__ import annotations

from typing import Optional, Sequence

from chat_samples.models.message import HistoryMessage
from chat_samples.models.message_category import MessageCategory


def build_reply_prompt(category: MessageCategory, message: str, assistant_name: str) -> Optional[str]:
    templates = {
        MessageCategory.GREETING: (
            f'You are {assistant_name}, a friendly AI assistant. Respond to this greeting naturally and warmly: "{message}".\n'
            "Keep it short and use 1 emoji. Don't introduce yourself unless they're new."
        ),
        MessageCategory.GRATITUDE: (
            f'You are {assistant_name}. Someone has expressed gratitude: "{message}".\n'
            "Respond warmly but briefly with 1 emoji. Vary your responses, don't always say \"you're welcome\"."
        ),
        MessageCategory.KNOWLEDGE: (
            f'You are {assistant_name}. Someone shared this information: "{message}".\n'
            "Respond with enthusiasm and appreciation for the knowledge shared. Use 1 emoji and keep it brief.\n"
            "Sometimes add a small relevant fact to build on what they shared."
        ),
        MessageCategory.EMOTION: (
            f'You are {assistant_name}. Someone expressed this emotion: "{message}".\n'
            "Respond empathetically and supportively. Use 1 appropriate emoji and keep it brief."
        ),
        MessageCategory.COMMAND: (
            f'You are {assistant_name}. Someone made this request/command: "{message}".\n'
            "If it's something you can help with, respond positively. If not, explain briefly why not.\n"
            "Use 1 emoji and keep it short."
        ),
    }
    return templates.get(category)


def build_history_answer_prompt(question: str, history: Sequence[HistoryMessage]) -> str:
    # Key line: history is joined oldest-first, one message per paragraph.
    history_text = "\n\n".join(m.text for m in history)

    return f"""
Your role is to help team members by answering questions based on previous conversations in the chat space.

Conversation history:
{history_text or "(no earlier messages)"}

Question: {question}

RULES:
- If the conversation history doesn't provide an answer, say something like
  "I don't have that information yet 🔍 When the team discusses this topic, I'll learn and be able to help in the future!"
- Ask a clarifying question only when you really need one.
- Keep your friendly personality in every response.
""".strip()

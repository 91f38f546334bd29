# Role: Prompt templates for the two cheap "routing" calls: message category and yes/no question detection.
# Both ask for a single token-like answer so the parser stays trivial.

from __future__ import annotations

from chat_samples.models.message_category import MessageCategory

_CATEGORY_HINTS = {
    MessageCategory.QUESTION: "if it's asking for information",
    MessageCategory.GREETING: "if it's saying hello/hi/etc",
    MessageCategory.GRATITUDE: "if it's saying thanks/thank you",
    MessageCategory.KNOWLEDGE: "if it's sharing information/facts",
    MessageCategory.EMOTION: "if it's expressing feelings",
    MessageCategory.COMMAND: "if it's a request/instruction",
    MessageCategory.GENERAL: "for other statements",
}


def build_classification_prompt(message: str) -> str:
    categories = "\n".join(f"- {c.value} ({hint})" for c, hint in _CATEGORY_HINTS.items())
    return f"""
Analyze this message and categorize it. Message: "{message}".
Return ONLY ONE of these categories in lowercase:
{categories}
""".strip()


def build_question_detection_prompt(message: str) -> str:
    return f"""
Does the message contain a question? Message: "{message}".
Answer 'yes' or 'no' only.
""".strip()

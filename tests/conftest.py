from typing import Callable, List, Optional, Tuple

import pytest

from chat_samples.models.errors import UpstreamError


class FakeGeminiClient:
    """Stands in for GeminiClient: answers from a callable and records every prompt."""

    def __init__(self, answer: Callable[[str], str]):
        self._answer = answer
        self.calls: List[Tuple[str, Optional[str]]] = []

    def generate_text(self, prompt: str, system_instruction: Optional[str] = None) -> str:
        self.calls.append((prompt, system_instruction))
        return self._answer(prompt)


class FailingGeminiClient:
    def __init__(self):
        self.calls = 0

    def generate_text(self, prompt: str, system_instruction: Optional[str] = None) -> str:
        self.calls += 1
        raise UpstreamError("Gemini API call failed: quota exceeded")


def _message_of(prompt: str) -> str:
    return prompt.split('Message: "', 1)[1].split('".', 1)[0]


def scripted_answer(prompt: str) -> str:
    # Routing prompts get one-word answers; everything else gets a canned reply.
    if prompt.startswith("Does the message contain a question?"):
        return "Yes." if "?" in _message_of(prompt) else "no"
    if prompt.startswith("Analyze this message and categorize it."):
        message = _message_of(prompt).lower()
        if "thanks" in message:
            return "Gratitude"
        if "coffee" in message:
            return "general"
        return "greeting"
    if "Conversation history:" in prompt:
        return "We use Slack for daily communication 💬"
    return "Hello there 👋"


@pytest.fixture
def fake_client() -> FakeGeminiClient:
    return FakeGeminiClient(scripted_answer)

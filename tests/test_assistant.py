import pytest

from chat_samples.core.assistant_controller import AssistantController
from chat_samples.core.history_store import HistoryStore
from chat_samples.llm.assistant_service import AssistantService
from chat_samples.models.chat_response import EmptyResponse, PostMessage
from chat_samples.models.errors import UpstreamError
from chat_samples.models.event import InteractionEvent
from chat_samples.models.message import HistoryMessage
from chat_samples.models.message_category import MessageCategory

from chat_events import USER, message_event
from conftest import FailingGeminiClient, FakeGeminiClient


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("greeting", MessageCategory.GREETING),
        ("  Gratitude.\n", MessageCategory.GRATITUDE),
        ("knowledge - they shared a fact", MessageCategory.KNOWLEDGE),
        ("**command**", MessageCategory.COMMAND),
        ("something odd", MessageCategory.GENERAL),
        ("", MessageCategory.GENERAL),
    ],
)
def test_classify_message_parses_category(raw, expected):
    service = AssistantService(FakeGeminiClient(lambda prompt: raw))

    assert service.classify_message("hi") == expected


def test_every_call_sends_persona_as_system_instruction(fake_client):
    service = AssistantService(fake_client, assistant_name="Jessica")

    service.classify_message("hello")
    service.detects_question("hello")

    assert all(system and "You are Jessica" in system for _, system in fake_client.calls)


def test_detects_question(fake_client):
    service = AssistantService(fake_client)

    assert service.detects_question("What channel do we use?") is True
    assert service.detects_question("I'm going to the store later today.") is False


def test_generate_reply_skips_general_and_question(fake_client):
    service = AssistantService(fake_client)

    assert service.generate_reply(MessageCategory.GENERAL, "I'm getting coffee") is None
    assert service.generate_reply(MessageCategory.QUESTION, "why?") is None
    assert fake_client.calls == []


def test_generate_reply_uses_category_prompt(fake_client):
    service = AssistantService(fake_client, assistant_name="Jessica")

    reply = service.generate_reply(MessageCategory.EMOTION, "I'm excited about the launch!")

    assert reply == "Hello there 👋"
    prompt = fake_client.calls[0][0]
    assert "expressed this emotion" in prompt
    assert "I'm excited about the launch!" in prompt


def test_answer_from_history_includes_messages_in_order(fake_client):
    service = AssistantService(fake_client)
    history = [
        HistoryMessage(text="Hi everyone! We use Slack for daily communication."),
        HistoryMessage(text="Please check the #announcements channel regularly."),
    ]

    answer = service.answer_from_history("What is our preferred channel?", history)

    assert answer == "We use Slack for daily communication 💬"
    prompt = fake_client.calls[0][0]
    assert "Hi everyone! We use Slack for daily communication.\n\nPlease check" in prompt
    assert "What is our preferred channel?" in prompt


def test_upstream_failure_propagates():
    client = FailingGeminiClient()
    controller = AssistantController(AssistantService(client))

    with pytest.raises(UpstreamError):
        controller.handle(message_event("Hello!"))
    assert client.calls == 1


def test_controller_answers_questions_from_space_history(fake_client):
    history = HistoryStore()
    history.add_message("spaces/AAA", "We use Slack for daily communication.")
    controller = AssistantController(AssistantService(fake_client), history=history)

    response = controller.handle(message_event("Which chat tool do we use?"))

    assert response == PostMessage(text="We use Slack for daily communication 💬")
    assert "We use Slack for daily communication." in fake_client.calls[-1][0]
    assert [m.text for m in history.recent("spaces/AAA")] == [
        "We use Slack for daily communication.",
        "Which chat tool do we use?",
    ]


def test_controller_replies_to_small_talk(fake_client):
    controller = AssistantController(AssistantService(fake_client))

    response = controller.handle(message_event("Thanks for all your help today!"))

    assert isinstance(response, PostMessage)
    assert "expressed gratitude" in fake_client.calls[-1][0]


def test_controller_stays_quiet_for_general_statements(fake_client):
    history = HistoryStore()
    controller = AssistantController(AssistantService(fake_client), history=history)

    response = controller.handle(message_event("I'm going to get some coffee."))

    assert isinstance(response, EmptyResponse)
    # still remembered for later questions
    assert history.recent("spaces/AAA")[0].sender == "Ada Admin"


def test_controller_greets_when_added_to_space(fake_client):
    controller = AssistantController(AssistantService(fake_client, assistant_name="Jessica"))
    event = InteractionEvent.model_validate({"type": "ADDED_TO_SPACE", "user": USER})

    response = controller.handle(event)

    assert "Jessica" in response.render()["text"]
    assert fake_client.calls == []


def test_controller_ignores_empty_messages(fake_client):
    controller = AssistantController(AssistantService(fake_client))

    assert isinstance(controller.handle(message_event("   ")), EmptyResponse)
    assert fake_client.calls == []


def test_history_store_is_bounded_and_expires():
    store = HistoryStore(max_messages=2, ttl_minutes=0)
    for text in ("one", "two", "three"):
        store.add_message("spaces/B", text)

    assert [m.text for m in store.recent("spaces/B")] == ["two", "three"]
    assert [m.text for m in store.recent("spaces/B", limit=1)] == ["three"]
    assert store.recent("spaces/B", limit=0) == []
    assert store.cleanup_expired() == 1
    assert store.recent("spaces/B") == []

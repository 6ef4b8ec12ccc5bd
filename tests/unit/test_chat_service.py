import pytest

from models.api_models import ChatRequest, Message
from models.chat_models import CompletionOptions
from services.chat_service import ChatService
from tests.fixtures.mock_clients import FakeCompletionClient
from utils.constants import CHAT_SYSTEM_PROMPT


def _history(count):
    roles = ["user", "assistant"]
    return [Message(role=roles[i % 2], content=f"turn {i}") for i in range(count)]


def test_prepare_messages_without_history_sends_system_and_user():
    """Given no history, prepare_messages should return exactly the persona prompt and the user message."""
    request = ChatRequest(message="Where should I eat in Lisbon?")
    messages = ChatService.prepare_messages(request)

    assert messages == [
        {"role": "system", "content": CHAT_SYSTEM_PROMPT},
        {"role": "user", "content": "Where should I eat in Lisbon?"},
    ]


@pytest.mark.parametrize("history_length, expected_kept", [
    (0, 0),
    (1, 1),
    (6, 6),
    (7, 6),
    (15, 6),
])
def test_prepare_messages_keeps_most_recent_history_in_order(history_length, expected_kept):
    """Given history of any length, only the last six entries should be kept, order preserved."""
    history = _history(history_length)
    request = ChatRequest(message="next", conversationHistory=history)

    messages = ChatService.prepare_messages(request)

    assert len(messages) == expected_kept + 2
    assert messages[0]["role"] == "system"
    assert messages[-1] == {"role": "user", "content": "next"}
    kept = messages[1:-1]
    assert [m["content"] for m in kept] == [m.content for m in history[history_length - expected_kept:]]


def test_chat_request_accepts_snake_case_history():
    """Given the history under its Python name, ChatRequest should still populate it."""
    request = ChatRequest(message="hi", conversation_history=[Message(role="user", content="a")])
    assert len(request.conversation_history) == 1


def test_recent_history_with_non_positive_limit_is_empty():
    assert ChatService.recent_history(_history(4), 0) == []


@pytest.mark.anyio
async def test_reply_calls_upstream_with_prepared_messages_and_options():
    """Given a chat request, reply should call the chat client once with its options and return the text."""
    client = FakeCompletionClient(["Try Time Out Market!"])
    options = CompletionOptions(model="gpt-3.5-turbo", max_tokens=300)
    service = ChatService(client, options)

    reply = await service.reply(ChatRequest(message="Food?", conversationHistory=_history(8)))

    assert reply == "Try Time Out Market!"
    assert len(client.call_history) == 1
    call = client.call_history[0]
    assert call["options"] is options
    assert len(call["messages"]) == 8
    assert call["messages"][1]["content"] == "turn 2"

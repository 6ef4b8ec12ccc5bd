import httpx
import openai
import pytest

from config import UpstreamProfile
from models.chat_models import CompletionOptions
from services.completion_client import CompletionClient
from utils.errors import UpstreamError


@pytest.fixture
def profile():
    return UpstreamProfile(name="budget", api_key="sk-test", model="gpt-4o-mini", max_tokens=2000, temperature=0.1)


@pytest.mark.anyio
async def test_complete_sends_profile_defaults(profile, mock_openai_client):
    """Given no options, complete should use the profile's model, output cap and temperature."""
    client = CompletionClient(profile, client=mock_openai_client)
    messages = [{"role": "user", "content": "hi"}]

    text = await client.complete(messages)

    assert text == "upstream text"
    mock_openai_client.chat.completions.create.assert_awaited_once_with(
        model="gpt-4o-mini", messages=messages, max_tokens=2000, temperature=0.1
    )


@pytest.mark.anyio
async def test_complete_omits_temperature_when_unset(profile, mock_openai_client):
    """Given options without a temperature, the provider default should be used."""
    client = CompletionClient(profile, client=mock_openai_client)

    await client.complete([], CompletionOptions(model="gpt-3.5-turbo", max_tokens=300))

    kwargs = mock_openai_client.chat.completions.create.call_args.kwargs
    assert "temperature" not in kwargs
    assert kwargs["model"] == "gpt-3.5-turbo"
    assert kwargs["max_tokens"] == 300


@pytest.mark.anyio
async def test_complete_returns_empty_string_for_null_content(profile, mock_openai_client):
    mock_openai_client.chat.completions.create.return_value.choices[0].message.content = None
    client = CompletionClient(profile, client=mock_openai_client)

    assert await client.complete([]) == ""


@pytest.mark.anyio
@pytest.mark.parametrize("error", [
    openai.APIConnectionError(request=httpx.Request("POST", "https://api.openai.com/v1/chat/completions")),
    openai.APITimeoutError(request=httpx.Request("POST", "https://api.openai.com/v1/chat/completions")),
    httpx.ReadTimeout("timed out"),
])
async def test_complete_wraps_transport_errors(profile, mock_openai_client, error):
    """Given a transport or provider failure, complete should raise UpstreamError."""
    mock_openai_client.chat.completions.create.side_effect = error
    client = CompletionClient(profile, client=mock_openai_client)

    with pytest.raises(UpstreamError):
        await client.complete([])


@pytest.mark.anyio
async def test_complete_without_choices_raises(profile, mock_openai_client):
    mock_openai_client.chat.completions.create.return_value.choices = []
    client = CompletionClient(profile, client=mock_openai_client)

    with pytest.raises(UpstreamError):
        await client.complete([])


def test_client_builds_openai_client_with_profile_credentials(profile):
    """Given only a profile, the client should configure its own OpenAI client and pooled transport."""
    client = CompletionClient(profile)

    assert isinstance(client._client, openai.AsyncOpenAI)
    assert client._client.api_key == "sk-test"
    assert client._client.max_retries == 0

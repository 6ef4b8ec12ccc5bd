import pytest
from unittest.mock import AsyncMock, MagicMock

from config import Config, UpstreamProfile

TEST_SECRET = "test-secret"


@pytest.fixture
def anyio_backend():
    """Run anyio-marked tests on asyncio, the event loop the app is built on."""
    return "asyncio"


@pytest.fixture
def test_config():
    """Config with dummy credentials for both upstream profiles."""
    return Config(
        jwt_secret=TEST_SECRET,
        chat=UpstreamProfile(name="chat", api_key="sk-chat", model="gpt-3.5-turbo", max_tokens=300),
        budget=UpstreamProfile(
            name="budget", api_key="sk-budget", model="gpt-4o-mini", max_tokens=2000, temperature=0.1
        ),
    )


@pytest.fixture
def chat_llm():
    """Fake chat completion client."""
    from tests.fixtures.mock_clients import FakeCompletionClient
    return FakeCompletionClient(["Hi expat! Try the pastéis de nata in Belém."], name="chat")


@pytest.fixture
def budget_llm():
    """Fake budget completion client returning a fenced budget."""
    from tests.fixtures.mock_clients import FakeCompletionClient
    from tests.fixtures.responses import FENCED_BUDGET_RESPONSE
    return FakeCompletionClient([FENCED_BUDGET_RESPONSE], name="budget")


@pytest.fixture
def mock_openai_client():
    """Reusable mock for openai.AsyncOpenAI returning a single choice."""
    client = MagicMock()
    choice = MagicMock()
    choice.message.content = "upstream text"
    completion = MagicMock()
    completion.choices = [choice]
    client.chat.completions.create = AsyncMock(return_value=completion)
    return client


@pytest.fixture
def token_service():
    from services.token_service import TokenService
    return TokenService(TEST_SECRET)


@pytest.fixture
def auth_headers(token_service):
    """Authentication headers for API requests."""
    return {"Authorization": f"Bearer {token_service.issue('user123')}"}


@pytest.fixture
def configured_app(test_config, chat_llm, budget_llm):
    """Pre-configured app with fake upstream clients."""
    from fastapi.testclient import TestClient
    from main import create_app

    app = create_app(test_config, chat_client=chat_llm, budget_client=budget_llm)

    with TestClient(app) as client:
        yield client

from utils.errors import UpstreamError


class FakeCompletionClient:
    """Completion client mock that records calls and replays canned responses."""

    def __init__(self, responses=None, name="fake"):
        self.name = name
        self.responses = list(responses or [])
        self.call_history = []

    async def complete(self, messages, options=None):
        self.call_history.append({
            "messages": messages,
            "options": options
        })

        if not self.responses:
            return ""

        response = self.responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response


class FailingCompletionClient(FakeCompletionClient):
    """Completion client that always fails like an unreachable provider."""

    async def complete(self, messages, options=None):
        self.call_history.append({"messages": messages, "options": options})
        raise UpstreamError(f"{self.name} completion failed")

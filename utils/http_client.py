"""
HTTP client utilities with connection pooling.
Provides one reusable httpx client per upstream profile.
"""
import httpx


class HTTPClientManager:
    """Manages shared httpx clients with connection pooling."""

    _clients: dict[str, httpx.AsyncClient] = {}

    @classmethod
    def get_client(cls, name: str, timeout: float) -> httpx.AsyncClient:
        """
        Get or create the shared httpx client for an upstream profile.

        Features:
        - Connection pooling (reuses TCP connections)
        - Explicit request timeout, so a slow upstream cannot hold a request forever

        Args:
            name: Profile name, one client per name
            timeout: Total timeout in seconds applied to each request

        Returns:
            Configured httpx.AsyncClient
        """
        client = cls._clients.get(name)
        if client is None or client.is_closed:
            limits = httpx.Limits(
                max_connections=20,
                max_keepalive_connections=5,
                keepalive_expiry=30.0
            )

            client = httpx.AsyncClient(
                timeout=httpx.Timeout(timeout, connect=min(timeout, 10.0)),
                limits=limits,
                http2=True
            )
            cls._clients[name] = client

        return client

    @classmethod
    async def close_all(cls) -> None:
        """
        Close all managed clients and clean up connections.
        """
        for client in cls._clients.values():
            if not client.is_closed:
                await client.aclose()
        cls._clients.clear()

"""
Authentication middleware for bearer token verification.
"""
from fastapi import Request
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware
from utils.errors import AppError
from utils.logger import app_logger


class BearerAuthMiddleware(BaseHTTPMiddleware):
    """
    Checks the Authorization bearer token on protected paths.
    """

    PROTECTED_PATHS = {"/api/chat", "/api/budget"}

    async def dispatch(self, request: Request, call_next):
        """
        Process each request and verify the bearer token.

        Args:
            request: Incoming HTTP request
            call_next: Next middleware/handler in chain

        Returns:
            Response from next handler or error response
        """
        if request.url.path.rstrip("/") not in self.PROTECTED_PATHS:
            return await call_next(request)

        token_service = request.app.state.token_service
        token = token_service.extract_bearer(request.headers.get("Authorization"))
        client_host = request.client.host if request.client else "unknown"

        try:
            request.state.user = token_service.verify(token)
        except AppError as e:
            app_logger.warning(
                f"Rejected request to {request.url.path} from {client_host} - {e.message}"
            )
            headers = {"WWW-Authenticate": "Bearer"} if e.status_code == 401 else None
            return JSONResponse(
                status_code=e.status_code,
                content={"error": e.message},
                headers=headers,
            )

        return await call_next(request)

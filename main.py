"""
Vasco Backend - FastAPI relay between authenticated clients and the OpenAI API.
Serves a travel-assistant chat endpoint and a structured monthly budget estimate endpoint.
"""
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware

from auth import BearerAuthMiddleware
from config import Config
from routes import auth_route, budget, chat, health
from services.budget_service import BudgetService
from services.chat_service import ChatService
from services.completion_client import CompletionClient
from services.token_service import TokenService
from utils.errors import AppError
from utils.http_client import HTTPClientManager
from utils.logger import app_logger, set_log_level


def create_app(config: Optional[Config] = None,
               chat_client: Optional[CompletionClient] = None,
               budget_client: Optional[CompletionClient] = None) -> FastAPI:
    """
    Build the application.

    Args:
        config: Settings; read from the environment when omitted
        chat_client: Completion client for the conversational profile
        budget_client: Completion client for the structured budget profile
    """
    config = config or Config.from_env()
    set_log_level(config.log_level)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan manager for startup and shutdown events."""
        for name in ("JWT_SECRET", "OPENAI_API_KEY", "OPENAI_BUDGET_API_KEY"):
            state = "Not set" if name in config.missing_settings() else "Set"
            app_logger.info(f"{name}: {state}")

        config.validate()

        chat_upstream = chat_client or CompletionClient(config.chat)
        budget_upstream = budget_client or CompletionClient(config.budget)

        app.state.token_service = TokenService(config.jwt_secret, config.token_ttl_seconds)
        app.state.chat_service = ChatService(
            chat_upstream, config.chat.options, config.max_history_messages
        )
        app.state.budget_service = BudgetService(budget_upstream, config.budget.options)

        app_logger.info(f"Chat model: {config.chat.model}, budget model: {config.budget.model}")
        yield
        await HTTPClientManager.close_all()

    app = FastAPI(title=config.app_title, lifespan=lifespan)
    app.state.config = config

    app.add_middleware(BearerAuthMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(AppError)
    async def app_error_handler(request: Request, exc: AppError):
        """Map service errors to a generic JSON error body."""
        return JSONResponse(status_code=exc.status_code, content={"error": exc.message})

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        """Handle validation errors with user-friendly messages"""
        errors = exc.errors()
        app_logger.error(f"Validation error for {request.url}")
        app_logger.error(f"Errors: {errors}")

        if errors:
            first_error = errors[0]
            error_type = first_error.get('type', '')
            field = first_error.get('loc', [])[-1] if first_error.get('loc') else 'field'
            message = f"{field}: {first_error.get('msg', 'Validation error')}"

            return JSONResponse(
                status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
                content={
                    "detail": [{
                        "msg": message,
                        "type": error_type,
                        "loc": list(first_error.get('loc', []))
                    }]
                },
            )

        return JSONResponse(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            content={"detail": "Validation error"},
        )

    app.include_router(health.router, tags=["health"])
    app.include_router(auth_route.router, tags=["auth"])
    app.include_router(chat.router, tags=["chat"])
    app.include_router(budget.router, tags=["budget"])

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=app.state.config.port)

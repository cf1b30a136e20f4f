"""Main application entry point."""

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
import uvicorn
import logging
import json
from contextlib import asynccontextmanager
from typing import Optional

from .config import Settings, settings as default_settings
from .api import router as api_router
from .database.init import init_storage
from .errors import (
    AuthError,
    NotFoundError,
    PermissionDeniedError,
    PromptDeskError,
    ValidationError,
)
from .providers import ProviderFactory
from .repositories import Storage, create_storage
from .services.chat_service import ChatService

# Configure log level
logging.basicConfig(
    level=getattr(logging, default_settings.log_level.upper(), logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[
        logging.StreamHandler(),
    ],
)

logger = logging.getLogger(__name__)


async def log_requests_middleware(request: Request, call_next):
    """Log every request, with bodies of prompt writes."""
    logger.info(f"Incoming request: {request.method} {request.url.path}")

    if "/prompts" in request.url.path and request.method in ("POST", "PUT"):
        try:
            body = await request.body()
            if body:
                try:
                    body_json = json.loads(body.decode("utf-8"))
                    # Never log credentials
                    if isinstance(body_json, dict) and "apiKey" in body_json:
                        body_json["apiKey"] = "***"
                    logger.info(
                        f"- Request body (JSON): {json.dumps(body_json, ensure_ascii=False)}"
                    )
                except json.JSONDecodeError:
                    logger.info(
                        f"- Request body (raw): {body.decode('utf-8', errors='ignore')}"
                    )
        except Exception as e:
            logger.error(f"Error reading request body: {e}")

    response = await call_next(request)
    logger.info(f"Response status: {response.status_code}")
    return response


def _error_response(status_code: int, exc: PromptDeskError) -> JSONResponse:
    content = {"message": exc.message}
    if isinstance(exc, ValidationError) and exc.errors:
        content["errors"] = exc.errors
    return JSONResponse(status_code=status_code, content=content)


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(ValidationError)
    async def validation_error_handler(request: Request, exc: ValidationError):
        return _error_response(400, exc)

    @app.exception_handler(NotFoundError)
    async def not_found_handler(request: Request, exc: NotFoundError):
        return _error_response(404, exc)

    @app.exception_handler(AuthError)
    async def auth_error_handler(request: Request, exc: AuthError):
        return _error_response(401, exc)

    @app.exception_handler(PermissionDeniedError)
    async def permission_denied_handler(request: Request, exc: PermissionDeniedError):
        return _error_response(403, exc)

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        errors = [
            {"field": ".".join(str(part) for part in err["loc"]), "message": err["msg"]}
            for err in exc.errors()
        ]
        return JSONResponse(
            status_code=400,
            content={"message": "Invalid request body", "errors": errors},
        )


def create_app(
    settings: Optional[Settings] = None,
    storage: Optional[Storage] = None,
    provider_factory: Optional[ProviderFactory] = None,
) -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = settings or default_settings
    storage = storage or create_storage(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan management."""
        # Startup
        await init_storage(storage, settings)
        yield
        # Shutdown
        await storage.close()
        logger.info("Shutting down PromptDesk...")

    app = FastAPI(
        title="PromptDesk",
        description="Admin-managed LLM prompts with persisted conversations",
        version="0.1.0",
        debug=settings.debug,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.storage = storage
    app.state.chat_service = ChatService(storage, settings, provider_factory)

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],  # Configure properly in production
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Add request logging middleware
    app.middleware("http")(log_requests_middleware)

    register_exception_handlers(app)

    # Include routers
    app.include_router(api_router, prefix=f"{settings.api_prefix}")

    @app.get("/")
    async def root():
        """Root endpoint."""
        return {"name": "PromptDesk", "version": "0.1.0", "status": "running"}

    @app.get("/health")
    async def health():
        """Health check endpoint."""
        return {"status": "healthy"}

    return app


if __name__ == "__main__":
    uvicorn.run(
        "promptdesk.main:create_app",
        factory=True,
        host=default_settings.server_host,
        port=default_settings.server_port,
        reload=default_settings.debug,
    )

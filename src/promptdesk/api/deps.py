"""Request dependencies shared by the routers."""

from typing import Optional
from fastapi import Header, Request

from ..config import Settings
from ..errors import AuthError, PermissionDeniedError, ValidationError
from ..models import UserOut
from ..repositories import Storage
from ..services.auth_service import AuthService
from ..services.chat_service import ChatService
from ..services.conversation_service import ConversationService
from ..services.prompt_service import PromptService


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_storage(request: Request) -> Storage:
    return request.app.state.storage


def get_auth_service(request: Request) -> AuthService:
    return AuthService(get_storage(request))


def get_prompt_service(request: Request) -> PromptService:
    return PromptService(get_storage(request))


def get_conversation_service(request: Request) -> ConversationService:
    return ConversationService(get_storage(request))


def get_chat_service(request: Request) -> ChatService:
    # Shared instance: it owns the per-prompt locks
    return request.app.state.chat_service


def parse_prompt_id(raw: str) -> int:
    try:
        return int(raw)
    except ValueError:
        raise ValidationError("Invalid prompt ID")


async def current_identity(
    request: Request, x_user_id: Optional[str] = Header(None)
) -> Optional[UserOut]:
    """
    Identity named by the ``X-User-Id`` header.

    Only checked when ``enforce_roles`` is on; otherwise returns None and
    every route is open.
    """
    if not get_settings(request).enforce_roles:
        return None
    if not x_user_id:
        raise AuthError("Authentication required")
    try:
        user_id = int(x_user_id)
    except ValueError:
        raise AuthError("Authentication required")
    identity = await get_auth_service(request).get_identity(user_id)
    if identity is None:
        raise AuthError("Authentication required")
    return identity


async def require_admin(
    request: Request, x_user_id: Optional[str] = Header(None)
) -> Optional[UserOut]:
    identity = await current_identity(request, x_user_id)
    if identity is not None and not identity.is_admin:
        raise PermissionDeniedError("Admin access required")
    return identity

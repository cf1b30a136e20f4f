"""Services package for PromptDesk.

Submodules are loaded lazily so that importing one service (for example
the reconstructor in isolation) does not pull in the provider stack.
"""

__all__ = ["AuthService", "ChatService", "ConversationService", "PromptService"]


def __getattr__(name):
    if name == "AuthService":
        from .auth_service import AuthService as _AuthService

        return _AuthService
    if name == "ChatService":
        from .chat_service import ChatService as _ChatService

        return _ChatService
    if name == "ConversationService":
        from .conversation_service import ConversationService as _ConversationService

        return _ConversationService
    if name == "PromptService":
        from .prompt_service import PromptService as _PromptService

        return _PromptService
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")

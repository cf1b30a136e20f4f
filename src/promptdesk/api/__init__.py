"""HTTP routers for PromptDesk."""

from fastapi import APIRouter

from .auth import router as auth_router
from .messages import router as messages_router
from .prompts import router as prompts_router

router = APIRouter()
router.include_router(auth_router)
router.include_router(prompts_router)
router.include_router(messages_router)

__all__ = ["router"]

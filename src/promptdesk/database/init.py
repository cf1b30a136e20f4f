"""Storage initialization and seed data."""

import logging

from ..config import Settings
from ..repositories import Storage

logger = logging.getLogger(__name__)

DEFAULT_PROMPT_CONTENT = (
    "You are a helpful customer support assistant. "
    "Answer customer questions politely and professionally."
)


async def seed_defaults(storage: Storage, settings: Settings) -> bool:
    """
    Create the bootstrap accounts and the sample prompt.

    Skipped when the ``admin`` account already exists.

    Returns:
        True if seed rows were written, False otherwise
    """
    if await storage.get_user_by_username("admin") is not None:
        return False

    admin = await storage.create_user("admin", "admin123", is_admin=True)
    await storage.create_user("user", "user123", is_admin=False)
    await storage.create_prompt(
        {
            "name": "Customer Support Assistant",
            "provider": "openai",
            "model": "gpt-4o",
            "temperature": 0.7,
            "content": DEFAULT_PROMPT_CONTENT,
            "created_by": admin.id,
        },
        api_key=settings.openai_api_key or "sk-dummy-key",
    )
    logger.info("Seeded default users and sample prompt")
    return True


async def init_storage(storage: Storage, settings: Settings) -> None:
    """
    Initialize the storage backend and make sure seed data exists.
    """
    logger.info(f"Initializing {settings.storage_backend} storage")
    await storage.init()
    await seed_defaults(storage, settings)

    prompts = await storage.list_prompts()
    logger.info(f"Found {len(prompts)} prompt(s) in storage")

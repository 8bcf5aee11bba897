from functools import lru_cache
from typing import Any

from openai import AsyncOpenAI

from signal_engine.core.config import settings


@lru_cache(maxsize=1)
def get_async_client() -> AsyncOpenAI:
    # Single attempt per classification.
    return AsyncOpenAI(
        api_key=settings.AI_API_KEY,
        base_url=settings.AI_API_BASE_URL,
        timeout=settings.AI_TIMEOUT_SECONDS,
        max_retries=0,
    )


async def create_chat_completion(**kwargs: Any) -> Any:
    client = get_async_client()
    return await client.chat.completions.create(**kwargs)

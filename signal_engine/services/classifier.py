"""LLM-backed tagging of free-text product feedback.

The classifier never raises: any transport failure, timeout or malformed
answer yields the fallback tag set.
"""

import json
import logging
import re
from typing import Any, Awaitable, Callable, Optional

from pydantic import ValidationError

from signal_engine.core.config import settings
from signal_engine.schemas.feedback import ClassificationTags
from signal_engine.services.openai_client import create_chat_completion

logger = logging.getLogger(__name__)

CompletionFn = Callable[..., Awaitable[Any]]

FALLBACK_TAGS = ClassificationTags(
    theme="Other",
    urgency="Medium",
    severity="Moderate",
    sentiment="Neutral",
)

PROMPT_TEMPLATE = """
Classify the following product feedback.

"{text}"

Return ONLY valid JSON:
{{
  "theme": "Authentication | Performance | UI/UX | Documentation | Bug | Feature Request | Integration | Other",
  "urgency": "Low | Medium | High",
  "severity": "Minor | Moderate | Critical",
  "sentiment": "Positive | Neutral | Negative"
}}
"""

_FENCE_RE = re.compile(r"```(?:json)?")


def fallback_tags() -> ClassificationTags:
    return FALLBACK_TAGS.model_copy()


def build_prompt(text: str) -> str:
    return PROMPT_TEMPLATE.format(text=text)


def parse_tags(content: Optional[str]) -> ClassificationTags:
    """Strip code fences from a model answer and validate it as a tag set.

    Raises ``ValueError`` (``ValidationError`` included) when the cleaned
    answer is empty, not JSON, or carries values outside the enumerations.
    """

    cleaned = _FENCE_RE.sub("", content or "").strip()
    if not cleaned:
        raise ValueError("Empty classification response")
    return ClassificationTags.model_validate_json(cleaned)


class FeedbackClassifier:
    def __init__(
        self,
        api_key: Optional[str],
        model: str,
        *,
        max_tokens: int = 256,
        completion: CompletionFn = create_chat_completion,
    ) -> None:
        self._api_key = api_key
        self.model = model
        self.max_tokens = max_tokens
        self._completion = completion

    @property
    def available(self) -> bool:
        return bool(self._api_key)

    async def classify(self, text: str) -> ClassificationTags:
        if not self.available:
            return fallback_tags()

        try:
            completion = await self._completion(
                model=self.model,
                max_tokens=self.max_tokens,
                temperature=0,
                messages=[{"role": "user", "content": build_prompt(text)}],
            )
            content = completion.choices[0].message.content
            return parse_tags(content)
        except (ValidationError, ValueError, json.JSONDecodeError) as exc:
            logger.warning("Invalid classification payload, using fallback tags: %s", exc)
        except Exception:
            logger.exception("Feedback classification failed, using fallback tags")
        return fallback_tags()


def classifier_from_settings() -> FeedbackClassifier:
    return FeedbackClassifier(
        api_key=settings.AI_API_KEY,
        model=settings.AI_CHAT_MODEL,
        max_tokens=settings.AI_MAX_TOKENS,
    )

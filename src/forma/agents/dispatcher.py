"""API key rotation and failover for generation calls."""

import json
import logging
import re
from dataclasses import dataclass
from typing import Any

import openai

from ..config import ApiCredential
from ..errors import CapacityExhaustedError, ConfigurationError, MalformedResponseError
from .client import ClientFactory

logger = logging.getLogger(__name__)

_RATE_LIMIT_PATTERN = re.compile(
    r"\b429\b|too many requests|quota|rate[\s_-]?limit|resource[\s_]exhausted",
    re.IGNORECASE,
)


def is_rate_limit_error(error: BaseException) -> bool:
    """True if ``error`` means the key is out of capacity (retry elsewhere)."""
    if isinstance(error, openai.RateLimitError):
        return True
    return bool(_RATE_LIMIT_PATTERN.search(str(error)))


def parse_json_reply(text: str) -> Any:
    """Parse a JSON-mode reply, tolerating a markdown code fence."""
    cleaned = text.strip()
    if cleaned.startswith("```"):
        cleaned = re.sub(r"^```(?:json)?\s*|\s*```$", "", cleaned)
    try:
        return json.loads(cleaned)
    except json.JSONDecodeError as e:
        raise MalformedResponseError(f"AI returned invalid JSON: {e}")


@dataclass
class DispatchResult:
    """Parsed reply plus the pool entry that produced it."""

    data: Any
    credential: ApiCredential
    attempts: int


class KeyRotationDispatcher:
    """Tries each credential in order until one produces a reply.

    Rate-limit failures rotate to the next credential. Any other failure
    is raised immediately and the remaining credentials are not tried.
    """

    def __init__(self, pool: list[ApiCredential], client_factory: ClientFactory):
        self.pool = [credential for credential in pool if credential.key]
        self.client_factory = client_factory

    async def dispatch(self, prompt: str) -> DispatchResult:
        """Generate with failover.

        Raises:
            ConfigurationError: if no credentials are configured
            CapacityExhaustedError: if every credential was rate limited
            MalformedResponseError: if the reply is not valid JSON
        """
        if not self.pool:
            raise ConfigurationError("No API keys configured. Please contact support.")

        for attempt, credential in enumerate(self.pool, start=1):
            logger.info("Attempting generation with %s (%s)...", credential.name, credential.model)
            try:
                client = self.client_factory(credential)
                text = await client.generate_json(prompt)
            except Exception as e:
                if is_rate_limit_error(e):
                    logger.warning("%s exhausted (429), switching to next key...", credential.name)
                    continue
                logger.error("%s failed with non-recoverable error: %s", credential.name, e)
                raise

            data = parse_json_reply(text)
            logger.info("Success with %s", credential.name)
            return DispatchResult(data=data, credential=credential, attempts=attempt)

        logger.error("All API keys exhausted. System busy.")
        raise CapacityExhaustedError(
            "System busy. All AI engines are at capacity. Please try again in 1-2 minutes."
        )

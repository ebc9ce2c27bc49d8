"""ProfanityChecker backed by the PurgoMalum web service.

``GET /service/containsprofanity?text=...`` answers with a plain-text
``true`` or ``false``.
"""

from __future__ import annotations

import asyncio
import logging

import aiohttp

from kitchenpos.domain.exceptions import ProfanityServiceError
from kitchenpos.domain.service.profanity_checker import ProfanityChecker

logger = logging.getLogger(__name__)

CONTAINS_PROFANITY_PATH = "/service/containsprofanity"


class PurgomalumProfanityChecker(ProfanityChecker):

    def __init__(self, base_url: str, timeout: float = 5.0) -> None:
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout

    def contains_profanity(self, text: str) -> bool:
        return asyncio.run(self._query(text))

    async def _query(self, text: str) -> bool:
        url = self._base_url + CONTAINS_PROFANITY_PATH
        timeout = aiohttp.ClientTimeout(total=self._timeout)
        logger.debug("Profanity check request for %r", text)
        try:
            async with aiohttp.ClientSession(timeout=timeout) as session:
                async with session.get(url, params={"text": text}) as response:
                    if response.status != 200:
                        raise ProfanityServiceError(
                            f"Profanity service answered HTTP {response.status}"
                        )
                    body = await response.text()
        except (aiohttp.ClientError, asyncio.TimeoutError) as exc:
            logger.error("Profanity service unreachable: %s", exc)
            raise ProfanityServiceError(f"Profanity service unreachable: {exc}") from exc

        return self._parse(body)

    @staticmethod
    def _parse(body: str) -> bool:
        answer = body.strip().lower()
        if answer not in ("true", "false"):
            raise ProfanityServiceError(f"Unexpected profanity service answer: {body!r}")
        return answer == "true"

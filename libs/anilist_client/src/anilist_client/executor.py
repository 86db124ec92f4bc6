"""Single GraphQL round trip to the AniList endpoint."""

import asyncio
import json
import logging
from typing import Any

import aiohttp

from .config import (
    ANILIST_GRAPHQL_URL,
    DEFAULT_TIMEOUT_SECONDS,
    MAX_TIMEOUT_SECONDS,
    MIN_TIMEOUT_SECONDS,
)
from .exceptions import DecodeError, TransportError

logger = logging.getLogger(__name__)


class RequestExecutor:
    """
    Posts ``{"query", "variables"}`` payloads and returns the decoded envelope.

    Args:
        api_token: Optional bearer token sent as the Authorization header.
        timeout: Total timeout for one request, 1 to 300 seconds.
        session: Optional aiohttp-style session. When omitted, a session is
            opened and closed around every request.

    There is no retry: every failure is raised to the caller.
    """

    def __init__(
        self,
        *,
        api_token: str | None = None,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        session: Any = None,
    ) -> None:
        self.api_token = api_token or None
        if not MIN_TIMEOUT_SECONDS <= timeout <= MAX_TIMEOUT_SECONDS:
            raise ValueError(
                f"AniList timeout must be between {MIN_TIMEOUT_SECONDS:g} and "
                f"{MAX_TIMEOUT_SECONDS:g} seconds, got {timeout!r}"
            )
        self.timeout = float(timeout)
        self.session = session

    @staticmethod
    def build_payload(document: str, variables: dict[str, Any] | None = None) -> dict[str, Any]:
        return {"query": document, "variables": variables or {}}

    def build_headers(self) -> dict[str, str]:
        headers = {
            "Content-Type": "application/json",
            "Accept": "application/json",
        }
        if self.api_token:
            headers["Authorization"] = f"Bearer {self.api_token}"
        return headers

    async def execute(
        self, document: str, variables: dict[str, Any] | None = None
    ) -> dict[str, Any]:
        """
        Send one GraphQL request and return the top-level JSON envelope.

        The envelope is returned as is, including any ``errors`` array.

        Raises:
            TransportError: On network failure, timeout, or an error status
                whose body is not a GraphQL envelope.
            DecodeError: If a successful response body is not a JSON object.

        The body is read as bytes so that invalid UTF-8 is reported as a
        ``DecodeError`` like any other malformed JSON.
        """
        payload = self.build_payload(document, variables)
        logger.debug(f"AniList request with variables {payload['variables']}")

        try:
            if self.session is None:
                async with aiohttp.ClientSession() as session:
                    return await self._post(session, payload)
            return await self._post(self.session, payload)
        except (aiohttp.ClientError, asyncio.TimeoutError) as exc:
            logger.error(f"AniList request failed: {exc!r}")
            raise TransportError(f"AniList request failed: {exc!r}") from exc

    async def _post(self, session: Any, payload: dict[str, Any]) -> dict[str, Any]:
        async with session.post(
            ANILIST_GRAPHQL_URL,
            json=payload,
            headers=self.build_headers(),
            timeout=aiohttp.ClientTimeout(total=self.timeout),
        ) as response:
            status = response.status
            body = await response.read()

        try:
            envelope = json.loads(body)
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            if status >= 400:
                logger.error(f"AniList returned HTTP {status} with a non-JSON body")
                raise TransportError(f"AniList returned HTTP {status}") from exc
            logger.error("AniList returned a body that is not valid JSON")
            raise DecodeError(f"Response body is not valid JSON: {exc}") from exc

        if not isinstance(envelope, dict):
            logger.error("AniList returned JSON that is not an object")
            raise DecodeError(
                f"Expected a JSON object envelope, got {type(envelope).__name__}"
            )
        if status >= 400 and "errors" not in envelope:
            logger.error(f"AniList returned HTTP {status}")
            raise TransportError(f"AniList returned HTTP {status}")
        return envelope

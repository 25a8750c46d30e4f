"""
HTTP client for the study material content service.

Generation requests are retried: on any failure the request is repeated up
to ``retries`` more times, waiting ``attempt * backoff_seconds`` before each
retry (2s, then 4s with the defaults). Topic and export calls are single
shot.
"""
from __future__ import annotations

import asyncio
from typing import Any

import httpx
from loguru import logger
from pydantic import ValidationError

from .errors import (
    ContentSourceConnectionError,
    ContentSourceError,
    ContentSourceServiceError,
)
from .models import GeneratedContent, GenerationType, Topic


class ContentSourceClient:
    """Async client for generation, topic management and export."""

    def __init__(
        self,
        base_url: str,
        timeout_seconds: float = 120.0,
        retries: int = 2,
        backoff_seconds: float = 2.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """
        Initialize the client.

        Args:
            base_url: Service root, e.g. https://classgpt.onrender.com
            timeout_seconds: Per-request timeout
            retries: Extra attempts for generation requests
            backoff_seconds: Delay unit; retry n waits n * backoff_seconds
            transport: Optional httpx transport (tests use MockTransport)
        """
        self.base_url = base_url.rstrip("/")
        self.retries = retries
        self.backoff_seconds = backoff_seconds
        self.client = httpx.AsyncClient(
            base_url=self.base_url,
            timeout=httpx.Timeout(timeout_seconds),
            follow_redirects=True,
            transport=transport,
        )

    async def close(self) -> None:
        await self.client.aclose()

    async def __aenter__(self) -> ContentSourceClient:
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.close()

    # ========================================
    # Generation
    # ========================================

    async def generate_study_material(
        self,
        topic: str,
        content_type: GenerationType | str = GenerationType.ALL,
    ) -> GeneratedContent:
        """
        Ask the service to generate study material for a topic.

        Args:
            topic: Free-text topic
            content_type: all, overview, notes, slides or mcqs

        Returns:
            Raw content channels

        Raises:
            ContentSourceConnectionError: Service unreachable after all retries
            ContentSourceServiceError: Service kept answering with an error
        """
        content_type = GenerationType(content_type).value
        payload = {"topic": topic, "type": content_type}
        attempts = self.retries + 1
        last_error: ContentSourceError | None = None

        logger.info(f"Generating {content_type} material for topic '{topic}'")

        for attempt in range(1, attempts + 1):
            logger.debug(f"Generation attempt {attempt} of {attempts}")
            try:
                response = await self.client.post("/generate", json=payload)
            except httpx.TransportError as e:
                logger.warning(f"Generation attempt {attempt}/{attempts} could not connect: {e}")
                last_error = ContentSourceConnectionError()
            else:
                if response.is_success:
                    logger.info("Generation successful")
                    try:
                        return GeneratedContent.from_response(response.json())
                    except (ValueError, ValidationError) as e:
                        raise ContentSourceServiceError(
                            f"The AI service returned an unreadable response: {e}",
                            status_code=response.status_code,
                        ) from e

                logger.warning(
                    f"Generation attempt {attempt}/{attempts} failed with status {response.status_code}"
                )
                last_error = ContentSourceServiceError.from_status(
                    response.status_code, _error_message(response)
                )

            if attempt < attempts:
                wait_time = attempt * self.backoff_seconds
                logger.info(f"Waiting {wait_time:g} seconds before retry...")
                await asyncio.sleep(wait_time)

        logger.error(f"Generation failed after {attempts} attempts: {last_error}")
        raise last_error

    # ========================================
    # Topics
    # ========================================

    async def fetch_topics(self) -> list[Topic]:
        data = await self._request("GET", "/topics")
        return [Topic.model_validate(item) for item in data or []]

    async def fetch_topic(self, topic_id: str) -> Topic:
        data = await self._request("GET", f"/topics/{topic_id}")
        return Topic.model_validate(data)

    async def delete_topic(self, topic_id: str) -> Any:
        return await self._request("DELETE", f"/topics/{topic_id}")

    async def export_topic(
        self, topic_id: str, fmt: str, content_type: str
    ) -> bytes | str:
        """
        Server-side export of a stored topic.

        Returns bytes for pdf and text for every other format.
        """
        response = await self._send(
            "POST",
            "/export",
            json={"topicId": topic_id, "format": fmt, "contentType": content_type},
        )
        if fmt == "pdf":
            return response.content
        return response.text

    async def _send(self, method: str, url: str, **kwargs: Any) -> httpx.Response:
        try:
            response = await self.client.request(method, url, **kwargs)
        except httpx.TransportError as e:
            logger.error(f"{method} {url} could not connect: {e}")
            raise ContentSourceConnectionError() from e

        if not response.is_success:
            logger.error(f"{method} {url} failed with status {response.status_code}")
            raise ContentSourceServiceError(
                f"HTTP error! status: {response.status_code}",
                status_code=response.status_code,
            )
        return response

    async def _request(self, method: str, url: str, **kwargs: Any) -> Any:
        response = await self._send(method, url, **kwargs)
        try:
            return response.json()
        except ValueError as e:
            raise ContentSourceServiceError(
                f"The AI service returned an unreadable response: {e}",
                status_code=response.status_code,
            ) from e


def _error_message(response: httpx.Response) -> str | None:
    try:
        body = response.json()
    except ValueError:
        return None
    if isinstance(body, dict) and isinstance(body.get("message"), str):
        return body["message"]
    return None

"""HTTP client posting messages to a Slack incoming webhook."""

from __future__ import annotations

import json
import logging
from typing import Dict, Optional

import httpx

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT_SECONDS = 5.0


class SlackWebhookClient:
    """Best-effort delivery of a text message to a webhook URL.

    One POST per call, no retries. Failures are logged and reported through
    the return value, never raised.
    """

    HEADERS: Dict[str, str] = {"Content-Type": "application/json; charset=utf-8"}

    def __init__(
        self,
        *,
        timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self._timeout_seconds = timeout_seconds
        self._transport = transport

    async def send(
        self,
        message: str,
        webhook_url: str,
        *,
        timeout_seconds: Optional[float] = None,
    ) -> bool:
        url = (webhook_url or "").strip()
        if not url:
            logger.debug("Slack webhook URL not configured; notification skipped")
            return False

        body = json.dumps({"text": message}, ensure_ascii=False).encode("utf-8")
        timeout = timeout_seconds or self._timeout_seconds

        try:
            async with httpx.AsyncClient(timeout=timeout, transport=self._transport) as client:
                response = await client.post(url, content=body, headers=self.HEADERS)
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            logger.error(
                "Slack notification failed: %s: %s", type(exc).__name__, exc
            )
            return False

        if not response.is_success:
            logger.error(
                "Slack notification failed: HTTP %s - %s",
                response.status_code,
                response.text,
            )
            return False

        logger.info("Slack notification delivered (HTTP %s)", response.status_code)
        return True

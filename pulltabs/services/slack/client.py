"""Slack incoming webhook client - delivery layer."""

import anyio
import httpx
from fastapi import BackgroundTasks

from pulltabs.config import NotifierConfig
from pulltabs.core.exceptions import DeliveryError, SerializationError
from pulltabs.core.logging import get_logger
from pulltabs.services.slack.schemas import OutboundMessage

logger = get_logger("slack.client")

CONTENT_TYPE = "application/json; charset=UTF-8"


class Dispatcher:
    """Posts Slack messages off the request path.

    Delivery is fire-and-forget: at most one attempt per message, failures
    are logged and dropped, and nothing is reported back to the webhook
    sender.
    """

    def __init__(self, config: NotifierConfig, client: httpx.AsyncClient | None = None) -> None:
        self._config = config
        self._client = client
        self._owns_client = client is None

    def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(timeout=self._config.delivery_timeout)
        return self._client

    async def aclose(self) -> None:
        """Close the shared HTTP client if this dispatcher created it."""
        if self._client is not None and self._owns_client:
            await self._client.aclose()
            self._client = None

    def dispatch(
        self,
        background_tasks: BackgroundTasks,
        message: OutboundMessage,
        request_id: str = "-",
    ) -> None:
        """Schedule delivery of a message. The outcome is never observed by the caller."""
        background_tasks.add_task(self.deliver, message, request_id)
        logger.debug(f"Queued Slack delivery for request {request_id}")

    async def deliver(self, message: OutboundMessage, request_id: str = "-") -> bool:
        """Deliver one message. Never raises; returns whether Slack accepted it."""
        logger.info(f"Posting Slack message for request {request_id}")
        try:
            await self.post(message)
        except SerializationError as e:
            logger.error(f"Failed to create message for request {request_id}: {e}")
            return False
        except DeliveryError as e:
            status = f" (status={e.status_code})" if e.status_code is not None else ""
            logger.error(f"Failed to post Slack message for request {request_id}{status}. Error: {e}")
            return False
        except Exception as e:
            logger.exception(f"Unexpected error delivering Slack message for request {request_id}: {e}")
            return False

        logger.info(f"Slack message delivered for request {request_id}")
        return True

    async def post(self, message: OutboundMessage) -> None:
        """
        Serialize and send a message in a single attempt.

        Raises:
            SerializationError: If the message cannot be encoded
            DeliveryError: On transport failure, timeout or non-2xx response
        """
        try:
            body = message.to_wire()
        except ValueError as e:
            raise SerializationError(str(e)) from e

        if not self._config.slack_url:
            raise DeliveryError("No Slack webhook URL configured")

        client = self._get_client()
        # httpx timeouts are per phase; fail_after bounds the whole exchange.
        try:
            with anyio.fail_after(self._config.delivery_timeout):
                async with client.stream(
                    "POST",
                    self._config.slack_url,
                    content=body,
                    headers={"Content-Type": CONTENT_TYPE},
                    timeout=self._config.delivery_timeout,
                ) as response:
                    await response.aread()
        except (TimeoutError, httpx.TimeoutException) as e:
            raise DeliveryError(f"timed out after {self._config.delivery_timeout}s") from e
        except httpx.HTTPError as e:
            raise DeliveryError(str(e) or e.__class__.__name__) from e

        if not response.is_success:
            raise DeliveryError(
                f"Slack returned {response.status_code}: {response.text[:200]}",
                status_code=response.status_code,
            )

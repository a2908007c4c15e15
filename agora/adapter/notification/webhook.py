"""Webhook notification delivery.

Notification events are posted as JSON to a configured endpoint (a mailer
service, a queue gateway); the endpoint owns actual e-mail delivery.
"""

import httpx
import logfire

from agora.adapter.error import DeliveryError
from agora.domain.model import NotificationEvent
from agora.domain.service.notification_service import NotificationDelivery


class WebhookNotificationDelivery(NotificationDelivery):
    """Delivers notification events to an HTTP webhook."""

    def __init__(self, webhook_url: str | None, timeout_seconds: float = 5.0) -> None:
        """Initialize webhook delivery.

        Args:
            webhook_url: Endpoint receiving events; events are dropped when None
            timeout_seconds: Request timeout
        """
        self.webhook_url = webhook_url
        self.timeout_seconds = timeout_seconds

    async def deliver(self, event: NotificationEvent) -> None:
        """Post a notification event to the webhook.

        Args:
            event: Event to deliver

        Raises:
            DeliveryError: If the endpoint is unreachable or rejects the event
        """
        if not self.webhook_url:
            logfire.info(
                "No notification webhook configured, dropping event",
                kind=event.kind.value,
                recipient_id=str(event.recipient_id),
            )
            return

        try:
            async with httpx.AsyncClient() as client:
                response = await client.post(
                    self.webhook_url,
                    json=event.model_dump(mode="json"),
                    timeout=self.timeout_seconds,
                )

                if response.status_code >= 400:
                    logfire.error(
                        "Notification webhook rejected event",
                        status_code=response.status_code,
                        error=response.text,
                    )
                    raise DeliveryError(
                        f"Webhook rejected event: {response.status_code}"
                    )

        except httpx.HTTPError as e:
            logfire.error("Notification webhook HTTP error", error=str(e))
            raise DeliveryError(f"HTTP error delivering notification: {e}")

        logfire.info(
            "Notification delivered",
            kind=event.kind.value,
            recipient_id=str(event.recipient_id),
        )


class MockNotificationDelivery(NotificationDelivery):
    """Mock delivery for testing.

    Records events instead of sending them. Set ``fail`` to make every
    delivery raise, to exercise the dispatcher's error path.
    """

    def __init__(self, fail: bool = False) -> None:
        self.events: list[NotificationEvent] = []
        self.fail = fail

    async def deliver(self, event: NotificationEvent) -> None:
        """Record a notification event."""
        if self.fail:
            raise DeliveryError("Mock delivery failure")
        self.events.append(event)

"""Notification infrastructure providers."""

from dishka import Scope, provide

from agora.adapter.notification import WebhookNotificationDelivery
from agora.config import NotificationSettings
from agora.domain.service import NotificationDelivery
from agora.util.di.base import ProviderBase


class NotificationProvider(ProviderBase):
    """Notification component base."""

    __mock_component__ = "notifications"


class ProdNotificationProvider(NotificationProvider):
    """Production notification provider posting events to a webhook."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_notification_delivery(
        self, notification_settings: NotificationSettings
    ) -> NotificationDelivery:
        """Provide webhook notification delivery.

        Without a configured webhook URL events are logged and dropped.
        """
        return WebhookNotificationDelivery(
            webhook_url=notification_settings.webhook_url,
            timeout_seconds=notification_settings.timeout_seconds,
        )

"""Notification delivery adapters."""

from .webhook import MockNotificationDelivery, WebhookNotificationDelivery

__all__ = ["MockNotificationDelivery", "WebhookNotificationDelivery"]

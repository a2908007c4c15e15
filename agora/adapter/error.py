"""Infrastructure layer errors."""


class AdapterError(Exception):
    """Base infrastructure error."""

    pass


class DeliveryError(AdapterError):
    """Notification could not be handed to the delivery endpoint."""

    pass

"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Domain validation error."""

    pass


class AuthorizationError(DomainError):
    """Raised when an action is not permitted for the acting user or commentable."""

    pass


class FeatureDisabledError(AuthorizationError):
    """Raised when a commentable has a comment feature switched off."""

    def __init__(self, feature: str, commentable: str):
        self.feature = feature
        self.commentable = commentable
        super().__init__(f"{feature} is not enabled for commentable {commentable}")


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")

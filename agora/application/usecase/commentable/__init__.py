"""Commentable use cases."""

from .register_commentable import (
    RegisterCommentableRequest,
    RegisterCommentableResponse,
    RegisterCommentableUseCase,
)

__all__ = [
    "RegisterCommentableRequest",
    "RegisterCommentableResponse",
    "RegisterCommentableUseCase",
]

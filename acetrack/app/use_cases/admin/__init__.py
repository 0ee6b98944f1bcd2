"""Admin use cases for system maintenance operations."""

from .expire_subscriptions_use_case import (
    ExpireSubscriptionsResponse,
    ExpireSubscriptionsUseCase,
)

__all__ = [
    "ExpireSubscriptionsUseCase",
    "ExpireSubscriptionsResponse",
]

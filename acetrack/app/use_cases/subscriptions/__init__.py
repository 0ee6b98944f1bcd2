"""
Subscription Use Cases

Paid subscription terms and their verification.
"""

from .cancel_subscription_use_case import CancelSubscriptionUseCase
from .create_subscription_use_case import CreateSubscriptionUseCase
from .dtos import (
    CreateSubscriptionCommand,
    ListSubscriptionsQuery,
    SubscriptionListResponse,
    SubscriptionResponse,
    UpdateSubscriptionCommand,
    VerifySubscriptionCommand,
)
from .get_expiring_subscriptions_use_case import GetExpiringSubscriptionsUseCase
from .get_organization_subscription_use_case import GetOrganizationSubscriptionUseCase
from .get_subscription_use_case import GetSubscriptionUseCase
from .list_subscriptions_use_case import ListSubscriptionsUseCase
from .update_subscription_use_case import UpdateSubscriptionUseCase
from .verify_subscription_use_case import VerifySubscriptionUseCase

__all__ = [
    "CreateSubscriptionUseCase",
    "ListSubscriptionsUseCase",
    "GetSubscriptionUseCase",
    "GetOrganizationSubscriptionUseCase",
    "UpdateSubscriptionUseCase",
    "VerifySubscriptionUseCase",
    "CancelSubscriptionUseCase",
    "GetExpiringSubscriptionsUseCase",
    "CreateSubscriptionCommand",
    "UpdateSubscriptionCommand",
    "VerifySubscriptionCommand",
    "ListSubscriptionsQuery",
    "SubscriptionResponse",
    "SubscriptionListResponse",
]

"""
Organization Use Cases

Founding, listing and maintaining organizations.
"""

from .create_organization_use_case import CreateOrganizationUseCase
from .delete_organization_use_case import DeleteOrganizationUseCase
from .dtos import (
    CreateOrganizationCommand,
    CreateOrganizationResponse,
    DeleteOrganizationResponse,
    ListOrganizationsQuery,
    MyOrganizationResponse,
    OrganizationListResponse,
    OrganizationResponse,
    SubscriptionTermInput,
    UpdateOrganizationCommand,
)
from .get_my_organizations_use_case import GetMyOrganizationsUseCase
from .get_organization_use_case import GetOrganizationUseCase
from .list_organizations_use_case import ListOrganizationsUseCase
from .update_organization_use_case import UpdateOrganizationUseCase

__all__ = [
    "CreateOrganizationUseCase",
    "ListOrganizationsUseCase",
    "GetOrganizationUseCase",
    "UpdateOrganizationUseCase",
    "DeleteOrganizationUseCase",
    "GetMyOrganizationsUseCase",
    "CreateOrganizationCommand",
    "UpdateOrganizationCommand",
    "ListOrganizationsQuery",
    "SubscriptionTermInput",
    "OrganizationResponse",
    "OrganizationListResponse",
    "CreateOrganizationResponse",
    "DeleteOrganizationResponse",
    "MyOrganizationResponse",
]

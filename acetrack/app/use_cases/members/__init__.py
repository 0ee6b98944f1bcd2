"""
Member Use Cases

Organization membership: direct adds, join requests and their review.
"""

from .add_member_use_case import AddMemberUseCase
from .decide_join_request_use_case import DecideJoinRequestUseCase
from .dtos import (
    AddMemberCommand,
    JoinRequestCommand,
    ListMembersQuery,
    MemberDecisionCommand,
    MemberDecisionResponse,
    MemberListResponse,
    MemberResponse,
    RemoveMemberResponse,
    UpdateMemberCommand,
)
from .get_my_memberships_use_case import GetMyMembershipsUseCase
from .list_members_use_case import ListMembersUseCase
from .remove_member_use_case import RemoveMemberUseCase
from .request_to_join_use_case import RequestToJoinUseCase
from .update_member_use_case import UpdateMemberUseCase

__all__ = [
    "AddMemberUseCase",
    "RequestToJoinUseCase",
    "DecideJoinRequestUseCase",
    "ListMembersUseCase",
    "UpdateMemberUseCase",
    "RemoveMemberUseCase",
    "GetMyMembershipsUseCase",
    "AddMemberCommand",
    "JoinRequestCommand",
    "MemberDecisionCommand",
    "UpdateMemberCommand",
    "ListMembersQuery",
    "MemberResponse",
    "MemberListResponse",
    "MemberDecisionResponse",
    "RemoveMemberResponse",
]

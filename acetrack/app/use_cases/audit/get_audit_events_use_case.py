"""
Get Audit Events Use Case

Retrieves the mutation audit log with cursor pagination.
"""

from typing import Any, Dict, Optional
from uuid import UUID

from acetrack.libs.result import Error, Result, Return
from acetrack.app.services.unit_of_work import UnitOfWork
from acetrack.domain.access_control import Action, Actor, authorize


class GetAuditEventsUseCase:
    """
    Use case for retrieving audit events.

    Business Rules:
    - Admins read every organization's log, optionally filtered
    - An org_admin reads only their own organization's log
    - Everyone else is refused
    - Results ordered by newest first, cursor-paginated
    - Each event includes action, user_email, timestamp, metadata
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self,
        actor: Actor,
        organization_id: Optional[UUID] = None,
        limit: int = 50,
        cursor: Optional[str] = None,
    ) -> Result[Dict[str, Any]]:
        """
        Execute get audit events use case.

        Args:
            actor: Resolved caller
            organization_id: Organization filter (forced for org_admins)
            limit: Maximum number of events to return
            cursor: Pagination cursor (optional)

        Returns:
            Result with events list and next_cursor, or Error
        """
        if not actor.is_admin:
            organization_id = actor.organization_id
            if organization_id is None or not authorize(
                actor, Action.view_audit_log, organization_id
            ).allowed:
                return Return.err(
                    Error(
                        "PERMISSION_DENIED",
                        "You do not have permission to view audit events",
                    )
                )

        async with self.uow:
            events, next_cursor = await self.uow.audit_events.get_paginated(
                organization_id=organization_id, limit=limit, cursor=cursor
            )

            events_list = []
            for event in events:
                user_email = None
                if event.user_id:
                    user = await self.uow.users.get_by_id(event.user_id)
                    if user:
                        user_email = user.email

                events_list.append(
                    {
                        "action": event.action,
                        "organization_id": (
                            str(event.organization_id) if event.organization_id else None
                        ),
                        "user_email": user_email,
                        "timestamp": event.created_at.isoformat() + "Z",
                        "metadata": event.event_metadata or {},
                    }
                )

            return Return.ok({"events": events_list, "next_cursor": next_cursor})

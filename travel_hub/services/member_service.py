"""
Group Member Service - membership records and the group counters they drive
"""
import logging
from typing import List, Optional

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from travel_hub.core.exceptions import NotFoundError, ValidationError
from travel_hub.core.store_guard import store_call
from travel_hub.models.group_member import MemberStatus, TravelGroupMember
from travel_hub.models.passenger_assignment import FlightPassengerAssignment, TransportPassengerAssignment
from travel_hub.models.travel_group import TravelGroup
from travel_hub.schemas.travel import GroupFilter, MemberInput
from travel_hub.services.group_records import get_group_or_404, refresh_member_counters, scope_clause
from travel_hub.services.group_service import clamp_page
from travel_hub.services.member_import import parse_member_lines

logger = logging.getLogger(__name__)


def member_record(group_id: str, member: MemberInput) -> TravelGroupMember:
    return TravelGroupMember(
        group_id=group_id,
        member_name=member.name.strip(),
        member_email=member.email.strip(),
        member_phone=member.phone.strip(),
        member_role=member.role.strip(),
        staff_id=member.staff_id,
        seat_preference=member.seat_preference,
        meal_preference=member.meal_preference,
        special_assistance=member.special_assistance,
        wheelchair_required=member.wheelchair_required,
        mobility_assistance=member.mobility_assistance,
        status=MemberStatus.PENDING,
    )


class GroupMemberService:
    """Manages members of travel groups"""

    def __init__(self, db: AsyncSession):
        self.db = db

    @store_call("fetch_group_members")
    async def fetch_group_members(
        self,
        filters: Optional[GroupFilter] = None,
        limit: Optional[int] = None,
        offset: int = 0,
    ) -> List[TravelGroupMember]:
        """
        List members, optionally narrowed to a group, status or group type

        Args:
            filters: group_id, status and group_type are honoured
            limit: Page size, defaulted and capped from settings
            offset: Rows to skip

        Returns:
            Members ordered by creation time
        """
        filters = filters or GroupFilter()
        limit, offset = clamp_page(limit, offset)

        stmt = select(TravelGroupMember)
        if filters.group_id:
            stmt = stmt.where(TravelGroupMember.group_id == filters.group_id)
        if filters.status:
            try:
                status = MemberStatus(filters.status)
            except ValueError:
                raise ValidationError(f"Unknown member status: {filters.status}", details={"field": "status"})
            stmt = stmt.where(TravelGroupMember.status == status)
        if filters.group_type or filters.event_id or filters.tour_id:
            stmt = stmt.join(TravelGroup, TravelGroup.id == TravelGroupMember.group_id)
            if filters.group_type:
                stmt = stmt.where(TravelGroup.group_type == filters.group_type)
            scope = scope_clause(TravelGroup, filters)
            if scope is not None:
                stmt = stmt.where(scope)

        stmt = stmt.order_by(TravelGroupMember.created_at.asc(), TravelGroupMember.id.asc())
        result = await self.db.execute(stmt.limit(limit).offset(offset))
        return list(result.scalars().all())

    @store_call("create_group_member")
    async def create_group_member(self, group_id: str, member: MemberInput) -> TravelGroupMember:
        members = await self.bulk_create_group_members(group_id, [member])
        return members[0]

    @store_call("bulk_create_group_members")
    async def bulk_create_group_members(
        self, group_id: str, members: List[MemberInput]
    ) -> List[TravelGroupMember]:
        """
        Insert several members at once and recount the group.

        Either every member is created or none is.

        Raises:
            ValidationError: empty list or a member without a name
            NotFoundError: unknown group
        """
        if not members:
            raise ValidationError("At least one member is required", details={"field": "members"})
        unnamed = [index for index, member in enumerate(members, start=1) if not member.name.strip()]
        if unnamed:
            raise ValidationError("Every member needs a name", details={"rows": unnamed})

        group = await get_group_or_404(self.db, group_id)
        records = [member_record(group.id, member) for member in members]
        self.db.add_all(records)
        await refresh_member_counters(self.db, group)
        await self.db.commit()
        for record in records:
            await self.db.refresh(record)

        logger.info(
            "Added group members",
            extra={"group_id": group.id, "added": len(records), "total_members": group.total_members},
        )
        return records

    @store_call("bulk_create_from_text")
    async def bulk_create_from_text(self, group_id: str, raw_text: str) -> List[TravelGroupMember]:
        """Parse "name, email, phone, role" lines and add them as members."""
        return await self.bulk_create_group_members(group_id, parse_member_lines(raw_text))

    async def _get_member(self, member_id: str) -> TravelGroupMember:
        result = await self.db.execute(select(TravelGroupMember).where(TravelGroupMember.id == member_id))
        member = result.scalar_one_or_none()
        if member is None:
            raise NotFoundError("Group member", member_id)
        return member

    @store_call("update_member_status")
    async def update_member_status(self, member_id: str, status: MemberStatus) -> TravelGroupMember:
        member = await self._get_member(member_id)
        member.status = MemberStatus(status)
        group = await get_group_or_404(self.db, member.group_id)
        await refresh_member_counters(self.db, group)
        await self.db.commit()
        await self.db.refresh(member)
        return member

    @store_call("delete_group_member")
    async def delete_group_member(self, member_id: str) -> None:
        member = await self._get_member(member_id)
        group = await get_group_or_404(self.db, member.group_id)

        for assignment in (FlightPassengerAssignment, TransportPassengerAssignment):
            await self.db.execute(
                delete(assignment)
                .where(assignment.group_member_id == member.id)
                .execution_options(synchronize_session=False)
            )
        await self.db.delete(member)
        await refresh_member_counters(self.db, group)
        await self.db.commit()

        logger.info("Removed group member", extra={"group_id": group.id, "member_id": member_id})

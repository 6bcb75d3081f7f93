"""
Travel Group Service - group CRUD with state-machine checks
"""
import logging
from typing import List, Optional

from sqlalchemy import delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from travel_hub.config import get_settings
from travel_hub.core.exceptions import ValidationError
from travel_hub.core.store_guard import store_call
from travel_hub.models.flight import FlightCoordination
from travel_hub.models.group_member import TravelGroupMember
from travel_hub.models.lodging import LodgingBooking
from travel_hub.models.passenger_assignment import FlightPassengerAssignment, TransportPassengerAssignment
from travel_hub.models.transportation import GroundTransportationCoordination
from travel_hub.models.travel_group import GroupStatus, TravelGroup
from travel_hub.schemas.travel import GroupFilter, TravelGroupCreate, TravelGroupUpdate
from travel_hub.services.group_records import get_group_or_404, scope_clause, sync_coordination_flags
from travel_hub.services.status_rules import ensure_transition

logger = logging.getLogger(__name__)

# Columns that reject an explicit null in a partial update
_REQUIRED_FIELDS = {
    "name",
    "group_type",
    "priority_level",
    "status",
    "special_requirements",
    "dietary_restrictions",
    "accessibility_needs",
}


def clamp_page(limit: Optional[int], offset: Optional[int]) -> tuple:
    """Apply the configured default and ceiling to a limit/offset pair."""
    coordination = get_settings().coordination
    if limit is None or limit <= 0:
        limit = coordination.default_page_size
    return min(limit, coordination.max_page_size), max(offset or 0, 0)


def _check_association(event_id, tour_id) -> None:
    if event_id is not None and tour_id is not None:
        raise ValidationError(
            "A travel group belongs to an event or a tour, not both",
            details={"event_id": event_id, "tour_id": tour_id},
        )


class TravelGroupService:
    """Manages travel group records"""

    def __init__(self, db: AsyncSession):
        self.db = db

    @store_call("fetch_groups")
    async def fetch_groups(
        self,
        filters: Optional[GroupFilter] = None,
        limit: Optional[int] = None,
        offset: int = 0,
    ) -> List[TravelGroup]:
        """
        List groups matching the filter.

        Args:
            filters: event_id / tour_id match either identifier; status and
                group_type narrow further
            limit: Page size, defaulted and capped from settings
            offset: Rows to skip

        Returns:
            Groups ordered by priority, then creation time
        """
        filters = filters or GroupFilter()
        limit, offset = clamp_page(limit, offset)

        stmt = select(TravelGroup)
        scope = scope_clause(TravelGroup, filters)
        if scope is not None:
            stmt = stmt.where(scope)
        if filters.group_id:
            stmt = stmt.where(TravelGroup.id == filters.group_id)
        if filters.status:
            try:
                status = GroupStatus(filters.status)
            except ValueError:
                raise ValidationError(f"Unknown group status: {filters.status}", details={"field": "status"})
            stmt = stmt.where(TravelGroup.status == status)
        if filters.group_type:
            stmt = stmt.where(TravelGroup.group_type == filters.group_type)

        stmt = stmt.order_by(
            TravelGroup.priority_level.asc(), TravelGroup.created_at.asc(), TravelGroup.id.asc()
        ).limit(limit).offset(offset)
        result = await self.db.execute(stmt)
        return list(result.scalars().all())

    @store_call("get_group")
    async def get_group(self, group_id: str) -> TravelGroup:
        return await get_group_or_404(self.db, group_id)

    @store_call("create_travel_group")
    async def create_travel_group(self, group_data: TravelGroupCreate) -> TravelGroup:
        """
        Create a travel group in planning state with no members

        Raises:
            ValidationError: blank name, or both event and tour given
        """
        if not group_data.name or not group_data.name.strip():
            raise ValidationError("Group name is required", details={"field": "name"})
        _check_association(group_data.event_id, group_data.tour_id)

        fields = group_data.model_dump()
        fields["name"] = group_data.name.strip()
        group = TravelGroup(
            **fields,
            status=GroupStatus.PLANNING,
            total_members=0,
            confirmed_members=0,
            flights_done=False,
            hotels_done=False,
            transport_done=False,
        )
        self.db.add(group)
        await self.db.flush()
        # Pre-existing event/tour lodging may already cover the new group
        await sync_coordination_flags(self.db, group)
        await self.db.commit()
        await self.db.refresh(group)

        logger.info(
            "Created travel group",
            extra={"group_id": group.id, "group_type": group.group_type.value},
        )
        return group

    @store_call("update_travel_group")
    async def update_travel_group(self, group_id: str, group_data: TravelGroupUpdate) -> TravelGroup:
        """
        Apply a partial update to a group.

        Args:
            group_id: Group ID
            group_data: Only fields explicitly set are applied

        Returns:
            Updated group

        Raises:
            NotFoundError: unknown group
            ValidationError: null for a required field, blank name, both
                associations, or departure before arrival
            InvalidStatusTransitionError: status change not allowed
        """
        group = await get_group_or_404(self.db, group_id)
        changes = group_data.model_dump(exclude_unset=True)

        nulls = sorted(name for name, value in changes.items() if value is None and name in _REQUIRED_FIELDS)
        if nulls:
            raise ValidationError("Fields cannot be null", details={"fields": nulls})
        if "name" in changes:
            if not changes["name"].strip():
                raise ValidationError("Group name is required", details={"field": "name"})
            changes["name"] = changes["name"].strip()
        if "status" in changes:
            ensure_transition(group.status, changes["status"])

        _check_association(changes.get("event_id", group.event_id), changes.get("tour_id", group.tour_id))
        arrival = changes.get("arrival_date", group.arrival_date)
        departure = changes.get("departure_date", group.departure_date)
        if arrival and departure and departure < arrival:
            raise ValidationError("departure_date cannot be before arrival_date")

        for field, value in changes.items():
            setattr(group, field, value)

        if "event_id" in changes or "tour_id" in changes:
            await sync_coordination_flags(self.db, group)

        await self.db.commit()
        await self.db.refresh(group)
        logger.info("Updated travel group", extra={"group_id": group.id, "fields": sorted(changes)})
        return group

    @store_call("delete_travel_group")
    async def delete_travel_group(self, group_id: str) -> None:
        """
        Delete a group and its members.

        Passenger assignments of the members go with them. Flights, transport
        runs and lodging bookings are kept but unlinked from the group.
        """
        group = await get_group_or_404(self.db, group_id)
        member_ids = select(TravelGroupMember.id).where(TravelGroupMember.group_id == group.id)

        for assignment in (FlightPassengerAssignment, TransportPassengerAssignment):
            await self.db.execute(
                delete(assignment)
                .where(assignment.group_member_id.in_(member_ids))
                .execution_options(synchronize_session=False)
            )
        await self.db.execute(delete(TravelGroupMember).where(TravelGroupMember.group_id == group.id))
        for model in (FlightCoordination, GroundTransportationCoordination, LodgingBooking):
            await self.db.execute(update(model).where(model.group_id == group.id).values(group_id=None))
        await self.db.delete(group)
        await self.db.commit()

        logger.info("Deleted travel group", extra={"group_id": group_id})

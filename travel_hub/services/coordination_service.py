"""
Coordination Service - group summaries and transactional auto-coordination
"""
import logging
from typing import Optional

from sqlalchemy import and_, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from travel_hub.core.exceptions import ValidationError
from travel_hub.core.store_guard import store_call
from travel_hub.models.flight import FlightCoordination
from travel_hub.models.group_member import TravelGroupMember
from travel_hub.models.lodging import LodgingBooking
from travel_hub.models.passenger_assignment import FlightPassengerAssignment, TransportPassengerAssignment
from travel_hub.models.transportation import GroundTransportationCoordination
from travel_hub.models.travel_group import TravelGroup
from travel_hub.schemas.coordination import CoordinationResultRead, GroupCoordinationView
from travel_hub.schemas.travel import TravelGroupRead
from travel_hub.services.coordination import compute_coordination_summary, derive_coordination_flags
from travel_hub.services.group_records import (
    get_group_or_404,
    groups_sharing_lodging,
    load_group_bookings,
    refresh_member_counters,
    sync_coordination_flags,
)
from travel_hub.services.status_rules import (
    TERMINAL_STATUSES,
    coordination_badge,
    priority_badge,
    status_badge,
)
from travel_hub.services.strategies import CoordinationStrategy, GroupCharterStrategy

logger = logging.getLogger(__name__)


def _unassigned_in_scope(model, group: TravelGroup):
    """Unlinked records of the group's event/tour, or all unlinked ones for a standalone group."""
    clause = model.group_id.is_(None)
    scope = []
    if group.event_id is not None:
        scope.append(model.event_id == group.event_id)
    if group.tour_id is not None:
        scope.append(model.tour_id == group.tour_id)
    if scope:
        clause = and_(clause, or_(*scope))
    return clause


class CoordinationService:
    """Aggregates and arranges logistics for travel groups"""

    def __init__(self, db: AsyncSession, strategy: Optional[CoordinationStrategy] = None):
        self.db = db
        self.strategy = strategy or GroupCharterStrategy()

    @store_call("get_group_summary")
    async def get_group_summary(self, group_id: str) -> GroupCoordinationView:
        """
        Build the coordination view for one group.

        Args:
            group_id: Group ID

        Returns:
            Group with summary counts, flags and display badges
        """
        group = await get_group_or_404(self.db, group_id)
        flights, transport, lodging = await load_group_bookings(self.db, group)
        summary = compute_coordination_summary(group, flights, transport, lodging)
        flags = derive_coordination_flags(summary)

        return GroupCoordinationView(
            group=TravelGroupRead.model_validate(group),
            summary=summary,
            flags=flags,
            coordination_status=group.coordination_status,
            status_badge=status_badge(group.status),
            coordination_badge=coordination_badge(group.coordination_status),
            priority_badge=priority_badge(group.priority_level),
        )

    @store_call("auto_coordinate_group")
    async def auto_coordinate_group(self, group_id: str) -> CoordinationResultRead:
        """
        Arrange flights, lodging and ground transport for every member.

        Runs in a single transaction: a failure at any point leaves no
        partial bookings or assignments behind.

        Raises:
            NotFoundError: unknown group
            ValidationError: group has no members or is cancelled/departed
        """
        try:
            result = await self._auto_coordinate(group_id)
            await self.db.commit()
        except Exception:
            await self.db.rollback()
            raise
        return result

    async def _auto_coordinate(self, group_id: str) -> CoordinationResultRead:
        group = await get_group_or_404(self.db, group_id)
        if group.status in TERMINAL_STATUSES:
            raise ValidationError(
                f"Cannot coordinate a {group.status.value} group",
                details={"group_id": group.id, "status": group.status.value},
            )

        members_result = await self.db.execute(
            select(TravelGroupMember)
            .where(TravelGroupMember.group_id == group.id)
            .order_by(TravelGroupMember.created_at.asc(), TravelGroupMember.id.asc())
        )
        members = list(members_result.scalars().all())
        if not members:
            raise ValidationError("Cannot coordinate a group without members", details={"group_id": group.id})

        await refresh_member_counters(self.db, group)
        await sync_coordination_flags(self.db, group)

        flights = await self.db.execute(
            select(FlightCoordination)
            .where(_unassigned_in_scope(FlightCoordination, group))
            .order_by(FlightCoordination.arrival_time.asc(), FlightCoordination.id.asc())
        )
        rooms = await self.db.execute(
            select(LodgingBooking)
            .where(or_(LodgingBooking.group_id == group.id, _unassigned_in_scope(LodgingBooking, group)))
            .order_by(LodgingBooking.check_in_date.asc(), LodgingBooking.id.asc())
        )
        vehicles = await self.db.execute(
            select(GroundTransportationCoordination)
            .where(_unassigned_in_scope(GroundTransportationCoordination, group))
            .order_by(GroundTransportationCoordination.pickup_time.asc(), GroundTransportationCoordination.id.asc())
        )

        outcome = self.strategy.assign(
            group,
            list(flights.scalars().all()),
            list(rooms.scalars().all()),
            list(vehicles.scalars().all()),
        )

        self.db.add_all(outcome.booked_flights + outcome.booked_rooms + outcome.booked_vehicles)
        await self.db.flush()

        for flight in outcome.booked_flights:
            self.db.add_all(
                FlightPassengerAssignment(
                    flight_id=flight.id,
                    group_member_id=member.id,
                    seat_class=flight.ticket_class,
                    status="confirmed",
                )
                for member in members
            )
        for vehicle in outcome.booked_vehicles:
            self.db.add_all(
                TransportPassengerAssignment(
                    transportation_id=vehicle.id,
                    group_member_id=member.id,
                    status="confirmed",
                )
                for member in members
            )

        # claimed shared bookings no longer count for the other groups of their event or tour
        for other in await groups_sharing_lodging(self.db, outcome.booked_rooms):
            if other.id != group.id:
                await sync_coordination_flags(self.db, other)

        summary = await sync_coordination_flags(self.db, group)
        status = group.coordination_status

        logger.info(
            "Auto-coordinated travel group",
            extra={
                "group_id": group.id,
                "members": len(members),
                "coordination_status": status.value,
                "errors": outcome.errors,
            },
        )
        return CoordinationResultRead(
            group_id=group.id,
            booked_flight_ids=[flight.id for flight in outcome.booked_flights],
            booked_room_ids=[booking.id for booking in outcome.booked_rooms],
            booked_vehicle_ids=[vehicle.id for vehicle in outcome.booked_vehicles],
            errors=outcome.errors,
            summary=summary,
            coordination_status=status,
        )

"""
Shared group lookups and cached-field maintenance used by several services.

These run inside the caller's transaction and never commit.
"""
from typing import List, Tuple

from sqlalchemy import and_, func, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from travel_hub.core.exceptions import NotFoundError
from travel_hub.models.flight import FlightCoordination
from travel_hub.models.group_member import MemberStatus, TravelGroupMember
from travel_hub.models.lodging import LodgingBooking
from travel_hub.models.transportation import GroundTransportationCoordination
from travel_hub.models.travel_group import TravelGroup
from travel_hub.schemas.coordination import CoordinationSummary
from travel_hub.services.coordination import apply_coordination_flags, compute_coordination_summary


async def get_group_or_404(db: AsyncSession, group_id: str) -> TravelGroup:
    result = await db.execute(select(TravelGroup).where(TravelGroup.id == group_id))
    group = result.scalar_one_or_none()
    if group is None:
        raise NotFoundError("Travel group", group_id)
    return group


async def refresh_member_counters(db: AsyncSession, group: TravelGroup) -> None:
    """Recount total and confirmed members from the member rows."""
    await db.flush()
    total = await db.scalar(
        select(func.count(TravelGroupMember.id)).where(TravelGroupMember.group_id == group.id)
    )
    confirmed = await db.scalar(
        select(func.count(TravelGroupMember.id)).where(
            TravelGroupMember.group_id == group.id,
            TravelGroupMember.status == MemberStatus.CONFIRMED,
        )
    )
    group.total_members = total or 0
    group.confirmed_members = confirmed or 0


def lodging_candidates_clause(group: TravelGroup):
    """SQL filter selecting lodging bookings that may count toward `group`."""
    shared_scope = []
    if group.event_id is not None:
        shared_scope.append(LodgingBooking.event_id == group.event_id)
    if group.tour_id is not None:
        shared_scope.append(LodgingBooking.tour_id == group.tour_id)
    linked = LodgingBooking.group_id == group.id
    if not shared_scope:
        return linked
    return or_(linked, and_(LodgingBooking.group_id.is_(None), or_(*shared_scope)))


async def load_group_bookings(
    db: AsyncSession, group: TravelGroup
) -> Tuple[List[FlightCoordination], List[GroundTransportationCoordination], List[LodgingBooking]]:
    await db.flush()
    flights = await db.execute(select(FlightCoordination).where(FlightCoordination.group_id == group.id))
    transport = await db.execute(
        select(GroundTransportationCoordination).where(GroundTransportationCoordination.group_id == group.id)
    )
    lodging = await db.execute(select(LodgingBooking).where(lodging_candidates_clause(group)))
    return list(flights.scalars().all()), list(transport.scalars().all()), list(lodging.scalars().all())


async def sync_coordination_flags(db: AsyncSession, group: TravelGroup) -> CoordinationSummary:
    """Recompute the group's summary from stored bookings and update its flags."""
    flights, transport, lodging = await load_group_bookings(db, group)
    summary = compute_coordination_summary(group, flights, transport, lodging)
    apply_coordination_flags(group, summary)
    return summary


async def groups_sharing_lodging(db: AsyncSession, bookings) -> List[TravelGroup]:
    """Groups whose event or tour matches any of `bookings`."""
    scope = []
    for booking in bookings:
        if booking.event_id is not None:
            scope.append(TravelGroup.event_id == booking.event_id)
        if booking.tour_id is not None:
            scope.append(TravelGroup.tour_id == booking.tour_id)
    if not scope:
        return []
    result = await db.execute(select(TravelGroup).where(or_(*scope)))
    return list(result.scalars().all())


def scope_clause(model, filters):
    """Match records of either the filter's event or its tour; None when neither is set."""
    scope = []
    if filters.event_id:
        scope.append(model.event_id == filters.event_id)
    if filters.tour_id:
        scope.append(model.tour_id == filters.tour_id)
    return or_(*scope) if scope else None

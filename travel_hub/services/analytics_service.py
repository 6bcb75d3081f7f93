"""
Analytics Service - cross-group coordination metrics
"""
from typing import Any, List, Optional, Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from travel_hub.core.store_guard import store_call
from travel_hub.models.flight import FlightCoordination
from travel_hub.models.lodging import LodgingBooking
from travel_hub.models.transportation import GroundTransportationCoordination
from travel_hub.models.travel_group import CoordinationStatus, GroupStatus, TravelGroup
from travel_hub.schemas.coordination import GroupUtilization, TravelAnalytics
from travel_hub.schemas.travel import GroupFilter
from travel_hub.services.coordination import lodging_matches_group
from travel_hub.services.group_records import scope_clause


def percent(part: float, whole: float) -> float:
    """part/whole as a percentage rounded to one decimal; 0 when whole is 0."""
    if not whole:
        return 0.0
    return round(part / whole * 100, 1)


def build_analytics(
    groups: Sequence[Any],
    flights: Sequence[Any],
    transportation: Sequence[Any],
    lodging_bookings: Sequence[Any],
) -> TravelAnalytics:
    total_groups = len(groups)
    fully_coordinated = sum(1 for g in groups if g.coordination_status == CoordinationStatus.COMPLETE)
    arrived = sum(1 for g in groups if g.status in (GroupStatus.ARRIVED, GroupStatus.DEPARTED))
    travelling = sum(1 for g in groups if g.status != GroupStatus.CANCELLED)

    return TravelAnalytics(
        total_groups=total_groups,
        total_travelers=sum(g.total_members or 0 for g in groups),
        confirmed_travelers=sum(g.confirmed_members or 0 for g in groups),
        arrived_groups=arrived,
        fully_coordinated_groups=fully_coordinated,
        pending_coordination_groups=sum(
            1 for g in groups if g.coordination_status == CoordinationStatus.PENDING
        ),
        total_flights=len(flights),
        total_flight_passengers=sum(f.booked_seats or 0 for f in flights),
        total_transport_runs=len(transportation),
        total_transport_passengers=sum(t.assigned_passengers or 0 for t in transportation),
        total_hotel_bookings=len(lodging_bookings),
        coordination_completion_rate=percent(fully_coordinated, total_groups),
        arrival_success_rate=percent(arrived, travelling),
    )


def build_utilization(
    groups: Sequence[Any],
    flights: Sequence[Any],
    transportation: Sequence[Any],
    lodging_bookings: Sequence[Any],
) -> List[GroupUtilization]:
    rows = []
    for group in groups:
        group_flights = [f for f in flights if f.group_id == group.id]
        group_transport = [t for t in transportation if t.group_id == group.id]
        group_lodging = [b for b in lodging_bookings if lodging_matches_group(b, group)]
        members = group.total_members or 0

        flight_passengers = sum(f.booked_seats or 0 for f in group_flights)
        transport_passengers = sum(t.assigned_passengers or 0 for t in group_transport)
        hotel_guests = sum(b.total_guests or 0 for b in group_lodging)

        rows.append(
            GroupUtilization(
                group_id=group.id,
                group_name=group.name,
                group_type=group.group_type.value,
                department=group.department,
                priority_level=group.priority_level,
                total_members=members,
                confirmed_members=group.confirmed_members or 0,
                total_flights=len(group_flights),
                flight_passengers=flight_passengers,
                flight_utilization_percentage=percent(flight_passengers, members),
                total_transport_runs=len(group_transport),
                transport_passengers=transport_passengers,
                transport_utilization_percentage=percent(transport_passengers, members),
                total_hotel_bookings=len(group_lodging),
                hotel_guests=hotel_guests,
                hotel_utilization_percentage=percent(hotel_guests, members),
                coordination_status=group.coordination_status,
                group_status=group.status,
                confirmation_rate=percent(group.confirmed_members or 0, members),
            )
        )
    return rows


class AnalyticsService:
    """Computes coordination metrics across an event or tour"""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def _load(self, filters: Optional[GroupFilter]):
        filters = filters or GroupFilter()

        def scoped(model):
            stmt = select(model)
            clause = scope_clause(model, filters)
            return stmt if clause is None else stmt.where(clause)

        groups_stmt = scoped(TravelGroup)
        if filters.group_type:
            groups_stmt = groups_stmt.where(TravelGroup.group_type == filters.group_type)
        groups_stmt = groups_stmt.order_by(
            TravelGroup.priority_level.asc(), TravelGroup.created_at.asc(), TravelGroup.id.asc()
        )

        groups = (await self.db.execute(groups_stmt)).scalars().all()
        flights = (await self.db.execute(scoped(FlightCoordination))).scalars().all()
        transport = (await self.db.execute(scoped(GroundTransportationCoordination))).scalars().all()
        lodging = (await self.db.execute(scoped(LodgingBooking))).scalars().all()
        return list(groups), list(flights), list(transport), list(lodging)

    @store_call("compute_analytics")
    async def compute_analytics(self, filters: Optional[GroupFilter] = None) -> TravelAnalytics:
        """
        Totals and rates across all groups in scope

        Args:
            filters: event_id / tour_id / group_type narrow the scope

        Returns:
            TravelAnalytics; rates are 0 when there are no groups
        """
        return build_analytics(*await self._load(filters))

    @store_call("compute_utilization")
    async def compute_utilization(self, filters: Optional[GroupFilter] = None) -> List[GroupUtilization]:
        """Per-group seat, vehicle and room utilization against headcount."""
        return build_utilization(*await self._load(filters))

"""
Booking Service - flights, ground transportation and lodging records
"""
import logging
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from travel_hub.core.exceptions import NotFoundError
from travel_hub.core.store_guard import store_call
from travel_hub.models.flight import FlightCoordination
from travel_hub.models.lodging import LodgingBooking
from travel_hub.models.transportation import GroundTransportationCoordination
from travel_hub.models.travel_group import TravelGroup
from travel_hub.schemas.travel import (
    FlightCreate,
    GroupFilter,
    LodgingBookingCreate,
    TransportationCreate,
)
from travel_hub.services.group_records import (
    get_group_or_404,
    groups_sharing_lodging,
    scope_clause,
    sync_coordination_flags,
)
from travel_hub.services.group_service import clamp_page

logger = logging.getLogger(__name__)


def _apply_filters(stmt, model, filters: GroupFilter):
    scope = scope_clause(model, filters)
    if scope is not None:
        stmt = stmt.where(scope)
    if filters.group_id:
        stmt = stmt.where(model.group_id == filters.group_id)
    if filters.status:
        stmt = stmt.where(model.status == filters.status)
    return stmt


class BookingService:
    """Manages flight, transport and lodging records"""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def _fetch(self, model, order_column, filters, limit, offset):
        limit, offset = clamp_page(limit, offset)
        stmt = _apply_filters(select(model), model, filters or GroupFilter())
        stmt = stmt.order_by(order_column.asc(), model.id.asc()).limit(limit).offset(offset)
        result = await self.db.execute(stmt)
        return list(result.scalars().all())

    @store_call("fetch_flights")
    async def fetch_flights(
        self, filters: Optional[GroupFilter] = None, limit: Optional[int] = None, offset: int = 0
    ) -> List[FlightCoordination]:
        return await self._fetch(FlightCoordination, FlightCoordination.departure_time, filters, limit, offset)

    @store_call("fetch_transportation")
    async def fetch_transportation(
        self, filters: Optional[GroupFilter] = None, limit: Optional[int] = None, offset: int = 0
    ) -> List[GroundTransportationCoordination]:
        return await self._fetch(
            GroundTransportationCoordination,
            GroundTransportationCoordination.pickup_time,
            filters,
            limit,
            offset,
        )

    @store_call("fetch_lodging_bookings")
    async def fetch_lodging_bookings(
        self, filters: Optional[GroupFilter] = None, limit: Optional[int] = None, offset: int = 0
    ) -> List[LodgingBooking]:
        return await self._fetch(LodgingBooking, LodgingBooking.check_in_date, filters, limit, offset)

    async def _linked_group(self, group_id: Optional[str]) -> Optional[TravelGroup]:
        if group_id is None:
            return None
        return await get_group_or_404(self.db, group_id)

    @store_call("create_flight")
    async def create_flight(self, flight_data: FlightCreate) -> FlightCoordination:
        """
        Record a flight; linking it to a group advances that group's flags

        Raises:
            NotFoundError: group_id given but unknown
        """
        group = await self._linked_group(flight_data.group_id)
        flight = FlightCoordination(**flight_data.model_dump())
        self.db.add(flight)
        if group is not None:
            await sync_coordination_flags(self.db, group)
        await self.db.commit()
        await self.db.refresh(flight)
        logger.info("Created flight", extra={"flight_id": flight.id, "group_id": flight.group_id})
        return flight

    @store_call("create_transportation")
    async def create_transportation(self, transport_data: TransportationCreate) -> GroundTransportationCoordination:
        group = await self._linked_group(transport_data.group_id)
        if transport_data.flight_id is not None:
            found = await self.db.scalar(
                select(FlightCoordination.id).where(FlightCoordination.id == transport_data.flight_id)
            )
            if found is None:
                raise NotFoundError("Flight", transport_data.flight_id)

        transport = GroundTransportationCoordination(**transport_data.model_dump())
        self.db.add(transport)
        if group is not None:
            await sync_coordination_flags(self.db, group)
        await self.db.commit()
        await self.db.refresh(transport)
        logger.info("Created transportation", extra={"transportation_id": transport.id, "group_id": transport.group_id})
        return transport

    @store_call("create_lodging_booking")
    async def create_lodging_booking(self, booking_data: LodgingBookingCreate) -> LodgingBooking:
        """
        Record a lodging booking.

        A booking without group_id is shared by every group of its event or
        tour, so each of those groups has its flags refreshed.
        """
        if booking_data.group_id is not None:
            groups = [await get_group_or_404(self.db, booking_data.group_id)]
        else:
            groups = await groups_sharing_lodging(self.db, [booking_data])

        booking = LodgingBooking(**booking_data.model_dump())
        self.db.add(booking)
        for group in groups:
            await sync_coordination_flags(self.db, group)
        await self.db.commit()
        await self.db.refresh(booking)
        logger.info(
            "Created lodging booking",
            extra={"booking_id": booking.id, "group_id": booking.group_id, "groups_refreshed": len(groups)},
        )
        return booking

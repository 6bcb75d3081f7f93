"""
Booking API endpoints - flights, ground transportation and lodging
"""
from typing import Optional
from fastapi import APIRouter, Depends, Query, status

from travel_hub.core.dependencies import get_booking_service
from travel_hub.schemas.base import Envelope
from travel_hub.schemas.travel import (
    FlightCreate,
    FlightRead,
    GroupFilter,
    LodgingBookingCreate,
    LodgingBookingRead,
    TransportationCreate,
    TransportationRead,
)
from travel_hub.services import BookingService

router = APIRouter(prefix="/travel-coordination", tags=["bookings"])


def booking_filters(
    event_id: Optional[str] = None,
    tour_id: Optional[str] = None,
    group_id: Optional[str] = None,
    status_filter: Optional[str] = Query(None, alias="status"),
) -> GroupFilter:
    return GroupFilter(event_id=event_id, tour_id=tour_id, group_id=group_id, status=status_filter)


@router.get("/flights", response_model=Envelope[list[FlightRead]])
async def list_flights(
    filters: GroupFilter = Depends(booking_filters),
    limit: Optional[int] = Query(None, ge=1),
    offset: int = Query(0, ge=0),
    service: BookingService = Depends(get_booking_service),
):
    flights = await service.fetch_flights(filters, limit, offset)
    return Envelope(status="ok", data=[FlightRead.model_validate(f) for f in flights])


@router.post("/flights", response_model=Envelope[FlightRead], status_code=status.HTTP_201_CREATED)
async def create_flight(
    flight_data: FlightCreate,
    service: BookingService = Depends(get_booking_service),
):
    """
    Record a flight

    Linking it to a group (**group_id**) marks the group's flights as booked.
    """
    flight = await service.create_flight(flight_data)
    return Envelope(status="ok", data=FlightRead.model_validate(flight))


@router.get("/transportation", response_model=Envelope[list[TransportationRead]])
async def list_transportation(
    filters: GroupFilter = Depends(booking_filters),
    limit: Optional[int] = Query(None, ge=1),
    offset: int = Query(0, ge=0),
    service: BookingService = Depends(get_booking_service),
):
    runs = await service.fetch_transportation(filters, limit, offset)
    return Envelope(status="ok", data=[TransportationRead.model_validate(t) for t in runs])


@router.post("/transportation", response_model=Envelope[TransportationRead], status_code=status.HTTP_201_CREATED)
async def create_transportation(
    transport_data: TransportationCreate,
    service: BookingService = Depends(get_booking_service),
):
    transport = await service.create_transportation(transport_data)
    return Envelope(status="ok", data=TransportationRead.model_validate(transport))


@router.get("/lodging", response_model=Envelope[list[LodgingBookingRead]])
async def list_lodging_bookings(
    filters: GroupFilter = Depends(booking_filters),
    limit: Optional[int] = Query(None, ge=1),
    offset: int = Query(0, ge=0),
    service: BookingService = Depends(get_booking_service),
):
    bookings = await service.fetch_lodging_bookings(filters, limit, offset)
    return Envelope(status="ok", data=[LodgingBookingRead.model_validate(b) for b in bookings])


@router.post("/lodging", response_model=Envelope[LodgingBookingRead], status_code=status.HTTP_201_CREATED)
async def create_lodging_booking(
    booking_data: LodgingBookingCreate,
    service: BookingService = Depends(get_booking_service),
):
    """
    Record a hotel booking

    Without **group_id** the booking counts for every group of the same
    event or tour.
    """
    booking = await service.create_lodging_booking(booking_data)
    return Envelope(status="ok", data=LodgingBookingRead.model_validate(booking))

"""
Unit tests for flight, transport and lodging records
"""
from datetime import date, datetime

import pytest
from pydantic import ValidationError as SchemaValidationError

from travel_hub.core.exceptions import NotFoundError
from travel_hub.models.transportation import TransportType
from travel_hub.models.travel_group import CoordinationStatus
from travel_hub.schemas.travel import (
    FlightCreate,
    GroupFilter,
    LodgingBookingCreate,
    TransportationCreate,
    TravelGroupCreate,
)
from travel_hub.services.booking_service import BookingService
from travel_hub.services.group_service import TravelGroupService


def _flight(**overrides):
    fields = dict(
        flight_number="AA100",
        airline="American",
        departure_airport="JFK",
        arrival_airport="LAX",
        departure_time=datetime(2026, 7, 10, 6),
        arrival_time=datetime(2026, 7, 10, 9),
        total_seats=10,
    )
    fields.update(overrides)
    return FlightCreate(**fields)


def _transport(**overrides):
    fields = dict(
        transport_type=TransportType.VAN,
        pickup_location="LAX",
        dropoff_location="Venue",
        pickup_time=datetime(2026, 7, 10, 10),
        estimated_dropoff_time=datetime(2026, 7, 10, 11),
        vehicle_capacity=8,
    )
    fields.update(overrides)
    return TransportationCreate(**fields)


def _lodging(**overrides):
    fields = dict(
        booking_number="B-1",
        check_in_date=date(2026, 7, 10),
        check_out_date=date(2026, 7, 14),
        rooms_booked=2,
        guests_per_room=2,
        primary_guest_name="Ana Ruiz",
    )
    fields.update(overrides)
    return LodgingBookingCreate(**fields)


def test_capacity_validation():
    with pytest.raises(SchemaValidationError):
        _flight(total_seats=2, booked_seats=3)
    with pytest.raises(SchemaValidationError):
        _transport(vehicle_capacity=2, assigned_passengers=3)
    with pytest.raises(SchemaValidationError):
        _lodging(check_out_date=date(2026, 7, 1))
    assert _lodging().total_guests == 4


@pytest.mark.asyncio
async def test_linked_bookings_advance_group_flags(db_session, group_data):
    groups = TravelGroupService(db_session)
    group = await groups.create_travel_group(group_data)
    service = BookingService(db_session)

    await service.create_flight(_flight(group_id=group.id))
    assert (await groups.get_group(group.id)).coordination_status == CoordinationStatus.FLIGHTS_BOOKED

    await service.create_transportation(_transport(group_id=group.id))
    await service.create_lodging_booking(_lodging(event_id="event-1"))

    refreshed = await groups.get_group(group.id)
    assert refreshed.flights_done and refreshed.transport_done and refreshed.hotels_done
    assert refreshed.coordination_status == CoordinationStatus.COMPLETE


@pytest.mark.asyncio
async def test_shared_lodging_refreshes_every_group_of_the_event(db_session):
    groups = TravelGroupService(db_session)
    crew = await groups.create_travel_group(TravelGroupCreate(name="Crew", event_id="e1"))
    artists = await groups.create_travel_group(TravelGroupCreate(name="Artists", event_id="e1"))
    other = await groups.create_travel_group(TravelGroupCreate(name="Other", event_id="e2"))

    await BookingService(db_session).create_lodging_booking(_lodging(event_id="e1"))

    assert (await groups.get_group(crew.id)).hotels_done is True
    assert (await groups.get_group(artists.id)).hotels_done is True
    assert (await groups.get_group(other.id)).hotels_done is False


@pytest.mark.asyncio
async def test_group_created_after_lodging_picks_it_up(db_session):
    await BookingService(db_session).create_lodging_booking(_lodging(tour_id="t1"))

    group = await TravelGroupService(db_session).create_travel_group(TravelGroupCreate(name="Band", tour_id="t1"))

    assert group.coordination_status == CoordinationStatus.HOTELS_BOOKED


@pytest.mark.asyncio
async def test_unknown_references_are_rejected(db_session):
    service = BookingService(db_session)

    with pytest.raises(NotFoundError):
        await service.create_flight(_flight(group_id="missing"))
    with pytest.raises(NotFoundError):
        await service.create_transportation(_transport(flight_id="missing"))
    with pytest.raises(NotFoundError):
        await service.create_lodging_booking(_lodging(group_id="missing"))


@pytest.mark.asyncio
async def test_fetch_filters(db_session, group_data):
    group = await TravelGroupService(db_session).create_travel_group(group_data)
    service = BookingService(db_session)
    await service.create_flight(_flight(group_id=group.id, event_id="event-1"))
    await service.create_flight(_flight(flight_number="UA200", event_id="event-2"))
    await service.create_transportation(_transport(event_id="event-1"))
    await service.create_lodging_booking(_lodging(event_id="event-1", status="confirmed"))

    assert [f.flight_number for f in await service.fetch_flights(GroupFilter(group_id=group.id))] == ["AA100"]
    assert [f.flight_number for f in await service.fetch_flights(GroupFilter(event_id="event-2"))] == ["UA200"]
    assert len(await service.fetch_flights()) == 2
    assert len(await service.fetch_transportation(GroupFilter(event_id="event-1"))) == 1
    assert len(await service.fetch_lodging_bookings(GroupFilter(status="confirmed"))) == 1
    assert await service.fetch_lodging_bookings(GroupFilter(status="cancelled")) == []


@pytest.mark.asyncio
async def test_fetch_with_event_and_tour_matches_either(db_session):
    service = BookingService(db_session)
    await service.create_flight(_flight(event_id="e1"))
    await service.create_flight(_flight(flight_number="UA200", tour_id="t1"))
    await service.create_flight(_flight(flight_number="DL300", event_id="e2"))

    flights = await service.fetch_flights(GroupFilter(event_id="e1", tour_id="t1"))

    assert sorted(f.flight_number for f in flights) == ["AA100", "UA200"]

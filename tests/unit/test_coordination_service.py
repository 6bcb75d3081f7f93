"""
Unit tests for group summaries and auto-coordination
"""
from datetime import date

import pytest
from sqlalchemy import func, select

from travel_hub.core.exceptions import NotFoundError, ValidationError
from travel_hub.models.flight import FlightCoordination
from travel_hub.models.lodging import LodgingBooking
from travel_hub.models.passenger_assignment import FlightPassengerAssignment, TransportPassengerAssignment
from travel_hub.models.transportation import GroundTransportationCoordination
from travel_hub.models.travel_group import CoordinationStatus, GroupStatus
from travel_hub.schemas.travel import LodgingBookingCreate, TravelGroupCreate, TravelGroupUpdate
from travel_hub.services.booking_service import BookingService
from travel_hub.services.coordination_service import CoordinationService
from travel_hub.services.group_service import TravelGroupService
from travel_hub.services.member_service import GroupMemberService
from travel_hub.services.strategies import CoordinationResult, CoordinationStrategy


async def _count(db_session, model):
    return await db_session.scalar(select(func.count()).select_from(model))


async def _crew_with_rooms(db_session, group_data, crew_members, guests=4):
    group = await TravelGroupService(db_session).create_travel_group(group_data)
    await GroupMemberService(db_session).bulk_create_group_members(group.id, crew_members)
    await BookingService(db_session).create_lodging_booking(
        LodgingBookingCreate(
            booking_number="B-1",
            event_id="event-1",
            check_in_date=date(2026, 7, 10),
            check_out_date=date(2026, 7, 14),
            total_guests=guests,
            primary_guest_name="Ana Ruiz",
        )
    )
    return group


@pytest.mark.asyncio
async def test_summary_view(db_session, group_data, crew_members):
    group = await _crew_with_rooms(db_session, group_data, crew_members)

    view = await CoordinationService(db_session).get_group_summary(group.id)

    assert view.group.id == group.id
    assert view.summary.hotel_rooms_booked == 1
    assert view.summary.flights_booked == 0
    assert view.flags.hotels_done is True
    assert view.coordination_status == CoordinationStatus.HOTELS_BOOKED
    assert view.coordination_badge.tone == "green"
    assert view.priority_badge.value == "2"
    assert view.status_badge.value == "planning"


@pytest.mark.asyncio
async def test_summary_of_unknown_group(db_session):
    with pytest.raises(NotFoundError):
        await CoordinationService(db_session).get_group_summary("missing")


@pytest.mark.asyncio
async def test_auto_coordinate_completes_group(db_session, group_data, crew_members):
    group = await _crew_with_rooms(db_session, group_data, crew_members)

    result = await CoordinationService(db_session).auto_coordinate_group(group.id)

    assert result.errors == []
    assert result.coordination_status == CoordinationStatus.COMPLETE
    assert result.summary.flights_booked == 1
    assert result.summary.transport_arranged == 1
    assert result.summary.hotel_rooms_booked == 1
    assert len(result.booked_room_ids) == 1
    assert await _count(db_session, FlightPassengerAssignment) == 3
    assert await _count(db_session, TransportPassengerAssignment) == 3

    flight = await db_session.get(FlightCoordination, result.booked_flight_ids[0])
    assert flight.flight_number == "GROUP-STAGE-CREW"
    refreshed = await TravelGroupService(db_session).get_group(group.id)
    assert refreshed.coordination_status == CoordinationStatus.COMPLETE


@pytest.mark.asyncio
async def test_auto_coordinate_twice_does_not_double_book(db_session, group_data, crew_members):
    group = await _crew_with_rooms(db_session, group_data, crew_members)
    service = CoordinationService(db_session)

    await service.auto_coordinate_group(group.id)
    second = await service.auto_coordinate_group(group.id)

    assert second.booked_flight_ids == []
    assert second.booked_room_ids == []
    assert second.errors == []
    assert second.booked_vehicle_ids == []
    assert await _count(db_session, FlightCoordination) == 1
    assert await _count(db_session, GroundTransportationCoordination) == 1


@pytest.mark.asyncio
async def test_auto_coordinate_reports_missing_lodging(db_session, group_data, crew_members):
    group = await TravelGroupService(db_session).create_travel_group(group_data)
    await GroupMemberService(db_session).bulk_create_group_members(group.id, crew_members)

    result = await CoordinationService(db_session).auto_coordinate_group(group.id)

    assert result.coordination_status == CoordinationStatus.FLIGHTS_BOOKED
    assert any(error.startswith("Lodging not arranged") for error in result.errors)


@pytest.mark.asyncio
async def test_auto_coordinate_requires_members(db_session, group_data):
    group = await TravelGroupService(db_session).create_travel_group(group_data)

    with pytest.raises(ValidationError):
        await CoordinationService(db_session).auto_coordinate_group(group.id)


@pytest.mark.asyncio
async def test_auto_coordinate_rejects_cancelled_group(db_session, group_data, crew_members):
    groups = TravelGroupService(db_session)
    group = await _crew_with_rooms(db_session, group_data, crew_members)
    await groups.update_travel_group(group.id, TravelGroupUpdate(status=GroupStatus.CANCELLED))

    with pytest.raises(ValidationError):
        await CoordinationService(db_session).auto_coordinate_group(group.id)


class ExplodingStrategy(CoordinationStrategy):
    """Books a flight, then fails before the run can finish."""

    def assign(self, group, available_flights, available_rooms, available_vehicles):
        flight = FlightCoordination(
            flight_number="X1",
            airline="Nowhere Air",
            departure_airport="JFK",
            arrival_airport="LAX",
            departure_time=None,
            arrival_time=None,
            group_id=group.id,
        )
        return CoordinationResult(booked_flights=[flight])


@pytest.mark.asyncio
async def test_failed_run_leaves_no_partial_writes(db_session, group_data, crew_members):
    group = await _crew_with_rooms(db_session, group_data, crew_members)

    with pytest.raises(Exception):
        await CoordinationService(db_session, ExplodingStrategy()).auto_coordinate_group(group.id)

    assert await _count(db_session, FlightCoordination) == 0
    assert await _count(db_session, FlightPassengerAssignment) == 0
    refreshed = await TravelGroupService(db_session).get_group(group.id)
    assert refreshed.flights_done is False


def _booking(number, guests, **scope):
    return LodgingBookingCreate(
        booking_number=number,
        check_in_date=date(2026, 7, 10),
        check_out_date=date(2026, 7, 14),
        total_guests=guests,
        primary_guest_name="Ana Ruiz",
        **scope,
    )


@pytest.mark.asyncio
async def test_standalone_group_claims_unlinked_lodging(db_session, group_data, crew_members):
    standalone = group_data.model_copy(update={"event_id": None})
    group = await TravelGroupService(db_session).create_travel_group(standalone)
    await GroupMemberService(db_session).bulk_create_group_members(group.id, crew_members)
    booking = await BookingService(db_session).create_lodging_booking(_booking("B-9", 4))

    result = await CoordinationService(db_session).auto_coordinate_group(group.id)

    assert result.booked_room_ids == [booking.id]
    assert result.errors == []
    assert result.coordination_status == CoordinationStatus.COMPLETE
    claimed = await db_session.get(LodgingBooking, booking.id)
    assert claimed.group_id == group.id


@pytest.mark.asyncio
async def test_claimed_shared_lodging_stops_counting_for_other_groups(db_session, crew_members):
    groups = TravelGroupService(db_session)
    members = GroupMemberService(db_session)
    first = await groups.create_travel_group(
        TravelGroupCreate(name="Crew", event_id="e1", arrival_location="LAX", arrival_date=date(2026, 7, 10))
    )
    second = await groups.create_travel_group(TravelGroupCreate(name="Artists", event_id="e1"))
    await members.bulk_create_group_members(first.id, crew_members)
    await members.bulk_create_group_members(second.id, crew_members)
    await BookingService(db_session).create_lodging_booking(_booking("B-1", 1, event_id="e1"))
    assert (await groups.get_group(second.id)).hotels_done is True

    result = await CoordinationService(db_session).auto_coordinate_group(first.id)

    assert len(result.booked_room_ids) == 1
    assert "Lodging covers 1 of 3 travelers" in result.errors
    assert result.coordination_status == CoordinationStatus.COMPLETE
    other = await groups.get_group(second.id)
    assert other.hotels_done is False
    assert other.coordination_status == CoordinationStatus.PENDING

"""
Auto-coordination strategies.

A strategy decides which flights, rooms and vehicles a group gets. It works
on in-memory records only: it may claim inventory by linking it to the group
and may return brand-new records, but persisting is left to the caller.
"""
import logging
import re
import uuid
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import date, datetime, time, timezone
from typing import List, Optional, Sequence

from travel_hub.config import CoordinationSettings, get_settings
from travel_hub.models.flight import FareType, FlightCoordination, TicketClass
from travel_hub.models.lodging import LodgingBooking
from travel_hub.models.transportation import GroundTransportationCoordination, TransportType
from travel_hub.models.travel_group import TravelGroup

logger = logging.getLogger(__name__)


@dataclass
class CoordinationResult:
    """Records a strategy booked for a group, plus stages it could not arrange."""
    booked_flights: List[FlightCoordination] = field(default_factory=list)
    booked_rooms: List[LodgingBooking] = field(default_factory=list)
    booked_vehicles: List[GroundTransportationCoordination] = field(default_factory=list)
    errors: List[str] = field(default_factory=list)


class CoordinationStrategy(ABC):
    """Assigns inventory to a group during auto-coordination."""

    @abstractmethod
    def assign(
        self,
        group: TravelGroup,
        available_flights: Sequence[FlightCoordination],
        available_rooms: Sequence[LodgingBooking],
        available_vehicles: Sequence[GroundTransportationCoordination],
    ) -> CoordinationResult:
        """
        Choose bookings for `group`.

        Args:
            group: Group being coordinated; total_members is its headcount
            available_flights: Flights not linked to any group
            available_rooms: Lodging bookings already linked to the group,
                plus unlinked candidates it may claim
            available_vehicles: Transport runs not linked to any group

        Returns:
            CoordinationResult listing every record linked to the group
        """


def _same_place(left: Optional[str], right: Optional[str]) -> bool:
    if not left or not right:
        return False
    return left.strip().casefold() == right.strip().casefold()


def _shares_scope(record, group: TravelGroup) -> bool:
    return (record.event_id is not None and record.event_id == group.event_id) or (
        record.tour_id is not None and record.tour_id == group.tour_id
    )


def _at(day: date, hour: int, minute: int = 0) -> datetime:
    return datetime.combine(day, time(hour, minute, tzinfo=timezone.utc))


def charter_flight_number(group_name: str) -> str:
    return "GROUP-" + re.sub(r"\s+", "-", group_name.strip().upper())


class GroupCharterStrategy(CoordinationStrategy):
    """
    Reuse matching inventory first, fall back to chartering.

    Flight and transport stages already marked done on the group are
    skipped. Lodging is claimed only until the bookings linked to the group
    hold every traveler, so re-running auto-coordination does not
    double-book. A group with no event or tour may claim any unlinked booking.
    """

    def __init__(self, settings: Optional[CoordinationSettings] = None):
        self.settings = settings or get_settings().coordination

    def assign(self, group, available_flights, available_rooms, available_vehicles) -> CoordinationResult:
        result = CoordinationResult()
        headcount = group.total_members or 0

        flight = None
        if not group.flights_done:
            flight = self._assign_flight(group, headcount, available_flights, result)
        self._assign_rooms(group, headcount, available_rooms, result)
        if not group.transport_done:
            self._assign_vehicle(group, headcount, available_vehicles, flight, result)

        logger.debug(
            "Strategy assignment finished",
            extra={
                "group_id": group.id,
                "flights": len(result.booked_flights),
                "rooms": len(result.booked_rooms),
                "vehicles": len(result.booked_vehicles),
                "errors": len(result.errors),
            },
        )
        return result

    def _assign_flight(self, group, headcount, available_flights, result) -> Optional[FlightCoordination]:
        if not group.arrival_location:
            result.errors.append("Flights not arranged: group has no arrival location")
            return None

        for flight in available_flights:
            if flight.group_id is not None or not _same_place(flight.arrival_airport, group.arrival_location):
                continue
            if group.arrival_date and flight.arrival_time.date() != group.arrival_date:
                continue
            free = flight.available_seats
            if free is not None and free < headcount:
                continue
            flight.group_id = group.id
            flight.is_group_flight = True
            flight.booked_seats = (flight.booked_seats or 0) + headcount
            result.booked_flights.append(flight)
            return flight

        if not group.arrival_date:
            result.errors.append("Flights not arranged: no matching flight and no arrival date to charter")
            return None

        flight = FlightCoordination(
            id=str(uuid.uuid4()),
            flight_number=charter_flight_number(group.name),
            airline=self.settings.charter_airline,
            departure_airport=group.departure_location or "TBD",
            arrival_airport=group.arrival_location,
            departure_time=_at(group.arrival_date, 8),
            arrival_time=_at(group.arrival_date, 10),
            total_seats=headcount,
            booked_seats=headcount,
            group_id=group.id,
            is_group_flight=True,
            ticket_class=TicketClass.ECONOMY,
            fare_type=FareType.GROUP,
            status="scheduled",
            event_id=group.event_id,
            tour_id=group.tour_id,
        )
        result.booked_flights.append(flight)
        return flight

    def _assign_rooms(self, group, headcount, available_rooms, result) -> None:
        covered = sum(b.total_guests or 0 for b in available_rooms if b.group_id == group.id)
        if covered >= headcount and covered > 0:
            return

        standalone = group.event_id is None and group.tour_id is None
        for booking in available_rooms:
            if covered >= headcount:
                break
            if booking.group_id is not None:
                continue
            if not standalone and not _shares_scope(booking, group):
                continue
            booking.group_id = group.id
            covered += booking.total_guests or 0
            result.booked_rooms.append(booking)

        if covered == 0:
            result.errors.append("Lodging not arranged: no unassigned bookings for the group's event or tour")
        elif covered < headcount:
            result.errors.append(f"Lodging covers {covered} of {headcount} travelers")

    def _assign_vehicle(self, group, headcount, available_vehicles, flight, result) -> None:
        if not group.arrival_location:
            result.errors.append("Transport not arranged: group has no arrival location")
            return

        for vehicle in available_vehicles:
            if vehicle.group_id is not None or not _same_place(vehicle.pickup_location, group.arrival_location):
                continue
            free = vehicle.available_capacity
            if free is None or free < headcount:
                continue
            vehicle.group_id = group.id
            vehicle.assigned_passengers = (vehicle.assigned_passengers or 0) + headcount
            if flight is not None and vehicle.flight_id is None:
                vehicle.flight_id = flight.id
            result.booked_vehicles.append(vehicle)
            return

        if not group.arrival_date:
            result.errors.append("Transport not arranged: no matching vehicle and no arrival date to schedule")
            return

        if headcount > self.settings.large_group_threshold:
            transport_type = TransportType.SHUTTLE_BUS
        else:
            transport_type = TransportType.VAN

        result.booked_vehicles.append(
            GroundTransportationCoordination(
                id=str(uuid.uuid4()),
                transport_type=transport_type,
                provider_name=self.settings.transport_provider,
                pickup_location=group.arrival_location,
                dropoff_location=self.settings.default_dropoff_location,
                pickup_time=_at(group.arrival_date, 10, 30),
                estimated_dropoff_time=_at(group.arrival_date, 11),
                vehicle_capacity=headcount,
                assigned_passengers=headcount,
                group_id=group.id,
                status="scheduled",
                event_id=group.event_id,
                tour_id=group.tour_id,
                flight_id=flight.id if flight is not None else None,
            )
        )

"""
Persistence models for the travel coordination backend.

Importing this package registers every table on the shared declarative Base.
"""

from .travel_group import TravelGroup, GroupType, GroupStatus, CoordinationStatus
from .group_member import TravelGroupMember, MemberStatus
from .flight import FlightCoordination, TicketClass, FareType
from .transportation import GroundTransportationCoordination, TransportType
from .lodging import LodgingBooking
from .passenger_assignment import FlightPassengerAssignment, TransportPassengerAssignment

__all__ = [
    "TravelGroup",
    "GroupType",
    "GroupStatus",
    "CoordinationStatus",
    "TravelGroupMember",
    "MemberStatus",
    "FlightCoordination",
    "TicketClass",
    "FareType",
    "GroundTransportationCoordination",
    "TransportType",
    "LodgingBooking",
    "FlightPassengerAssignment",
    "TransportPassengerAssignment",
]

"""
Travel coordination schemas for API requests/responses
"""
from datetime import date, datetime
from typing import Optional

from pydantic import BaseModel, Field, field_validator, model_validator

from travel_hub.models.travel_group import CoordinationStatus, GroupStatus, GroupType
from travel_hub.models.group_member import MemberStatus
from travel_hub.models.flight import FareType, TicketClass
from travel_hub.models.transportation import TransportType


def _clean_tags(value):
    """Strip, drop blanks and de-duplicate while keeping order."""
    if value is None:
        return []
    seen = []
    for tag in value:
        tag = str(tag).strip()
        if tag and tag not in seen:
            seen.append(tag)
    return seen


class GroupFilter(BaseModel):
    """Filters accepted by the group and booking fetchers"""
    event_id: Optional[str] = None
    tour_id: Optional[str] = None
    group_id: Optional[str] = None
    status: Optional[str] = None
    group_type: Optional[GroupType] = None


# ---------------------------------------------------------------------------
# Travel groups
# ---------------------------------------------------------------------------


class TravelGroupCreate(BaseModel):
    """Schema for creating a travel group"""
    name: str = Field(..., max_length=255)
    description: Optional[str] = None
    group_type: GroupType = GroupType.CREW
    department: Optional[str] = Field(None, max_length=255)
    priority_level: int = Field(3, ge=1, le=5)
    arrival_date: Optional[date] = None
    departure_date: Optional[date] = None
    arrival_location: Optional[str] = Field(None, max_length=255)
    departure_location: Optional[str] = Field(None, max_length=255)
    group_leader_id: Optional[str] = None
    backup_contact_id: Optional[str] = None
    special_requirements: list[str] = Field(default_factory=list)
    dietary_restrictions: list[str] = Field(default_factory=list)
    accessibility_needs: list[str] = Field(default_factory=list)
    event_id: Optional[str] = None
    tour_id: Optional[str] = None
    created_by: Optional[str] = None

    @field_validator(
        "special_requirements", "dietary_restrictions", "accessibility_needs", mode="before"
    )
    @classmethod
    def clean_tags(cls, v):
        return _clean_tags(v)

    @model_validator(mode="after")
    def check_dates(self):
        if self.arrival_date and self.departure_date and self.departure_date < self.arrival_date:
            raise ValueError("departure_date cannot be before arrival_date")
        return self


class TravelGroupUpdate(BaseModel):
    """Schema for updating a travel group; only provided fields change"""
    name: Optional[str] = Field(None, max_length=255)
    description: Optional[str] = None
    group_type: Optional[GroupType] = None
    department: Optional[str] = Field(None, max_length=255)
    priority_level: Optional[int] = Field(None, ge=1, le=5)
    arrival_date: Optional[date] = None
    departure_date: Optional[date] = None
    arrival_location: Optional[str] = Field(None, max_length=255)
    departure_location: Optional[str] = Field(None, max_length=255)
    group_leader_id: Optional[str] = None
    backup_contact_id: Optional[str] = None
    special_requirements: Optional[list[str]] = None
    dietary_restrictions: Optional[list[str]] = None
    accessibility_needs: Optional[list[str]] = None
    status: Optional[GroupStatus] = None
    event_id: Optional[str] = None
    tour_id: Optional[str] = None

    # Counters and coordination flags are derived, never written directly
    model_config = {"extra": "forbid"}

    @field_validator(
        "special_requirements", "dietary_restrictions", "accessibility_needs", mode="before"
    )
    @classmethod
    def clean_tags(cls, v):
        return None if v is None else _clean_tags(v)


class TravelGroupRead(BaseModel):
    """Schema for travel group read response"""
    id: str
    name: str
    description: Optional[str]
    group_type: GroupType
    department: Optional[str]
    priority_level: int
    arrival_date: Optional[date]
    departure_date: Optional[date]
    arrival_location: Optional[str]
    departure_location: Optional[str]
    group_leader_id: Optional[str]
    backup_contact_id: Optional[str]
    special_requirements: list[str]
    dietary_restrictions: list[str]
    accessibility_needs: list[str]
    total_members: int
    confirmed_members: int
    status: GroupStatus
    coordination_status: CoordinationStatus
    flights_done: bool
    hotels_done: bool
    transport_done: bool
    event_id: Optional[str]
    tour_id: Optional[str]
    created_by: Optional[str]
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


# ---------------------------------------------------------------------------
# Members
# ---------------------------------------------------------------------------


class MemberInput(BaseModel):
    """One member row for bulk ingestion; every field is optional"""
    name: str = ""
    email: str = ""
    phone: str = ""
    role: str = ""
    staff_id: Optional[str] = None
    seat_preference: str = ""
    meal_preference: str = ""
    special_assistance: bool = False
    wheelchair_required: bool = False
    mobility_assistance: bool = False


class BulkMembersRequest(BaseModel):
    """Structured members, raw "name, email, phone, role" lines, or both"""
    members: list[MemberInput] = Field(default_factory=list)
    raw_text: Optional[str] = None


class MemberStatusUpdate(BaseModel):
    status: MemberStatus


class TravelGroupMemberRead(BaseModel):
    id: str
    group_id: str
    member_name: str
    member_email: str
    member_phone: str
    member_role: str
    staff_id: Optional[str]
    seat_preference: str
    meal_preference: str
    special_assistance: bool
    wheelchair_required: bool
    mobility_assistance: bool
    status: MemberStatus
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


# ---------------------------------------------------------------------------
# Flights, ground transportation, lodging
# ---------------------------------------------------------------------------


class FlightCreate(BaseModel):
    flight_number: str = Field(..., min_length=1, max_length=64)
    airline: str = Field(..., min_length=1, max_length=255)
    departure_airport: str = Field(..., min_length=1, max_length=255)
    arrival_airport: str = Field(..., min_length=1, max_length=255)
    departure_time: datetime
    arrival_time: datetime
    total_seats: Optional[int] = Field(None, gt=0)
    booked_seats: int = Field(0, ge=0)
    group_id: Optional[str] = None
    is_group_flight: bool = False
    booking_reference: Optional[str] = None
    ticket_class: TicketClass = TicketClass.ECONOMY
    fare_type: FareType = FareType.STANDARD
    status: str = "scheduled"
    event_id: Optional[str] = None
    tour_id: Optional[str] = None

    @model_validator(mode="after")
    def check_capacity(self):
        if self.total_seats is not None and self.booked_seats > self.total_seats:
            raise ValueError("booked_seats cannot exceed total_seats")
        return self


class FlightRead(BaseModel):
    id: str
    flight_number: str
    airline: str
    departure_airport: str
    arrival_airport: str
    departure_time: datetime
    arrival_time: datetime
    total_seats: Optional[int]
    booked_seats: int
    available_seats: Optional[int]
    group_id: Optional[str]
    is_group_flight: bool
    booking_reference: Optional[str]
    ticket_class: TicketClass
    fare_type: FareType
    status: str
    event_id: Optional[str]
    tour_id: Optional[str]
    created_at: datetime

    model_config = {"from_attributes": True}


class TransportationCreate(BaseModel):
    transport_type: TransportType
    provider_name: Optional[str] = None
    pickup_location: str = Field(..., min_length=1, max_length=255)
    dropoff_location: str = Field(..., min_length=1, max_length=255)
    pickup_time: datetime
    estimated_dropoff_time: datetime
    vehicle_capacity: Optional[int] = Field(None, gt=0)
    assigned_passengers: int = Field(0, ge=0)
    group_id: Optional[str] = None
    driver_name: Optional[str] = None
    driver_phone: Optional[str] = None
    vehicle_plate: Optional[str] = None
    status: str = "scheduled"
    event_id: Optional[str] = None
    tour_id: Optional[str] = None
    flight_id: Optional[str] = None

    @model_validator(mode="after")
    def check_capacity(self):
        if self.vehicle_capacity is not None and self.assigned_passengers > self.vehicle_capacity:
            raise ValueError("assigned_passengers cannot exceed vehicle_capacity")
        return self


class TransportationRead(BaseModel):
    id: str
    transport_type: TransportType
    provider_name: Optional[str]
    pickup_location: str
    dropoff_location: str
    pickup_time: datetime
    estimated_dropoff_time: datetime
    vehicle_capacity: Optional[int]
    assigned_passengers: int
    available_capacity: Optional[int]
    group_id: Optional[str]
    driver_name: Optional[str]
    driver_phone: Optional[str]
    vehicle_plate: Optional[str]
    status: str
    event_id: Optional[str]
    tour_id: Optional[str]
    flight_id: Optional[str]
    created_at: datetime

    model_config = {"from_attributes": True}


class LodgingBookingCreate(BaseModel):
    booking_number: str = Field(..., min_length=1, max_length=64)
    provider_name: Optional[str] = None
    event_id: Optional[str] = None
    tour_id: Optional[str] = None
    group_id: Optional[str] = None
    check_in_date: date
    check_out_date: date
    rooms_booked: int = Field(1, ge=1)
    guests_per_room: int = Field(1, ge=1)
    total_guests: Optional[int] = Field(None, ge=1)
    primary_guest_name: str = Field(..., min_length=1, max_length=255)
    status: str = "pending"

    @model_validator(mode="after")
    def check_stay(self):
        if self.check_out_date < self.check_in_date:
            raise ValueError("check_out_date cannot be before check_in_date")
        if self.total_guests is None:
            self.total_guests = self.rooms_booked * self.guests_per_room
        return self


class LodgingBookingRead(BaseModel):
    id: str
    booking_number: str
    provider_name: Optional[str]
    event_id: Optional[str]
    tour_id: Optional[str]
    group_id: Optional[str]
    check_in_date: date
    check_out_date: date
    rooms_booked: int
    guests_per_room: int
    total_guests: int
    primary_guest_name: str
    status: str
    created_at: datetime

    model_config = {"from_attributes": True}

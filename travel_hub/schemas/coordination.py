"""
Coordination aggregate schemas: summaries, badges, analytics
"""
from typing import Optional, Union

from pydantic import BaseModel, Field

from travel_hub.models.travel_group import CoordinationStatus, GroupStatus
from travel_hub.schemas.travel import TravelGroupRead


class CoordinationSummary(BaseModel):
    """Per-group counts of arranged logistics"""
    flights_booked: int = 0
    transport_arranged: int = 0
    hotel_rooms_booked: int = 0


class CoordinationFlags(BaseModel):
    flights_done: bool = False
    hotels_done: bool = False
    transport_done: bool = False

    @property
    def complete(self) -> bool:
        return self.flights_done and self.hotels_done and self.transport_done


class Badge(BaseModel):
    """Display label and colour tone for a status value"""
    value: str
    label: str
    tone: str


class GroupCoordinationView(BaseModel):
    """A group with its coordination summary and display badges"""
    group: TravelGroupRead
    summary: CoordinationSummary
    flags: CoordinationFlags
    coordination_status: CoordinationStatus
    status_badge: Badge
    coordination_badge: Badge
    priority_badge: Badge


class LogisticsChecklist(BaseModel):
    """Four-slot logistics checklist used for progress display"""
    transportation: str = ""
    accommodation: str = ""
    equipment: Union[str, list[str]] = ""
    crew: int = Field(0, ge=0)


class ProgressResponse(BaseModel):
    percent: int
    completed: int
    total: int


class CoordinationResultRead(BaseModel):
    """Outcome of an auto-coordination run"""
    group_id: str
    booked_flight_ids: list[str] = Field(default_factory=list)
    booked_room_ids: list[str] = Field(default_factory=list)
    booked_vehicle_ids: list[str] = Field(default_factory=list)
    errors: list[str] = Field(default_factory=list)
    summary: CoordinationSummary
    coordination_status: CoordinationStatus


class TravelAnalytics(BaseModel):
    total_groups: int = 0
    total_travelers: int = 0
    confirmed_travelers: int = 0
    arrived_groups: int = 0
    fully_coordinated_groups: int = 0
    pending_coordination_groups: int = 0
    total_flights: int = 0
    total_flight_passengers: int = 0
    total_transport_runs: int = 0
    total_transport_passengers: int = 0
    total_hotel_bookings: int = 0
    coordination_completion_rate: float = 0.0
    arrival_success_rate: float = 0.0


class GroupUtilization(BaseModel):
    group_id: str
    group_name: str
    group_type: str
    department: Optional[str] = None
    priority_level: int
    total_members: int
    confirmed_members: int
    total_flights: int
    flight_passengers: int
    flight_utilization_percentage: float
    total_transport_runs: int
    transport_passengers: int
    transport_utilization_percentage: float
    total_hotel_bookings: int
    hotel_guests: int
    hotel_utilization_percentage: float
    coordination_status: CoordinationStatus
    group_status: GroupStatus
    confirmation_rate: float

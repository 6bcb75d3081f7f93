"""
Flight coordination model
"""
import enum
import uuid

from sqlalchemy import Boolean, Column, DateTime, ForeignKey, Integer, String
from sqlalchemy.sql import func

from travel_hub.core.db import Base, enum_column


class TicketClass(str, enum.Enum):
    ECONOMY = "economy"
    PREMIUM_ECONOMY = "premium_economy"
    BUSINESS = "business"
    FIRST = "first"


class FareType(str, enum.Enum):
    STANDARD = "standard"
    FLEXIBLE = "flexible"
    REFUNDABLE = "refundable"
    GROUP = "group"


class FlightCoordination(Base):
    """
    A booked or planned flight segment.
    group_id is optional: unassigned flights are inventory for auto-coordination.
    """
    __tablename__ = "flight_coordination"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    flight_number = Column(String(64), nullable=False)
    airline = Column(String(255), nullable=False)
    departure_airport = Column(String(255), nullable=False)
    arrival_airport = Column(String(255), nullable=False)
    departure_time = Column(DateTime(timezone=True), nullable=False)
    arrival_time = Column(DateTime(timezone=True), nullable=False)
    total_seats = Column(Integer, nullable=True)
    booked_seats = Column(Integer, nullable=False, default=0)
    group_id = Column(String(36), ForeignKey("travel_groups.id", ondelete="SET NULL"), nullable=True, index=True)
    is_group_flight = Column(Boolean, nullable=False, default=False)
    booking_reference = Column(String(64), nullable=True)
    ticket_class = Column(enum_column(TicketClass), nullable=False, default=TicketClass.ECONOMY)
    fare_type = Column(enum_column(FareType), nullable=False, default=FareType.STANDARD)
    status = Column(String(32), nullable=False, default="scheduled")
    event_id = Column(String(36), nullable=True, index=True)
    tour_id = Column(String(36), nullable=True, index=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)

    @property
    def available_seats(self):
        if self.total_seats is None:
            return None
        return max(self.total_seats - (self.booked_seats or 0), 0)

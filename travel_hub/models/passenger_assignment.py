import uuid

from sqlalchemy import Column, DateTime, ForeignKey, String
from sqlalchemy.sql import func

from travel_hub.core.db import Base, enum_column
from travel_hub.models.flight import TicketClass


class FlightPassengerAssignment(Base):
    __tablename__ = "flight_passenger_assignments"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    flight_id = Column(String(36), ForeignKey("flight_coordination.id", ondelete="CASCADE"), nullable=False, index=True)
    group_member_id = Column(String(36), ForeignKey("travel_group_members.id", ondelete="CASCADE"), nullable=False, index=True)
    seat_class = Column(enum_column(TicketClass), nullable=False, default=TicketClass.ECONOMY)
    status = Column(String(32), nullable=False, default="confirmed")
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)


class TransportPassengerAssignment(Base):
    __tablename__ = "transportation_passenger_assignments"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    transportation_id = Column(
        String(36),
        ForeignKey("ground_transportation_coordination.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    group_member_id = Column(String(36), ForeignKey("travel_group_members.id", ondelete="CASCADE"), nullable=False, index=True)
    status = Column(String(32), nullable=False, default="confirmed")
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

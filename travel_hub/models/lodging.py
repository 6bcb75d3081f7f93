"""
Lodging booking model
"""
import uuid

from sqlalchemy import Column, Date, DateTime, ForeignKey, Integer, String
from sqlalchemy.sql import func

from travel_hub.core.db import Base


class LodgingBooking(Base):
    """
    Hotel booking for an event or tour.

    group_id is an explicit link to a travel group. Bookings without one are
    matched to groups through the shared event/tour id.
    """
    __tablename__ = "lodging_bookings"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    booking_number = Column(String(64), nullable=False, index=True)
    provider_name = Column(String(255), nullable=True)
    event_id = Column(String(36), nullable=True, index=True)
    tour_id = Column(String(36), nullable=True, index=True)
    group_id = Column(String(36), ForeignKey("travel_groups.id", ondelete="SET NULL"), nullable=True, index=True)
    check_in_date = Column(Date, nullable=False)
    check_out_date = Column(Date, nullable=False)
    rooms_booked = Column(Integer, nullable=False, default=1)
    guests_per_room = Column(Integer, nullable=False, default=1)
    total_guests = Column(Integer, nullable=False, default=1)
    primary_guest_name = Column(String(255), nullable=False)
    status = Column(String(32), nullable=False, default="pending")
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)

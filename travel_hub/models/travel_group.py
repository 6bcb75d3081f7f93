"""
Travel group model: a cohort of travelers coordinated together
"""
import enum
import uuid

from sqlalchemy import Boolean, CheckConstraint, Column, Date, DateTime, Integer, JSON, String, Text
from sqlalchemy.sql import func

from travel_hub.core.db import Base, enum_column


class GroupType(str, enum.Enum):
    CREW = "crew"
    ARTISTS = "artists"
    STAFF = "staff"
    VENDORS = "vendors"
    GUESTS = "guests"
    VIP = "vip"
    MEDIA = "media"
    SECURITY = "security"
    CATERING = "catering"
    TECHNICAL = "technical"
    MANAGEMENT = "management"


class GroupStatus(str, enum.Enum):
    """Physical travel state of a group"""
    PLANNING = "planning"
    CONFIRMED = "confirmed"
    IN_TRANSIT = "in_transit"
    ARRIVED = "arrived"
    DEPARTED = "departed"
    CANCELLED = "cancelled"


class CoordinationStatus(str, enum.Enum):
    """How much of the logistics stack has been arranged"""
    PENDING = "pending"
    FLIGHTS_BOOKED = "flights_booked"
    HOTELS_BOOKED = "hotels_booked"
    TRANSPORT_ARRANGED = "transport_arranged"
    COMPLETE = "complete"


def _new_id() -> str:
    return str(uuid.uuid4())


class TravelGroup(Base):
    """
    A named cohort sharing itinerary constraints.

    total_members / confirmed_members are a cache over travel_group_members,
    recomputed on every membership write. Coordination progress is kept as
    three independent flags; coordination_status is derived from them.
    """
    __tablename__ = "travel_groups"
    __table_args__ = (
        CheckConstraint("confirmed_members <= total_members", name="ck_travel_groups_confirmed_le_total"),
        CheckConstraint("priority_level BETWEEN 1 AND 5", name="ck_travel_groups_priority_range"),
    )

    id = Column(String(36), primary_key=True, default=_new_id)
    name = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    group_type = Column(enum_column(GroupType), nullable=False, index=True)
    department = Column(String(255), nullable=True)
    priority_level = Column(Integer, nullable=False, default=3)

    arrival_date = Column(Date, nullable=True)
    departure_date = Column(Date, nullable=True)
    arrival_location = Column(String(255), nullable=True)
    departure_location = Column(String(255), nullable=True)

    group_leader_id = Column(String(36), nullable=True)
    backup_contact_id = Column(String(36), nullable=True)

    special_requirements = Column(JSON, nullable=False, default=list)
    dietary_restrictions = Column(JSON, nullable=False, default=list)
    accessibility_needs = Column(JSON, nullable=False, default=list)

    total_members = Column(Integer, nullable=False, default=0)
    confirmed_members = Column(Integer, nullable=False, default=0)

    status = Column(enum_column(GroupStatus), nullable=False, default=GroupStatus.PLANNING, index=True)
    flights_done = Column(Boolean, nullable=False, default=False)
    hotels_done = Column(Boolean, nullable=False, default=False)
    transport_done = Column(Boolean, nullable=False, default=False)

    event_id = Column(String(36), nullable=True, index=True)
    tour_id = Column(String(36), nullable=True, index=True)
    created_by = Column(String(36), nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)

    @property
    def coordination_status(self) -> CoordinationStatus:
        flags = (
            (self.flights_done, CoordinationStatus.FLIGHTS_BOOKED),
            (self.hotels_done, CoordinationStatus.HOTELS_BOOKED),
            (self.transport_done, CoordinationStatus.TRANSPORT_ARRANGED),
        )
        done = [stage for flag, stage in flags if flag]
        if len(done) == len(flags):
            return CoordinationStatus.COMPLETE
        if not done:
            return CoordinationStatus.PENDING
        return done[0]

    def __repr__(self) -> str:  # pragma: no cover
        return f"<TravelGroup id={self.id} name={self.name!r}>"

import enum
import uuid

from sqlalchemy import Boolean, Column, DateTime, ForeignKey, String
from sqlalchemy.sql import func

from travel_hub.core.db import Base, enum_column


class MemberStatus(str, enum.Enum):
    PENDING = "pending"
    CONFIRMED = "confirmed"
    CHECKED_IN = "checked_in"
    IN_TRANSIT = "in_transit"
    ARRIVED = "arrived"
    NO_SHOW = "no_show"
    CANCELLED = "cancelled"


class TravelGroupMember(Base):
    __tablename__ = "travel_group_members"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    group_id = Column(String(36), ForeignKey("travel_groups.id", ondelete="CASCADE"), nullable=False, index=True)
    member_name = Column(String(255), nullable=False)
    member_email = Column(String(255), nullable=False, default="")
    member_phone = Column(String(64), nullable=False, default="")
    member_role = Column(String(255), nullable=False, default="")
    staff_id = Column(String(36), nullable=True)
    seat_preference = Column(String(64), nullable=False, default="")
    meal_preference = Column(String(64), nullable=False, default="")
    special_assistance = Column(Boolean, nullable=False, default=False)
    wheelchair_required = Column(Boolean, nullable=False, default=False)
    mobility_assistance = Column(Boolean, nullable=False, default=False)
    status = Column(enum_column(MemberStatus), nullable=False, default=MemberStatus.PENDING, index=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)

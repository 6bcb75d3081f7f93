import enum
import uuid

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String
from sqlalchemy.sql import func

from travel_hub.core.db import Base, enum_column


class TransportType(str, enum.Enum):
    SHUTTLE_BUS = "shuttle_bus"
    LIMO = "limo"
    VAN = "van"
    CAR = "car"
    TRAIN = "train"
    SUBWAY = "subway"
    WALKING = "walking"


class GroundTransportationCoordination(Base):
    __tablename__ = "ground_transportation_coordination"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    transport_type = Column(enum_column(TransportType), nullable=False)
    provider_name = Column(String(255), nullable=True)
    pickup_location = Column(String(255), nullable=False)
    dropoff_location = Column(String(255), nullable=False)
    pickup_time = Column(DateTime(timezone=True), nullable=False)
    estimated_dropoff_time = Column(DateTime(timezone=True), nullable=False)
    vehicle_capacity = Column(Integer, nullable=True)
    assigned_passengers = Column(Integer, nullable=False, default=0)
    group_id = Column(String(36), ForeignKey("travel_groups.id", ondelete="SET NULL"), nullable=True, index=True)
    driver_name = Column(String(255), nullable=True)
    driver_phone = Column(String(64), nullable=True)
    vehicle_plate = Column(String(32), nullable=True)
    status = Column(String(32), nullable=False, default="scheduled")
    event_id = Column(String(36), nullable=True, index=True)
    tour_id = Column(String(36), nullable=True, index=True)
    flight_id = Column(String(36), ForeignKey("flight_coordination.id", ondelete="SET NULL"), nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)

    @property
    def available_capacity(self):
        if self.vehicle_capacity is None:
            return None
        return max(self.vehicle_capacity - (self.assigned_passengers or 0), 0)

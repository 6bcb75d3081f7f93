"""
Dependency providers for FastAPI routes.
Each request gets services bound to its own database session.
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from travel_hub.config import get_settings
from travel_hub.core.db import get_db
from travel_hub.services import (
    AnalyticsService,
    BookingService,
    CoordinationService,
    CoordinationStrategy,
    GroupCharterStrategy,
    GroupMemberService,
    TravelGroupService,
)


def get_coordination_strategy() -> CoordinationStrategy:
    """Strategy used by auto-coordination; override to plug in another one."""
    return GroupCharterStrategy(get_settings().coordination)


def get_group_service(db: AsyncSession = Depends(get_db)) -> TravelGroupService:
    return TravelGroupService(db)


def get_member_service(db: AsyncSession = Depends(get_db)) -> GroupMemberService:
    return GroupMemberService(db)


def get_booking_service(db: AsyncSession = Depends(get_db)) -> BookingService:
    return BookingService(db)


def get_coordination_service(
    db: AsyncSession = Depends(get_db),
    strategy: CoordinationStrategy = Depends(get_coordination_strategy),
) -> CoordinationService:
    return CoordinationService(db, strategy)


def get_analytics_service(db: AsyncSession = Depends(get_db)) -> AnalyticsService:
    return AnalyticsService(db)

"""
Coordination analytics and progress endpoints
"""
from typing import Optional
from fastapi import APIRouter, Depends

from travel_hub.core.dependencies import get_analytics_service
from travel_hub.models.travel_group import GroupType
from travel_hub.schemas.base import Envelope
from travel_hub.schemas.coordination import (
    GroupUtilization,
    LogisticsChecklist,
    ProgressResponse,
    TravelAnalytics,
)
from travel_hub.schemas.travel import GroupFilter
from travel_hub.services import AnalyticsService
from travel_hub.services.coordination import build_progress

router = APIRouter(prefix="/travel-coordination", tags=["analytics"])


@router.get("/analytics", response_model=Envelope[TravelAnalytics])
async def get_analytics(
    event_id: Optional[str] = None,
    tour_id: Optional[str] = None,
    group_type: Optional[GroupType] = None,
    service: AnalyticsService = Depends(get_analytics_service),
):
    """
    Totals across groups, flights, transport and lodging in scope, with
    coordination completion and arrival success rates
    """
    filters = GroupFilter(event_id=event_id, tour_id=tour_id, group_type=group_type)
    analytics = await service.compute_analytics(filters)
    return Envelope(status="ok", data=analytics)


@router.get("/utilization", response_model=Envelope[list[GroupUtilization]])
async def get_utilization(
    event_id: Optional[str] = None,
    tour_id: Optional[str] = None,
    group_type: Optional[GroupType] = None,
    service: AnalyticsService = Depends(get_analytics_service),
):
    filters = GroupFilter(event_id=event_id, tour_id=tour_id, group_type=group_type)
    rows = await service.compute_utilization(filters)
    return Envelope(status="ok", data=rows)


@router.post("/progress", response_model=Envelope[ProgressResponse])
async def compute_progress(checklist: LogisticsChecklist):
    """
    Share of the transportation / accommodation / equipment / crew slots
    that are filled in, as a whole percentage
    """
    return Envelope(status="ok", data=build_progress(checklist))

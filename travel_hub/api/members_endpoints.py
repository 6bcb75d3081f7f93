"""
Group member API endpoints
"""
from typing import Optional
from fastapi import APIRouter, Depends, Query

from travel_hub.core.dependencies import get_member_service
from travel_hub.models.travel_group import GroupType
from travel_hub.schemas.base import Envelope, Message
from travel_hub.schemas.travel import GroupFilter, MemberStatusUpdate, TravelGroupMemberRead
from travel_hub.services import GroupMemberService

router = APIRouter(prefix="/travel-coordination/members", tags=["travel-members"])


@router.get("", response_model=Envelope[list[TravelGroupMemberRead]])
async def list_members(
    group_id: Optional[str] = None,
    event_id: Optional[str] = None,
    tour_id: Optional[str] = None,
    status_filter: Optional[str] = Query(None, alias="status"),
    group_type: Optional[GroupType] = None,
    limit: Optional[int] = Query(None, ge=1),
    offset: int = Query(0, ge=0),
    service: GroupMemberService = Depends(get_member_service),
):
    filters = GroupFilter(
        group_id=group_id,
        event_id=event_id,
        tour_id=tour_id,
        status=status_filter,
        group_type=group_type,
    )
    members = await service.fetch_group_members(filters, limit, offset)
    return Envelope(status="ok", data=[TravelGroupMemberRead.model_validate(m) for m in members])


@router.put("/{member_id}/status", response_model=Envelope[TravelGroupMemberRead])
async def update_member_status(
    member_id: str,
    update: MemberStatusUpdate,
    service: GroupMemberService = Depends(get_member_service),
):
    """
    Change a member's status; the group's confirmed count follows
    """
    member = await service.update_member_status(member_id, update.status)
    return Envelope(status="ok", data=TravelGroupMemberRead.model_validate(member))


@router.delete("/{member_id}", response_model=Envelope[Message])
async def delete_member(
    member_id: str,
    service: GroupMemberService = Depends(get_member_service),
):
    await service.delete_group_member(member_id)
    return Envelope(status="ok", data=Message(message="Group member removed"))

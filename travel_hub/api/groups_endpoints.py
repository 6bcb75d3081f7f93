"""
Travel group API endpoints - group lifecycle, members and auto-coordination
"""
from typing import Optional
from fastapi import APIRouter, Depends, Query, status

from travel_hub.core.dependencies import (
    get_coordination_service,
    get_group_service,
    get_member_service,
)
from travel_hub.models.travel_group import GroupStatus, GroupType
from travel_hub.schemas.base import Envelope, Message
from travel_hub.schemas.coordination import CoordinationResultRead, GroupCoordinationView
from travel_hub.schemas.travel import (
    BulkMembersRequest,
    GroupFilter,
    MemberInput,
    TravelGroupCreate,
    TravelGroupMemberRead,
    TravelGroupRead,
    TravelGroupUpdate,
)
from travel_hub.services import CoordinationService, GroupMemberService, TravelGroupService
from travel_hub.services.member_import import parse_member_lines

router = APIRouter(prefix="/travel-coordination/groups", tags=["travel-groups"])


@router.get("", response_model=Envelope[list[TravelGroupRead]])
async def list_groups(
    event_id: Optional[str] = None,
    tour_id: Optional[str] = None,
    status_filter: Optional[GroupStatus] = Query(None, alias="status"),
    group_type: Optional[GroupType] = None,
    limit: Optional[int] = Query(None, ge=1),
    offset: int = Query(0, ge=0),
    service: TravelGroupService = Depends(get_group_service),
):
    """
    List travel groups

    - **event_id** / **tour_id**: groups of either identifier
    - **status**, **group_type**: optional narrowing filters
    - **limit**: page size (server default and ceiling apply)
    """
    filters = GroupFilter(
        event_id=event_id,
        tour_id=tour_id,
        status=status_filter.value if status_filter else None,
        group_type=group_type,
    )
    groups = await service.fetch_groups(filters, limit, offset)
    return Envelope(status="ok", data=[TravelGroupRead.model_validate(g) for g in groups])


@router.post("", response_model=Envelope[TravelGroupRead], status_code=status.HTTP_201_CREATED)
async def create_group(
    group_data: TravelGroupCreate,
    service: TravelGroupService = Depends(get_group_service),
):
    group = await service.create_travel_group(group_data)
    return Envelope(status="ok", data=TravelGroupRead.model_validate(group))


@router.get("/{group_id}", response_model=Envelope[TravelGroupRead])
async def get_group(
    group_id: str,
    service: TravelGroupService = Depends(get_group_service),
):
    group = await service.get_group(group_id)
    return Envelope(status="ok", data=TravelGroupRead.model_validate(group))


@router.put("/{group_id}", response_model=Envelope[TravelGroupRead])
async def update_group(
    group_id: str,
    group_data: TravelGroupUpdate,
    service: TravelGroupService = Depends(get_group_service),
):
    """
    Update a travel group

    All fields optional - only provided fields will be updated. Status
    changes must follow planning -> confirmed -> in_transit -> arrived ->
    departed, with cancelled reachable until the group has departed.
    """
    group = await service.update_travel_group(group_id, group_data)
    return Envelope(status="ok", data=TravelGroupRead.model_validate(group))


@router.delete("/{group_id}", response_model=Envelope[Message])
async def delete_group(
    group_id: str,
    service: TravelGroupService = Depends(get_group_service),
):
    """
    Delete a travel group and its members; bookings are kept but unlinked
    """
    await service.delete_travel_group(group_id)
    return Envelope(status="ok", data=Message(message="Travel group deleted"))


@router.get("/{group_id}/summary", response_model=Envelope[GroupCoordinationView])
async def get_group_summary(
    group_id: str,
    service: CoordinationService = Depends(get_coordination_service),
):
    """
    Group details plus flights, transport runs and hotel bookings counted
    toward it, with display badges
    """
    view = await service.get_group_summary(group_id)
    return Envelope(status="ok", data=view)


@router.get("/{group_id}/members", response_model=Envelope[list[TravelGroupMemberRead]])
async def list_group_members(
    group_id: str,
    status_filter: Optional[str] = Query(None, alias="status"),
    limit: Optional[int] = Query(None, ge=1),
    offset: int = Query(0, ge=0),
    group_service: TravelGroupService = Depends(get_group_service),
    member_service: GroupMemberService = Depends(get_member_service),
):
    await group_service.get_group(group_id)
    members = await member_service.fetch_group_members(
        GroupFilter(group_id=group_id, status=status_filter), limit, offset
    )
    return Envelope(status="ok", data=[TravelGroupMemberRead.model_validate(m) for m in members])


@router.post(
    "/{group_id}/members",
    response_model=Envelope[TravelGroupMemberRead],
    status_code=status.HTTP_201_CREATED,
)
async def add_group_member(
    group_id: str,
    member: MemberInput,
    service: GroupMemberService = Depends(get_member_service),
):
    record = await service.create_group_member(group_id, member)
    return Envelope(status="ok", data=TravelGroupMemberRead.model_validate(record))


@router.post(
    "/{group_id}/members/bulk",
    response_model=Envelope[list[TravelGroupMemberRead]],
    status_code=status.HTTP_201_CREATED,
)
async def bulk_add_group_members(
    group_id: str,
    payload: BulkMembersRequest,
    service: GroupMemberService = Depends(get_member_service),
):
    """
    Add several members in one transaction

    - **members**: structured member rows
    - **raw_text**: one "name, email, phone, role" line per member; blank
      lines are skipped and missing trailing fields are left empty
    """
    members = list(payload.members)
    if payload.raw_text:
        members.extend(parse_member_lines(payload.raw_text))
    records = await service.bulk_create_group_members(group_id, members)
    return Envelope(status="ok", data=[TravelGroupMemberRead.model_validate(r) for r in records])


@router.post("/{group_id}/auto-coordinate", response_model=Envelope[CoordinationResultRead])
async def auto_coordinate_group(
    group_id: str,
    service: CoordinationService = Depends(get_coordination_service),
):
    """
    Arrange flights, lodging and ground transport for the whole group

    Every write happens in one transaction. Stages that could not be
    arranged are listed in **errors**.
    """
    result = await service.auto_coordinate_group(group_id)
    return Envelope(status="ok", data=result)

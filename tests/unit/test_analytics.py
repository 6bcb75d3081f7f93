"""
Unit tests for analytics and utilization aggregation
"""
from types import SimpleNamespace

import pytest

from travel_hub.models.travel_group import CoordinationStatus, GroupStatus, GroupType
from travel_hub.schemas.travel import GroupFilter, TravelGroupCreate
from travel_hub.services.analytics_service import AnalyticsService, build_analytics, build_utilization, percent
from travel_hub.services.group_service import TravelGroupService


def _group(id, status=GroupStatus.PLANNING, coordination=CoordinationStatus.PENDING, total=4, confirmed=2):
    return SimpleNamespace(
        id=id,
        name=f"Group {id}",
        group_type=GroupType.CREW,
        department=None,
        priority_level=3,
        total_members=total,
        confirmed_members=confirmed,
        status=status,
        coordination_status=coordination,
        event_id="e1",
        tour_id=None,
    )


def test_percent_handles_zero_denominator():
    assert percent(3, 0) == 0.0
    assert percent(1, 3) == 33.3


def test_analytics_with_no_groups():
    analytics = build_analytics([], [], [], [])

    assert analytics.total_groups == 0
    assert analytics.coordination_completion_rate == 0.0
    assert analytics.arrival_success_rate == 0.0


def test_analytics_totals_and_rates():
    groups = [
        _group("g1", status=GroupStatus.ARRIVED, coordination=CoordinationStatus.COMPLETE),
        _group("g2", status=GroupStatus.CONFIRMED),
        _group("g3", status=GroupStatus.CANCELLED, total=2, confirmed=0),
    ]
    flights = [SimpleNamespace(group_id="g1", booked_seats=4), SimpleNamespace(group_id=None, booked_seats=6)]
    transport = [SimpleNamespace(group_id="g1", assigned_passengers=4)]
    lodging = [SimpleNamespace(group_id="g1", event_id="e1", tour_id=None, total_guests=4)]

    analytics = build_analytics(groups, flights, transport, lodging)

    assert analytics.total_groups == 3
    assert analytics.total_travelers == 10
    assert analytics.confirmed_travelers == 4
    assert analytics.fully_coordinated_groups == 1
    assert analytics.pending_coordination_groups == 2
    assert analytics.arrived_groups == 1
    assert analytics.total_flight_passengers == 10
    assert analytics.total_transport_passengers == 4
    assert analytics.total_hotel_bookings == 1
    assert analytics.coordination_completion_rate == 33.3
    # cancelled groups are not expected to arrive
    assert analytics.arrival_success_rate == 50.0


def test_utilization_per_group():
    groups = [_group("g1"), _group("g2", total=0, confirmed=0)]
    flights = [SimpleNamespace(group_id="g1", booked_seats=3)]
    transport = [SimpleNamespace(group_id="g1", assigned_passengers=4)]
    lodging = [SimpleNamespace(group_id=None, event_id="e1", tour_id=None, total_guests=2)]

    first, second = build_utilization(groups, flights, transport, lodging)

    assert first.flight_utilization_percentage == 75.0
    assert first.transport_utilization_percentage == 100.0
    assert first.hotel_guests == 2
    assert first.hotel_utilization_percentage == 50.0
    assert first.confirmation_rate == 50.0
    assert first.group_type == "crew"
    assert second.total_flights == 0
    assert second.flight_utilization_percentage == 0.0
    assert second.total_hotel_bookings == 1


@pytest.mark.asyncio
async def test_event_and_tour_filters_match_either_identifier(db_session):
    groups = TravelGroupService(db_session)
    await groups.create_travel_group(TravelGroupCreate(name="Festival Crew", event_id="e1"))
    await groups.create_travel_group(TravelGroupCreate(name="Touring Band", tour_id="t1"))
    await groups.create_travel_group(TravelGroupCreate(name="Elsewhere", event_id="e2"))
    filters = GroupFilter(event_id="e1", tour_id="t1")

    fetched = await groups.fetch_groups(filters)
    analytics = await AnalyticsService(db_session).compute_analytics(filters)
    rows = await AnalyticsService(db_session).compute_utilization(filters)

    assert len(fetched) == 2
    assert analytics.total_groups == 2
    assert {row.group_name for row in rows} == {"Festival Crew", "Touring Band"}

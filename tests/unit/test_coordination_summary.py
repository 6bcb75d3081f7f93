"""
Unit tests for the coordination aggregator
"""
from types import SimpleNamespace

import pytest

from travel_hub.models.travel_group import CoordinationStatus, TravelGroup
from travel_hub.schemas.coordination import CoordinationSummary, LogisticsChecklist
from travel_hub.services.coordination import (
    apply_coordination_flags,
    build_progress,
    compute_coordination_summary,
    compute_group_progress_percent,
    derive_coordination_flags,
    lodging_matches_group,
)


def _group(**overrides):
    fields = {"id": "g1", "event_id": "e1", "tour_id": None}
    fields.update(overrides)
    return SimpleNamespace(**fields)


def _lodging(group_id=None, event_id=None, tour_id=None):
    return SimpleNamespace(group_id=group_id, event_id=event_id, tour_id=tour_id)


def test_summary_counts_linked_records():
    group = _group()
    flights = [SimpleNamespace(group_id="g1"), SimpleNamespace(group_id="g2")]
    transport = [SimpleNamespace(group_id="g1")]
    lodging = [_lodging(event_id="e1"), _lodging(event_id="e2")]

    summary = compute_coordination_summary(group, flights, transport, lodging)

    assert summary == CoordinationSummary(flights_booked=1, transport_arranged=1, hotel_rooms_booked=1)


def test_summary_of_empty_inputs_is_zero():
    summary = compute_coordination_summary(_group(), [], [], [])

    assert summary == CoordinationSummary(flights_booked=0, transport_arranged=0, hotel_rooms_booked=0)


def test_summary_does_not_mutate_inputs():
    flights = [SimpleNamespace(group_id="g1")]
    lodging = [_lodging(event_id="e1")]

    compute_coordination_summary(_group(), flights, [], lodging)

    assert flights == [SimpleNamespace(group_id="g1")]
    assert lodging == [_lodging(event_id="e1")]


def test_lodging_with_explicit_group_counts_only_for_that_group():
    booking = _lodging(group_id="g2", event_id="e1")

    assert lodging_matches_group(booking, _group(id="g2")) is True
    assert lodging_matches_group(booking, _group(id="g1")) is False


def test_lodging_falls_back_to_tour_match():
    group = _group(event_id=None, tour_id="t1")

    assert lodging_matches_group(_lodging(tour_id="t1"), group) is True
    assert lodging_matches_group(_lodging(tour_id="t2"), group) is False


def test_missing_identifiers_never_match_each_other():
    standalone = _group(event_id=None, tour_id=None)

    assert lodging_matches_group(_lodging(), standalone) is False
    assert compute_coordination_summary(standalone, [], [], [_lodging(), _lodging()]).hotel_rooms_booked == 0


def test_flags_follow_nonzero_counts():
    flags = derive_coordination_flags(CoordinationSummary(flights_booked=2, transport_arranged=0, hotel_rooms_booked=1))

    assert flags.flights_done is True
    assert flags.hotels_done is True
    assert flags.transport_done is False
    assert flags.complete is False


def test_apply_flags_drives_coordination_status():
    group = TravelGroup(flights_done=False, hotels_done=False, transport_done=False)
    assert group.coordination_status == CoordinationStatus.PENDING

    apply_coordination_flags(group, CoordinationSummary(flights_booked=1))
    assert group.coordination_status == CoordinationStatus.FLIGHTS_BOOKED

    apply_coordination_flags(group, CoordinationSummary(hotel_rooms_booked=1, transport_arranged=1))
    assert group.coordination_status == CoordinationStatus.HOTELS_BOOKED

    apply_coordination_flags(group, CoordinationSummary(flights_booked=1, hotel_rooms_booked=3, transport_arranged=1))
    assert group.coordination_status == CoordinationStatus.COMPLETE


@pytest.mark.parametrize(
    "checklist, expected",
    [
        ({"transportation": "booked", "accommodation": "", "equipment": [], "crew": 0}, 25),
        ({"transportation": "booked", "accommodation": "Hotel A", "equipment": ["x"], "crew": 4}, 100),
        ({"transportation": "pending", "accommodation": "pending", "equipment": "", "crew": 0}, 0),
        ({"transportation": "booked", "accommodation": "Hotel A"}, 50),
        ({}, 0),
        ({"equipment": "truck", "crew": 2}, 50),
        ({"transportation": "booked", "accommodation": "Hotel A", "equipment": "truck"}, 75),
        # equipment counts whenever non-empty
        ({"transportation": "x", "accommodation": "y", "equipment": "pending", "crew": 2}, 100),
        ({"transportation": "x", "accommodation": "y", "equipment": "   ", "crew": 2}, 75),
    ],
)
def test_progress_percent(checklist, expected):
    assert compute_group_progress_percent(checklist) == expected


def test_progress_accepts_schema_and_reports_counts():
    checklist = LogisticsChecklist(transportation="van", accommodation="pending", equipment=["lights"], crew=0)

    progress = build_progress(checklist)

    assert compute_group_progress_percent(checklist) == 50
    assert (progress.percent, progress.completed, progress.total) == (50, 2, 4)

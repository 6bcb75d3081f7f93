"""
Coordination aggregator - pure functions over already-loaded records.

Nothing here touches the database; callers load the group and its candidate
bookings and pass them in. Records only need the attributes used below, so
ORM instances, schemas and plain namespaces all work.
"""
from typing import Any, Iterable, Mapping, Union

from travel_hub.schemas.coordination import (
    CoordinationFlags,
    CoordinationSummary,
    LogisticsChecklist,
    ProgressResponse,
)

PROGRESS_SLOTS = ("transportation", "accommodation", "equipment", "crew")


def _same_id(left, right) -> bool:
    return left is not None and left == right


def lodging_matches_group(booking: Any, group: Any) -> bool:
    """
    Decide whether a lodging booking counts toward a group.

    An explicit group_id wins. Without one, the booking matches on a shared
    non-null event_id or tour_id.
    """
    if booking.group_id is not None:
        return booking.group_id == group.id
    return _same_id(booking.event_id, group.event_id) or _same_id(booking.tour_id, group.tour_id)


def compute_coordination_summary(
    group: Any,
    flights: Iterable[Any],
    transportation: Iterable[Any],
    lodging_bookings: Iterable[Any],
) -> CoordinationSummary:
    """
    Count the logistics arranged for one group.

    Args:
        group: The travel group
        flights: Candidate flights; only those linked to the group count
        transportation: Candidate transport runs; only those linked count
        lodging_bookings: Candidate bookings, matched via lodging_matches_group

    Returns:
        CoordinationSummary with non-negative counts
    """
    return CoordinationSummary(
        flights_booked=sum(1 for flight in flights if flight.group_id == group.id),
        transport_arranged=sum(1 for run in transportation if run.group_id == group.id),
        hotel_rooms_booked=sum(1 for booking in lodging_bookings if lodging_matches_group(booking, group)),
    )


def derive_coordination_flags(summary: CoordinationSummary) -> CoordinationFlags:
    return CoordinationFlags(
        flights_done=summary.flights_booked > 0,
        hotels_done=summary.hotel_rooms_booked > 0,
        transport_done=summary.transport_arranged > 0,
    )


def apply_coordination_flags(group: Any, summary: CoordinationSummary) -> CoordinationFlags:
    """Write the flags derived from `summary` onto `group` and return them."""
    flags = derive_coordination_flags(summary)
    group.flights_done = flags.flights_done
    group.hotels_done = flags.hotels_done
    group.transport_done = flags.transport_done
    return flags


def _slot_value(checklist, slot: str):
    if isinstance(checklist, Mapping):
        return checklist.get(slot)
    return getattr(checklist, slot, None)


PENDING_SLOTS = ("transportation", "accommodation")


def _slot_completed(slot: str, value) -> bool:
    if value is None:
        return False
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return value > 0
    if isinstance(value, str):
        text = value.strip()
        if slot in PENDING_SLOTS:
            return bool(text) and text.lower() != "pending"
        return bool(text)
    return len(value) > 0


def count_completed_slots(checklist: Union[LogisticsChecklist, Mapping[str, Any]]) -> int:
    return sum(1 for slot in PROGRESS_SLOTS if _slot_completed(slot, _slot_value(checklist, slot)))


def compute_group_progress_percent(checklist: Union[LogisticsChecklist, Mapping[str, Any]]) -> int:
    """
    Percentage of the four logistics slots that are filled in.

    Transportation and accommodation count when set to anything other than
    "pending"; equipment counts whenever it is non-empty, even the text
    "pending"; crew counts when positive.
    Missing slots count as incomplete.
    """
    completed = count_completed_slots(checklist)
    return round(completed / len(PROGRESS_SLOTS) * 100)


def build_progress(checklist: Union[LogisticsChecklist, Mapping[str, Any]]) -> ProgressResponse:
    completed = count_completed_slots(checklist)
    return ProgressResponse(
        percent=round(completed / len(PROGRESS_SLOTS) * 100),
        completed=completed,
        total=len(PROGRESS_SLOTS),
    )

"""
Travel status state machine and display badge rules.
"""
from typing import Union

from travel_hub.core.exceptions import InvalidStatusTransitionError
from travel_hub.models.travel_group import CoordinationStatus, GroupStatus
from travel_hub.schemas.coordination import Badge

# Forward-only; cancelled is reachable from every non-terminal state.
_ALLOWED_STATUS_TRANSITIONS: dict[GroupStatus, set[GroupStatus]] = {
    GroupStatus.PLANNING: {GroupStatus.CONFIRMED, GroupStatus.CANCELLED},
    GroupStatus.CONFIRMED: {GroupStatus.IN_TRANSIT, GroupStatus.CANCELLED},
    GroupStatus.IN_TRANSIT: {GroupStatus.ARRIVED, GroupStatus.CANCELLED},
    GroupStatus.ARRIVED: {GroupStatus.DEPARTED, GroupStatus.CANCELLED},
    GroupStatus.DEPARTED: set(),
    GroupStatus.CANCELLED: set(),
}

TERMINAL_STATUSES = frozenset(
    status for status, targets in _ALLOWED_STATUS_TRANSITIONS.items() if not targets
)


def can_transition(current: GroupStatus, target: GroupStatus) -> bool:
    """Return True if a group may move from `current` to `target`.

    Re-asserting the current status is always allowed.
    """
    current, target = GroupStatus(current), GroupStatus(target)
    return current == target or target in _ALLOWED_STATUS_TRANSITIONS[current]


def ensure_transition(current: GroupStatus, target: GroupStatus) -> None:
    if not can_transition(current, target):
        raise InvalidStatusTransitionError(GroupStatus(current).value, GroupStatus(target).value)


# ---------------------------------------------------------------------------
# Badges
# ---------------------------------------------------------------------------

_STATUS_BADGES = {
    GroupStatus.PLANNING: ("Planning", "gray"),
    GroupStatus.CONFIRMED: ("Confirmed", "green"),
    GroupStatus.IN_TRANSIT: ("In Transit", "blue"),
    GroupStatus.ARRIVED: ("Arrived", "purple"),
    GroupStatus.DEPARTED: ("Departed", "orange"),
    GroupStatus.CANCELLED: ("Cancelled", "red"),
}

_COORDINATION_BADGES = {
    CoordinationStatus.PENDING: ("Pending", "yellow"),
    CoordinationStatus.FLIGHTS_BOOKED: ("Flights Booked", "blue"),
    CoordinationStatus.HOTELS_BOOKED: ("Hotels Booked", "green"),
    CoordinationStatus.TRANSPORT_ARRANGED: ("Transport Arranged", "purple"),
    CoordinationStatus.COMPLETE: ("Complete", "emerald"),
}

_PRIORITY_BADGES = {
    1: ("Critical", "red"),
    2: ("High", "orange"),
    3: ("Normal", "yellow"),
    4: ("Low", "blue"),
    5: ("Minimal", "gray"),
}


def _lookup(table: dict, enum_cls, value, fallback):
    try:
        key = enum_cls(value)
    except ValueError:
        key = fallback
    label, tone = table[key]
    return Badge(value=key.value, label=label, tone=tone)


def status_badge(status: Union[GroupStatus, str]) -> Badge:
    """Badge for a travel status; unknown values render as planning."""
    return _lookup(_STATUS_BADGES, GroupStatus, status, GroupStatus.PLANNING)


def coordination_badge(status: Union[CoordinationStatus, str]) -> Badge:
    """Badge for a coordination status; unknown values render as pending."""
    return _lookup(_COORDINATION_BADGES, CoordinationStatus, status, CoordinationStatus.PENDING)


def priority_badge(level) -> Badge:
    """Badge for a priority level 1-5; anything else renders as 3."""
    key = level if level in _PRIORITY_BADGES else 3
    label, tone = _PRIORITY_BADGES[key]
    return Badge(value=str(key), label=label, tone=tone)

# Business logic services

from .coordination import (
    compute_coordination_summary,
    compute_group_progress_percent,
    derive_coordination_flags,
    apply_coordination_flags,
    lodging_matches_group,
)
from .member_import import parse_member_lines
from .status_rules import (
    can_transition,
    status_badge,
    coordination_badge,
    priority_badge,
)
from .strategies import CoordinationResult, CoordinationStrategy, GroupCharterStrategy
from .group_service import TravelGroupService
from .member_service import GroupMemberService
from .booking_service import BookingService
from .coordination_service import CoordinationService
from .analytics_service import AnalyticsService

__all__ = [
    'compute_coordination_summary',
    'compute_group_progress_percent',
    'derive_coordination_flags',
    'apply_coordination_flags',
    'lodging_matches_group',
    'parse_member_lines',
    'can_transition',
    'status_badge',
    'coordination_badge',
    'priority_badge',
    'CoordinationResult',
    'CoordinationStrategy',
    'GroupCharterStrategy',
    'TravelGroupService',
    'GroupMemberService',
    'BookingService',
    'CoordinationService',
    'AnalyticsService',
]

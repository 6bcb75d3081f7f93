"""Bulk member ingestion from "name, email, phone, role" lines.

The format is deliberately lenient: blank lines are dropped, missing trailing
fields become empty strings and anything past the fourth field is ignored.
"""
from travel_hub.schemas.travel import MemberInput

MEMBER_LINE_FIELDS = ("name", "email", "phone", "role")


def parse_member_line(line: str) -> MemberInput:
    parts = [part.strip() for part in line.split(",")]
    parts += [""] * (len(MEMBER_LINE_FIELDS) - len(parts))
    return MemberInput(**dict(zip(MEMBER_LINE_FIELDS, parts)))


def parse_member_lines(text: str) -> list[MemberInput]:
    """Parse a multi-line blob into member inputs, one per non-blank line."""
    if not text:
        return []
    return [parse_member_line(line) for line in text.splitlines() if line.strip()]

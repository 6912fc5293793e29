"""Weekly slot code decoding.

A slot code packs a weekday, a shift and an ordinal position within the shift:

- "2M1": Monday, morning, first slot
- "5T4": Thursday, afternoon, fourth slot
- "3N2": Tuesday, evening, second slot

Codes that do not match the pattern decode to an unknown shift. They still
occupy their (normalized) code for conflict detection but never trigger
shift rules.
"""

import re
from dataclasses import dataclass
from typing import Iterable

from ..models import Shift
from .constants import SLOT_CODE_PATTERN

_SLOT_RE = re.compile(SLOT_CODE_PATTERN)
_TIME_RE = re.compile(r"^(\d{1,2}):(\d{2})$")


@dataclass(frozen=True)
class DecodedSlot:
    """Parsed form of a slot code."""

    raw: str
    day: int | None
    shift: Shift
    ordinal: int | None

    @property
    def is_known(self) -> bool:
        return self.shift != Shift.UNKNOWN


def normalize_slot_code(code: str) -> str:
    """Normalize a slot code for comparison (" 2m1 " -> "2M1")."""
    return str(code).strip().upper()


def decode_slot(code: str) -> DecodedSlot:
    """Decode a slot code, degrading to an unknown shift on mismatch.

    Args:
        code: Slot code like "2M1"

    Returns:
        DecodedSlot with day, shift and ordinal (day and ordinal are None
        for malformed codes)
    """
    normalized = normalize_slot_code(code)
    match = _SLOT_RE.match(normalized)
    if not match:
        return DecodedSlot(raw=normalized, day=None, shift=Shift.UNKNOWN, ordinal=None)

    return DecodedSlot(
        raw=normalized,
        day=int(match.group(1)),
        shift=Shift(match.group(2)),
        ordinal=int(match.group(3)),
    )


def parse_clock_time(value: str | None) -> int | None:
    """Convert "HH:MM" to minutes since midnight, or None if malformed."""
    if not value:
        return None
    match = _TIME_RE.match(str(value).strip())
    if not match:
        return None
    hour, minute = int(match.group(1)), int(match.group(2))
    if hour > 23 or minute > 59:
        return None
    return hour * 60 + minute


def preferred_slot_ordinal(
    value: str | None,
    start_times: Iterable[tuple[int, str]],
) -> int | None:
    """Map a preferred clock time to the closest canonical afternoon slot.

    Ties resolve to the earlier start time.

    Args:
        value: Preferred time as "HH:MM"
        start_times: (ordinal, "HH:MM") pairs of canonical afternoon starts

    Returns:
        Ordinal of the closest canonical slot, or None if no valid time given
    """
    minutes = parse_clock_time(value)
    if minutes is None:
        return None

    best_ordinal = None
    best_distance = None
    for ordinal, start in start_times:
        start_minutes = parse_clock_time(start)
        if start_minutes is None:
            continue
        distance = abs(start_minutes - minutes)
        if best_distance is None or distance < best_distance:
            best_distance = distance
            best_ordinal = ordinal
    return best_ordinal


def slot_distance(ordinal: int, preferred: int) -> int:
    """Distance in slots between an ordinal and the preferred ordinal."""
    return abs(ordinal - preferred)


def closest_afternoon_distance(slots: Iterable[DecodedSlot], preferred: int) -> int | None:
    """Best distance from any afternoon slot to the preferred ordinal.

    Returns:
        Smallest distance, or None when there is no afternoon slot
    """
    distances = [
        slot_distance(slot.ordinal, preferred)
        for slot in slots
        if slot.shift == Shift.AFTERNOON and slot.ordinal is not None
    ]
    return min(distances) if distances else None

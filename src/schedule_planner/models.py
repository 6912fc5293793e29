"""Input records for the schedule planner."""

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Self

from .utils import split_cell, split_names


class Shift(str, Enum):
    """Shift of a weekly time slot."""

    MORNING = "M"
    AFTERNOON = "T"
    EVENING = "N"
    UNKNOWN = "X"

    @property
    def label(self) -> str:
        """Human readable shift name."""
        return self.name.capitalize()

    @classmethod
    def parse(cls, value: Any) -> "Shift | None":
        """Parse a shift from a letter, an English name or a member.

        Examples: "M", "morning", "Afternoon", Shift.EVENING

        Returns:
            Matching Shift, or None if the value is not recognised
        """
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            return None
        text = value.strip()
        if not text:
            return None
        for shift in cls:
            if text.upper() == shift.value or text.upper() == shift.name:
                return shift
        return None


def _optional_number(value: Any) -> float | None:
    if value is None or isinstance(value, bool):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(number) or number < 0:
        return None
    return number


def _optional_int(value: Any) -> int | None:
    number = _optional_number(value)
    return int(number) if number is not None else None


def _as_list(values: Any) -> list[Any]:
    if isinstance(values, (str, Shift)):
        return [values]
    return list(values)


def _shift_set(values: Any) -> frozenset[Shift] | None:
    # A given set always applies, even when none of its names is recognised
    if values is None:
        return None
    shifts = {Shift.parse(v) for v in _as_list(values)}
    shifts.discard(None)
    shifts.discard(Shift.UNKNOWN)
    return frozenset(shifts)


def _unrecognized_shifts(*groups: Any) -> tuple[str, ...]:
    names: list[str] = []
    for values in groups:
        if values is None:
            continue
        for value in _as_list(values):
            if Shift.parse(value) in (None, Shift.UNKNOWN):
                names.append(str(value))
    return tuple(names)


def _first(data: dict[str, Any], *keys: str, default: Any = None) -> Any:
    for key in keys:
        if key in data:
            return data[key]
    return default


@dataclass
class Section:
    """One concretely scheduled offering of a course.

    Attributes:
        section_id: Section code within the course (e.g. "S71")
        time_slots: Weekly slot codes the section occupies (e.g. ["5T4", "5T5"])
        instructors: Instructor names, carried through to proposals
        rooms: Room per slot when known, carried through to proposals
    """

    section_id: str
    time_slots: list[str]
    instructors: list[str] = field(default_factory=list)
    rooms: list[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Self:
        """Create a Section from a dictionary."""
        raw_slots = _first(data, "time_slots", "timeSlots", "slots", "horarios", default=[])
        if isinstance(raw_slots, str):
            raw_slots = split_cell(raw_slots)
        slots: list[str] = []
        rooms: list[str] = []
        for item in raw_slots or []:
            # {"horario": "2M1", "sala": "A-101"} style entries
            if isinstance(item, dict):
                slots.append(str(_first(item, "slot", "code", "horario", default="")))
                room = _first(item, "room", "sala")
                if room:
                    rooms.append(str(room))
            else:
                slots.append(str(item))
        rooms = _first(data, "rooms", default=rooms) or []
        instructors = _first(data, "instructors", "professores", default=[]) or []
        return cls(
            section_id=str(_first(data, "section_id", "sectionId", "section", "code", "codigo", default="")),
            time_slots=slots,
            instructors=split_names(instructors) if isinstance(instructors, str) else list(instructors),
            rooms=split_cell(rooms) if isinstance(rooms, str) else list(rooms),
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "section_id": self.section_id,
            "time_slots": self.time_slots,
            "instructors": self.instructors,
            "rooms": self.rooms,
        }


@dataclass
class CourseOffering:
    """A course offered in the target period with its sections.

    Attributes:
        code: Course code
        name: Course name
        credits: Weekly credit-hours as given by the catalog (may be missing)
        sections: Offered sections
    """

    code: str
    name: str
    credits: float | None = None
    sections: list[Section] = field(default_factory=list)

    @property
    def weekly_credits(self) -> float:
        """Credits used by the search; missing or invalid values count as 1."""
        credits = _optional_number(self.credits)
        if credits is None or credits <= 0:
            return 1
        return int(credits) if credits.is_integer() else credits

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Self:
        """Create a CourseOffering from a dictionary."""
        sections = _first(data, "sections", "turmas", default=[]) or []
        return cls(
            code=str(_first(data, "code", "codigo", default="")),
            name=str(_first(data, "name", "nome", default="")),
            credits=_first(data, "credits", "creditos"),
            sections=[s if isinstance(s, Section) else Section.from_dict(s) for s in sections],
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "code": self.code,
            "name": self.name,
            "credits": self.credits,
            "sections": [s.to_dict() for s in self.sections],
        }


@dataclass(frozen=True)
class ConstraintProfile:
    """Structured scheduling preferences of a student.

    Every field is optional and None means "no preference" on that axis.
    A cap of 0 is a real cap and differs from None.

    Attributes:
        target_credits_per_period: Desired weekly credit load
        target_subject_count: Desired number of courses
        max_afternoon_days: Maximum distinct weekdays with afternoon classes
        max_afternoon_sections: Maximum sections with an afternoon slot
        allowed_shifts: Only these shifts may be occupied (hard)
        blocked_shifts: These shifts may never be occupied (hard)
        preferred_afternoon_time: Preferred afternoon class time, "HH:MM"
        unrecognized_shifts: Shift names given in the input that matched no shift
    """

    target_credits_per_period: float | None = None
    target_subject_count: int | None = None
    max_afternoon_days: int | None = None
    max_afternoon_sections: int | None = None
    allowed_shifts: frozenset[Shift] | None = None
    blocked_shifts: frozenset[Shift] | None = None
    preferred_afternoon_time: str | None = None
    unrecognized_shifts: tuple[str, ...] = field(default=(), compare=False)

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> Self:
        """Create a profile from snake_case or camelCase keys.

        Invalid numbers are dropped rather than rejected.
        """
        data = data or {}
        allowed = _first(data, "allowed_shifts", "allowedShifts")
        blocked = _first(data, "blocked_shifts", "blockedShifts")
        preferred = _first(data, "preferred_afternoon_time", "preferredAfternoonTime", "preferredAfternoonSlot")
        return cls(
            target_credits_per_period=_optional_number(
                _first(data, "target_credits_per_period", "targetCreditsPerPeriod", "targetChsPerPeriod")
            ),
            target_subject_count=_optional_int(
                _first(data, "target_subject_count", "targetSubjectCount", "targetSubjectsPerPeriod")
            ),
            max_afternoon_days=_optional_int(_first(data, "max_afternoon_days", "maxAfternoonDays")),
            max_afternoon_sections=_optional_int(
                _first(data, "max_afternoon_sections", "maxAfternoonSections", "maxAfternoonClasses")
            ),
            allowed_shifts=_shift_set(allowed),
            blocked_shifts=_shift_set(blocked),
            preferred_afternoon_time=str(preferred).strip() if preferred else None,
            unrecognized_shifts=_unrecognized_shifts(allowed, blocked),
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary, omitting unset fields."""
        data: dict[str, Any] = {
            "target_credits_per_period": self.target_credits_per_period,
            "target_subject_count": self.target_subject_count,
            "max_afternoon_days": self.max_afternoon_days,
            "max_afternoon_sections": self.max_afternoon_sections,
            "allowed_shifts": _shift_labels(self.allowed_shifts),
            "blocked_shifts": _shift_labels(self.blocked_shifts),
            "preferred_afternoon_time": self.preferred_afternoon_time,
        }
        return {key: value for key, value in data.items() if value is not None}


def _shift_labels(shifts: frozenset[Shift] | None) -> list[str] | None:
    if shifts is None:
        return None
    order = list(Shift)
    return [s.label for s in sorted(shifts, key=order.index)]

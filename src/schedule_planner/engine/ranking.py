"""Per-course section ranking.

Before the search, each course's sections are ordered by a cheap penalty and
only the best few are kept. This bounds the branching factor of the beam;
sections that do not make the cut are never tried in that tier.
"""

from ..models import CourseOffering, Section
from .config import SearchConfig
from .models import ChosenSection
from .slots import closest_afternoon_distance, decode_slot, normalize_slot_code


def build_candidate(course: CourseOffering, section: Section) -> ChosenSection:
    """Prepare a section for the search, decoding its slots once."""
    return ChosenSection(
        course_code=course.code,
        course_name=course.name,
        section_id=section.section_id,
        time_slots=tuple(normalize_slot_code(code) for code in section.time_slots),
        decoded_slots=tuple(decode_slot(code) for code in section.time_slots),
        credits=course.weekly_credits,
        instructors=tuple(section.instructors),
        rooms=tuple(section.rooms),
    )


def section_penalty(
    candidate: ChosenSection,
    preferred_ordinal: int | None,
    config: SearchConfig,
) -> int:
    """Penalty of a single section: morning and afternoon load plus preference.

    Args:
        candidate: Section to rate
        preferred_ordinal: Preferred afternoon slot ordinal, None if no preference
        config: Search configuration holding the weights

    Returns:
        Penalty, lower is better
    """
    penalty = (
        candidate.morning_slots * config.weight("morning_load")
        + candidate.afternoon_slots * config.weight("afternoon_load")
    )
    if preferred_ordinal is None:
        return penalty

    distance = closest_afternoon_distance(candidate.decoded_slots, preferred_ordinal)
    if distance is None:
        return penalty + config.weight("preferred_missing")
    return penalty + distance * config.weight("preferred_distance")


def rank_sections(
    course: CourseOffering,
    preferred_ordinal: int | None,
    config: SearchConfig,
) -> list[ChosenSection]:
    """Best sections of a course, at most config.max_sections_per_course.

    Ties keep catalog order.
    """
    candidates = [build_candidate(course, section) for section in course.sections]
    candidates.sort(key=lambda c: section_penalty(c, preferred_ordinal, config))
    return candidates[: config.max_sections_per_course]

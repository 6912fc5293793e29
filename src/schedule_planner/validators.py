"""Validation logic for catalog entries and constraint profiles."""

import math
import re

from .engine.constants import SLOT_CODE_PATTERN
from .engine.slots import parse_clock_time
from .models import ConstraintProfile, CourseOffering


def validate_slot_code(code: str) -> tuple[bool, str | None]:
    """Validate a slot code.

    Expected format: day digit 2-7 + shift letter M/T/N + ordinal
    Example: 2M1, 5T4, 3N2

    Args:
        code: Slot code to validate

    Returns:
        Tuple of (is_valid, error_message)
    """
    if code is None or not str(code).strip():
        return False, "Slot code is empty"

    normalized = str(code).strip().upper()
    if not re.match(SLOT_CODE_PATTERN, normalized):
        return False, f"Slot code doesn't match expected pattern: '{code}'"

    return True, None


def validate_credits(credits) -> tuple[bool, str | None]:
    """Validate a credit value (missing is allowed and counts as 1).

    Args:
        credits: Weekly credit-hours

    Returns:
        Tuple of (is_valid, error_message)
    """
    if credits is None:
        return True, None

    try:
        value = float(credits)
    except (TypeError, ValueError):
        return False, f"Credits must be a number, got '{credits}'"

    if not math.isfinite(value) or value <= 0:
        return False, f"Credits must be a positive number, got {credits}"

    return True, None


def validate_preferred_time(value: str | None) -> tuple[bool, str | None]:
    """Validate a preferred afternoon time ("HH:MM").

    Args:
        value: Time string

    Returns:
        Tuple of (is_valid, error_message)
    """
    if value is None:
        return True, None
    if parse_clock_time(value) is None:
        return False, f"Preferred time must be HH:MM, got '{value}'"
    return True, None


def validate_course(course: CourseOffering) -> tuple[list[str], list[str]]:
    """Validate a course offering.

    Malformed data never stops the engine, so problems that it tolerates
    are reported as warnings.

    Args:
        course: Course to validate

    Returns:
        Tuple of (errors, warnings)
    """
    errors: list[str] = []
    warnings: list[str] = []

    if not course.code:
        errors.append("Course without a code")

    label = course.code or course.name or "?"

    if not course.sections:
        warnings.append(f"{label}: no sections offered, course will be skipped")

    is_valid, message = validate_credits(course.credits)
    if not is_valid:
        warnings.append(f"{label}: {message}; counted as 1")

    seen_ids: set[str] = set()
    for section in course.sections:
        if section.section_id in seen_ids:
            errors.append(f"{label}: duplicate section '{section.section_id}'")
        seen_ids.add(section.section_id)

        if not section.time_slots:
            warnings.append(f"{label}/{section.section_id}: section has no time slots")

        for code in section.time_slots:
            is_valid, message = validate_slot_code(code)
            if not is_valid:
                warnings.append(
                    f"{label}/{section.section_id}: {message}; used for conflicts only"
                )

    return errors, warnings


def validate_catalog(catalog: list[CourseOffering]) -> dict:
    """Validate a whole catalog.

    Args:
        catalog: Courses to validate

    Returns:
        Dictionary with validation results
    """
    result = {
        "valid": True,
        "courses": len(catalog),
        "sections": sum(len(c.sections) for c in catalog),
        "errors": [],
        "warnings": [],
    }

    seen_codes: set[str] = set()
    for course in catalog:
        if course.code and course.code in seen_codes:
            result["errors"].append(f"Duplicate course code '{course.code}'")
        seen_codes.add(course.code)

        errors, warnings = validate_course(course)
        result["errors"].extend(errors)
        result["warnings"].extend(warnings)

    result["valid"] = not result["errors"]
    return result


def validate_profile(profile: ConstraintProfile) -> list[str]:
    """Check a profile for contradictions the engine will silently accept.

    Args:
        profile: Constraint profile

    Returns:
        List of warning messages
    """
    warnings: list[str] = []

    is_valid, message = validate_preferred_time(profile.preferred_afternoon_time)
    if not is_valid:
        warnings.append(f"{message}; preference ignored")

    if profile.unrecognized_shifts:
        names = ", ".join(profile.unrecognized_shifts)
        warnings.append(f"Unrecognized shift name(s): {names}; expected Morning, Afternoon or Evening")

    if profile.allowed_shifts is not None and not profile.allowed_shifts:
        warnings.append("Allowed shifts match no known shift; no section can be scheduled in a shift")

    if profile.allowed_shifts and profile.blocked_shifts:
        overlap = profile.allowed_shifts & profile.blocked_shifts
        if overlap:
            names = ", ".join(sorted(s.label for s in overlap))
            warnings.append(f"Shifts both allowed and blocked: {names}; they stay blocked")

    if profile.target_subject_count == 0:
        warnings.append("Target subject count is 0; only partial schedules can be proposed")

    return warnings

import logging
from dataclasses import dataclass, field, replace
from typing import Any, Optional, Tuple

from celestius.core.gpa import GpaResult, SubjectEntry, calculate_gpa
from celestius.core.inputs import to_credits, to_grade_code, to_name, to_previous_average


logger = logging.getLogger(__name__)

_FIELD_COERCERS = {
    "name": to_name,
    "credits": to_credits,
    "grade": to_grade_code,
}


@dataclass(frozen=True)
class FormState:
    subjects: Tuple[SubjectEntry, ...] = field(default_factory=lambda: (SubjectEntry(),))
    previous_average: float = 0.0
    result: Optional[GpaResult] = None

    @property
    def can_remove(self) -> bool:
        return len(self.subjects) > 1

    @property
    def has_result(self) -> bool:
        return self.result is not None


def initial_state() -> FormState:
    return FormState()


def add_subject(state: FormState) -> FormState:
    subjects = state.subjects + (SubjectEntry(),)
    logger.debug("Subject added (%d rows)", len(subjects))
    return replace(state, subjects=subjects)


def remove_subject(state: FormState, index: int) -> FormState:
    if not state.can_remove:
        logger.debug("Refused to remove the last subject")
        return state
    if not 0 <= index < len(state.subjects):
        return state

    subjects = state.subjects[:index] + state.subjects[index + 1 :]
    logger.debug("Subject %d removed (%d rows)", index, len(subjects))
    return replace(state, subjects=subjects)


def update_subject(state: FormState, index: int, field_name: str, value: Any) -> FormState:
    try:
        coerce = _FIELD_COERCERS[field_name]
    except KeyError as exc:
        raise ValueError(f"Unsupported subject field: {field_name}") from exc

    if not 0 <= index < len(state.subjects):
        return state

    updated = replace(state.subjects[index], **{field_name: coerce(value)})
    subjects = state.subjects[:index] + (updated,) + state.subjects[index + 1 :]
    return replace(state, subjects=subjects)


def set_previous_average(state: FormState, value: Any) -> FormState:
    return replace(state, previous_average=to_previous_average(value))


def calculate(state: FormState) -> FormState:
    result = calculate_gpa(state.subjects, state.previous_average)
    logger.debug("Calculated SGPA %.2f, CGPA %.2f", result.sgpa, result.cgpa)
    return replace(state, result=result)

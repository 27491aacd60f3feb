import math
from dataclasses import dataclass
from typing import Iterable, Tuple

from celestius.core.grades import to_grade_point


@dataclass(frozen=True)
class SubjectEntry:
    name: str = ""
    credits: float = 0.0
    grade: str = ""


@dataclass(frozen=True)
class GpaResult:
    sgpa: float
    cgpa: float


def _accumulate(subjects: Iterable[SubjectEntry]) -> Tuple[float, float]:
    """
    Σ(credits * grade_point) and Σ(credits) over the subjects that count.
    A subject is skipped when it has no credits, a grade outside the scale,
    or would push either sum past the float range.
    """
    weighted_sum = 0.0
    total_credits = 0.0

    for subject in subjects:
        grade_point = to_grade_point(subject.grade)
        if subject.credits <= 0 or grade_point is None:
            continue
        next_weighted = weighted_sum + subject.credits * grade_point
        next_total = total_credits + subject.credits
        if not (math.isfinite(next_weighted) and math.isfinite(next_total)):
            continue
        weighted_sum, total_credits = next_weighted, next_total

    return weighted_sum, total_credits


def _raw_sgpa(subjects: Iterable[SubjectEntry]) -> float:
    weighted_sum, total_credits = _accumulate(subjects)
    if total_credits <= 0:
        return 0.0
    return weighted_sum / total_credits


def counted_credits(subjects: Iterable[SubjectEntry]) -> float:
    """Credits of the subjects that take part in the average."""
    return _accumulate(subjects)[1]


def combine_with_previous(sgpa: float, previous_average: float, *, round_to: int = 2) -> float:
    """
    CGPA = (sgpa + previous) / 2, or sgpa alone when no previous average is given.
    Not weighted by credits across terms.
    """
    if previous_average > 0:
        return round((sgpa + previous_average) / 2, round_to)
    return round(sgpa, round_to)


def calculate_gpa(subjects: Iterable[SubjectEntry], previous_average: float = 0.0, *, round_to: int = 2) -> GpaResult:
    """
    SGPA = Σ(credits * grade_point) / Σ(credits), rounded.
    The unrounded SGPA feeds the CGPA.
    """
    sgpa = _raw_sgpa(subjects)
    return GpaResult(
        sgpa=round(sgpa, round_to),
        cgpa=combine_with_previous(sgpa, previous_average, round_to=round_to),
    )


def format_average(value: float) -> str:
    text = f"{value:.2f}".rstrip("0").rstrip(".")
    return text or "0"

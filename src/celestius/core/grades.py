from types import MappingProxyType
from typing import Mapping, Optional, Tuple


GRADE_CODES: Tuple[str, ...] = ("O", "A+", "A", "B+", "B", "C", "RE")

GRADE_POINTS: Mapping[str, int] = MappingProxyType(
    {
        "O": 10,
        "A+": 9,
        "A": 8,
        "B+": 7,
        "B": 6,
        "C": 5,
        "RE": 0,
    }
)


def to_grade_point(code: str) -> Optional[int]:
    """
    Point value for a grade code, or None when the code is not on the scale.
    Codes are matched exactly: "a+" is not "A+".
    """
    return GRADE_POINTS.get(code)

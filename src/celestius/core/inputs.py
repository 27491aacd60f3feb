import math
from typing import Any


def to_non_negative_number(value: Any) -> float:
    """
    Coerce raw field input to a number >= 0.
    Blank, unparsable, negative, NaN and infinite input all become 0.
    """
    if value is None or isinstance(value, bool):
        return 0.0

    if isinstance(value, (int, float)):
        number = float(value)
    else:
        text = str(value).strip()
        if not text:
            return 0.0
        try:
            number = float(text)
        except ValueError:
            return 0.0

    if math.isnan(number) or math.isinf(number) or number < 0:
        return 0.0
    return number


def to_credits(value: Any) -> float:
    return to_non_negative_number(value)


def to_previous_average(value: Any) -> float:
    return to_non_negative_number(value)


def to_name(value: Any) -> str:
    return "" if value is None else str(value)


def to_grade_code(value: Any) -> str:
    return "" if value is None else str(value).strip()
